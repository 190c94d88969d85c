"""
基于Django ORM的行政区划仓储实现。
所有区划分类存放在同一张表中，按type鉴别列过滤分类。
"""
from typing import Any, List

from geography.domain import Division, DivisionKind, DivisionRepository
from geography.infrastructure.mapping import to_domain
from geography.infrastructure.models.geography_models import Division as DivisionModel
from geography.infrastructure.repositories.base import DjangoGeoRepository


class DjangoDivisionRepository(DjangoGeoRepository, DivisionRepository):
    """
    基于Django ORM的行政区划仓储实现。
    """

    model_class = DivisionModel

    def list_by_country(self, country_id: int, kind: Any = None) -> List[Division]:
        """
        获取国家下的行政区划。

        Args:
            country_id: 国家ID
            kind: 可选的区划分类过滤

        Returns:
            按ID排序的行政区划列表
        """
        queryset = DivisionModel.objects.filter(country_id=country_id)
        if kind is not None:
            queryset = queryset.filter(type=DivisionKind.parse(kind).value)
        return [to_domain(model) for model in queryset.order_by('id')]
