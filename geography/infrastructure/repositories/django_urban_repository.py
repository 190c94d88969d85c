"""
基于Django ORM的城市区域仓储实现。
"""
from typing import Any, List

from geography.domain import Urban, UrbanKind, UrbanRepository
from geography.infrastructure.mapping import to_domain
from geography.infrastructure.models.geography_models import Urban as UrbanModel
from geography.infrastructure.repositories.base import DjangoGeoRepository


class DjangoUrbanRepository(DjangoGeoRepository, UrbanRepository):
    """
    基于Django ORM的城市区域仓储实现。
    """

    model_class = UrbanModel

    def list_by_division(self, division_id: int, kind: Any = None) -> List[Urban]:
        queryset = UrbanModel.objects.filter(division_id=division_id)
        if kind is not None:
            queryset = queryset.filter(type=UrbanKind.parse(kind).value)
        return [to_domain(model) for model in queryset.order_by('id')]
