"""
基于Django ORM的国家仓储实现。
"""
from typing import Optional

from geography.domain import Country, CountryRepository
from geography.infrastructure.mapping import to_domain
from geography.infrastructure.models.geography_models import Country as CountryModel
from geography.infrastructure.repositories.base import DjangoGeoRepository


class DjangoCountryRepository(DjangoGeoRepository, CountryRepository):
    """
    基于Django ORM的国家仓储实现。
    """

    model_class = CountryModel

    def get_by_iso(self, iso: str) -> Optional[Country]:
        """
        根据ISO代码获取国家。

        Args:
            iso: ISO 3166-1 alpha-2 代码，不区分大小写

        Returns:
            找到的国家，如果不存在则返回None
        """
        model = CountryModel.objects.filter(iso__iexact=iso).first()
        return to_domain(model) if model else None
