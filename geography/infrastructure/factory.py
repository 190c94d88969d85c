"""
地理基础设施层工厂。
负责创建和管理基础设施层对象，包括仓储和种子数据加载器。
"""
from geography.domain import CountryRepository, DivisionRepository, UrbanRepository
from geography.infrastructure.repositories import (
    DjangoCountryRepository,
    DjangoDivisionRepository,
    DjangoUrbanRepository,
)
from geography.infrastructure.seeder import GeographySeeder


class GeographyInfrastructureFactory:
    """
    地理基础设施层工厂类。
    已创建的实例会被缓存，重复调用返回同一对象。
    """

    def __init__(self):
        self._country_repository = None
        self._division_repository = None
        self._urban_repository = None
        self._seeder = None

    def create_country_repository(self) -> CountryRepository:
        if not self._country_repository:
            self._country_repository = DjangoCountryRepository()
        return self._country_repository

    def create_division_repository(self) -> DivisionRepository:
        if not self._division_repository:
            self._division_repository = DjangoDivisionRepository()
        return self._division_repository

    def create_urban_repository(self) -> UrbanRepository:
        if not self._urban_repository:
            self._urban_repository = DjangoUrbanRepository()
        return self._urban_repository

    def create_seeder(self) -> GeographySeeder:
        """
        创建种子数据加载器。

        Returns:
            使用本工厂仓储的加载器实例
        """
        if not self._seeder:
            self._seeder = GeographySeeder(
                country_repository=self.create_country_repository(),
                division_repository=self.create_division_repository(),
                urban_repository=self.create_urban_repository(),
            )
        return self._seeder
