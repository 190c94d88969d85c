"""
种子数据加载器。
将随库发布的种子数据集按层次顺序写入外部存储。
种子数据集本身不校验跨数据集引用，加载器在写入前完成这项检查。
"""
from typing import Dict, Iterable, Optional, Set, Tuple

from django.db import transaction
from loguru import logger

from core.domain.exceptions import EntityNotFoundException
from geography.domain import (
    Country,
    CountryRepository,
    Division,
    DivisionRepository,
    Urban,
    UrbanRepository,
    get_seed_dataset,
    list_seed_datasets,
)
from geography.domain import config


class SeedReport:
    """
    种子数据加载结果。
    记录每个数据集写入的实体数量。
    """

    def __init__(self):
        self.counts: Dict[Tuple[str, str], int] = {}

    def record(self, family: str, variant: str, count: int) -> None:
        self.counts[(family, variant)] = count

    @property
    def total(self) -> int:
        """写入的实体总数"""
        return sum(self.counts.values())

    def __str__(self) -> str:
        parts = [f"{family}/{variant}={count}" for (family, variant), count in self.counts.items()]
        return f"SeedReport(total={self.total}, {', '.join(parts)})"


class GeographySeeder:
    """
    地理种子数据加载器。
    在单个事务中依次写入国家、行政区划、城市区域，重复执行时按ID更新已有行。
    """

    def __init__(
        self,
        country_repository: CountryRepository,
        division_repository: DivisionRepository,
        urban_repository: UrbanRepository,
        verify_references: Optional[bool] = None
    ):
        """
        初始化种子数据加载器。

        Args:
            country_repository: 国家仓储
            division_repository: 行政区划仓储
            urban_repository: 城市区域仓储
            verify_references: 是否校验引用，未指定时使用模块配置
        """
        self.country_repository = country_repository
        self.division_repository = division_repository
        self.urban_repository = urban_repository
        if verify_references is None:
            verify_references = config.VERIFY_SEED_REFERENCES
        self.verify_references = verify_references

    def seed(self) -> SeedReport:
        """
        加载全部种子数据集。

        Returns:
            加载结果

        Raises:
            EntityNotFoundException: 启用引用校验且某个区划或城市区域引用了不存在的上级
        """
        keys = list_seed_datasets()
        datasets = {key: get_seed_dataset(*key) for key in keys}

        if self.verify_references:
            self._verify(datasets)

        report = SeedReport()
        with transaction.atomic():
            for (family, variant), entities in datasets.items():
                repository = self._repository_for(family)
                for entity in entities:
                    repository.save(entity)
                    if config.SEED_LOG_ENTITIES:
                        logger.debug(f"已写入种子实体: {entity!r}")
                report.record(family, variant, len(entities))

        logger.info(f"种子数据加载完成: {report}")
        return report

    def _repository_for(self, family: str):
        """根据实体族选择仓储"""
        return {
            Country.family: self.country_repository,
            Division.family: self.division_repository,
            Urban.family: self.urban_repository,
        }[family]

    def _verify(self, datasets: Dict[Tuple[str, str], Iterable]) -> None:
        """
        校验种子数据的上级引用。
        上级可以来自同批种子数据，也可以已存在于存储中。
        """
        seeded_countries: Set[int] = set()
        seeded_divisions: Set[int] = set()
        for (family, _), entities in datasets.items():
            if family == Country.family:
                seeded_countries.update(entity.id for entity in entities)
            elif family == Division.family:
                seeded_divisions.update(entity.id for entity in entities)

        for (family, _), entities in datasets.items():
            for entity in entities:
                if family == Division.family:
                    self._require(
                        Country.family, entity.country_id, seeded_countries, self.country_repository
                    )
                elif family == Urban.family:
                    self._require(
                        Division.family, entity.division_id, seeded_divisions, self.division_repository
                    )

    def _require(self, entity_name: str, entity_id: int, seeded: Set[int], repository) -> None:
        if entity_id in seeded:
            return
        if repository.get_by_id(entity_id) is not None:
            return
        logger.error(f"种子数据引用了不存在的{entity_name}: ID={entity_id}")
        raise EntityNotFoundException(entity_name, entity_id)
