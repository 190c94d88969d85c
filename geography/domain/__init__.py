"""
地理领域模型包。
提供分类标签、字段约束、实体、种子数据集和仓储接口。
"""

# 分类标签
from geography.domain.kinds import DivisionKind, UrbanKind

# 实体
from geography.domain.entities import GeoEntity, Country, Division, Urban

# 种子数据集
from geography.domain.seeds import (
    SeedDatasetNotFoundException,
    get_seed_dataset,
    list_seed_datasets,
    countries,
    provinces,
    cities,
)

# 仓储接口
from geography.domain.repositories import CountryRepository, DivisionRepository, UrbanRepository

__all__ = [
    # 分类标签
    'DivisionKind',
    'UrbanKind',

    # 实体
    'GeoEntity',
    'Country',
    'Division',
    'Urban',

    # 种子数据集
    'SeedDatasetNotFoundException',
    'get_seed_dataset',
    'list_seed_datasets',
    'countries',
    'provinces',
    'cities',

    # 仓储接口
    'CountryRepository',
    'DivisionRepository',
    'UrbanRepository',
]
