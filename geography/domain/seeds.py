"""
种子数据集。
随库发布的固定参考数据，用于初始化外部存储。
每个数据集是同一具体变体实体的只读有序元组，按(实体族, 变体)命名，
在首次访问时构建一次，此后在进程生命周期内只读。
本模块不校验数据集之间的引用完整性，这是加载方的职责。
"""
import threading
from typing import Dict, List, Optional, Tuple

from loguru import logger

from core.domain import DomainException
from geography.domain.entities import Country, Division, GeoEntity, Urban
from geography.domain.kinds import DivisionKind, UrbanKind

SeedKey = Tuple[str, str]


class SeedDatasetNotFoundException(DomainException):
    """种子数据集不存在异常"""
    def __init__(self, family: str, variant: str):
        message = f"不存在种子数据集: {family}/{variant}"
        super().__init__(message)
        self.family = family
        self.variant = variant


def _build_countries() -> Tuple[Country, ...]:
    return (
        Country(
            764,
            iso="TH",
            calling_code=66,
            name="Thailand",
            native="ไทย",
            population=69950850,
        ),
    )


def _build_provinces() -> Tuple[Division, ...]:
    return (
        Division(
            1,
            country_id=764,
            iso="BKK",
            name="Bangkok",
            native="กรุงเทพมหานคร",
            population=5494932,
            kind=DivisionKind.PROVINCE,
        ),
    )


def _build_cities() -> Tuple[Urban, ...]:
    return (
        Urban(
            1,
            division_id=1,
            name="Bangkok",
            native="กรุงเทพมหานคร",
            iso="BKK",
            kind=UrbanKind.CITY,
        ),
    )


# 数据集构建函数，按层次顺序排列（国家 → 行政区划 → 城市区域）
_BUILDERS = (
    (("Country", "Country"), _build_countries),
    (("Division", DivisionKind.PROVINCE.value), _build_provinces),
    (("Urban", UrbanKind.CITY.value), _build_cities),
)

# 各实体族允许的变体名称
_FAMILY_VARIANTS = {
    "Country": ("Country",),
    "Division": tuple(kind.value for kind in DivisionKind),
    "Urban": tuple(kind.value for kind in UrbanKind),
}

_datasets: Optional[Dict[SeedKey, Tuple[GeoEntity, ...]]] = None
_lock = threading.Lock()


def _load() -> Dict[SeedKey, Tuple[GeoEntity, ...]]:
    """构建全部数据集，只在首次访问时执行一次"""
    global _datasets
    if _datasets is not None:
        return _datasets

    with _lock:
        if _datasets is None:
            datasets = {}
            for key, build in _BUILDERS:
                datasets[key] = build()
                logger.debug(f"种子数据集 {key[0]}/{key[1]} 已构建，共 {len(datasets[key])} 条")
            _datasets = datasets
    return _datasets


def _normalize(family: str, variant: str) -> SeedKey:
    """按实体族校验并规范化变体名称（不区分大小写）"""
    for known_family, variants in _FAMILY_VARIANTS.items():
        if known_family.lower() != str(family).lower():
            continue
        for known_variant in variants:
            if known_variant.lower() == str(variant).lower():
                return known_family, known_variant
    raise SeedDatasetNotFoundException(str(family), str(variant))


def get_seed_dataset(family: str, variant: str) -> Tuple[GeoEntity, ...]:
    """
    获取指定实体族和变体的种子数据集。

    Args:
        family: 实体族名称，Country、Division或Urban
        variant: 变体名称，如Province、City；Country族的变体为Country

    Returns:
        只读有序元组；已知变体但没有种子数据时返回空元组

    Raises:
        SeedDatasetNotFoundException: 如果实体族或变体未知
    """
    key = _normalize(family, variant)
    return _load().get(key, ())


def list_seed_datasets() -> List[SeedKey]:
    """
    列出所有带数据的种子数据集。

    Returns:
        (实体族, 变体)列表，按层次加载顺序排列
    """
    return [key for key, dataset in _load().items() if dataset]


def countries() -> Tuple[Country, ...]:
    """国家种子数据集"""
    return get_seed_dataset("Country", "Country")


def provinces() -> Tuple[Division, ...]:
    """省种子数据集"""
    return get_seed_dataset("Division", DivisionKind.PROVINCE.value)


def cities() -> Tuple[Urban, ...]:
    """城市种子数据集"""
    return get_seed_dataset("Urban", UrbanKind.CITY.value)
