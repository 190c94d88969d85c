"""
地理领域模型中的实体。
国家 → 行政区划 → 城市区域 三级层次，层级之间通过整数外键关联（引用而非嵌入）。
行政区划和城市区域各自是一个实体族，具体分类由kind标签区分。
"""
from typing import Any, Dict, Hashable, Optional

from core.domain import Entity, InvalidEntityStateException
from geography.domain.constraints import (
    COUNTRY_CONSTRAINTS,
    DIVISION_CONSTRAINTS,
    URBAN_CONSTRAINTS,
    validate_fields,
)
from geography.domain.kinds import DivisionKind, UrbanKind


class GeoEntity(Entity[int]):
    """
    地理实体基类。
    构造完成后即不可变：所有字段在构造时校验，之后的赋值会被拒绝。
    """

    # 实体族名称，作为变体标签的第一部分
    family: str = ""
    constraints: Dict[str, Any] = {}

    def __init__(self, id: Optional[int] = None, **fields: Any):
        super().__init__(id)
        values = validate_fields(self.constraints, {'id': self.id, **fields})
        for name, value in values.items():
            object.__setattr__(self, name, value)
        object.__setattr__(self, '_frozen', True)

    def __setattr__(self, name: str, value: Any) -> None:
        if getattr(self, '_frozen', False):
            raise InvalidEntityStateException(
                self.__class__.__name__, f"实体不可变，不能修改字段'{name}'"
            )
        object.__setattr__(self, name, value)

    def __delattr__(self, name: str) -> None:
        raise InvalidEntityStateException(
            self.__class__.__name__, f"实体不可变，不能删除字段'{name}'"
        )

    @property
    def variant(self) -> Hashable:
        return (self.family, self.family)

    def to_dict(self) -> Dict[str, Any]:
        """
        将实体转换为字典表示。

        Returns:
            字段名到值的字典
        """
        return {name: getattr(self, name) for name in self.constraints}

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id!r}, name={self.name!r})"


class Country(GeoEntity):
    """
    国家实体。
    层次的根节点，没有上级；封闭记录，不参与分类体系。
    """
    family = "Country"
    constraints = COUNTRY_CONSTRAINTS

    def __init__(
        self,
        id: Optional[int] = None,
        *,
        iso: str,
        calling_code: int,
        name: str,
        native: str,
        population: int,
    ):
        """
        初始化国家实体。

        Args:
            id: 国家ID（通常为ISO 3166-1数字代码），未提供则为瞬态
            iso: ISO 3166-1 alpha-2 代码
            calling_code: 国际电话区号
            name: 英文名称
            native: 本地语言名称
            population: 人口

        Raises:
            ValidationException: 任一字段不满足约束
        """
        super().__init__(
            id,
            iso=iso,
            calling_code=calling_code,
            name=name,
            native=native,
            population=population,
        )


class Division(GeoEntity):
    """
    行政区划实体。
    隶属于某个国家；具体分类（省、州、县等）由kind标签表示。
    """
    family = "Division"
    constraints = DIVISION_CONSTRAINTS

    def __init__(
        self,
        id: Optional[int] = None,
        *,
        country_id: int,
        iso: str,
        name: str,
        native: str,
        population: int,
        kind: Any,
    ):
        """
        初始化行政区划实体。
        country_id不做引用校验，引用完整性由持久化层负责。

        Args:
            id: 行政区划ID，未提供则为瞬态
            country_id: 所属国家ID
            iso: 区划代码
            name: 英文名称
            native: 本地语言名称
            population: 人口
            kind: 区划分类，DivisionKind成员或其名称

        Raises:
            ValidationException: 任一字段不满足约束或分类未知
        """
        resolved_kind = DivisionKind.parse(kind)
        super().__init__(
            id,
            country_id=country_id,
            iso=iso,
            name=name,
            native=native,
            population=population,
        )
        object.__setattr__(self, 'kind', resolved_kind)

    @property
    def variant(self) -> Hashable:
        return (self.family, self.kind.value)

    def is_kind(self, kind: Any) -> bool:
        """判断区划是否属于指定分类"""
        return self.kind is DivisionKind.parse(kind)

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data['type'] = self.kind.value
        return data


class Urban(GeoEntity):
    """
    城市区域实体。
    隶属于某个行政区划；具体分类（城市、镇、村等）由kind标签表示。
    """
    family = "Urban"
    constraints = URBAN_CONSTRAINTS

    def __init__(
        self,
        id: Optional[int] = None,
        *,
        division_id: int,
        name: str,
        native: str,
        iso: str,
        kind: Any,
    ):
        resolved_kind = UrbanKind.parse(kind)
        super().__init__(
            id,
            division_id=division_id,
            name=name,
            native=native,
            iso=iso,
        )
        object.__setattr__(self, 'kind', resolved_kind)

    @property
    def variant(self) -> Hashable:
        return (self.family, self.kind.value)

    def is_kind(self, kind: Any) -> bool:
        """判断城市区域是否属于指定分类"""
        return self.kind is UrbanKind.parse(kind)

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data['type'] = self.kind.value
        return data
