"""
领域实体与数据库模型之间的映射。
持久化边界上的两阶段构建：先创建空构建器，再逐个设置字段，最后通过实体的校验构造函数生成实例。
领域实体本身不提供无参构造，"构造即有效"在边界之外始终成立。
"""
from typing import Any, Dict, Type

from django.db import models
from loguru import logger

from core.domain.exceptions import ValidationException
from geography.domain.entities import Country, Division, GeoEntity, Urban
from geography.infrastructure.models import geography_models

# 各实体类可设置的字段
_ENTITY_FIELDS = {
    Country: ('id', 'iso', 'calling_code', 'name', 'native', 'population'),
    Division: ('id', 'country_id', 'iso', 'name', 'native', 'population', 'kind'),
    Urban: ('id', 'division_id', 'name', 'native', 'iso', 'kind'),
}


class EntityBuilder:
    """
    实体构建器。
    仅供映射层使用，用于从数据库行逐字段填充实体。
    """

    def __init__(self, entity_class: Type[GeoEntity]):
        if entity_class not in _ENTITY_FIELDS:
            raise ValidationException(None, f"不支持的实体类型: {entity_class.__name__}")
        self._entity_class = entity_class
        self._fields: Dict[str, Any] = {}

    def set_field(self, name: str, value: Any) -> 'EntityBuilder':
        """
        设置字段值。

        Args:
            name: 字段名
            value: 字段值

        Returns:
            构建器本身，便于链式调用

        Raises:
            ValidationException: 如果字段不属于该实体
        """
        if name not in _ENTITY_FIELDS[self._entity_class]:
            raise ValidationException(
                name, f"{self._entity_class.__name__}没有此字段"
            )
        self._fields[name] = value
        return self

    def build(self) -> GeoEntity:
        """
        构建实体。

        Returns:
            经过完整校验的实体

        Raises:
            ValidationException: 缺少必填字段或字段值不满足约束
        """
        for name in _ENTITY_FIELDS[self._entity_class]:
            if name != 'id' and name not in self._fields:
                raise ValidationException(name, "必填字段未设置")
        fields = dict(self._fields)
        entity_id = fields.pop('id', None)
        return self._entity_class(entity_id, **fields)


def to_domain(model: models.Model) -> GeoEntity:
    """
    将数据库模型转换为领域实体。

    Args:
        model: Country、Division或Urban数据库模型

    Returns:
        对应的领域实体
    """
    if isinstance(model, geography_models.Country):
        builder = EntityBuilder(Country)
        names = ('id', 'iso', 'calling_code', 'name', 'native', 'population')
    elif isinstance(model, geography_models.Division):
        builder = EntityBuilder(Division).set_field('kind', model.type)
        names = ('id', 'country_id', 'iso', 'name', 'native', 'population')
    elif isinstance(model, geography_models.Urban):
        builder = EntityBuilder(Urban).set_field('kind', model.type)
        names = ('id', 'division_id', 'name', 'native', 'iso')
    else:
        raise ValidationException(None, f"不支持的数据库模型: {type(model).__name__}")

    for name in names:
        builder.set_field(name, getattr(model, name))

    entity = builder.build()
    logger.debug(f"数据库行已映射为领域实体: {entity!r}")
    return entity


def to_model_fields(entity: GeoEntity) -> Dict[str, Any]:
    """
    将领域实体转换为数据库列字典。

    Args:
        entity: 领域实体

    Returns:
        列名到值的字典；瞬态实体不包含id，由数据库分配
    """
    data = entity.to_dict()
    if entity.is_transient():
        data.pop('id', None)
    return data
