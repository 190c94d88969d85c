"""
基于Django ORM的地理仓储公共实现。
负责领域实体与数据库模型之间的转换，以及按标识的增删改查。
"""
from typing import Any, List, Optional, Type

from django.db import models, transaction
from loguru import logger

from core.domain.exceptions import InvalidEntityStateException
from geography.domain.entities import GeoEntity
from geography.infrastructure.mapping import to_domain, to_model_fields


class DjangoGeoRepository:
    """
    地理仓储公共基类。
    子类通过model_class指定对应的数据库模型。
    """

    model_class: Type[models.Model]

    def get_by_id(self, id: Any) -> Optional[GeoEntity]:
        """
        根据ID获取实体。

        Args:
            id: 实体ID

        Returns:
            找到的实体，如果不存在则返回None
        """
        try:
            return to_domain(self.model_class.objects.get(id=id))
        except (self.model_class.DoesNotExist, ValueError, TypeError):
            return None

    def save(self, entity: GeoEntity) -> GeoEntity:
        """
        保存实体。
        瞬态实体插入新行并由数据库分配ID；已持久化实体按ID插入或更新。
        引用完整性和唯一性冲突由数据库抛出。

        Args:
            entity: 要保存的实体

        Returns:
            携带持久ID的新实体实例
        """
        fields = to_model_fields(entity)
        try:
            with transaction.atomic():
                if entity.is_transient():
                    model = self.model_class.objects.create(**fields)
                else:
                    entity_id = fields.pop('id')
                    model, created = self.model_class.objects.update_or_create(
                        id=entity_id, defaults=fields
                    )
                    logger.debug(
                        f"{self.model_class.__name__} {entity_id} 已{'创建' if created else '更新'}"
                    )
        except Exception as e:
            logger.error(f"保存{self.model_class.__name__}失败: {e}")
            raise
        return to_domain(model)

    def delete(self, entity: GeoEntity) -> None:
        """
        删除实体。

        Args:
            entity: 要删除的实体

        Raises:
            InvalidEntityStateException: 如果实体是瞬态的
        """
        if entity.is_transient():
            raise InvalidEntityStateException(entity.__class__.__name__, "瞬态实体不能删除")
        self.model_class.objects.filter(id=entity.id).delete()

    def list(self, skip: int = 0, limit: int = 100) -> List[GeoEntity]:
        """
        按ID顺序获取实体列表。

        Args:
            skip: 跳过的记录数
            limit: 返回的最大记录数

        Returns:
            实体列表
        """
        skip = max(0, skip)
        limit = max(0, limit)
        queryset = self.model_class.objects.order_by('id')[skip:skip + limit]
        return [to_domain(model) for model in queryset]

    def exists(self, id: Any) -> bool:
        """判断指定ID的行是否存在"""
        return self.model_class.objects.filter(id=id).exists()
