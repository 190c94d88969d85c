"""
仓储接口模块。
定义持久化和检索实体的通用接口，具体实现位于各模块的基础设施层。
"""
from abc import ABC, abstractmethod
from typing import Any, Generic, List, Optional, TypeVar

from core.domain.base import Entity

E = TypeVar('E', bound=Entity)


class Repository(Generic[E], ABC):
    """
    仓储接口。
    核心层不执行任何I/O，实体的创建、更新、删除全部委托给实现此接口的外部协作者。
    """

    @abstractmethod
    def get_by_id(self, id: Any) -> Optional[E]:
        """
        根据ID获取实体。

        Args:
            id: 实体ID

        Returns:
            找到的实体，如果不存在则返回None
        """

    @abstractmethod
    def save(self, entity: E) -> E:
        """
        保存实体。
        瞬态实体由存储分配标识，已持久化实体按标识更新。

        Args:
            entity: 要保存的实体

        Returns:
            携带持久标识的实体（新实例）
        """

    @abstractmethod
    def delete(self, entity: E) -> None:
        """删除实体。"""

    @abstractmethod
    def list(self, skip: int = 0, limit: int = 100) -> List[E]:
        """
        按标识顺序获取实体列表。

        Args:
            skip: 跳过的记录数
            limit: 返回的最大记录数
        """
