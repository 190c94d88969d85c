"""
核心领域模型基类模块。
包含Entity基类，用于所有具有唯一标识的领域对象。
"""
from typing import Any, Generic, Hashable, Optional, TypeVar

T = TypeVar('T')


class Entity(Generic[T]):
    """
    实体基类。
    实体是具有唯一标识的领域对象，其相等性通过(变体标签, 标识)判断。
    标识等于默认值的实体处于"瞬态"，即尚未被持久化层分配持久标识。
    """

    # 标识类型的默认值，整数标识为0
    DEFAULT_ID: Any = 0

    def __init__(self, id: Optional[T] = None):
        """
        初始化实体。

        Args:
            id: 实体标识，如果未提供，则使用默认值（瞬态）。
                实体本身不生成标识，标识由调用方或持久化层分配。
        """
        self.id = id if id is not None else self.DEFAULT_ID

    @property
    def variant(self) -> Hashable:
        """
        实体的变体标签，与标识一同参与相等性比较。
        默认为具体类名，实体族可覆盖为更细的分类标签。
        """
        return self.__class__.__name__

    def is_transient(self) -> bool:
        """
        判断实体是否处于瞬态。

        Returns:
            如果标识为空或等于默认值，则返回True；否则返回False
        """
        return self.id is None or self.id == self.DEFAULT_ID

    def __eq__(self, other: Any) -> bool:
        """
        判断两个实体是否相等。
        仅当变体标签相同、双方都不是瞬态且标识相等时才相等。
        两个瞬态实体即使标识都是默认值也不相等。

        Args:
            other: 另一个实体

        Returns:
            如果两个实体表示同一个已持久化对象，则返回True；否则返回False
        """
        if self is other:
            return True
        if not isinstance(other, Entity):
            return False
        if self.variant != other.variant:
            return False
        if self.is_transient() or other.is_transient():
            return False
        return self.id == other.id

    def __ne__(self, other: Any) -> bool:
        return not self.__eq__(other)

    def __hash__(self) -> int:
        """
        计算实体的哈希值。
        已持久化实体基于(变体标签, 标识)，瞬态实体退回到对象自身的哈希。

        Returns:
            实体的哈希值
        """
        if self.is_transient():
            return object.__hash__(self)
        return hash((self.variant, self.id))
