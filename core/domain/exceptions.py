"""
领域异常模块。
包含领域模型中使用的各种异常类。
"""
from typing import Any, Optional


class DomainException(Exception):
    """
    领域异常基类。
    所有领域模型中的异常都应继承自此类。
    """

    def __init__(self, message: str):
        """
        初始化领域异常。

        Args:
            message: 异常消息
        """
        self.message = message
        super().__init__(self.message)


class InvalidEntityStateException(DomainException):
    """
    实体状态无效异常。
    当对实体执行其当前状态不允许的操作时抛出，例如修改不可变实体。
    """

    def __init__(self, entity_name: str, reason: str):
        message = f"{entity_name}处于无效状态: {reason}"
        super().__init__(message)
        self.entity_name = entity_name
        self.reason = reason


class EntityNotFoundException(DomainException):
    """
    实体未找到异常。
    当引用的实体不存在时抛出。
    """

    def __init__(self, entity_name: str, entity_id: Any):
        message = f"无法找到{entity_name}: ID={entity_id}"
        super().__init__(message)
        self.entity_name = entity_name
        self.entity_id = entity_id


class ValidationException(DomainException):
    """
    数据验证异常。
    当字段值违反约束（必填、长度、取值范围）时抛出。
    """

    def __init__(self, field_name: Optional[str] = None, message: str = "数据验证失败"):
        """
        初始化数据验证异常。

        Args:
            field_name: 字段名称
            message: 异常消息
        """
        if field_name:
            full_message = f"字段'{field_name}'验证失败: {message}"
        else:
            full_message = message
        super().__init__(full_message)
        self.field_name = field_name
