"""
地理实体的字段约束。
构造实体时立即校验（快速失败，不截断、不强制转换），
同一组长度限制也被基础设施层用作数据库列定义。
"""
from typing import Any, Dict, Optional

from core.domain.exceptions import ValidationException

# 名称长度上限（按Unicode码点计）
NAME_MAX_LENGTH = 100
NATIVE_MAX_LENGTH = 100

COUNTRY_ISO_LENGTH = 2
DIVISION_ISO_MAX_LENGTH = 3
URBAN_ISO_MAX_LENGTH = 5


class TextConstraint:
    """必填文本字段约束"""

    def __init__(self, field_name: str, max_length: int, min_length: int = 1):
        self.field_name = field_name
        self.max_length = max_length
        self.min_length = min_length

    def validate(self, value: Any) -> str:
        """
        校验文本字段。

        Args:
            value: 待校验的值

        Returns:
            原值

        Raises:
            ValidationException: 值缺失、不是字符串、为空白或长度越界
        """
        if value is None:
            raise ValidationException(self.field_name, "必填字段不能为空")
        if not isinstance(value, str):
            raise ValidationException(self.field_name, f"必须是字符串，实际为{type(value).__name__}")
        if not value.strip():
            raise ValidationException(self.field_name, "必填字段不能为空白")
        length = len(value)
        if length > self.max_length:
            raise ValidationException(
                self.field_name, f"长度{length}超过上限{self.max_length}"
            )
        if length < self.min_length:
            raise ValidationException(
                self.field_name, f"长度{length}低于下限{self.min_length}"
            )
        return value


class IntegerConstraint:
    """整数字段约束，布尔值不被视为整数"""

    def __init__(self, field_name: str, min_value: Optional[int] = 0):
        self.field_name = field_name
        self.min_value = min_value

    def validate(self, value: Any) -> int:
        if value is None:
            raise ValidationException(self.field_name, "必填字段不能为空")
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValidationException(self.field_name, f"必须是整数，实际为{type(value).__name__}")
        if self.min_value is not None and value < self.min_value:
            raise ValidationException(self.field_name, f"不能小于{self.min_value}，实际为{value}")
        return value


# 各实体族的字段约束表
COUNTRY_CONSTRAINTS: Dict[str, Any] = {
    'id': IntegerConstraint('id'),
    'iso': TextConstraint('iso', COUNTRY_ISO_LENGTH, min_length=COUNTRY_ISO_LENGTH),
    'calling_code': IntegerConstraint('calling_code'),
    'name': TextConstraint('name', NAME_MAX_LENGTH),
    'native': TextConstraint('native', NATIVE_MAX_LENGTH),
    'population': IntegerConstraint('population'),
}

DIVISION_CONSTRAINTS: Dict[str, Any] = {
    'id': IntegerConstraint('id'),
    'country_id': IntegerConstraint('country_id'),
    'iso': TextConstraint('iso', DIVISION_ISO_MAX_LENGTH),
    'name': TextConstraint('name', NAME_MAX_LENGTH),
    'native': TextConstraint('native', NATIVE_MAX_LENGTH),
    'population': IntegerConstraint('population'),
}

URBAN_CONSTRAINTS: Dict[str, Any] = {
    'id': IntegerConstraint('id'),
    'division_id': IntegerConstraint('division_id'),
    'name': TextConstraint('name', NAME_MAX_LENGTH),
    'native': TextConstraint('native', NATIVE_MAX_LENGTH),
    'iso': TextConstraint('iso', URBAN_ISO_MAX_LENGTH),
}


def validate_fields(constraints: Dict[str, Any], values: Dict[str, Any]) -> Dict[str, Any]:
    """
    按约束表依次校验字段值。

    Args:
        constraints: 字段名到约束的映射
        values: 字段名到值的映射

    Returns:
        校验通过的字段值

    Raises:
        ValidationException: 第一个不满足约束的字段
    """
    return {name: constraint.validate(values.get(name)) for name, constraint in constraints.items()}
