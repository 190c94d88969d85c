"""
领域模型包。
提供实体标识抽象、领域异常和仓储接口。
"""

# 基础类
from core.domain.base import Entity

# 领域异常
from core.domain.exceptions import (
    DomainException,
    InvalidEntityStateException,
    EntityNotFoundException,
    ValidationException,
)

# 仓储接口
from core.domain.repositories import Repository

__all__ = [
    # 基础类
    'Entity',

    # 领域异常
    'DomainException',
    'InvalidEntityStateException',
    'EntityNotFoundException',
    'ValidationException',

    # 仓储接口
    'Repository',
]
