"""
Invariant Module - 不变量检查

检查牌组和手牌在任意可达状态下都成立的不变量。

Classes:
    DeckInvariantChecker: 牌组完整性检查器
    HandInvariantChecker: 手牌一致性检查器
    BaseInvariantChecker: 不变量检查器基类

Types:
    InvariantType: 不变量类型枚举
    InvariantViolation: 不变量违反记录
    InvariantCheckResult: 不变量检查结果
    InvariantError: 不变量错误异常
"""

from .types import (
    InvariantType,
    InvariantViolation,
    InvariantCheckResult,
    InvariantError
)
from .base_checker import BaseInvariantChecker
from .deck_checker import DeckInvariantChecker
from .hand_checker import HandInvariantChecker

__all__ = [
    'DeckInvariantChecker',
    'HandInvariantChecker',
    'BaseInvariantChecker',
    'InvariantType',
    'InvariantViolation',
    'InvariantCheckResult',
    'InvariantError'
]
