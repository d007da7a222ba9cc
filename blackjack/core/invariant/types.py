"""
不变量检查的结果类型.

检查器把发现的问题记录为InvariantViolation，汇总到InvariantCheckResult中返回.
"""

from enum import Enum, auto
from dataclasses import dataclass, field
from typing import List, Dict, Any

__all__ = [
    'SEVERITIES',
    'InvariantType',
    'InvariantViolation',
    'InvariantCheckResult',
    'InvariantError'
]

SEVERITIES = ('CRITICAL', 'WARNING', 'INFO')


class InvariantType(Enum):
    """被检查的对象种类"""
    DECK_INTEGRITY = auto()         # 牌组索引、大小和组成
    HAND_CONSISTENCY = auto()       # 手牌状态与点数一致


@dataclass(frozen=True)
class InvariantViolation:
    """
    一条违反记录.

    Attributes:
        invariant_type: 所属检查类型
        description: 问题描述
        severity: CRITICAL / WARNING / INFO
        context: 定位问题用的相关数值，如top、点数、手牌
    """
    invariant_type: InvariantType
    description: str
    severity: str = 'CRITICAL'
    context: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if not self.description:
            raise ValueError("description不能为空")
        if self.severity not in SEVERITIES:
            raise ValueError(f"severity必须是{'/'.join(SEVERITIES)}之一: {self.severity!r}")

    @property
    def is_critical(self) -> bool:
        return self.severity == 'CRITICAL'


@dataclass(frozen=True)
class InvariantCheckResult:
    """一次检查的结果，通过时violations为空"""
    invariant_type: InvariantType
    is_valid: bool
    violations: List[InvariantViolation] = field(default_factory=list)

    def __post_init__(self):
        if not self.is_valid and not self.violations:
            raise ValueError("检查失败时必须提供违反记录")

    @classmethod
    def create_success(cls, invariant_type: InvariantType) -> 'InvariantCheckResult':
        return cls(invariant_type=invariant_type, is_valid=True)

    @classmethod
    def create_failure(cls, invariant_type: InvariantType,
                       violations: List[InvariantViolation]) -> 'InvariantCheckResult':
        return cls(invariant_type=invariant_type, is_valid=False, violations=list(violations))


class InvariantError(Exception):
    """assert_valid发现违反记录时抛出"""

    def __init__(self, message: str, violations: List[InvariantViolation]):
        super().__init__(message)
        self.violations = violations

    def get_critical_violations(self) -> List[InvariantViolation]:
        """只取CRITICAL级别的记录"""
        return [v for v in self.violations if v.is_critical]
