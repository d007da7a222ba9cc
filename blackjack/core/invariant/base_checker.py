"""
不变量检查器基础类

定义不变量检查器的抽象基类和通用功能。
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
import logging

from .types import InvariantType, InvariantViolation, InvariantCheckResult, InvariantError

__all__ = ['BaseInvariantChecker']

logger = logging.getLogger(__name__)


class BaseInvariantChecker(ABC):
    """不变量检查器基础抽象类"""

    def __init__(self, invariant_type: InvariantType):
        """初始化检查器

        Args:
            invariant_type: 不变量类型
        """
        self.invariant_type = invariant_type
        self._violations: List[InvariantViolation] = []

    @abstractmethod
    def _perform_check(self, subject: Any) -> bool:
        """执行具体的不变量检查逻辑

        Args:
            subject: 被检查的对象（牌组或手牌）

        Returns:
            bool: 检查是否通过
        """
        pass

    def check(self, subject: Any) -> InvariantCheckResult:
        """执行不变量检查，检查过程中的异常也记录为违反而不向外抛出

        Args:
            subject: 被检查的对象

        Returns:
            InvariantCheckResult: 检查结果
        """
        self._violations.clear()

        try:
            is_valid = self._perform_check(subject) and not self._violations
        except Exception as e:
            self._create_violation(
                description=f"检查过程中发生异常: {str(e)}",
                severity='CRITICAL',
                context={'exception_type': type(e).__name__, 'exception_message': str(e)}
            )
            is_valid = False

        if is_valid:
            return InvariantCheckResult.create_success(self.invariant_type)

        for violation in self._violations:
            logger.warning(f"[不变量] {self.invariant_type.name}: {violation.description}")
        return InvariantCheckResult.create_failure(
            invariant_type=self.invariant_type,
            violations=self._violations.copy()
        )

    def assert_valid(self, subject: Any) -> None:
        """检查并在失败时抛出InvariantError

        Raises:
            InvariantError: 存在违反记录时
        """
        result = self.check(subject)
        if not result.is_valid:
            descriptions = "; ".join(v.description for v in result.violations)
            raise InvariantError(f"{self.invariant_type.name}检查失败: {descriptions}",
                                 result.violations)

    def _create_violation(self, description: str, severity: str = 'CRITICAL',
                          context: Optional[Dict[str, Any]] = None) -> InvariantViolation:
        """创建违反记录

        Args:
            description: 违反描述
            severity: 严重程度
            context: 上下文信息

        Returns:
            InvariantViolation: 违反记录
        """
        violation = InvariantViolation(
            invariant_type=self.invariant_type,
            description=description,
            severity=severity,
            context=context or {}
        )

        self._violations.append(violation)
        return violation
