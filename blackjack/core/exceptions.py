"""
二十一点业务异常定义
所有异常都向调用方抛出，失败的操作不会修改任何状态
"""

from typing import Optional


class BlackjackError(Exception):
    """二十一点基础异常类"""
    pass


class InvalidArgumentError(BlackjackError, ValueError):
    """无效参数异常（如牌组副数为0或负数）"""
    pass


class EmptyDeckError(BlackjackError, IndexError):
    """从空牌组发牌异常"""
    pass


class DeckStateError(BlackjackError, ValueError):
    """牌组内部索引越界（top不在0到总牌数之间）"""
    pass


class IllegalActionError(BlackjackError):
    """当前手牌状态不允许该行动"""

    def __init__(self, message: str, action: Optional[object] = None,
                 state: Optional[object] = None):
        super().__init__(message)
        self.action = action
        self.state = state


class ConfigError(BlackjackError):
    """配置错误异常"""
    pass
