"""
手牌状态机类型定义

定义手牌状态和玩家行动的枚举。
"""

from enum import Enum, auto

__all__ = [
    'HandState',
    'HandAction',
    'TERMINAL_STATES',
]


class HandState(Enum):
    """手牌状态枚举"""
    ACTIVE = auto()          # 还可以行动
    STANDING = auto()        # 主动停牌
    BUSTED = auto()          # 爆牌（点数超过21）
    BLACKJACK = auto()       # 起手两张牌21点
    DOUBLED_DOWN = auto()    # 加倍，只再接收一张牌
    SPLIT = auto()           # 已分成两手独立的牌
    SURRENDERED = auto()     # 投降


class HandAction(Enum):
    """玩家行动枚举"""
    HIT = auto()
    STAND = auto()
    DOUBLE_DOWN = auto()
    SPLIT = auto()
    SURRENDER = auto()


# 加倍后的状态只有在收到那张强制牌之后才是终止状态，由Hand自行判断
TERMINAL_STATES = frozenset({
    HandState.STANDING,
    HandState.BUSTED,
    HandState.BLACKJACK,
    HandState.SURRENDERED,
    HandState.SPLIT,
})
