"""
二十一点手牌模块.

提供手牌计分（A的软/硬点数）和玩家行动状态机（要牌、停牌、加倍、分牌、投降）.
只依赖牌组模块的Card类型，不依赖Deck的内部实现.
"""

from .types import HandState, HandAction, TERMINAL_STATES
from .scoring import (
    BLACKJACK_VALUE,
    base_value,
    hand_totals,
    hand_value,
    is_soft,
    is_blackjack,
    is_bust,
    can_split,
)
from .hand import Hand
from .player import Player

__all__ = [
    'Hand',
    'Player',
    'HandState',
    'HandAction',
    'TERMINAL_STATES',
    'BLACKJACK_VALUE',
    'base_value',
    'hand_totals',
    'hand_value',
    'is_soft',
    'is_blackjack',
    'is_bust',
    'can_split',
]
