"""
Blackjack Core Module - 纯领域逻辑层

该模块包含二十一点的核心业务逻辑.
核心模块只能依赖其他核心模块，不依赖任何UI或编排层.

Modules:
    deck: 牌组管理和发牌逻辑
    hand: 手牌计分和玩家行动状态机
    invariant: 牌组与手牌的不变量检查
    config: 牌组与日志配置
    exceptions: 业务异常定义
"""

from .exceptions import (
    BlackjackError,
    InvalidArgumentError,
    EmptyDeckError,
    DeckStateError,
    IllegalActionError,
    ConfigError,
)
from .deck import Card, Deck, Suit, Rank
from .hand import Hand, HandState, HandAction, Player

__all__ = [
    'Card',
    'Deck',
    'Suit',
    'Rank',
    'Hand',
    'HandState',
    'HandAction',
    'Player',
    'BlackjackError',
    'InvalidArgumentError',
    'EmptyDeckError',
    'DeckStateError',
    'IllegalActionError',
    'ConfigError',
]
