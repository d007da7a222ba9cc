"""
二十一点牌组管理模块.

提供Card和Deck类，实现多副扑克牌的组成、洗牌和发牌功能.
"""

from .types import Suit, Rank, get_all_suits, get_all_ranks
from .card import Card, is_ace, is_face_card
from .deck import Deck, CARDS_PER_SET

__all__ = [
    'Card',
    'Deck',
    'Suit',
    'Rank',
    'CARDS_PER_SET',
    'get_all_suits',
    'get_all_ranks',
    'is_ace',
    'is_face_card',
]
