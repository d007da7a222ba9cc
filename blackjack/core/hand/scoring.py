"""
二十一点计分规则.

牌面分值：2-10按面值，K/Q/J为10，A为11或1.
手牌点数先把所有A按11计，总点数超过21时逐张把A降为1，
直到不超过21或者没有可降的A为止.
"""

from typing import Iterable, Sequence, Tuple

from ..deck.card import Card
from ..deck.types import Rank

BLACKJACK_VALUE = 21
ACE_HIGH = 11
ACE_LOW = 1
FACE_VALUE = 10

_NUMERIC_VALUES = {
    Rank.TEN: 10, Rank.NINE: 9, Rank.EIGHT: 8, Rank.SEVEN: 7, Rank.SIX: 6,
    Rank.FIVE: 5, Rank.FOUR: 4, Rank.THREE: 3, Rank.TWO: 2,
}


def base_value(card: Card) -> int:
    """
    获取一张牌的基础分值.
    
    Args:
        card: 扑克牌
        
    Returns:
        int: A为11，人头牌为10，其余为面值
    """
    if card.is_ace:
        return ACE_HIGH
    if card.is_face_card:
        return FACE_VALUE
    return _NUMERIC_VALUES[card.rank]


def hand_totals(cards: Iterable[Card]) -> Tuple[int, bool]:
    """
    计算手牌点数.
    
    Args:
        cards: 手牌
        
    Returns:
        Tuple[int, bool]: (点数, 是否为软点数)，软点数表示仍有A按11计
    """
    total = 0
    high_aces = 0
    for card in cards:
        total += base_value(card)
        if card.is_ace:
            high_aces += 1
    while total > BLACKJACK_VALUE and high_aces > 0:
        total -= ACE_HIGH - ACE_LOW
        high_aces -= 1
    return total, high_aces > 0


def hand_value(cards: Iterable[Card]) -> int:
    """计算手牌点数."""
    return hand_totals(cards)[0]


def is_soft(cards: Iterable[Card]) -> bool:
    """是否为软点数（至少一张A仍按11计）."""
    return hand_totals(cards)[1]


def is_blackjack(cards: Sequence[Card]) -> bool:
    """恰好两张牌且点数为21."""
    return len(cards) == 2 and hand_value(cards) == BLACKJACK_VALUE


def is_bust(cards: Iterable[Card]) -> bool:
    """点数超过21即爆牌，无论是否还有A."""
    return hand_value(cards) > BLACKJACK_VALUE


def can_split(cards: Sequence[Card]) -> bool:
    """恰好两张牌且基础分值相同（如7和7，K和Q）."""
    return len(cards) == 2 and base_value(cards[0]) == base_value(cards[1])
