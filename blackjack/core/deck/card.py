"""
扑克牌数据结构.

定义不可变的Card类以及点数分类函数. Card本身不携带分值，
分值属于具体游戏的计分规则（见 blackjack.core.hand.scoring）.
"""

from dataclasses import dataclass
from functools import total_ordering
from typing import Dict

from .types import Suit, Rank, FACE_RANKS, RANK_ORDER, SUIT_ORDER


_RANK_ALIASES: Dict[str, Rank] = {rank.value: rank for rank in Rank}
_RANK_ALIASES.update({"T": Rank.TEN, "a": Rank.ACE, "k": Rank.KING,
                      "q": Rank.QUEEN, "j": Rank.JACK, "t": Rank.TEN})

_SUIT_ALIASES: Dict[str, Suit] = {suit.value: suit for suit in Suit}
_SUIT_ALIASES.update({
    "s": Suit.SPADES, "S": Suit.SPADES,
    "h": Suit.HEARTS, "H": Suit.HEARTS,
    "d": Suit.DIAMONDS, "D": Suit.DIAMONDS,
    "c": Suit.CLUBS, "C": Suit.CLUBS,
})


@total_ordering
@dataclass(frozen=True)
class Card:
    """
    表示一张扑克牌.
    
    不可变数据类，相等性、哈希和排序只由(点数, 花色)决定，
    多副牌中相同点数花色的两张牌可以互换.
    
    Attributes:
        rank: 点数
        suit: 花色
        
    Examples:
        >>> card = Card(Rank.ACE, Suit.SPADES)
        >>> str(card)
        'A♠'
        >>> card.is_ace
        True
    """

    rank: Rank
    suit: Suit

    def __post_init__(self) -> None:
        """
        验证扑克牌数据的有效性.
        
        Raises:
            TypeError: 当点数或花色类型无效时
        """
        if not isinstance(self.rank, Rank):
            raise TypeError(f"点数必须是Rank类型，实际: {type(self.rank)}")
        if not isinstance(self.suit, Suit):
            raise TypeError(f"花色必须是Suit类型，实际: {type(self.suit)}")

    @property
    def is_ace(self) -> bool:
        """是否为A"""
        return self.rank is Rank.ACE

    @property
    def is_face_card(self) -> bool:
        """是否为人头牌（K、Q、J）"""
        return self.rank in FACE_RANKS

    def __str__(self) -> str:
        """
        返回扑克牌的字符串表示.
        
        Returns:
            str: 格式为"点数花色"的字符串，如"A♠"
        """
        return f"{self.rank.value}{self.suit.value}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    def __lt__(self, other: 'Card') -> bool:
        """
        按(点数, 花色)的组成顺序比较.
        
        Args:
            other: 另一张牌
            
        Returns:
            bool: 当前牌在组成顺序中排在另一张牌之前时返回True
        """
        if not isinstance(other, Card):
            return NotImplemented
        return (RANK_ORDER[self.rank], SUIT_ORDER[self.suit]) < \
            (RANK_ORDER[other.rank], SUIT_ORDER[other.suit])

    @classmethod
    def from_str(cls, card_str: str) -> 'Card':
        """
        从字符串创建扑克牌对象.
        
        Args:
            card_str: 扑克牌字符串，如"A♠"、"AS"、"10h"、"Th"
            
        Returns:
            Card: 对应的扑克牌对象
            
        Raises:
            TypeError: 当输入不是字符串时
            ValueError: 当字符串格式无效时
        """
        if not isinstance(card_str, str):
            raise TypeError(f"输入必须是字符串，实际: {type(card_str)}")

        card_str = card_str.strip()
        if len(card_str) < 2:
            raise ValueError(f"卡牌字符串格式错误: {card_str}")

        # 处理10的特殊情况
        if card_str.startswith("10"):
            rank_str, suit_str = "10", card_str[2:]
        else:
            rank_str, suit_str = card_str[0], card_str[1:]

        if rank_str not in _RANK_ALIASES:
            raise ValueError(f"无效的点数: {rank_str}")
        if suit_str not in _SUIT_ALIASES:
            raise ValueError(f"无效的花色: {suit_str}")

        return cls(_RANK_ALIASES[rank_str], _SUIT_ALIASES[suit_str])


def is_ace(card: Card) -> bool:
    """判断一张牌是否为A."""
    return card.is_ace


def is_face_card(card: Card) -> bool:
    """判断一张牌是否为人头牌（K、Q、J）."""
    return card.is_face_card
