"""
扑克牌相关类型定义.

定义扑克牌的花色、点数等基础枚举类型.
枚举的声明顺序就是新牌组的组成顺序：点数A到2，花色♠♥♦♣.
"""

from enum import Enum
from typing import Dict, List


class Suit(Enum):
    """
    扑克牌花色枚举.
    
    定义四种标准扑克牌花色，使用Unicode符号表示.
    """

    SPADES = "♠"      # 黑桃
    HEARTS = "♥"      # 红桃
    DIAMONDS = "♦"    # 方块
    CLUBS = "♣"       # 梅花


class Rank(Enum):
    """
    扑克牌点数枚举.
    
    值为点数的显示文本. 点数本身不带游戏分值，分值由具体游戏的计分规则决定.
    """

    ACE = "A"
    KING = "K"
    QUEEN = "Q"
    JACK = "J"
    TEN = "10"
    NINE = "9"
    EIGHT = "8"
    SEVEN = "7"
    SIX = "6"
    FIVE = "5"
    FOUR = "4"
    THREE = "3"
    TWO = "2"


FACE_RANKS = frozenset({Rank.KING, Rank.QUEEN, Rank.JACK})

# 比较排序用的位置索引
RANK_ORDER: Dict[Rank, int] = {rank: index for index, rank in enumerate(Rank)}
SUIT_ORDER: Dict[Suit, int] = {suit: index for index, suit in enumerate(Suit)}


def get_all_suits() -> List[Suit]:
    """
    获取所有花色.
    
    Returns:
        List[Suit]: 按组成顺序排列的四种花色
    """
    return list(Suit)


def get_all_ranks() -> List[Rank]:
    """
    获取所有点数.
    
    Returns:
        List[Rank]: 按组成顺序（A, K, Q, ..., 2）排列的13种点数
    """
    return list(Rank)
