"""
二十一点玩家.

Player持有一个名字和本局的所有手牌（分牌后可能多于一手）.
每局开始时丢弃上一局的手牌，换上一手新的空牌.
"""

import logging
from typing import List, Tuple

from ..exceptions import InvalidArgumentError
from .hand import Hand

logger = logging.getLogger(__name__)


class Player:
    """
    二十一点玩家.

    Attributes:
        name: 玩家名称
        _hands: 本局手牌，按分牌顺序排列
    """

    def __init__(self, name: str) -> None:
        if not name:
            raise InvalidArgumentError("玩家名称不能为空")
        self.name = name
        self._hands: List[Hand] = [Hand()]

    @property
    def hands(self) -> Tuple[Hand, ...]:
        return tuple(self._hands)

    @property
    def hand(self) -> Hand:
        """第一手牌"""
        return self._hands[0]

    @property
    def is_done(self) -> bool:
        """所有手牌都已终止"""
        return all(hand.is_terminal for hand in self._hands)

    def new_round(self) -> Hand:
        """
        开始新的一局.

        Returns:
            Hand: 新的空手牌
        """
        self._hands = [Hand()]
        logger.debug(f"[玩家] {self.name} 开始新的一局")
        return self._hands[0]

    def split(self, index: int = 0) -> Tuple[Hand, Hand]:
        """
        分开第index手牌，两手新牌按原顺序替换原来的位置.

        Args:
            index: 要分的手牌位置

        Returns:
            Tuple[Hand, Hand]: 分出的两手牌

        Raises:
            IndexError: 位置不存在时
            IllegalActionError: 该手牌不能分牌时（玩家的手牌保持不变）
        """
        first, second = self._hands[index].split()
        self._hands[index:index + 1] = [first, second]
        logger.debug(f"[玩家] {self.name} 分牌: 现有{len(self._hands)}手牌")
        return first, second

    def active_hands(self) -> List[Hand]:
        """还可以行动的手牌"""
        return [hand for hand in self._hands if not hand.is_terminal]

    def __repr__(self) -> str:
        return f"Player(name={self.name!r}, hands={self._hands!r})"
