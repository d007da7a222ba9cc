"""
扑克牌组管理.

定义Deck类，管理一副或多副标准52张牌拼接而成的牌组，包括洗牌、发牌等操作.
"""

import logging
import random
from typing import List, Optional, Tuple

from ..exceptions import InvalidArgumentError, EmptyDeckError, DeckStateError
from .card import Card
from .types import get_all_suits, get_all_ranks

logger = logging.getLogger(__name__)

CARDS_PER_SET = 52

# 进程级随机数生成器，导入时播种一次，之后不再重新播种
_DEFAULT_RNG = random.Random()


class Deck:
    """
    表示由一副或多副标准扑克牌组成的牌组.
    
    牌的顺序固定保存在列表中，通过top索引表示已经发出的牌数，
    发牌只移动索引而不删除元素. 使用可选的随机数生成器以支持确定性测试.
    
    Attributes:
        _cards: 牌组中的全部牌（包括已发出的）
        _set_count: 副数，牌组生命周期内不变
        _top: 下一张待发牌的位置，满足 0 <= top <= len(_cards)
        _shuffled: 自上次重置以来是否已经洗牌
        _rng: 随机数生成器
        
    Examples:
        >>> deck = Deck(2)
        >>> deck.prepare()
        >>> deck.is_ready
        True
        >>> card = deck.draw()
        >>> deck.remaining
        103
    """

    def __init__(self, set_count: int = 1, rng: Optional[random.Random] = None) -> None:
        """
        初始化牌组.
        
        Args:
            set_count: 标准52张牌的副数，必须为正整数
            rng: 随机数生成器，用于洗牌操作。如果为None，使用进程级共享生成器
            
        Raises:
            InvalidArgumentError: 当副数不是正整数时
        """
        if isinstance(set_count, bool) or not isinstance(set_count, int):
            raise InvalidArgumentError(f"副数必须是整数，实际: {type(set_count).__name__}")
        if set_count < 1:
            raise InvalidArgumentError(f"副数必须为正整数，实际: {set_count}")

        self._set_count = set_count
        self._rng = rng or _DEFAULT_RNG
        self._cards: List[Card] = self._build_cards(set_count)
        self._top = 0
        self._shuffled = False

    @staticmethod
    def _build_cards(set_count: int) -> List[Card]:
        """按 副数 -> 点数 -> 花色 的确定顺序构建未洗的牌."""
        return [
            Card(rank, suit)
            for _ in range(set_count)
            for rank in get_all_ranks()
            for suit in get_all_suits()
        ]

    def _set_top(self, top: int) -> None:
        if not 0 <= top <= len(self._cards):
            raise DeckStateError(f"top越界: {top}, 牌组大小: {len(self._cards)}")
        self._top = top

    @property
    def set_count(self) -> int:
        """副数"""
        return self._set_count

    @property
    def cards(self) -> Tuple[Card, ...]:
        """全部牌（包括已发出的）的只读副本，按当前顺序排列"""
        return tuple(self._cards)

    @property
    def top(self) -> int:
        """已发出的牌数，也是下一张待发牌的位置"""
        return self._top

    @property
    def total_count(self) -> int:
        """
        牌组总牌数.
        
        Returns:
            int: 52 × 副数，生命周期内不变
        """
        return len(self._cards)

    @property
    def remaining(self) -> int:
        """
        获取剩余牌数.
        
        Returns:
            int: 尚未发出的牌数
        """
        return len(self._cards) - self._top

    @property
    def is_full(self) -> bool:
        """是否一张牌都没有发出"""
        return self._top == 0

    @property
    def is_empty(self) -> bool:
        """是否所有牌都已发出"""
        return self._top == len(self._cards)

    @property
    def is_shuffled(self) -> bool:
        """自上次重置以来是否已经洗牌"""
        return self._shuffled

    @property
    def is_ready(self) -> bool:
        """
        检查牌组是否可以开始新的一局.
        
        发牌不会检查该条件，调用方需要在开局前自行确认.
        
        Returns:
            bool: 牌组既是满的又已洗过时返回True
        """
        return self.is_full and self.is_shuffled

    def reset(self) -> None:
        """收回所有已发的牌并清除洗牌标记，牌的顺序保持不变."""
        self._set_top(0)
        self._shuffled = False
        logger.debug(f"[牌组] 重置牌组: {self.total_count}张")

    def prepare(self) -> None:
        """
        为新的一局准备牌组.
        
        先重置再洗牌，结果总是满的且已洗过的牌组，但每次调用的顺序都不同.
        """
        self.reset()
        self.shuffle()

    def shuffle(self) -> None:
        """
        洗牌.
        
        对整个牌组（包括已发出的位置）执行Fisher-Yates洗牌，不改变top.
        牌局中途需要公平重洗时，调用方应先调用reset().
        """
        cards = self._cards
        for i in range(len(cards) - 1, 0, -1):
            j = self._rng.randint(0, i)
            cards[i], cards[j] = cards[j], cards[i]
        self._shuffled = True
        logger.debug(f"[牌组] 洗牌完成: {self.total_count}张, top={self._top}")

    def draw(self) -> Card:
        """
        发一张牌.
        
        Returns:
            Card: top位置上的牌，发出后top加一
            
        Raises:
            EmptyDeckError: 当牌组为空时
        """
        if self.is_empty:
            logger.warning(f"[牌组] 尝试从空牌组发牌: 共{self.total_count}张已全部发出")
            raise EmptyDeckError("Cannot draw from empty deck")
        card = self._cards[self._top]
        self._set_top(self._top + 1)
        return card

    def draw_many(self, count: int) -> List[Card]:
        """
        发多张牌.
        
        Args:
            count: 要发的牌数
            
        Returns:
            List[Card]: 按发牌顺序排列的牌
            
        Raises:
            InvalidArgumentError: 当count为负数时
            EmptyDeckError: 当牌组中的牌不足时
        """
        if count < 0:
            raise InvalidArgumentError("Count must be non-negative")
        if count > self.remaining:
            raise EmptyDeckError(f"Cannot draw {count} cards, only {self.remaining} remaining")
        return [self.draw() for _ in range(count)]

    def peek_top(self) -> Optional[Card]:
        """
        查看顶部的牌但不发出.
        
        Returns:
            Optional[Card]: 顶部的牌，如果牌组为空则返回None
        """
        if self.is_empty:
            return None
        return self._cards[self._top]

    def cards_from_top(self) -> Tuple[Card, ...]:
        """
        获取尚未发出的牌，从顶部到底部排列.
        
        Returns:
            Tuple[Card, ...]: 剩余牌的只读序列
        """
        return tuple(self._cards[self._top:])

    def __len__(self) -> int:
        return self.remaining

    def __str__(self) -> str:
        """
        返回牌组的字符串表示.
        
        Returns:
            str: 方括号包围、逗号分隔的剩余牌，如"[A♠, K♥]"
        """
        return "[" + ", ".join(str(card) for card in self.cards_from_top()) + "]"

    def __repr__(self) -> str:
        return (f"Deck(set_count={self._set_count}, remaining={self.remaining}, "
                f"shuffled={self._shuffled})")
