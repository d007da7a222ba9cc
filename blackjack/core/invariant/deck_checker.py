"""
牌组完整性检查器

检查牌组的索引边界、大小、组成和就绪状态。
"""

from collections import Counter

from ..deck.deck import Deck, CARDS_PER_SET
from .base_checker import BaseInvariantChecker
from .types import InvariantType

__all__ = ['DeckInvariantChecker']


class DeckInvariantChecker(BaseInvariantChecker):
    """牌组完整性检查器

    验证以下规则：
    1. 0 <= top <= 总牌数
    2. 总牌数 == 52 × 副数
    3. 每种(点数, 花色)恰好出现副数次（洗牌只是重新排列）
    4. 就绪 <=> 满 且 已洗牌
    """

    def __init__(self):
        super().__init__(InvariantType.DECK_INTEGRITY)

    def _perform_check(self, deck: Deck) -> bool:
        cards = deck.cards
        total = len(cards)

        if not 0 <= deck.top <= total:
            self._create_violation(
                f"top越界: {deck.top}, 总牌数: {total}",
                context={'top': deck.top, 'total': total}
            )

        expected_total = CARDS_PER_SET * deck.set_count
        if total != expected_total or deck.total_count != expected_total:
            self._create_violation(
                f"总牌数错误: {total}, 应为 {expected_total}",
                context={'total': total, 'expected': expected_total}
            )

        counts = Counter(cards)
        if len(counts) != CARDS_PER_SET:
            self._create_violation(
                f"不同的牌应有{CARDS_PER_SET}种，实际{len(counts)}种",
                context={'distinct': len(counts)}
            )
        wrong = {str(card): n for card, n in counts.items() if n != deck.set_count}
        if wrong:
            self._create_violation(
                f"部分牌的张数不等于副数{deck.set_count}",
                context={'wrong_counts': wrong}
            )

        if deck.remaining != total - deck.top:
            self._create_violation("剩余牌数与top不一致", 'WARNING')
        if deck.is_ready != (deck.is_full and deck.is_shuffled):
            self._create_violation("就绪状态与满/已洗牌状态不一致")

        return not self._violations
