"""
手牌一致性检查器

检查手牌的状态是否与手中的牌一致。
"""

from ..hand.hand import Hand
from ..hand.scoring import BLACKJACK_VALUE, can_split
from ..hand.types import HandState
from .base_checker import BaseInvariantChecker
from .types import InvariantType

__all__ = ['HandInvariantChecker']


class HandInvariantChecker(BaseInvariantChecker):
    """手牌一致性检查器"""

    def __init__(self):
        super().__init__(InvariantType.HAND_CONSISTENCY)

    def _perform_check(self, hand: Hand) -> bool:
        state = hand.state
        count = len(hand.cards)
        value = hand.value
        context = {'state': state.name, 'cards': str(hand), 'value': value}

        if state is HandState.SPLIT:
            if not can_split(hand.cards):
                self._create_violation("已分牌的手牌必须是两张同分值的牌", context=context)
            return not self._violations

        if (value > BLACKJACK_VALUE) != (state is HandState.BUSTED):
            self._create_violation("爆牌状态与点数不一致", context=context)

        if state is HandState.BLACKJACK and (count != 2 or value != BLACKJACK_VALUE or hand.from_split):
            self._create_violation("Blackjack必须是非分牌的两张21点", context=context)

        if state is HandState.ACTIVE and count == 2 and value == BLACKJACK_VALUE and not hand.from_split:
            self._create_violation("起手两张21点的手牌应为Blackjack", context=context)

        if state is HandState.SURRENDERED and count != 2:
            self._create_violation("投降只能发生在两张起手牌时", context=context)

        if state is HandState.DOUBLED_DOWN:
            if not hand.is_doubled or count not in (2, 3):
                self._create_violation("加倍后手牌应为两张或三张", context=context)
            elif (count == 3) != hand.is_terminal:
                self._create_violation("加倍后收到强制牌才终止", context=context)

        if hand.is_doubled and state not in (HandState.DOUBLED_DOWN, HandState.BUSTED):
            self._create_violation("加倍的手牌只能处于加倍或爆牌状态", context=context)

        return not self._violations
