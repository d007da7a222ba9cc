"""
玩家手牌状态机.

Hand保存一局中玩家拿到的牌（只追加），每次查询时重新计算点数，
并根据当前状态决定哪些行动合法. 非法行动抛出IllegalActionError且不修改任何状态.
"""

import logging
from typing import Iterable, List, Tuple

from ..deck.card import Card
from ..exceptions import IllegalActionError
from .scoring import BLACKJACK_VALUE, hand_totals, can_split
from .types import HandState, HandAction, TERMINAL_STATES

logger = logging.getLogger(__name__)


class Hand:
    """
    表示玩家的一手牌.

    状态转换:
        ACTIVE --hit--> ACTIVE / BUSTED / BLACKJACK（起手两张21点）
        ACTIVE --stand--> STANDING
        ACTIVE --double_down--> DOUBLED_DOWN（再接收一张牌后终止）
        ACTIVE --split--> SPLIT（产生两手新的ACTIVE牌）
        ACTIVE --surrender--> SURRENDERED

    加倍、分牌和投降只能作为两张起手牌之后的第一个行动.
    分牌产生的手牌两张21点不算Blackjack.

    Attributes:
        _cards: 手牌
        _state: 当前状态
        _from_split: 是否由分牌产生
        _acted: 起手两张牌之后是否已经行动过
        _doubled: 是否加倍
        _awaiting_double_card: 加倍后是否还在等待那张强制牌

    Examples:
        >>> hand = Hand([Card.from_str("A♠"), Card.from_str("K♥")])
        >>> hand.state
        <HandState.BLACKJACK: 4>
        >>> hand.value
        21
    """

    def __init__(self, cards: Iterable[Card] = (), from_split: bool = False) -> None:
        """
        初始化手牌.

        Args:
            cards: 起手牌，按顺序逐张发入
            from_split: 是否由分牌产生

        Raises:
            IllegalActionError: 起手牌在手牌终止（爆牌或Blackjack）之后仍有剩余时
        """
        self._cards: List[Card] = []
        self._state = HandState.ACTIVE
        self._from_split = from_split
        self._acted = False
        self._doubled = False
        self._awaiting_double_card = False
        for card in cards:
            if self.is_terminal:
                self._reject(HandAction.HIT, "手牌已终止，不能继续发牌")
            self._receive(card)

    # ---- 查询 ----

    @property
    def cards(self) -> Tuple[Card, ...]:
        """手牌的只读副本"""
        return tuple(self._cards)

    @property
    def state(self) -> HandState:
        return self._state

    @property
    def value(self) -> int:
        """当前点数，每次查询重新计算"""
        return hand_totals(self._cards)[0]

    @property
    def is_soft(self) -> bool:
        return hand_totals(self._cards)[1]

    @property
    def is_blackjack(self) -> bool:
        """
        是否处于BLACKJACK状态.

        只看状态不看牌面：分牌产生的手牌即使两张牌合计21点也返回False，
        而scoring.is_blackjack对同样的两张牌返回True.
        """
        return self._state is HandState.BLACKJACK

    @property
    def is_bust(self) -> bool:
        return self.value > BLACKJACK_VALUE

    @property
    def is_doubled(self) -> bool:
        return self._doubled

    @property
    def from_split(self) -> bool:
        return self._from_split

    @property
    def is_terminal(self) -> bool:
        """
        是否已不能再行动.

        Returns:
            bool: 终止状态，或加倍后已经收到强制牌时返回True
        """
        if self._state is HandState.DOUBLED_DOWN:
            return not self._awaiting_double_card
        return self._state in TERMINAL_STATES

    def available_actions(self) -> List[HandAction]:
        """
        获取当前状态下的合法行动.

        Returns:
            List[HandAction]: 合法行动列表，终止状态下为空
        """
        if self._state is HandState.DOUBLED_DOWN:
            return [HandAction.HIT] if self._awaiting_double_card else []
        if self._state is not HandState.ACTIVE:
            return []
        if len(self._cards) < 2:
            return [HandAction.HIT]

        actions = [HandAction.HIT, HandAction.STAND]
        if len(self._cards) == 2 and not self._acted:
            actions.append(HandAction.DOUBLE_DOWN)
            if can_split(self._cards):
                actions.append(HandAction.SPLIT)
            actions.append(HandAction.SURRENDER)
        return actions

    def can(self, action: HandAction) -> bool:
        """判断某个行动当前是否合法"""
        return action in self.available_actions()

    # ---- 行动 ----

    def deal(self, card: Card) -> None:
        """
        发起手牌.

        Args:
            card: 发给该手的牌

        Raises:
            IllegalActionError: 手牌已有两张或不再是ACTIVE状态时
        """
        if self._state is not HandState.ACTIVE or len(self._cards) >= 2:
            self._reject(HandAction.HIT, "起手牌只能在手牌少于两张时发放")
        self._receive(card)

    def hit(self, card: Card) -> None:
        """
        要牌.

        Args:
            card: 调用方从牌组中发出的牌

        Raises:
            IllegalActionError: 当前状态不允许要牌时
        """
        self._require(HandAction.HIT)
        if len(self._cards) >= 2:
            self._acted = True
        self._receive(card)

    def stand(self) -> None:
        """停牌."""
        self._require(HandAction.STAND)
        self._acted = True
        self._transition(HandState.STANDING)

    def double_down(self) -> None:
        """
        加倍.

        之后调用方必须且只能再用hit()发一张牌，收到这张牌后手牌终止.
        """
        self._require(HandAction.DOUBLE_DOWN)
        self._acted = True
        self._doubled = True
        self._awaiting_double_card = True
        self._transition(HandState.DOUBLED_DOWN)

    def split(self) -> Tuple['Hand', 'Hand']:
        """
        分牌.

        Returns:
            Tuple[Hand, Hand]: 两手新的ACTIVE牌，各持有原来的一张牌

        Raises:
            IllegalActionError: 两张牌分值不同或不是第一个行动时
        """
        self._require(HandAction.SPLIT)
        first, second = self._cards
        self._acted = True
        self._transition(HandState.SPLIT)
        return Hand([first], from_split=True), Hand([second], from_split=True)

    def surrender(self) -> None:
        """投降（只能作为第一个行动）."""
        self._require(HandAction.SURRENDER)
        self._acted = True
        self._transition(HandState.SURRENDERED)

    # ---- 内部实现 ----

    def _require(self, action: HandAction) -> None:
        if action not in self.available_actions():
            self._reject(action, "当前状态不允许该行动")

    def _reject(self, action: HandAction, reason: str) -> None:
        logger.info(f"[手牌] 拒绝行动 {action.name}: {reason}, 状态={self._state.name}, 手牌={self}")
        raise IllegalActionError(
            f"{action.name} is not allowed in state {self._state.name} ({reason})",
            action=action,
            state=self._state,
        )

    def _receive(self, card: Card) -> None:
        if not isinstance(card, Card):
            raise TypeError(f"手牌只能接收Card，实际: {type(card)}")
        self._cards.append(card)
        total = self.value

        if self._awaiting_double_card:
            self._awaiting_double_card = False
            if total > BLACKJACK_VALUE:
                self._transition(HandState.BUSTED)
            return

        if total > BLACKJACK_VALUE:
            self._transition(HandState.BUSTED)
        elif len(self._cards) == 2 and total == BLACKJACK_VALUE and not self._from_split:
            self._transition(HandState.BLACKJACK)

    def _transition(self, new_state: HandState) -> None:
        logger.debug(f"[手牌] {self._state.name} -> {new_state.name}, 手牌={self}, 点数={self.value}")
        self._state = new_state

    def __len__(self) -> int:
        return len(self._cards)

    def __str__(self) -> str:
        return "[" + ", ".join(str(card) for card in self._cards) + "]"

    def __repr__(self) -> str:
        return f"Hand(cards={self}, value={self.value}, state={self._state.name})"
