"""
Hand状态机的单元测试.

每个被拒绝的行动都检查手牌保持不变，每个合法行动都检查状态转换合法.
"""

import pytest

from blackjack.core.deck import Card
from blackjack.core.exceptions import IllegalActionError
from blackjack.core.hand import Hand, HandState, HandAction, scoring
from blackjack.tests.anti_cheat.core_usage_checker import CoreUsageChecker
from blackjack.tests.anti_cheat.state_consistency_checker import (
    StateConsistencyChecker,
    HandStateSnapshot,
)


def assert_rejected(hand: Hand, action, *args):
    """断言行动被拒绝且手牌未被修改"""
    before = HandStateSnapshot.of(hand)
    with pytest.raises(IllegalActionError) as exc_info:
        action(*args)
    StateConsistencyChecker.verify_unchanged(before, HandStateSnapshot.of(hand))
    return exc_info.value


def apply(hand: Hand, action, *args):
    """执行行动并验证状态转换合法"""
    before = HandStateSnapshot.of(hand)
    result = action(*args)
    StateConsistencyChecker.verify_hand_transition(before, HandStateSnapshot.of(hand))
    return result


class TestInitialDeal:
    """起手发牌测试."""

    def test_new_hand_is_empty_and_active(self):
        hand = Hand()
        CoreUsageChecker.verify_real_objects(hand, "Hand")

        assert hand.state is HandState.ACTIVE
        assert hand.cards == ()
        assert hand.value == 0
        assert hand.available_actions() == [HandAction.HIT]

    def test_deal_two_cards(self, cards):
        hand = Hand()
        for card in cards("9♠", "7♥"):
            apply(hand, hand.deal, card)

        assert hand.value == 16
        assert hand.state is HandState.ACTIVE

    def test_deal_third_card_rejected(self, make_hand, cards):
        hand = make_hand("9♠", "7♥")
        assert_rejected(hand, hand.deal, cards("2♦")[0])

    def test_blackjack_on_deal(self, make_hand):
        hand = make_hand("A♠", "K♥")

        assert hand.value == 21
        assert hand.state is HandState.BLACKJACK
        assert hand.is_blackjack
        assert hand.is_terminal
        assert hand.available_actions() == []

    def test_cards_after_terminal_rejected_on_construction(self, cards):
        with pytest.raises(IllegalActionError):
            Hand(cards("A♠", "K♥", "5♦"))

    def test_receives_only_cards(self):
        with pytest.raises(TypeError):
            Hand().deal("A♠")


class TestHit:
    """要牌测试."""

    def test_soft_21_on_three_cards_is_not_blackjack(self, make_hand, cards):
        hand = make_hand("A♠", "A♥")
        apply(hand, hand.hit, cards("9♦")[0])

        assert hand.value == 21
        assert hand.state is HandState.ACTIVE
        assert not hand.is_blackjack

    def test_bust(self, make_hand, cards):
        hand = make_hand("K♠", "Q♥")
        apply(hand, hand.hit, cards("5♦")[0])

        assert hand.value == 25
        assert hand.state is HandState.BUSTED
        assert hand.is_bust
        assert hand.is_terminal

    def test_bust_on_construction(self, make_hand):
        hand = make_hand("K♠", "Q♥", "5♦")
        assert hand.state is HandState.BUSTED

    def test_bust_is_terminal(self, make_hand, cards):
        hand = make_hand("K♠", "Q♥", "5♦")

        assert_rejected(hand, hand.hit, cards("2♣")[0])
        assert_rejected(hand, hand.stand)
        assert_rejected(hand, hand.surrender)

    def test_blackjack_is_terminal(self, make_hand, cards):
        hand = make_hand("A♠", "K♥")

        error = assert_rejected(hand, hand.hit, cards("2♣")[0])
        assert error.action is HandAction.HIT
        assert error.state is HandState.BLACKJACK
        assert_rejected(hand, hand.stand)
        assert_rejected(hand, hand.double_down)

    def test_hit_by_hit_blackjack(self, cards):
        """通过hit拿到的起手两张21点也是Blackjack."""
        hand = Hand()
        ace, king = cards("A♦", "K♣")
        hand.hit(ace)
        hand.hit(king)
        assert hand.state is HandState.BLACKJACK

    def test_value_recomputed_after_each_card(self, make_hand, cards):
        hand = make_hand("A♠", "6♥")
        assert (hand.value, hand.is_soft) == (17, True)

        hand.hit(cards("K♦")[0])
        assert (hand.value, hand.is_soft) == (17, False)


class TestStand:
    """停牌测试."""

    def test_stand(self, make_hand):
        hand = make_hand("10♠", "7♥")
        apply(hand, hand.stand)

        assert hand.state is HandState.STANDING
        assert hand.is_terminal

    def test_stand_is_terminal(self, make_hand, cards):
        hand = make_hand("10♠", "7♥")
        hand.stand()

        assert_rejected(hand, hand.hit, cards("2♣")[0])
        assert_rejected(hand, hand.stand)
        assert_rejected(hand, hand.split)

    def test_stand_needs_two_cards(self, make_hand):
        hand = make_hand("10♠")
        assert_rejected(hand, hand.stand)


class TestDoubleDown:
    """加倍测试."""

    def test_double_down_takes_exactly_one_card(self, make_hand, cards):
        hand = make_hand("5♠", "6♥")
        apply(hand, hand.double_down)

        assert hand.state is HandState.DOUBLED_DOWN
        assert hand.is_doubled
        assert not hand.is_terminal
        assert hand.available_actions() == [HandAction.HIT]

        apply(hand, hand.hit, cards("9♦")[0])
        assert hand.value == 20
        assert hand.state is HandState.DOUBLED_DOWN
        assert hand.is_terminal

        assert_rejected(hand, hand.hit, cards("A♣")[0])
        assert_rejected(hand, hand.stand)

    def test_double_down_waits_for_forced_card(self, make_hand):
        hand = make_hand("5♠", "6♥")
        hand.double_down()

        assert_rejected(hand, hand.stand)
        assert_rejected(hand, hand.double_down)
        assert_rejected(hand, hand.surrender)

    def test_double_down_bust(self, make_hand, cards):
        hand = make_hand("10♠", "6♥")
        hand.double_down()
        apply(hand, hand.hit, cards("K♦")[0])

        assert hand.state is HandState.BUSTED
        assert hand.is_doubled
        assert hand.is_terminal

    def test_double_down_only_as_first_action(self, make_hand, cards):
        hand = make_hand("2♠", "3♥")
        hand.hit(cards("4♦")[0])
        assert_rejected(hand, hand.double_down)

    def test_double_down_needs_two_cards(self, make_hand):
        hand = make_hand("5♠")
        assert_rejected(hand, hand.double_down)


class TestSplit:
    """分牌测试."""

    def test_split_equal_cards(self, make_hand):
        hand = make_hand("7♠", "7♥")
        assert hand.can(HandAction.SPLIT)

        first, second = apply(hand, hand.split)

        assert hand.state is HandState.SPLIT
        assert hand.is_terminal
        for sub_hand, card_str in ((first, "7♠"), (second, "7♥")):
            CoreUsageChecker.verify_real_objects(sub_hand, "Hand")
            assert sub_hand.cards == (Card.from_str(card_str),)
            assert sub_hand.value == 7
            assert sub_hand.state is HandState.ACTIVE
            assert sub_hand.from_split

    def test_split_unequal_cards_rejected(self, make_hand):
        hand = make_hand("7♠", "8♥")
        assert not hand.can(HandAction.SPLIT)

        assert_rejected(hand, hand.split)
        assert hand.state is HandState.ACTIVE
        assert len(hand) == 2

    def test_split_ten_value_cards(self, make_hand):
        first, second = make_hand("K♠", "Q♥").split()
        assert first.value == second.value == 10

    def test_split_hand_rejects_actions(self, make_hand, cards):
        hand = make_hand("8♠", "8♥")
        hand.split()

        assert_rejected(hand, hand.hit, cards("2♣")[0])
        assert_rejected(hand, hand.split)

    def test_sub_hands_are_independent(self, make_hand, cards):
        first, second = make_hand("8♠", "8♥").split()
        first.hit(cards("10♦")[0])
        first.stand()

        assert first.state is HandState.STANDING
        assert second.state is HandState.ACTIVE
        assert len(second) == 1

    def test_split_aces_21_is_not_blackjack(self, make_hand, cards):
        first, _ = make_hand("A♠", "A♥").split()
        first.hit(cards("K♦")[0])

        assert first.value == 21
        assert first.state is HandState.ACTIVE
        assert not first.is_blackjack
        assert scoring.is_blackjack(first.cards)
        first.stand()
        assert first.state is HandState.STANDING

    def test_resplit(self, make_hand, cards):
        first, _ = make_hand("8♠", "8♥").split()
        first.hit(cards("8♦")[0])

        assert first.can(HandAction.SPLIT)
        third, fourth = first.split()
        assert third.value == fourth.value == 8


class TestSurrender:
    """投降测试."""

    def test_surrender(self, make_hand):
        hand = make_hand("10♠", "6♥")
        apply(hand, hand.surrender)

        assert hand.state is HandState.SURRENDERED
        assert hand.is_terminal

    def test_surrender_only_as_first_action(self, make_hand, cards):
        hand = make_hand("2♠", "3♥")
        hand.hit(cards("4♦")[0])
        assert_rejected(hand, hand.surrender)

    def test_surrendered_is_terminal(self, make_hand, cards):
        hand = make_hand("10♠", "6♥")
        hand.surrender()
        assert_rejected(hand, hand.hit, cards("4♦")[0])


class TestAvailableActions:
    """合法行动列表测试."""

    def test_opening_actions_for_pair(self, make_hand):
        assert make_hand("9♠", "9♥").available_actions() == [
            HandAction.HIT, HandAction.STAND, HandAction.DOUBLE_DOWN,
            HandAction.SPLIT, HandAction.SURRENDER,
        ]

    def test_opening_actions_without_pair(self, make_hand):
        assert make_hand("9♠", "8♥").available_actions() == [
            HandAction.HIT, HandAction.STAND, HandAction.DOUBLE_DOWN, HandAction.SURRENDER,
        ]

    def test_after_hit_only_hit_and_stand(self, make_hand, cards):
        hand = make_hand("2♠", "3♥")
        hand.hit(cards("4♦")[0])
        assert hand.available_actions() == [HandAction.HIT, HandAction.STAND]

    def test_display(self, make_hand):
        hand = make_hand("A♠", "K♥")
        assert str(hand) == "[A♠, K♥]"
        assert repr(hand) == "Hand(cards=[A♠, K♥], value=21, state=BLACKJACK)"
