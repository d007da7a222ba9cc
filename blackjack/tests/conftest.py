"""
Blackjack Test Configuration - pytest配置文件

该文件提供测试的基础设施，包括：
- 固定种子的随机数生成器
- 新牌组与已准备好的牌组
- 按字符串快速构造手牌的工具
- 测试标记注册
"""

import random
from typing import Callable, List

import pytest

from blackjack.core.deck import Card, Deck
from blackjack.core.hand import Hand


@pytest.fixture
def seeded_rng() -> random.Random:
    """固定种子的随机数生成器"""
    return random.Random(20181011)


@pytest.fixture
def fresh_deck(seeded_rng) -> Deck:
    """未洗牌的单副牌组"""
    return Deck(1, seeded_rng)


@pytest.fixture
def prepared_deck(seeded_rng) -> Deck:
    """已准备好（满且已洗）的单副牌组"""
    deck = Deck(1, seeded_rng)
    deck.prepare()
    return deck


@pytest.fixture
def cards() -> Callable[..., List[Card]]:
    """按字符串构造牌列表: cards("A♠", "K♥")"""
    def _cards(*card_strs: str) -> List[Card]:
        return [Card.from_str(card_str) for card_str in card_strs]
    return _cards


@pytest.fixture
def make_hand(cards) -> Callable[..., Hand]:
    """按字符串构造手牌: make_hand("7♠", "7♥")"""
    def _make_hand(*card_strs: str) -> Hand:
        return Hand(cards(*card_strs))
    return _make_hand


# 测试标记定义
def pytest_configure(config):
    """pytest配置"""
    config.addinivalue_line(
        "markers", "anti_cheat: 标记需要反作弊检查的测试"
    )
    config.addinivalue_line(
        "markers", "property_test: 标记基于属性的测试"
    )
    config.addinivalue_line(
        "markers", "integration: 标记集成测试"
    )
