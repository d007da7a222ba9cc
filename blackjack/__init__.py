"""
Blackjack - 二十一点核心库

提供多副牌的牌组管理（洗牌、发牌）以及玩家手牌的计分与行动状态机.

Packages:
    core: 纯领域逻辑层（牌组、手牌、不变量检查、配置）
    tests: 单元测试、性质测试和集成测试
"""

__version__ = "1.0.0"
