"""
Anti-Cheat System - 反作弊工具

Modules:
    core_usage_checker.py: 核心对象使用检查器
    state_consistency_checker.py: 手牌状态转换与牌张守恒检查器
"""
