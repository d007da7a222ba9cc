"""
Integration Tests - 集成测试

牌组与手牌协作完成完整的一局.
"""
