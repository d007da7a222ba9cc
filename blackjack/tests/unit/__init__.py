"""
Unit Tests - 单元测试

每个测试都使用真实的核心对象，不使用mock。
"""
