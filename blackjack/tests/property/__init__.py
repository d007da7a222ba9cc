"""
Property Tests - 性质测试

该目录包含基于hypothesis的性质测试，验证洗牌置换、发牌顺序和手牌计分等不变量。
"""
