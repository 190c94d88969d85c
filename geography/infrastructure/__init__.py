"""
地理基础设施层包。
提供数据库模型、映射、仓储实现和种子数据加载器。
"""
