# src/recipe_hub/infrastructure/__init__.py
"""基础设施层：数据库、消息代理与持久化实现。"""
