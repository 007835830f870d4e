# src/recipe_hub/infrastructure/persistence/__init__.py
"""持久化层：仓库实现与方言相关的语句工厂。"""

from ._statements import get_statement_factory
from .repositories import SqlAlchemyRecipeRepository, SqlAlchemyUserRepository

__all__ = [
    "get_statement_factory",
    "SqlAlchemyRecipeRepository",
    "SqlAlchemyUserRepository",
]
