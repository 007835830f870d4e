# src/recipe_hub/infrastructure/persistence/repositories/__init__.py
from ._recipe_repo import SqlAlchemyRecipeRepository
from ._user_repo import SqlAlchemyUserRepository

__all__ = [
    "SqlAlchemyRecipeRepository",
    "SqlAlchemyUserRepository",
]
