# src/recipe_hub/infrastructure/db/__init__.py
"""数据库基础设施：ORM 模型、引擎、会话与连接句柄。"""

from ._schema import RhIngredient, RhRecipe, RhRecipeIngredient, RhUser
from .base import Base, metadata
from .connection import ConnectionState, DatabaseConnection, redact_database_url
from .engine import create_async_db_engine
from .session import create_async_sessionmaker, session_scope

__all__ = [
    "Base",
    "metadata",
    "RhUser",
    "RhRecipe",
    "RhIngredient",
    "RhRecipeIngredient",
    "ConnectionState",
    "DatabaseConnection",
    "redact_database_url",
    "create_async_db_engine",
    "create_async_sessionmaker",
    "session_scope",
]
