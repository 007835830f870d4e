"""
Recipe-Hub 核心契约包。

只包含异常、接口协议与数据类型，不依赖任何基础设施实现。
"""
from .exceptions import (
    BackendConnectionError,
    ConfigValidationError,
    DuplicateEntityError,
    EntityNotFoundError,
    MissingConfigError,
    NotInitializedError,
    RecipeHubError,
)
from .interfaces import (
    Connection,
    RecipeEventPublisher,
    RecipeRepository,
    UserRepository,
)
from .types import (
    Event,
    Ingredient,
    IngredientRef,
    Recipe,
    RecipeCreate,
    RecipeEventType,
    RecipeIngredient,
    RecipeIngredientCreate,
    RecipeUpdate,
    User,
    UserCreate,
)

__all__ = [
    # from exceptions.py
    "RecipeHubError", "ConfigValidationError", "MissingConfigError",
    "BackendConnectionError", "NotInitializedError", "EntityNotFoundError",
    "DuplicateEntityError",
    # from interfaces.py
    "Connection", "UserRepository", "RecipeRepository", "RecipeEventPublisher",
    # from types.py
    "RecipeEventType", "User", "Ingredient", "RecipeIngredient", "Recipe",
    "IngredientRef", "RecipeIngredientCreate", "RecipeCreate", "RecipeUpdate",
    "UserCreate", "Event",
]
