# src/recipe_hub/presentation/api/routers/__init__.py
from .health import api_create_health_router
from .recipes import api_create_recipe_router
from .users import api_create_user_router

__all__ = [
    "api_create_health_router",
    "api_create_recipe_router",
    "api_create_user_router",
]
