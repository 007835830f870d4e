# src/recipe_hub/presentation/api/dependencies.py
"""路由依赖：从 `app.state` 取出已初始化的服务容器。"""

from __future__ import annotations

from fastapi import Request

from recipe_hub.application.services import RecipeService, UserService
from recipe_hub.containers import ServicesContainer


def get_services(request: Request) -> ServicesContainer:
    return request.app.state.services


def get_recipe_service(request: Request) -> RecipeService:
    return get_services(request).recipe_service


def get_user_service(request: Request) -> UserService:
    return get_services(request).user_service
