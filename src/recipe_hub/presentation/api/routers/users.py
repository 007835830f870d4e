# src/recipe_hub/presentation/api/routers/users.py
"""用户相关的 HTTP 路由，包括按作者列出食谱。"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from recipe_hub.application.services import RecipeService, UserService

from ..dependencies import get_recipe_service, get_user_service
from ..schemas import RecipeOut, UserCreateIn, UserOut


def api_create_user_router() -> APIRouter:
    router = APIRouter(prefix="/users", tags=["users"])

    @router.post("", response_model=UserOut, status_code=status.HTTP_201_CREATED)
    async def create_user(
        body: UserCreateIn, service: UserService = Depends(get_user_service)
    ) -> UserOut:
        return UserOut.from_domain(await service.create_user(body.to_domain()))

    @router.get("/{user_id}", response_model=UserOut)
    async def get_user(
        user_id: str, service: UserService = Depends(get_user_service)
    ) -> UserOut:
        user = await service.get_user_by_id(user_id)
        if user is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail=f"用户 {user_id} 不存在"
            )
        return UserOut.from_domain(user)

    @router.get("/{user_id}/recipes", response_model=list[RecipeOut])
    async def list_user_recipes(
        user_id: str, service: RecipeService = Depends(get_recipe_service)
    ) -> list[RecipeOut]:
        return [RecipeOut.from_domain(r) for r in await service.get_user_recipes(user_id)]

    return router
