# src/recipe_hub/presentation/api/routers/recipes.py
"""食谱相关的 HTTP 路由。"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response, status

from recipe_hub.application.services import RecipeService

from ..dependencies import get_recipe_service
from ..schemas import (
    AddIngredientIn,
    RecipeCreateIn,
    RecipeIngredientOut,
    RecipeOut,
    RecipeUpdateIn,
)


def api_create_recipe_router() -> APIRouter:
    router = APIRouter(prefix="/recipes", tags=["recipes"])

    @router.get("", response_model=list[RecipeOut])
    async def list_recipes(
        service: RecipeService = Depends(get_recipe_service),
    ) -> list[RecipeOut]:
        return [RecipeOut.from_domain(r) for r in await service.get_all_recipes()]

    @router.get("/{recipe_id}", response_model=RecipeOut)
    async def get_recipe(
        recipe_id: str, service: RecipeService = Depends(get_recipe_service)
    ) -> RecipeOut:
        recipe = await service.get_recipe_by_id(recipe_id)
        if recipe is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail=f"食谱 {recipe_id} 不存在"
            )
        return RecipeOut.from_domain(recipe)

    @router.post("", response_model=RecipeOut, status_code=status.HTTP_201_CREATED)
    async def create_recipe(
        body: RecipeCreateIn, service: RecipeService = Depends(get_recipe_service)
    ) -> RecipeOut:
        return RecipeOut.from_domain(await service.create_recipe(body.to_domain()))

    @router.patch("/{recipe_id}", response_model=RecipeOut)
    async def update_recipe(
        recipe_id: str,
        body: RecipeUpdateIn,
        service: RecipeService = Depends(get_recipe_service),
    ) -> RecipeOut:
        updated = await service.update_recipe(recipe_id, body.to_domain())
        return RecipeOut.from_domain(updated)

    @router.post(
        "/{recipe_id}/ingredients",
        response_model=RecipeIngredientOut,
        status_code=status.HTTP_201_CREATED,
    )
    async def add_ingredient(
        recipe_id: str,
        body: AddIngredientIn,
        service: RecipeService = Depends(get_recipe_service),
    ) -> RecipeIngredientOut:
        link = await service.add_ingredient_to_recipe(
            recipe_id, body.ingredient.to_domain()
        )
        return RecipeIngredientOut.from_domain(link)

    @router.delete(
        "/{recipe_id}/ingredients/{ingredient_id}",
        status_code=status.HTTP_204_NO_CONTENT,
    )
    async def remove_ingredient(
        recipe_id: str,
        ingredient_id: str,
        service: RecipeService = Depends(get_recipe_service),
    ) -> Response:
        await service.remove_ingredient_from_recipe(recipe_id, ingredient_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
