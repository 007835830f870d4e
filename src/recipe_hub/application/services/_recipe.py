# src/recipe_hub/application/services/_recipe.py
"""
食谱相关的应用服务。

读操作直接委托给仓库；写操作在仓库调用成功后发布对应的领域事件。
事件发布是尽力而为的：发布失败只记录 error 日志，不影响已经完成的写入。
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Awaitable, Callable

if TYPE_CHECKING:
    from recipe_hub.observability import LoggerService
    from recipe_hub_core.interfaces import RecipeEventPublisher, RecipeRepository
    from recipe_hub_core.types import (
        Recipe,
        RecipeCreate,
        RecipeIngredient,
        RecipeIngredientCreate,
        RecipeUpdate,
    )


class RecipeService:
    def __init__(
        self,
        recipe_repo: RecipeRepository,
        event_publisher: RecipeEventPublisher,
        logger: LoggerService,
    ):
        self._recipe_repo = recipe_repo
        self._event_publisher = event_publisher
        self._logger = logger

    async def get_recipe_by_id(self, recipe_id: str) -> Recipe | None:
        return await self._recipe_repo.find_by_id(recipe_id)

    async def get_user_recipes(self, user_id: str) -> list[Recipe]:
        return await self._recipe_repo.find_by_user(user_id)

    async def get_all_recipes(self) -> list[Recipe]:
        return await self._recipe_repo.find_all()

    async def create_recipe(self, recipe: RecipeCreate) -> Recipe:
        created = await self._recipe_repo.create(recipe)
        await self._publish(
            self._event_publisher.publish_recipe_created,
            created.id,
            routing_key="recipe.created",
        )
        return created

    async def update_recipe(self, recipe_id: str, data: RecipeUpdate) -> Recipe:
        # 只写入显式设置的字段
        updated = await self._recipe_repo.update(
            recipe_id, data.model_dump(exclude_unset=True)
        )
        await self._publish(
            self._event_publisher.publish_recipe_updated,
            recipe_id,
            routing_key="recipe.updated",
        )
        return updated

    async def add_ingredient_to_recipe(
        self, recipe_id: str, ingredient_data: RecipeIngredientCreate
    ) -> RecipeIngredient:
        link = await self._recipe_repo.add_ingredient(recipe_id, ingredient_data)
        await self._publish(
            self._event_publisher.publish_ingredient_added,
            recipe_id,
            link.ingredient_id,
            routing_key="recipe.ingredient_added",
        )
        return link

    async def remove_ingredient_from_recipe(
        self, recipe_id: str, ingredient_id: str
    ) -> None:
        await self._recipe_repo.remove_ingredient(recipe_id, ingredient_id)
        await self._publish(
            self._event_publisher.publish_ingredient_removed,
            recipe_id,
            ingredient_id,
            routing_key="recipe.ingredient_removed",
        )

    async def _publish(
        self, publish: Callable[..., Awaitable[None]], *args: Any, routing_key: str
    ) -> None:
        try:
            await publish(*args)
        except Exception as e:
            self._logger.error(
                "领域事件发布失败，写入已生效",
                {"routing_key": routing_key, "args": list(args)},
                error=e,
            )
