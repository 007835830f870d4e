# src/recipe_hub/infrastructure/persistence/repositories/_recipe_repo.py
"""
食谱仓库的 SQLAlchemy 实现。

食材按名称“存在则复用，不存在则创建”：先执行方言相关的
INSERT ... ON CONFLICT (name) DO NOTHING，再按名称查回主键，
因此并发创建同名食材也只会留下一行。
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import delete, select
from sqlalchemy.orm import selectinload

from recipe_hub.infrastructure.db._schema import (
    RhIngredient,
    RhRecipe,
    RhRecipeIngredient,
    RhUser,
    new_id,
)
from recipe_hub_core.exceptions import EntityNotFoundError
from recipe_hub_core.types import (
    Ingredient,
    Recipe,
    RecipeCreate,
    RecipeIngredient,
    RecipeIngredientCreate,
)

from .._statements import get_statement_factory
from ._base_repo import BaseRepository

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

# 允许通过 update() 修改的列
_UPDATABLE_COLUMNS = frozenset({"name", "description"})


def _recipe_query(with_author: bool = False):
    stmt = select(RhRecipe).options(
        selectinload(RhRecipe.ingredients).selectinload(RhRecipeIngredient.ingredient)
    )
    if with_author:
        stmt = stmt.options(selectinload(RhRecipe.author))
    return stmt.execution_options(populate_existing=True)


class SqlAlchemyRecipeRepository(BaseRepository):
    """`RecipeRepository` 接口的 SQLAlchemy 实现。"""

    async def find_by_id(self, recipe_id: str) -> Recipe | None:
        async with self._transaction() as session:
            orm_recipe = await self._load(session, recipe_id, with_author=True)
            return Recipe.from_orm_model(orm_recipe) if orm_recipe else None

    async def create(self, recipe: RecipeCreate) -> Recipe:
        async with self._transaction() as session:
            # SQLite 默认不校验外键，作者在这里显式检查
            if await session.get(RhUser, recipe.author_id) is None:
                raise EntityNotFoundError(f"用户 {recipe.author_id} 不存在")

            orm_recipe = RhRecipe(
                name=recipe.name,
                author_id=recipe.author_id,
                description=recipe.description,
            )
            session.add(orm_recipe)
            for item in recipe.ingredients:
                ingredient_id = await self._connect_or_create_ingredient(
                    session, item.ingredient.name
                )
                session.add(
                    RhRecipeIngredient(
                        recipe_id=orm_recipe.id,
                        ingredient_id=ingredient_id,
                        amount=item.amount,
                    )
                )
            await session.flush()

            return Recipe.from_orm_model(await self._reload(session, orm_recipe.id))

    async def update(self, recipe_id: str, data: dict[str, Any]) -> Recipe:
        async with self._transaction() as session:
            orm_recipe = await session.get(RhRecipe, recipe_id)
            if orm_recipe is None:
                raise EntityNotFoundError(f"食谱 {recipe_id} 不存在")

            for key, value in data.items():
                if key in _UPDATABLE_COLUMNS:
                    setattr(orm_recipe, key, value)
            await session.flush()

            return Recipe.from_orm_model(await self._reload(session, recipe_id))

    async def add_ingredient(
        self, recipe_id: str, ingredient_data: RecipeIngredientCreate
    ) -> RecipeIngredient:
        async with self._transaction() as session:
            if await session.get(RhRecipe, recipe_id) is None:
                raise EntityNotFoundError(f"食谱 {recipe_id} 不存在")

            ingredient_id = await self._connect_or_create_ingredient(
                session, ingredient_data.ingredient.name
            )
            link = RhRecipeIngredient(
                recipe_id=recipe_id,
                ingredient_id=ingredient_id,
                amount=ingredient_data.amount,
            )
            session.add(link)
            await session.flush()

            ingredient = await session.get(RhIngredient, ingredient_id)
            return RecipeIngredient(
                id=link.id,
                recipe_id=link.recipe_id,
                ingredient_id=link.ingredient_id,
                amount=link.amount,
                ingredient=Ingredient.model_validate(ingredient),
            )

    async def remove_ingredient(self, recipe_id: str, ingredient_id: str) -> None:
        async with self._transaction() as session:
            await session.execute(
                delete(RhRecipeIngredient).where(
                    RhRecipeIngredient.recipe_id == recipe_id,
                    RhRecipeIngredient.ingredient_id == ingredient_id,
                )
            )

    async def find_by_user(self, user_id: str) -> list[Recipe]:
        async with self._transaction() as session:
            stmt = (
                _recipe_query()
                .where(RhRecipe.author_id == user_id)
                .order_by(RhRecipe.created_at)
            )
            result = await session.execute(stmt)
            return [Recipe.from_orm_model(r) for r in result.scalars().all()]

    async def find_all(self) -> list[Recipe]:
        async with self._transaction() as session:
            stmt = _recipe_query(with_author=True).order_by(RhRecipe.created_at)
            result = await session.execute(stmt)
            return [Recipe.from_orm_model(r) for r in result.scalars().all()]

    # --- 内部辅助 ---

    async def _load(
        self, session: AsyncSession, recipe_id: str, *, with_author: bool = False
    ) -> RhRecipe | None:
        stmt = _recipe_query(with_author).where(RhRecipe.id == recipe_id)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def _reload(self, session: AsyncSession, recipe_id: str) -> RhRecipe:
        """在同一事务内重新读取刚写入的食谱。"""
        result = await session.execute(_recipe_query().where(RhRecipe.id == recipe_id))
        return result.scalar_one()

    async def _connect_or_create_ingredient(
        self, session: AsyncSession, name: str
    ) -> str:
        factory = get_statement_factory(session.get_bind().dialect.name)
        await session.execute(
            factory.create_insert_on_conflict_nothing(
                RhIngredient, {"id": new_id(), "name": name}, index_elements=["name"]
            )
        )
        result = await session.execute(
            select(RhIngredient.id).where(RhIngredient.name == name)
        )
        return result.scalar_one()
