# src/recipe_hub/presentation/api/schemas.py
"""
HTTP 层的请求/响应模型。

对外统一使用 camelCase（`authorId`、`createdAt` ...），
内部 DTO 保持 snake_case，转换只发生在这一层。
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from recipe_hub_core.types import (
    IngredientRef,
    Recipe,
    RecipeCreate,
    RecipeIngredient,
    RecipeIngredientCreate,
    RecipeUpdate,
    User,
    UserCreate,
)


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ===================== 请求 =====================


class IngredientIn(CamelModel):
    name: str = Field(min_length=1)
    amount: str = Field(min_length=1)

    def to_domain(self) -> RecipeIngredientCreate:
        return RecipeIngredientCreate(
            amount=self.amount, ingredient=IngredientRef(name=self.name)
        )


class RecipeCreateIn(CamelModel):
    name: str = Field(min_length=1)
    description: str | None = None
    author_id: str
    ingredients: list[IngredientIn] = Field(default_factory=list)

    def to_domain(self) -> RecipeCreate:
        return RecipeCreate(
            name=self.name,
            description=self.description,
            author_id=self.author_id,
            ingredients=[item.to_domain() for item in self.ingredients],
        )


class RecipeUpdateIn(CamelModel):
    name: str | None = Field(default=None, min_length=1)
    description: str | None = None

    @field_validator("name")
    @classmethod
    def _reject_null_name(cls, v: str | None) -> str:
        # 可以省略，但不能显式置空
        if v is None:
            raise ValueError("name 不能为 null")
        return v

    def to_domain(self) -> RecipeUpdate:
        # 保留“未设置”语义，只更新请求中出现的字段
        return RecipeUpdate(**self.model_dump(exclude_unset=True))


class AddIngredientIn(CamelModel):
    ingredient: IngredientIn


class UserCreateIn(CamelModel):
    name: str | None = None
    email: str | None = None

    def to_domain(self) -> UserCreate:
        return UserCreate(name=self.name, email=self.email)


# ===================== 响应 =====================


class UserOut(CamelModel):
    id: str
    name: str | None = None
    email: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_domain(cls, user: User) -> "UserOut":
        return cls.model_validate(user.model_dump())


class IngredientOut(CamelModel):
    id: str
    name: str


class RecipeIngredientOut(CamelModel):
    id: str
    recipe_id: str
    ingredient_id: str
    amount: str
    ingredient: IngredientOut | None = None

    @classmethod
    def from_domain(cls, link: RecipeIngredient) -> "RecipeIngredientOut":
        return cls.model_validate(link.model_dump())


class RecipeOut(CamelModel):
    id: str
    name: str
    description: str | None = None
    author_id: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
    ingredients: list[RecipeIngredientOut] = Field(default_factory=list)
    author: UserOut | None = None

    @classmethod
    def from_domain(cls, recipe: Recipe) -> "RecipeOut":
        return cls.model_validate(recipe.model_dump())


class HealthOut(BaseModel):
    status: str = "ok"
