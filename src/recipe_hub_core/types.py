# src/recipe_hub_core/types.py
"""
本模块定义了 Recipe-Hub 系统的核心数据类型。
这些类型是系统各层之间数据交换的契约。
"""
from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field


class RecipeEventType(str, Enum):
    """食谱领域事件的种类。"""
    RECIPE_CREATED = "recipeCreated"
    RECIPE_UPDATED = "recipeUpdated"
    INGREDIENT_ADDED = "ingredientAdded"
    INGREDIENT_REMOVED = "ingredientRemoved"


# ===================== 读模型 (DTO) =====================


class User(BaseModel):
    """用户记录的 DTO。"""
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str | None = None
    email: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class Ingredient(BaseModel):
    """食材记录的 DTO。名称在全系统内唯一。"""
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str


class RecipeIngredient(BaseModel):
    """食谱与食材的关联记录，携带用量。"""
    model_config = ConfigDict(from_attributes=True)

    id: str
    recipe_id: str
    ingredient_id: str
    amount: str
    ingredient: Ingredient | None = None


class Recipe(BaseModel):
    """食谱记录的 DTO。"""
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: str | None = None
    author_id: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
    ingredients: list[RecipeIngredient] = Field(default_factory=list)
    author: User | None = None

    @classmethod
    def from_orm_model(cls, orm_obj: Any) -> "Recipe":
        """
        [防腐层] 从 SQLAlchemy ORM 实例安全地创建 DTO。
        未加载的 author 关系不会触发懒加载，而是被视为 None。
        """
        data = {c.name: getattr(orm_obj, c.name) for c in orm_obj.__table__.columns}
        data["ingredients"] = [
            RecipeIngredient.model_validate(link) for link in orm_obj.ingredients
        ]
        author = orm_obj.__dict__.get("author")
        data["author"] = User.model_validate(author) if author is not None else None
        return cls.model_validate(data)


# ===================== 写模型 =====================


class IngredientRef(BaseModel):
    """按名称引用一个食材（存在则复用，不存在则创建）。"""
    name: str


class RecipeIngredientCreate(BaseModel):
    amount: str
    ingredient: IngredientRef


class RecipeCreate(BaseModel):
    name: str
    description: str | None = None
    author_id: str
    ingredients: list[RecipeIngredientCreate] = Field(default_factory=list)


class RecipeUpdate(BaseModel):
    """部分更新；只有显式设置的字段才会写入。"""
    name: str | None = None
    description: str | None = None


class UserCreate(BaseModel):
    name: str | None = None
    email: str | None = None


# ===================== 领域事件 =====================


class Event(BaseModel):
    """
    领域事件基类。事件是瞬时的，只发布一次，不做持久化。
    `event_type` 与 `routing_key` 由具体子类声明。
    """
    model_config = ConfigDict(frozen=True)

    event_type: ClassVar[RecipeEventType]
    routing_key: ClassVar[str]

    recipe_id: str = Field(serialization_alias="recipeId")

    def to_message_body(self) -> bytes:
        """序列化为消息体（UTF-8 JSON，字段为 camelCase）。"""
        return self.model_dump_json(by_alias=True).encode("utf-8")
