# src/recipe_hub/infrastructure/db/_schema.py
"""
定义了与 Alembic 迁移完全对应的 SQLAlchemy ORM 模型。

关系字段一律 `init=False`：构造实例时只传外键，关系由会话加载。
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Index, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from .base import Base


def new_id() -> str:
    return uuid.uuid4().hex


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class RhUser(Base):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(
        Text, primary_key=True, default_factory=new_id, init=False
    )
    name: Mapped[str | None] = mapped_column(Text, default=None)
    email: Mapped[str | None] = mapped_column(Text, unique=True, default=None)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        default_factory=_utcnow,
        init=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        default_factory=_utcnow,
        onupdate=_utcnow,
        init=False,
    )

    recipes: Mapped[list["RhRecipe"]] = relationship(
        back_populates="author", default_factory=list, init=False, repr=False
    )


class RhRecipe(Base):
    __tablename__ = "recipes"

    name: Mapped[str] = mapped_column(Text, nullable=False)
    author_id: Mapped[str] = mapped_column(
        Text, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    description: Mapped[str | None] = mapped_column(Text, default=None)
    id: Mapped[str] = mapped_column(
        Text, primary_key=True, default_factory=new_id, init=False
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        default_factory=_utcnow,
        init=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        default_factory=_utcnow,
        onupdate=_utcnow,
        init=False,
    )

    author: Mapped[RhUser] = relationship(
        back_populates="recipes", init=False, repr=False
    )
    ingredients: Mapped[list["RhRecipeIngredient"]] = relationship(
        back_populates="recipe",
        cascade="all, delete-orphan",
        default_factory=list,
        init=False,
        repr=False,
    )

    __table_args__ = (Index("ix_recipes_author_id", "author_id"),)


class RhIngredient(Base):
    __tablename__ = "ingredients"

    name: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    id: Mapped[str] = mapped_column(
        Text, primary_key=True, default_factory=new_id, init=False
    )


class RhRecipeIngredient(Base):
    __tablename__ = "recipe_ingredients"

    recipe_id: Mapped[str] = mapped_column(
        Text, ForeignKey("recipes.id", ondelete="CASCADE"), nullable=False
    )
    ingredient_id: Mapped[str] = mapped_column(
        Text, ForeignKey("ingredients.id", ondelete="CASCADE"), nullable=False
    )
    amount: Mapped[str] = mapped_column(Text, nullable=False)
    id: Mapped[str] = mapped_column(
        Text, primary_key=True, default_factory=new_id, init=False
    )

    recipe: Mapped[RhRecipe] = relationship(
        back_populates="ingredients", init=False, repr=False
    )
    ingredient: Mapped[RhIngredient] = relationship(init=False, repr=False)

    __table_args__ = (
        Index(
            "ix_recipe_ingredients_recipe_id_ingredient_id",
            "recipe_id",
            "ingredient_id",
        ),
    )
