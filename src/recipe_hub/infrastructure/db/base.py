# src/recipe_hub/infrastructure/db/base.py
"""
定义了 SQLAlchemy 的元数据 (MetaData) 和声明式基类 (DeclarativeBase)。

所有 ORM 模型都通过 `Base` 类与模块级的单一 `metadata` 实例关联，
Alembic 迁移与测试中的建表都从这里取元数据。
"""

from __future__ import annotations

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase, MappedAsDataclass

metadata = MetaData()


class Base(MappedAsDataclass, DeclarativeBase):
    """
    项目统一的声明式基类。

    它被配置为数据类 (`MappedAsDataclass`)，并与模块级的 `metadata` 实例关联。
    """

    __abstract__ = True
    metadata = metadata
