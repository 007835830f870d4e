# tests/integration/conftest.py
"""
集成测试夹具：基于临时 aiosqlite 文件数据库的会话工厂与仓库。

SQLite 使用 NullPool，`:memory:` 数据库无法跨连接共享，因此使用文件。
"""

from __future__ import annotations

from typing import AsyncGenerator

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from recipe_hub.infrastructure.db import (
    Base,
    create_async_db_engine,
    create_async_sessionmaker,
)
from recipe_hub.infrastructure.persistence import (
    SqlAlchemyRecipeRepository,
    SqlAlchemyUserRepository,
)
from recipe_hub_core.types import UserCreate


@pytest_asyncio.fixture
async def sessionmaker(tmp_path) -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    engine = create_async_db_engine(f"sqlite+aiosqlite:///{tmp_path / 'recipes.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    try:
        yield create_async_sessionmaker(engine)
    finally:
        await engine.dispose()


@pytest_asyncio.fixture
async def user_repo(sessionmaker) -> SqlAlchemyUserRepository:
    return SqlAlchemyUserRepository(sessionmaker)


@pytest_asyncio.fixture
async def recipe_repo(sessionmaker) -> SqlAlchemyRecipeRepository:
    return SqlAlchemyRecipeRepository(sessionmaker)


@pytest_asyncio.fixture
async def author(user_repo):
    return await user_repo.create(UserCreate(name="Ada", email="ada@example.com"))
