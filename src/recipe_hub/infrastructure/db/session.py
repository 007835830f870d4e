# src/recipe_hub/infrastructure/db/session.py
"""
仓库使用的会话工厂与事务作用域。

每次仓库调用对应一个 `session_scope`：正常退出时提交，任何异常都会回滚后
原样抛出。会话关闭后 ORM 对象仍可读取（`expire_on_commit=False`），
仓库据此在事务结束后再把它们转换为 DTO。
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker


def create_async_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # 食材的“先插入后查询”依赖显式 flush，关闭 autoflush 避免隐式写入
    return async_sessionmaker(
        bind=engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )


@asynccontextmanager
async def session_scope(
    sessionmaker: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    """打开一个会话并在单个事务中运行调用方的代码块。"""
    async with sessionmaker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
