# src/recipe_hub/infrastructure/db/engine.py
"""
异步引擎工厂

- Postgres：使用默认连接池（QueuePool）
- SQLite：NullPool，避免多任务共享同一句柄
"""

from __future__ import annotations

from typing import Any

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import NullPool


def _is_sqlite(url: str) -> bool:
    return url.startswith("sqlite+aiosqlite") or url.startswith("sqlite://")


def create_async_db_engine(
    url: str, *, echo: bool = False, pool_pre_ping: bool = True
) -> AsyncEngine:
    """按数据库方言创建 AsyncEngine。"""
    kwargs: dict[str, Any] = {"echo": echo, "pool_pre_ping": pool_pre_ping}
    if _is_sqlite(url):
        kwargs["poolclass"] = NullPool
    return create_async_engine(url, **kwargs)
