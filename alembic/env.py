# alembic/env.py
"""
Alembic 迁移环境。

1. 元数据：优先使用 `context.config.attributes["target_metadata"]`（测试注入），
   否则从 `recipe_hub.infrastructure.db` 导入。
2. 数据库 URL：优先使用 `sqlalchemy.url`（由 CLI 注入），
   否则加载 .env 后读取 `RECIPEHUB_DATABASE_URL`。
3. 在线模式使用异步引擎，通过 `run_sync` 桥接到同步的 Alembic 上下文。
"""

from __future__ import annotations

import asyncio
import os
from logging.config import fileConfig

import structlog
from alembic import context
from sqlalchemy import pool
from sqlalchemy.ext.asyncio import create_async_engine

from recipe_hub.config import ENV_PREFIX, load_dotenv_files

logger = structlog.get_logger(__name__)

config = context.config

if config.config_file_name is not None and not config.attributes.get(
    "skip_logging_config"
):
    fileConfig(config.config_file_name, disable_existing_loggers=False)

target_metadata = config.attributes.get("target_metadata")
if target_metadata is None:
    from recipe_hub.infrastructure.db import Base

    target_metadata = Base.metadata


def _database_url() -> str:
    url = config.get_main_option("sqlalchemy.url")
    if url:
        return url
    load_dotenv_files()
    url = os.environ.get(f"{ENV_PREFIX}DATABASE_URL")
    if not url:
        raise RuntimeError(f"未配置数据库 URL，请设置 {ENV_PREFIX}DATABASE_URL")
    return url


def run_migrations_offline() -> None:
    """离线模式：只生成 SQL 脚本，不连接数据库。"""
    context.configure(
        url=_database_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection) -> None:
    context.configure(connection=connection, target_metadata=target_metadata)
    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online() -> None:
    """在线模式：创建异步引擎并直接应用迁移。"""
    connectable = create_async_engine(_database_url(), poolclass=pool.NullPool)

    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)

    await connectable.dispose()
    logger.debug("迁移执行完毕")


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())
