# src/recipe_hub/infrastructure/db/connection.py
"""
数据库连接句柄。

持有 AsyncEngine 与 async_sessionmaker，生命周期由 `connect()` /
`disconnect()` 显式控制：

- DISCONNECTED --connect 成功--> CONNECTED
- CONNECTED    --disconnect-->   DISCONNECTED
- connect 失败时保持 DISCONNECTED，并抛出 `BackendConnectionError`。
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from sqlalchemy import text
from sqlalchemy.exc import ArgumentError
from sqlalchemy.engine.url import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from recipe_hub_core.exceptions import BackendConnectionError, NotInitializedError

from .engine import create_async_db_engine
from .session import create_async_sessionmaker

if TYPE_CHECKING:
    from recipe_hub.application.services import ConfigurationService
    from recipe_hub.observability import LoggerService


class ConnectionState(str, Enum):
    DISCONNECTED = "disconnected"
    CONNECTED = "connected"


def redact_database_url(url: str) -> str:
    """隐藏 URL 中的密码，用于日志输出。"""
    try:
        return make_url(url).render_as_string(hide_password=True)
    except (ArgumentError, ValueError):
        # 无法解析时只保留主机部分
        return url.split("@")[-1]


class DatabaseConnection:
    """关系数据库连接。客户端即 `async_sessionmaker`。"""

    def __init__(self, config_service: ConfigurationService, logger: LoggerService):
        self._config = config_service
        self._logger = logger
        self._engine: AsyncEngine | None = None
        self._sessionmaker: async_sessionmaker[AsyncSession] | None = None

    @property
    def state(self) -> ConnectionState:
        if self._sessionmaker is None:
            return ConnectionState.DISCONNECTED
        return ConnectionState.CONNECTED

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise NotInitializedError("数据库未连接")
        return self._engine

    async def connect(self) -> None:
        if self._sessionmaker is not None:
            self._logger.debug("数据库已连接，跳过")
            return

        url = self._config.get("database_url")
        echo = bool(self._config.get("db_echo", False)) or (
            self._config.get("app_env", "development") == "development"
        )
        engine: AsyncEngine | None = None
        try:
            engine = create_async_db_engine(
                url,
                echo=echo,
                pool_pre_ping=bool(self._config.get("db_pool_pre_ping", True)),
            )
            async with engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except Exception as e:
            target = redact_database_url(str(url))
            self._logger.error("无法连接到数据库", {"url": target}, error=e)
            if engine is not None:
                await self._dispose_quietly(engine)
            raise BackendConnectionError(f"无法连接到数据库 {target}: {e}") from e

        self._engine = engine
        self._sessionmaker = create_async_sessionmaker(engine)
        self._logger.info("成功连接到数据库", {"url": redact_database_url(str(url))})

    async def disconnect(self) -> None:
        engine = self._engine
        if engine is None:
            return
        self._engine = None
        self._sessionmaker = None
        if await self._dispose_quietly(engine):
            self._logger.info("数据库连接已断开")

    def get_client(self) -> async_sessionmaker[AsyncSession]:
        if self._sessionmaker is None:
            raise NotInitializedError("数据库未连接，请先调用 connect()")
        return self._sessionmaker

    async def _dispose_quietly(self, engine: AsyncEngine) -> bool:
        try:
            await engine.dispose()
        except Exception as e:
            self._logger.error("释放数据库引擎失败", error=e)
            return False
        return True
