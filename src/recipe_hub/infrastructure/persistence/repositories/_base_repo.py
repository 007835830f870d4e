# src/recipe_hub/infrastructure/persistence/repositories/_base_repo.py
from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, AsyncIterator

from sqlalchemy.exc import IntegrityError

from recipe_hub.infrastructure.db.session import session_scope
from recipe_hub_core.exceptions import DuplicateEntityError

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker


class BaseRepository:
    """所有 SQLAlchemy 仓库的基类。每次调用在独立的事务中执行。"""

    def __init__(self, sessionmaker: "async_sessionmaker[AsyncSession]"):
        self._sessionmaker = sessionmaker

    @asynccontextmanager
    async def _transaction(self) -> AsyncIterator["AsyncSession"]:
        """
        事务作用域。

        Raises:
            DuplicateEntityError: flush 或提交时违反了完整性约束（唯一键）。
        """
        try:
            async with session_scope(self._sessionmaker) as session:
                yield session
        except IntegrityError as e:
            raise DuplicateEntityError(str(e.orig)) from e
