# src/recipe_hub/infrastructure/persistence/repositories/_user_repo.py
"""用户仓库的 SQLAlchemy 实现。"""

from __future__ import annotations

from recipe_hub.infrastructure.db._schema import RhUser
from recipe_hub_core.types import User, UserCreate

from ._base_repo import BaseRepository


class SqlAlchemyUserRepository(BaseRepository):
    async def find_by_id(self, user_id: str) -> User | None:
        async with self._transaction() as session:
            user = await session.get(RhUser, user_id)
            return User.model_validate(user) if user else None

    async def create(self, user: UserCreate) -> User:
        async with self._transaction() as session:
            orm_user = RhUser(name=user.name, email=user.email)
            session.add(orm_user)
            await session.flush()
            return User.model_validate(orm_user)
