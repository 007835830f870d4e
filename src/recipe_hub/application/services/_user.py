# src/recipe_hub/application/services/_user.py
"""用户相关的应用服务。"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from recipe_hub_core.interfaces import UserRepository
    from recipe_hub_core.types import User, UserCreate


class UserService:
    def __init__(self, user_repo: UserRepository):
        self._user_repo = user_repo

    async def get_user_by_id(self, user_id: str) -> User | None:
        return await self._user_repo.find_by_id(user_id)

    async def create_user(self, user_data: UserCreate) -> User:
        return await self._user_repo.create(user_data)
