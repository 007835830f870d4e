# src/recipe_hub_core/interfaces.py
"""
定义了 Recipe-Hub 系统中所有基础设施和服务的抽象接口协议 (Protocols)。
这些接口是系统内部解耦的关键，应用层（服务）应依赖于这些抽象接口，
而不是具体的 SQLAlchemy / aio-pika 实现类。
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, TypeVar

if TYPE_CHECKING:
    from .types import (
        Recipe,
        RecipeCreate,
        RecipeIngredient,
        RecipeIngredientCreate,
        User,
        UserCreate,
    )

ClientT = TypeVar("ClientT", covariant=True)


class Connection(Protocol[ClientT]):
    """对外部系统（数据库、消息代理）持有的连接句柄，具有显式的生命周期。"""

    async def connect(self) -> None:
        """建立连接；已连接时为空操作。"""
        ...

    async def disconnect(self) -> None:
        """尽力断开连接；失败只记录日志，从不抛出。"""
        ...

    def get_client(self) -> ClientT:
        """返回底层客户端；未连接时抛出 `NotInitializedError`。"""
        ...


class UserRepository(Protocol):
    """用户仓库接口。"""

    async def find_by_id(self, user_id: str) -> User | None: ...

    async def create(self, user: UserCreate) -> User: ...


class RecipeRepository(Protocol):
    """食谱仓库接口。所有方法都是到持久化引擎的直通调用，没有业务逻辑。"""

    async def find_by_id(self, recipe_id: str) -> Recipe | None: ...

    async def create(self, recipe: RecipeCreate) -> Recipe: ...

    async def update(self, recipe_id: str, data: dict[str, Any]) -> Recipe: ...

    async def add_ingredient(
        self, recipe_id: str, ingredient_data: RecipeIngredientCreate
    ) -> RecipeIngredient: ...

    async def remove_ingredient(self, recipe_id: str, ingredient_id: str) -> None: ...

    async def find_by_user(self, user_id: str) -> list[Recipe]: ...

    async def find_all(self) -> list[Recipe]: ...


class RecipeEventPublisher(Protocol):
    """定义了食谱领域事件发布者的接口。"""

    async def publish_recipe_created(self, recipe_id: str) -> None: ...

    async def publish_recipe_updated(self, recipe_id: str) -> None: ...

    async def publish_ingredient_added(
        self, recipe_id: str, ingredient_id: str
    ) -> None: ...

    async def publish_ingredient_removed(
        self, recipe_id: str, ingredient_id: str
    ) -> None: ...
