# src/recipe_hub/containers/services.py
"""
应用服务层容器。

负责把仓库、事件发布者与业务服务装配在一起。
仓库绑定到数据库客户端 (async_sessionmaker)，事件发布者绑定到消息代理客户端。
"""

from __future__ import annotations

from dataclasses import dataclass

from dependency_injector import containers, providers

from recipe_hub.application.services import (
    ConfigurationService,
    RecipeService,
    UserService,
)
from recipe_hub.infrastructure.amqp import AmqpRecipeEventPublisher
from recipe_hub.infrastructure.persistence import repositories
from recipe_hub.observability import LoggerService


class ServiceProviders(containers.DeclarativeContainer):
    """仓库、事件发布者与应用服务的容器。"""

    config_service = providers.Dependency(instance_of=ConfigurationService)
    logger = providers.Dependency(instance_of=LoggerService)
    db_client = providers.Dependency()
    amqp_client = providers.Dependency()

    # --- 仓库绑定 ---
    user_repo = providers.Singleton(
        repositories.SqlAlchemyUserRepository,
        sessionmaker=db_client,
    )
    recipe_repo = providers.Singleton(
        repositories.SqlAlchemyRecipeRepository,
        sessionmaker=db_client,
    )

    # --- 事件 ---
    event_publisher = providers.Singleton(
        AmqpRecipeEventPublisher,
        connection=amqp_client,
    )

    # --- 应用服务 ---
    user_service = providers.Singleton(
        UserService,
        user_repo=user_repo,
    )
    recipe_service = providers.Singleton(
        RecipeService,
        recipe_repo=recipe_repo,
        event_publisher=event_publisher,
        logger=logger,
    )


@dataclass(frozen=True)
class ServicesContainer:
    """进程级的服务集合。只有在连接容器创建成功后才会存在。"""

    config_service: ConfigurationService
    logger: LoggerService
    user_service: UserService
    recipe_service: RecipeService
