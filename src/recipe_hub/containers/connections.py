# src/recipe_hub/containers/connections.py
"""
外部连接层容器。

`ConnectionProviders` 负责构造数据库与消息代理的连接句柄（尚未连接）；
`ConnectionsContainer` 是两个连接都已建立后的不可变快照。
"""

from __future__ import annotations

from dataclasses import dataclass

from dependency_injector import containers, providers

from recipe_hub.application.services import ConfigurationService
from recipe_hub.infrastructure.amqp import AMQPConnection
from recipe_hub.infrastructure.db import DatabaseConnection
from recipe_hub.observability import LoggerService


class ConnectionProviders(containers.DeclarativeContainer):
    """连接句柄的 DI 容器。测试中可通过 override 替换为假连接。"""

    config_service = providers.Dependency(instance_of=ConfigurationService)
    logger = providers.Dependency(instance_of=LoggerService)

    database_connection = providers.Factory(
        DatabaseConnection,
        config_service=config_service,
        logger=logger,
    )
    amqp_connection = providers.Factory(
        AMQPConnection,
        config_service=config_service,
        logger=logger,
    )


@dataclass(frozen=True)
class ConnectionsContainer:
    """两个已连接的连接句柄。只有在两者都连接成功后才会被创建。"""

    database_connection: DatabaseConnection
    amqp_connection: AMQPConnection
