# src/recipe_hub/infrastructure/amqp/_connection.py
"""
消息代理 (RabbitMQ) 连接句柄。

状态机：
- DISCONNECTED --connect-->     CLIENT_ONLY
- CLIENT_ONLY  --get_channel--> CHANNEL_OPEN
- 任意状态     --disconnect-->  DISCONNECTED

每个连接生命周期内最多打开一个共享通道。
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

import aio_pika
from aio_pika.abc import AbstractChannel, AbstractConnection

from recipe_hub_core.exceptions import BackendConnectionError, NotInitializedError

if TYPE_CHECKING:
    from recipe_hub.application.services import ConfigurationService
    from recipe_hub.observability import LoggerService


class AMQPConnectionState(str, Enum):
    DISCONNECTED = "disconnected"
    CLIENT_ONLY = "client_only"
    CHANNEL_OPEN = "channel_open"


def redact_amqp_url(host: str, port: int, username: str) -> str:
    """仅用于日志的连接地址，密码固定显示为 `***`。"""
    return f"amqp://{username}:***@{host}:{port}/"


class AMQPConnection:
    """持有 aio-pika 连接以及惰性打开的共享通道。"""

    def __init__(self, config_service: ConfigurationService, logger: LoggerService):
        self._config = config_service
        self._logger = logger
        self._connection: AbstractConnection | None = None
        self._channel: AbstractChannel | None = None

    @property
    def state(self) -> AMQPConnectionState:
        if self._connection is None:
            return AMQPConnectionState.DISCONNECTED
        if self._channel is None:
            return AMQPConnectionState.CLIENT_ONLY
        return AMQPConnectionState.CHANNEL_OPEN

    async def connect(self) -> None:
        if self._connection is not None:
            self._logger.debug("消息代理已连接，跳过")
            return

        host = self._config.get("rabbitmq_host")
        port = self._config.get("rabbitmq_port")
        username = self._config.get("rabbitmq_username")
        target = redact_amqp_url(host, port, username)
        try:
            # 凭据以关键字参数传入，避免特殊字符破坏 URL 解析
            self._connection = await aio_pika.connect(
                host=host,
                port=int(port),
                login=username,
                password=self._config.get("rabbitmq_password"),
            )
        except Exception as e:
            self._logger.error("无法连接到消息代理", {"url": target}, error=e)
            raise BackendConnectionError(f"无法连接到消息代理 {target}: {e}") from e

        self._logger.info("成功连接到消息代理", {"url": target})

    async def disconnect(self) -> None:
        channel, connection = self._channel, self._connection
        self._channel = None
        self._connection = None

        if channel is not None:
            try:
                await channel.close()
            except Exception as e:
                self._logger.error("关闭 AMQP 通道失败", error=e)
        if connection is not None:
            try:
                await connection.close()
            except Exception as e:
                self._logger.error("关闭 AMQP 连接失败", error=e)
            else:
                self._logger.info("消息代理连接已断开")

    def get_client(self) -> AbstractConnection:
        if self._connection is None:
            raise NotInitializedError("消息代理未连接，请先调用 connect()")
        return self._connection

    async def get_channel(self) -> AbstractChannel:
        """返回共享通道；首次调用时打开并缓存。"""
        if self._channel is not None:
            return self._channel
        connection = self.get_client()
        try:
            self._channel = await connection.channel()
        except Exception as e:
            self._logger.error("打开 AMQP 通道失败", error=e)
            raise
        return self._channel
