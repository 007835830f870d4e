# src/recipe_hub/bootstrap.py
"""
应用引导程序和进程级容器的生命周期管理。

本模块是应用的唯一初始化入口，负责：
1. 加载 .env 与环境记录。
2. 建立数据库与消息代理连接（先数据库，后消息代理）。
3. 装配仓库、事件发布者和业务服务，并把冻结的容器发布到进程中。

两个容器各由一把 `asyncio.Lock` 保护“检查后构建”的过程，
并发调用方等待同一把锁并拿到同一个实例。构建失败时不缓存任何东西，
下一次调用会从头重试。
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from pathlib import Path

import structlog

from recipe_hub.application.services import ConfigurationService
from recipe_hub.config import load_dotenv_files, load_environment
from recipe_hub.containers import (
    ConnectionProviders,
    ConnectionsContainer,
    ServiceProviders,
    ServicesContainer,
)
from recipe_hub.observability import LoggerService, setup_logging
from recipe_hub_core.exceptions import NotInitializedError

logger = structlog.get_logger("recipe_hub.bootstrap")


@dataclass
class _Registry:
    connections: ConnectionsContainer | None = None
    services: ServicesContainer | None = None


_registry = _Registry()
_connections_lock = asyncio.Lock()
_services_lock = asyncio.Lock()


async def init_connections(
    config_service: ConfigurationService,
    logger_service: LoggerService,
    *,
    providers: ConnectionProviders | None = None,
) -> ConnectionsContainer:
    """
    返回进程级的连接容器，首次调用时建立连接。

    任一连接失败时错误原样向上传播，且不缓存任何状态；
    已经连上的数据库会在抛出前尽力断开。
    """
    if _registry.connections is not None:
        return _registry.connections

    async with _connections_lock:
        if _registry.connections is not None:
            return _registry.connections

        container = providers or ConnectionProviders()
        container.config_service.override(config_service)
        container.logger.override(logger_service)

        database_connection = container.database_connection()
        amqp_connection = container.amqp_connection()

        await database_connection.connect()
        try:
            await amqp_connection.connect()
        except Exception:
            await database_connection.disconnect()
            raise

        _registry.connections = ConnectionsContainer(
            database_connection=database_connection,
            amqp_connection=amqp_connection,
        )
        logger_service.info("外部连接已就绪")
        return _registry.connections


async def init_services(
    *,
    base_dir: Path | None = None,
    config_service: ConfigurationService | None = None,
    connection_providers: ConnectionProviders | None = None,
) -> ServicesContainer:
    """
    返回进程级的服务容器，首次调用时完成全部装配。

    调用方已经加载过环境记录时（如 CLI）应传入 `config_service`，
    此时不会再次读取 .env 与环境变量。

    Raises:
        ConfigValidationError: 环境变量校验失败。
        BackendConnectionError: 数据库或消息代理连接失败。
    """
    if _registry.services is not None:
        return _registry.services

    async with _services_lock:
        if _registry.services is not None:
            return _registry.services

        if config_service is None:
            load_dotenv_files(base_dir)
            config_service = ConfigurationService(load_environment())
        setup_logging(
            log_level=config_service.get("log_level", "info"),
            log_format=config_service.get("log_format", "json"),
            service="recipe-hub",
        )
        logger_service = LoggerService(config_service)

        connections = await init_connections(
            config_service, logger_service, providers=connection_providers
        )

        providers = ServiceProviders(
            config_service=config_service,
            logger=logger_service,
            db_client=connections.database_connection.get_client(),
            amqp_client=connections.amqp_connection.get_client(),
        )

        _registry.services = ServicesContainer(
            config_service=config_service,
            logger=logger_service,
            user_service=providers.user_service(),
            recipe_service=providers.recipe_service(),
        )
        logger_service.debug("服务容器已初始化")
        return _registry.services


def get_connections_container() -> ConnectionsContainer:
    if _registry.connections is None:
        raise NotInitializedError(
            "连接容器尚未初始化，请先 await init_connections()"
        )
    return _registry.connections


def get_services_container() -> ServicesContainer:
    if _registry.services is None:
        raise NotInitializedError("服务容器尚未初始化，请先 await init_services()")
    return _registry.services


async def close_connections() -> None:
    """先断开消息代理，再断开数据库；清空两个进程级容器。断开失败只记录日志。"""
    async with _services_lock, _connections_lock:
        connections = _registry.connections
        _registry.services = None
        _registry.connections = None
        if connections is None:
            return
        await connections.amqp_connection.disconnect()
        await connections.database_connection.disconnect()
        logger.info("所有外部连接已关闭")


def reset_state() -> None:
    """丢弃已发布的容器并重建锁，不做任何断开操作（供测试使用）。"""
    global _connections_lock, _services_lock
    _registry.connections = None
    _registry.services = None
    _connections_lock = asyncio.Lock()
    _services_lock = asyncio.Lock()
