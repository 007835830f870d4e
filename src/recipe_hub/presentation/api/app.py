# src/recipe_hub/presentation/api/app.py
"""
FastAPI 应用工厂。

生命周期 (lifespan)：
- 启动时若未显式传入服务容器，则 `await init_services()`（沿用传入的配置访问器，
  不再重复读取环境），并存入 `app.state.services`；
- 关闭时仅在由本应用初始化连接的情况下调用 `close_connections()`。
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from recipe_hub.bootstrap import close_connections, init_services
from recipe_hub.application.services import ConfigurationService
from recipe_hub.containers import ServicesContainer
from recipe_hub_core.exceptions import DuplicateEntityError, EntityNotFoundError

from .routers import (
    api_create_health_router,
    api_create_recipe_router,
    api_create_user_router,
)


def create_api_application(
    services: ServicesContainer | None = None,
    *,
    config_service: ConfigurationService | None = None,
) -> FastAPI:
    """创建 FastAPI 应用实例。

    Args:
        services: 已初始化的服务容器；为 None 时在启动阶段自行初始化。
        config_service: 已加载的配置访问器，仅在自行初始化时使用。
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        container = (
            services
            if services is not None
            else await init_services(config_service=config_service)
        )
        app.state.services = container

        env = container.config_service
        container.logger.info(
            f"> Server listening at http://{env.get('host', '0.0.0.0')}:"
            f"{env.get('port')} as {env.get('app_env', 'development')}"
        )
        try:
            yield
        finally:
            if services is None:
                await close_connections()

    application = FastAPI(title="Recipe Hub", lifespan=lifespan)

    @application.exception_handler(EntityNotFoundError)
    async def handle_not_found(_: Request, exc: EntityNotFoundError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"detail": exc.args[0] if exc.args else str(exc)},
        )

    @application.exception_handler(DuplicateEntityError)
    async def handle_conflict(_: Request, exc: DuplicateEntityError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content={"detail": str(exc)},
        )

    application.include_router(api_create_health_router())
    application.include_router(api_create_recipe_router())
    application.include_router(api_create_user_router())
    return application
