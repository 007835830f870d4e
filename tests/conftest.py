# tests/conftest.py
"""
Pytest 共享夹具。

核心 Fixtures:
- _isolate_process_state: (自动) 清理 RECIPEHUB_* 环境变量、进程级容器与日志配置。
- make_environment / environment: 构造一个合法的环境记录。
- config_service / logger_service: 基于上述记录的配置访问器与日志服务。
"""

from __future__ import annotations

import logging
import os
from typing import Any, Callable

import pytest
import structlog

from recipe_hub import bootstrap
from recipe_hub.application.services import ConfigurationService
from recipe_hub.config import ENV_PREFIX, RecipeHubConfig
from recipe_hub.observability import LoggerService

BASE_ENVIRONMENT: dict[str, Any] = {
    "port": 3000,
    "app_env": "test",
    "database_url": "sqlite+aiosqlite:///:memory:",
    "rabbitmq_host": "localhost",
    "rabbitmq_port": 5672,
    "rabbitmq_username": "guest",
    "rabbitmq_password": "guest",
    "log_level": "debug",
}


@pytest.fixture(autouse=True)
def _isolate_process_state(monkeypatch: pytest.MonkeyPatch):
    for key in list(os.environ):
        if key.upper().startswith(ENV_PREFIX):
            monkeypatch.delenv(key)
    bootstrap.reset_state()
    yield
    bootstrap.reset_state()
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
    logging.getLogger().handlers.clear()


@pytest.fixture
def make_environment() -> Callable[..., RecipeHubConfig]:
    def _make(**overrides: Any) -> RecipeHubConfig:
        return RecipeHubConfig(**{**BASE_ENVIRONMENT, **overrides})

    return _make


@pytest.fixture
def environment(make_environment) -> RecipeHubConfig:
    return make_environment()


@pytest.fixture
def config_service(environment) -> ConfigurationService:
    return ConfigurationService(environment)


@pytest.fixture
def logger_service(config_service) -> LoggerService:
    return LoggerService(config_service)


@pytest.fixture
def set_env(monkeypatch: pytest.MonkeyPatch) -> Callable[..., None]:
    """以 RECIPEHUB_ 前缀设置一组环境变量。"""

    def _set(**values: Any) -> None:
        for name, value in values.items():
            monkeypatch.setenv(f"{ENV_PREFIX}{name.upper()}", str(value))

    return _set
