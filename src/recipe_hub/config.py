# src/recipe_hub/config.py
"""
Recipe-Hub 配置（Pydantic v2）

- `RecipeHubConfig` 是进程的环境记录：字段具名、强类型、创建后不可变。
- `load_environment()` 是唯一的加载入口，只在启动时调用一次；校验失败抛出
  `ConfigValidationError`。
- 设置 `RECIPEHUB_SKIP_ENV_VALIDATION` 可跳过校验（受限的构建环境），
  此时缺失的字段保持缺失，由下游（配置访问器）自行处理。
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal

import structlog
from dotenv import load_dotenv
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine.url import make_url

from recipe_hub_core.exceptions import ConfigValidationError

ENV_PREFIX = "RECIPEHUB_"
SKIP_VALIDATION_ENV = f"{ENV_PREFIX}SKIP_ENV_VALIDATION"

AppEnv = Literal["development", "test", "production"]
LogLevel = Literal["debug", "info", "warn", "error"]

logger = structlog.get_logger(__name__)


class RecipeHubConfig(BaseSettings):
    """
    Recipe-Hub 环境记录。

    环境变量名 = `RECIPEHUB_` + 大写字段名，例如 `database_url` 读取
    `RECIPEHUB_DATABASE_URL`。空字符串视为未设置。
    """

    # --- 服务器通用 ---
    host: str = "0.0.0.0"
    port: int = Field(gt=0, le=65535)
    app_env: AppEnv = "development"

    # --- 数据库 ---
    database_url: str
    db_echo: bool = False
    db_pool_pre_ping: bool = True

    # --- 消息代理 (RabbitMQ) ---
    rabbitmq_host: str = Field(min_length=1)
    rabbitmq_port: int = Field(gt=0, le=65535)
    rabbitmq_username: str = Field(min_length=1)
    rabbitmq_password: str = Field(min_length=1)

    # --- 日志 ---
    log_level: LogLevel = "info"
    log_format: Literal["console", "json"] = "json"

    # --- 校验器 ---
    @field_validator("database_url")
    @classmethod
    def _validate_database_url(cls, v: str) -> str:
        try:
            make_url(v)
        except Exception as e:
            raise ValueError(f"非法数据库 URL：{v!r}（{e}）") from e
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = v.strip().lower()
            if v == "warning":
                return "warn"
        return v

    # --- Pydantic v2 设置 ---
    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        case_sensitive=False,
        extra="ignore",
        env_ignore_empty=True,
        frozen=True,
    )


def _read_raw_environment() -> dict[str, str]:
    """读取与配置字段对应的原始环境变量（不做任何转换或校验）。"""
    environ = {k.lower(): v for k, v in os.environ.items()}
    raw: dict[str, str] = {}
    for name in RecipeHubConfig.model_fields:
        value = environ.get(f"{ENV_PREFIX}{name}".lower())
        if value:
            raw[name] = value
    return raw


def load_environment() -> RecipeHubConfig:
    """
    加载并校验环境记录。

    Raises:
        ConfigValidationError: 必填变量缺失或类型/枚举校验失败。
    """
    if os.environ.get(SKIP_VALIDATION_ENV):
        logger.warning(
            "已跳过环境变量校验，缺失的配置项将由调用方自行处理。",
            flag=SKIP_VALIDATION_ENV,
        )
        return RecipeHubConfig.model_construct(**_read_raw_environment())

    try:
        return RecipeHubConfig()
    except ValidationError as e:
        raise ConfigValidationError(
            f"启动配置校验失败，请检查 .env 或环境变量。详情: {e}"
        ) from e


def load_dotenv_files(base_dir: Path | None = None) -> list[Path]:
    """
    根据运行模式加载 .env 文件：先 `.env.<app_env>`，再 `.env`。

    已存在于进程环境中的变量不会被覆盖，因此优先级为：
    真实环境变量 > `.env.<app_env>` > `.env`。
    """
    root = base_dir or Path.cwd()
    # 这是唯一一处在配置记录之外直接读取环境变量的地方：
    # 需要先知道运行模式才能决定加载哪些文件。
    app_env = os.environ.get(f"{ENV_PREFIX}APP_ENV", "development").lower()

    loaded: list[Path] = []
    for file_path in (root / f".env.{app_env}", root / ".env"):
        if file_path.is_file():
            load_dotenv(file_path, override=False, encoding="utf-8")
            loaded.append(file_path)

    logger.debug("已加载 dotenv 文件", files=[str(p) for p in loaded])
    return loaded
