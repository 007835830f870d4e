# src/recipe_hub/observability/logging_config.py
"""
集中配置项目日志系统：structlog ⇄ 标准 logging。

提供两种输出，每次调用都只写一行到 stderr：
- json   ：生产环境的结构化日志（ISO-8601 且 UTC，主消息键为 `message`）。
- console：开发环境的单行 key=value 输出（本地时间）。

要点：
1) 使用 structlog 官方推荐的 ProcessorFormatter 桥接到标准 logging；
2) console 用本地时间，json 统一 UTC；
3) 可选屏蔽第三方噪声 logger（aio_pika/aiormq/sqlalchemy.engine 等）。
"""

from __future__ import annotations

import logging
from typing import Literal

import structlog
from structlog.typing import Processor

# 应用级别 -> 标准 logging 级别
_STDLIB_LEVELS: dict[str, str] = {
    "debug": "DEBUG",
    "info": "INFO",
    "warn": "WARNING",
    "error": "ERROR",
}

APP_LOGGER_NAME = "recipe_hub"


def setup_logging(
    *,
    log_level: str = "info",
    log_format: Literal["json", "console"] = "json",
    root_level: str | None = None,
    service: str | None = None,
    silence_noisy_libs: bool = True,
) -> None:
    """
    配置全局 structlog 日志系统。

    Args:
        log_level: 应用 logger 的最低级别（debug/info/warn/error）。
        log_format: 'json'（生产结构化输出）或 'console'（开发单行输出）。
        root_level: 根 logger 级别；默认 None 表示使用 WARNING 以降低第三方噪声。
        service: 统一绑定到日志的服务名（通过 contextvars 注入）。
        silence_noisy_libs: 是否下调常见噪声 logger 的级别（默认 True）。
    """
    app_level = _STDLIB_LEVELS.get(log_level.lower(), log_level.upper())

    pre_chain: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
    ]

    if log_format == "json":
        timestamper = structlog.processors.TimeStamper(fmt="iso", utc=True)
    else:
        timestamper = structlog.processors.TimeStamper(
            fmt="%Y-%m-%d %H:%M:%S", utc=False
        )

    processors: list[Processor] = [
        *pre_chain,
        timestamper,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # 最终渲染器
    if log_format == "json":
        final_processors: list[Processor] = [
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.EventRenamer("message"),
            structlog.processors.JSONRenderer(),
        ]
    else:
        final_processors = [
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.dev.ConsoleRenderer(colors=False),
        ]

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=final_processors,
        foreign_pre_chain=[*pre_chain, timestamper],
    )

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    # 根记录器：默认 WARNING 抑制第三方噪声；如需覆盖可传 root_level
    root_logger = logging.getLogger()
    if root_logger.hasHandlers():
        root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel((root_level or "WARNING").upper())

    # 应用 logger：按入参设定
    app_logger = logging.getLogger(APP_LOGGER_NAME)
    app_logger.setLevel(app_level)
    app_logger.propagate = True

    # 绑定全局上下文（service 等），所有日志都会带上
    structlog.contextvars.clear_contextvars()
    if service:
        structlog.contextvars.bind_contextvars(service=service)

    if silence_noisy_libs:
        for noisy in (
            "aio_pika",
            "aiormq",
            "asyncio",
            "uvicorn.access",
            "sqlalchemy.engine.Engine",
        ):
            logging.getLogger(noisy).setLevel(logging.WARNING)

    structlog.get_logger("recipe_hub.logging_config").debug(
        "日志系统已配置完成。",
        log_format=log_format,
        app_log_level=app_level,
        root_log_level=(root_level or "WARNING").upper(),
        service=service,
    )
