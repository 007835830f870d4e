# src/recipe_hub/observability/logger.py
"""
应用日志服务。

在构造时通过配置访问器读取一次日志级别（之后修改配置不会生效），
只有级别不低于阈值的调用才会输出。每次调用输出一行结构化日志，
`metadata` 的键与 `level`、`message` 并列；传入 `error` 时附加嵌套的
`error` 字段（name/message/stack）。日志从不抛出异常。
"""

from __future__ import annotations

import traceback
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Literal

import structlog

from .logging_config import APP_LOGGER_NAME

if TYPE_CHECKING:
    from recipe_hub.application.services import ConfigurationService

LogLevel = Literal["debug", "info", "warn", "error"]
LogMeta = Mapping[str, Any]

_LEVEL_ORDER: tuple[LogLevel, ...] = ("debug", "info", "warn", "error")
# structlog 的方法名
_METHODS: dict[LogLevel, str] = {
    "debug": "debug",
    "info": "info",
    "warn": "warning",
    "error": "error",
}


def _describe_error(error: BaseException) -> dict[str, str]:
    return {
        "name": type(error).__name__,
        "message": str(error),
        "stack": "".join(
            traceback.format_exception(type(error), error, error.__traceback__)
        ),
    }


class LoggerService:
    """按级别过滤的结构化日志门面。"""

    def __init__(self, config_service: ConfigurationService, name: str = APP_LOGGER_NAME):
        level = str(config_service.get("log_level", "info")).lower()
        if level == "warning":
            level = "warn"
        self._level: LogLevel = level if level in _LEVEL_ORDER else "info"  # type: ignore[assignment]
        self._threshold = _LEVEL_ORDER.index(self._level)
        self._logger = structlog.get_logger(name)

    @property
    def level(self) -> LogLevel:
        return self._level

    def should_log(self, level: LogLevel) -> bool:
        return _LEVEL_ORDER.index(level) >= self._threshold

    def debug(self, message: str, metadata: LogMeta | None = None) -> None:
        self._log("debug", message, metadata)

    def info(self, message: str, metadata: LogMeta | None = None) -> None:
        self._log("info", message, metadata)

    def warn(self, message: str, metadata: LogMeta | None = None) -> None:
        self._log("warn", message, metadata)

    def error(
        self,
        message: str,
        metadata: LogMeta | None = None,
        error: BaseException | None = None,
    ) -> None:
        self._log("error", message, metadata, error)

    def _log(
        self,
        level: LogLevel,
        message: str,
        metadata: LogMeta | None = None,
        error: BaseException | None = None,
    ) -> None:
        if not self.should_log(level):
            return
        fields: dict[str, Any] = {str(k): v for k, v in (metadata or {}).items()}
        if error is not None:
            fields["error"] = _describe_error(error)
        # metadata 中的 `event` 键会被消息本身覆盖
        bound = self._logger.bind(**fields)
        getattr(bound, _METHODS[level])(message)
