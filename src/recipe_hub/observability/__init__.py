"""可观测性：日志系统配置与应用日志服务。"""

from .logger import LoggerService, LogLevel
from .logging_config import setup_logging

__all__ = ["LoggerService", "LogLevel", "setup_logging"]
