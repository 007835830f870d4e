# src/recipe_hub/__init__.py
"""
Recipe-Hub 服务端。

对外暴露进程级容器的初始化与访问入口。
"""

from .bootstrap import (
    close_connections,
    get_connections_container,
    get_services_container,
    init_connections,
    init_services,
)

__all__ = [
    "init_connections",
    "init_services",
    "get_connections_container",
    "get_services_container",
    "close_connections",
]

__version__ = "0.1.0"
