# src/recipe_hub/containers/__init__.py
"""
应用的组合根 (Composition Root)。

`ConnectionProviders` / `ServiceProviders` 是 dependency-injector 容器，
负责装配；`ConnectionsContainer` / `ServicesContainer` 是装配完成后
发布到进程中的不可变快照，由 `recipe_hub.bootstrap` 管理。
"""

from .connections import ConnectionProviders, ConnectionsContainer
from .services import ServiceProviders, ServicesContainer

__all__ = [
    "ConnectionProviders",
    "ConnectionsContainer",
    "ServiceProviders",
    "ServicesContainer",
]
