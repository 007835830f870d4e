# src/recipe_hub/application/services/__init__.py
"""
应用服务层。

本模块包含所有具体的业务用例实现，每个服务对应一组相关的业务操作。
"""

from ._configuration import ConfigurationService
from ._recipe import RecipeService
from ._user import UserService

__all__ = [
    "ConfigurationService",
    "RecipeService",
    "UserService",
]
