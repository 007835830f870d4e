# src/recipe_hub/application/__init__.py
"""
应用服务层。

本模块负责编排领域逻辑和基础设施，以完成具体的业务用例。
"""
from .services import ConfigurationService, RecipeService, UserService

__all__ = ["ConfigurationService", "RecipeService", "UserService"]
