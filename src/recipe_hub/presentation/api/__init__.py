# src/recipe_hub/presentation/api/__init__.py
"""Recipe-Hub 的 HTTP API（FastAPI）。"""

from .app import create_api_application

__all__ = ["create_api_application"]
