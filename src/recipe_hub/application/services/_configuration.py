# src/recipe_hub/application/services/_configuration.py
"""配置访问器：对环境记录做按键读取。"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from recipe_hub_core.exceptions import MissingConfigError

if TYPE_CHECKING:
    from recipe_hub.config import RecipeHubConfig

_MISSING: Any = object()


class ConfigurationService:
    """
    包装一个不可变的环境记录。

    `get` 是纯函数，没有副作用，可以在任意任务中调用。需要静态类型时，
    直接访问 `environment` 上的具名字段。
    """

    def __init__(self, environment: RecipeHubConfig):
        self._environment = environment

    @property
    def environment(self) -> RecipeHubConfig:
        return self._environment

    def get(self, key: str, default: Any = _MISSING) -> Any:
        """
        按键读取配置值（大小写不敏感，`LOG_LEVEL` 与 `log_level` 等价）。

        Raises:
            MissingConfigError: 键不存在（或值为 None）且未提供默认值。
        """
        name = key.lower()
        value = None
        if name in type(self._environment).model_fields:
            # 跳过校验时，缺失的必填字段根本不存在于实例上
            value = getattr(self._environment, name, None)
        if value is not None:
            return value
        if default is not _MISSING:
            return default
        raise MissingConfigError(f"配置项 {key} 不存在，且未提供默认值")
