# src/recipe_hub/application/events.py
"""
定义了 Recipe-Hub 系统中所有食谱领域事件的数据模型。

事件通过 `recipe_events` 主题交换机发布，消息体为 camelCase 的 JSON，
例如 `{"recipeId": "1", "ingredientId": "ing1"}`。
"""

from typing import ClassVar

from pydantic import Field

from recipe_hub_core.types import Event, RecipeEventType


class RecipeCreated(Event):
    """当一个新食谱被创建时触发。"""

    event_type: ClassVar[RecipeEventType] = RecipeEventType.RECIPE_CREATED
    routing_key: ClassVar[str] = "recipe.created"


class RecipeUpdated(Event):
    """当食谱的名称或描述被修改时触发。"""

    event_type: ClassVar[RecipeEventType] = RecipeEventType.RECIPE_UPDATED
    routing_key: ClassVar[str] = "recipe.updated"


class IngredientAdded(Event):
    """当一个食材被加入食谱时触发。"""

    event_type: ClassVar[RecipeEventType] = RecipeEventType.INGREDIENT_ADDED
    routing_key: ClassVar[str] = "recipe.ingredient_added"

    ingredient_id: str = Field(serialization_alias="ingredientId")


class IngredientRemoved(Event):
    """当一个食材从食谱中移除时触发。"""

    event_type: ClassVar[RecipeEventType] = RecipeEventType.INGREDIENT_REMOVED
    routing_key: ClassVar[str] = "recipe.ingredient_removed"

    ingredient_id: str = Field(serialization_alias="ingredientId")
