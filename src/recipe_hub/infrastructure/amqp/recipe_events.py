# src/recipe_hub/infrastructure/amqp/recipe_events.py
"""
`RecipeEventPublisher` 接口的 AMQP 实现。

每种事件各自惰性打开一个通道，并在该通道上声明 `recipe_events`
主题交换机（非持久化）；通道与交换机在发布者的生命周期内缓存复用。
发布失败直接抛给调用方。
"""

from __future__ import annotations

import asyncio

import aio_pika
import structlog
from aio_pika.abc import AbstractConnection, AbstractExchange

from recipe_hub.application.events import (
    IngredientAdded,
    IngredientRemoved,
    RecipeCreated,
    RecipeUpdated,
)
from recipe_hub_core.types import Event, RecipeEventType

EXCHANGE_NAME = "recipe_events"

logger = structlog.get_logger(__name__)


class AmqpRecipeEventPublisher:
    """把食谱领域事件发布到 RabbitMQ 主题交换机。"""

    def __init__(self, connection: AbstractConnection):
        self._connection = connection
        self._exchanges: dict[RecipeEventType, AbstractExchange] = {}
        self._lock = asyncio.Lock()

    async def _get_exchange(self, event_type: RecipeEventType) -> AbstractExchange:
        exchange = self._exchanges.get(event_type)
        if exchange is not None:
            return exchange
        async with self._lock:
            # 等锁期间可能已被其他任务创建
            exchange = self._exchanges.get(event_type)
            if exchange is None:
                channel = await self._connection.channel()
                exchange = await channel.declare_exchange(
                    EXCHANGE_NAME, aio_pika.ExchangeType.TOPIC, durable=False
                )
                self._exchanges[event_type] = exchange
                logger.debug("已为事件打开 AMQP 通道", event_type=event_type.value)
            return exchange

    async def publish(self, event: Event) -> None:
        exchange = await self._get_exchange(event.event_type)
        message = aio_pika.Message(
            body=event.to_message_body(), content_type="application/json"
        )
        await exchange.publish(message, routing_key=event.routing_key)
        logger.debug(
            "事件已发布", routing_key=event.routing_key, recipe_id=event.recipe_id
        )

    async def publish_recipe_created(self, recipe_id: str) -> None:
        await self.publish(RecipeCreated(recipe_id=recipe_id))

    async def publish_recipe_updated(self, recipe_id: str) -> None:
        await self.publish(RecipeUpdated(recipe_id=recipe_id))

    async def publish_ingredient_added(self, recipe_id: str, ingredient_id: str) -> None:
        await self.publish(IngredientAdded(recipe_id=recipe_id, ingredient_id=ingredient_id))

    async def publish_ingredient_removed(
        self, recipe_id: str, ingredient_id: str
    ) -> None:
        await self.publish(
            IngredientRemoved(recipe_id=recipe_id, ingredient_id=ingredient_id)
        )
