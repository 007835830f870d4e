# src/recipe_hub/infrastructure/amqp/__init__.py
"""消息代理基础设施：RabbitMQ 连接与食谱事件发布者。"""

from ._connection import AMQPConnection, AMQPConnectionState, redact_amqp_url
from .recipe_events import EXCHANGE_NAME, AmqpRecipeEventPublisher

__all__ = [
    "AMQPConnection",
    "AMQPConnectionState",
    "redact_amqp_url",
    "EXCHANGE_NAME",
    "AmqpRecipeEventPublisher",
]
