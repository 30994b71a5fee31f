"""
In-memory event bus implementation.

This is a simple in-memory implementation suitable for modular monolith.
For production scale, this could be replaced with RabbitMQ (see
rabbitmq_event_bus.py); build_event_bus() picks one from settings.
"""

import asyncio
import logging
from typing import Dict, List, Type

from django.conf import settings

from core.domain.events import DomainEvent, EventBus, EventHandler
from core.metrics import events_published_total

logger = logging.getLogger(__name__)


class InMemoryEventBus(EventBus):
    """
    In-memory event bus implementation.

    Handlers run concurrently in the publishing task. A failing handler
    is logged and does not affect the other handlers or the publisher.
    """

    def __init__(self):
        """Initialize the event bus."""
        self._handlers: Dict[Type[DomainEvent], List[EventHandler]] = {}

    def subscribe(self, event_type: Type[DomainEvent], handler: EventHandler) -> None:
        """
        Subscribe to a domain event type.

        Args:
            event_type: The type of event to subscribe to
            handler: The handler to call when event is published
        """
        self._handlers.setdefault(event_type, []).append(handler)
        logger.debug("Subscribed %s to %s", handler.__class__.__name__, event_type.__name__)

    async def publish(self, event: DomainEvent) -> None:
        """
        Publish a domain event.

        Args:
            event: The domain event to publish
        """
        event_type = type(event)
        handlers = self._handlers.get(event_type, [])
        events_published_total.labels(event_type=event.event_type, transport="memory").inc()

        if not handlers:
            logger.debug("No handlers registered for %s", event_type.__name__)
            return

        logger.info("Publishing %s to %d handler(s)", event_type.__name__, len(handlers))

        tasks = [self._handle_event(handler, event) for handler in handlers]
        await asyncio.gather(*tasks, return_exceptions=True)

    async def _handle_event(self, handler: EventHandler, event: DomainEvent) -> None:
        """
        Handle an event with a specific handler.

        Args:
            handler: The handler to use
            event: The event to handle
        """
        try:
            await handler.handle(event)
            logger.debug(
                "Successfully handled %s with %s", event.event_type, handler.__class__.__name__
            )
        except Exception as e:
            logger.error(
                "Error handling %s with %s: %s",
                event.event_type,
                handler.__class__.__name__,
                e,
                exc_info=True,
            )
            raise


def build_event_bus() -> EventBus:
    """
    Build the event bus configured in settings, with handlers registered.

    ``USE_RABBITMQ`` selects the RabbitMQ bus; otherwise events stay
    in process.
    """
    from core.infrastructure.event_handlers import register_event_handlers

    if getattr(settings, "USE_RABBITMQ", False):
        from core.infrastructure.rabbitmq_event_bus import RabbitMQEventBus

        bus: EventBus = RabbitMQEventBus(
            broker_url=settings.RABBITMQ_URL,
            exchange_name=settings.EVENT_EXCHANGE_NAME,
        )
    else:
        bus = InMemoryEventBus()

    register_event_handlers(bus)
    return bus
