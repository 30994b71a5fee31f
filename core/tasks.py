"""
Celery tasks for background processing.

Tasks for event processing.
"""
import logging

from asgiref.sync import async_to_sync

from ProductCatalogService.celery import app

logger = logging.getLogger(__name__)


@app.task
def process_event_from_rabbitmq(event_data: dict):
    """
    Process event from RabbitMQ queue.

    Runs the handlers registered for the event type, the same set
    register_event_handlers() subscribes on the publishing side.

    Args:
        event_data: Event body as published by RabbitMQEventBus
    """
    from django.conf import settings

    from core.infrastructure.event_handlers import register_event_handlers
    from core.infrastructure.rabbitmq_event_bus import RabbitMQEventBus, ReceivedEvent

    event = ReceivedEvent.from_message(event_data)

    bus = RabbitMQEventBus(
        broker_url=settings.RABBITMQ_URL,
        exchange_name=settings.EVENT_EXCHANGE_NAME,
    )
    register_event_handlers(bus)
    handlers = bus.handlers_for(event.event_type)

    if not handlers:
        logger.warning("No handlers registered for %s", event.event_type)
        return

    for handler in handlers:
        try:
            async_to_sync(handler.handle)(event)
        except Exception as e:  # pylint: disable=broad-exception-caught
            logger.error(
                "Handler %s failed for %s: %s",
                handler.__class__.__name__,
                event.event_type,
                e,
                exc_info=True,
            )
