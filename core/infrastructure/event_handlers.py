"""
Event handlers for domain events.

These handlers process domain events asynchronously for side effects
like audit logging.
"""

import logging

from brands.domain.events import BrandCreated
from core.domain.events import DomainEvent, EventBus, EventHandler

logger = logging.getLogger(__name__)


class AuditLogEventHandler(EventHandler):
    """
    Event handler for audit logging.

    Writes every domain event as a structured log line.
    """

    async def handle(self, event: DomainEvent) -> None:
        """
        Handle domain event for audit logging.

        Args:
            event: Domain event to log
        """
        logger.info(
            "Audit log: %s - %s",
            event.event_type,
            event.aggregate_id,
            extra={
                "event_id": str(event.event_id),
                "event_type": event.event_type,
                "aggregate_id": event.aggregate_id,
                "occurred_at": event.occurred_at.isoformat(),
                "event_data": event.payload(),
            },
        )


def register_event_handlers(bus: EventBus) -> None:
    """Register all event handlers with the given event bus."""
    audit_handler = AuditLogEventHandler()

    bus.subscribe(BrandCreated, audit_handler)

    logger.info("Event handlers registered on %s", bus.__class__.__name__)
