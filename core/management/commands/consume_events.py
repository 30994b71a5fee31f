"""
Django management command to consume domain events from RabbitMQ.

Each message is handed to the process_event_from_rabbitmq Celery task.
"""

import logging

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from core.infrastructure.rabbitmq_event_bus import RabbitMQEventBus

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    """Command to run the event consumer."""

    help = "Consume domain events from RabbitMQ and dispatch them to Celery"

    def add_arguments(self, parser):
        """Add command arguments."""
        parser.add_argument(
            "--queue",
            type=str,
            default="catalog_events_queue",
            help="Queue to consume from (default: catalog_events_queue)",
        )

    def handle(self, *args, **options):
        """Execute the command."""
        if not settings.USE_RABBITMQ:
            raise CommandError("USE_RABBITMQ is disabled; events are handled in process")

        bus = RabbitMQEventBus(
            broker_url=settings.RABBITMQ_URL,
            exchange_name=settings.EVENT_EXCHANGE_NAME,
        )
        self.stdout.write(f"Consuming events from {options['queue']} (Ctrl+C to stop)")
        try:
            bus.consume_events(queue_name=options["queue"])
        except KeyboardInterrupt:
            logger.info("Event consumer stopped")
            self.stdout.write(self.style.SUCCESS("Stopped"))
