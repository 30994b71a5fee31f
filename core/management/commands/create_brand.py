"""
Django management command to create a brand from the shell.

Runs the same CreateBrandHandler as the HTTP endpoint, so validation,
events and metrics behave identically.
"""

from asgiref.sync import async_to_sync
from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from brands.application.commands.create_brand import CreateBrandCommand
from brands.application.handlers.create_brand_handler import CreateBrandHandler
from brands.infrastructure.repositories.django_brand_repository import DjangoBrandRepository
from core.domain.exceptions import DomainException, ValidationError
from core.infrastructure.events import build_event_bus


class Command(BaseCommand):
    """Command to create a brand."""

    help = "Create a brand and publish BrandCreated"

    def add_arguments(self, parser):
        """Add command arguments."""
        parser.add_argument("--name", type=str, required=True, help="Brand name")
        parser.add_argument("--description", type=str, default=None, help="Brand description")
        parser.add_argument(
            "--website", type=str, default=None, help="Absolute URI, e.g. https://example.com"
        )
        parser.add_argument("--logo-url", type=str, default=None, help="Logo URL or path")

    def handle(self, *args, **options):
        """Execute the command."""
        handler = CreateBrandHandler(
            brand_repository=DjangoBrandRepository(),
            event_publisher=build_event_bus(),
            publish_timeout=settings.EVENT_PUBLISH_TIMEOUT_SECONDS,
        )
        command = CreateBrandCommand(
            name=options["name"],
            description=options["description"],
            website=options["website"],
            logo_url=options["logo_url"],
        )

        try:
            brand = async_to_sync(handler.handle)(command)
        except ValidationError as e:
            details = "; ".join(
                f"{field}: {', '.join(messages)}" for field, messages in e.errors.items()
            )
            raise CommandError(f"{e.message}: {details}") from e
        except DomainException as e:
            raise CommandError(e.message) from e

        self.stdout.write(self.style.SUCCESS(f"Created brand '{brand.name}' (id={brand.id})"))
