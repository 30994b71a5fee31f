"""
Django management command to issue an API key.

The raw key is printed once and never stored.
"""

from datetime import timedelta

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError
from django.utils import timezone

from core.infrastructure.models import ApiKey


class Command(BaseCommand):
    """Command to create an API key."""

    help = "Create an API key with the given roles and print the raw key"

    def add_arguments(self, parser):
        """Add command arguments."""
        parser.add_argument(
            "--name",
            type=str,
            required=True,
            help="Who or what holds the key",
        )
        parser.add_argument(
            "--role",
            dest="roles",
            action="append",
            default=None,
            help=f"Role to grant; repeatable (default: {settings.PRODUCT_MANAGER_ROLE})",
        )
        parser.add_argument(
            "--expires-in-days",
            type=int,
            default=None,
            help="Expire the key after this many days (default: never)",
        )

    def handle(self, *args, **options):
        """Execute the command."""
        roles = options["roles"] or [settings.PRODUCT_MANAGER_ROLE]
        expires_at = None
        if options["expires_in_days"] is not None:
            if options["expires_in_days"] <= 0:
                raise CommandError("--expires-in-days must be positive")
            expires_at = timezone.now() + timedelta(days=options["expires_in_days"])

        api_key = ApiKey(name=options["name"], roles=roles, expires_at=expires_at)
        api_key.save()

        self.stdout.write(self.style.SUCCESS(f"Created API key '{api_key.name}' ({api_key.id})"))
        self.stdout.write(f"Roles: {', '.join(roles)}")
        self.stdout.write(self.style.WARNING("Save this key - it won't be shown again:"))
        self.stdout.write(api_key._raw_key)  # pylint: disable=protected-access
