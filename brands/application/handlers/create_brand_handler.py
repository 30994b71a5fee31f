"""
CreateBrandHandler.

Handles the create brand command: validate, persist, announce.
"""

import asyncio
import logging

from brands.application.commands.create_brand import CreateBrandCommand
from brands.application.dto.brand_dto import BrandDTO
from brands.domain.brand import Brand
from brands.domain.events import BrandCreated
from brands.domain.services import BrandValidator
from brands.ports.brand_repository import BrandRepository
from core.domain.events import EventPublisher
from core.domain.exceptions import ValidationError
from core.metrics import brands_created_total, event_publication_failures_total

logger = logging.getLogger(__name__)

DEFAULT_PUBLISH_TIMEOUT_SECONDS = 2.0


class CreateBrandHandler:
    """Handler for CreateBrandCommand."""

    def __init__(
        self,
        brand_repository: BrandRepository,
        event_publisher: EventPublisher,
        publish_timeout: float = DEFAULT_PUBLISH_TIMEOUT_SECONDS,
    ):
        """Initialize handler with its collaborators."""
        self.brand_repository = brand_repository
        self.event_publisher = event_publisher
        self.publish_timeout = publish_timeout

    async def handle(self, command: CreateBrandCommand) -> BrandDTO:
        """
        Handle create brand command.

        Args:
            command: CreateBrandCommand

        Returns:
            BrandDTO describing the persisted brand

        Raises:
            ValidationError: If any field violates its constraints
            DuplicateBrandNameError: If the name is already taken
            StoreUnavailableError: If the store cannot perform the write
        """
        errors = BrandValidator.validate(
            name=command.name,
            description=command.description,
            website=command.website,
            logo_url=command.logo_url,
        )
        if errors:
            logger.info("Rejected brand creation: %s", errors)
            raise ValidationError(errors)

        brand = Brand.create(
            name=command.name,
            description=command.description,
            website=command.website,
            logo_url=command.logo_url,
        )

        saved = await self.brand_repository.save(brand)
        brands_created_total.inc()
        logger.info("Brand %s created", saved.id, extra={"brand_id": saved.id})

        await self._publish(BrandCreated.from_brand(saved))

        return BrandDTO.from_entity(saved)

    async def _publish(self, event: BrandCreated) -> None:
        """Hand the event to the publisher; failures never reach the caller."""
        try:
            await asyncio.wait_for(self.event_publisher.publish(event), timeout=self.publish_timeout)
        except asyncio.TimeoutError:
            event_publication_failures_total.labels(event_type=event.event_type).inc()
            logger.warning(
                "Publishing %s for brand %s timed out after %ss",
                event.event_type,
                event.brand_id,
                self.publish_timeout,
            )
        except Exception as e:  # pylint: disable=broad-exception-caught
            event_publication_failures_total.labels(event_type=event.event_type).inc()
            logger.error(
                "Failed to publish %s for brand %s: %s",
                event.event_type,
                event.brand_id,
                e,
                exc_info=True,
            )
