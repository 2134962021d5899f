"""Journey use cases."""

from typing import Any

from learng.auth.ownership import OwnershipResolver, ResourceKind, lookup_or_raise
from learng.configs import DEFAULT_PAGE_LIMIT, MAX_PAGE_LIMIT
from learng.errors import InputValidationError
from learng.models import JourneyDB
from learng.monitoring import get_logger
from learng.repositories import (
    JourneyFilters,
    JourneyRepository,
    ScenarioRepository,
    WordRepository,
)
from learng.schemas import (
    JourneyCreate,
    JourneyDetail,
    JourneyListResponse,
    JourneyResponse,
    RequestIdentity,
    ScenarioWithWords,
    WordResponse,
)
from learng.services.patch import journey_merger

logger = get_logger(__name__)


def normalize_page(page: int | None, limit: int | None) -> tuple[int, int]:
    """
    Clamp pagination input.

    ``page`` below 1 becomes 1. ``limit`` outside 1..MAX_PAGE_LIMIT falls
    back to the default rather than to the nearest bound.
    """
    page = page if page is not None and page >= 1 else 1
    if limit is None or not 1 <= limit <= MAX_PAGE_LIMIT:
        limit = DEFAULT_PAGE_LIMIT
    return page, limit


class JourneyService:
    """Create, read, change and remove journeys."""

    def __init__(
        self,
        journeys: JourneyRepository,
        scenarios: ScenarioRepository,
        words: WordRepository,
        resolver: OwnershipResolver,
    ) -> None:
        self.journeys = journeys
        self.scenarios = scenarios
        self.words = words
        self.resolver = resolver

    async def list_journeys(
        self,
        filters: JourneyFilters,
        page: int | None,
        limit: int | None,
    ) -> JourneyListResponse:
        page, limit = normalize_page(page, limit)
        items, total = await self.journeys.list_journeys(filters, page, limit)
        return JourneyListResponse(
            journeys=[JourneyResponse.model_validate(item) for item in items],
            total=total,
            page=page,
            limit=limit,
        )

    async def get_journey(self, journey_id: str) -> JourneyDetail:
        """
        Load a journey with its scenarios and their words, in display order.

        Raises:
            ResourceNotFoundError: If the journey does not exist
        """
        journey = await self._get(journey_id)
        scenarios = await self.scenarios.list_by_journey(journey.id)
        words = await self.words.list_by_scenarios([scenario.id for scenario in scenarios])

        tree = [
            ScenarioWithWords.model_validate(scenario).model_copy(
                update={
                    "words": [WordResponse.model_validate(w) for w in words.get(scenario.id, [])],
                },
            )
            for scenario in scenarios
        ]
        return JourneyDetail.model_validate(journey).model_copy(
            update={
                "scenarios": tree,
                "scenario_count": len(tree),
                "word_count": sum(len(scenario.words) for scenario in tree),
            },
        )

    async def create_journey(self, identity: RequestIdentity, data: JourneyCreate) -> JourneyDB:
        """
        Create a draft journey owned by the caller.

        Raises:
            InputValidationError: If a required field is blank
        """
        if not data.title.strip():
            raise InputValidationError("title is required")
        if not data.source_language.strip():
            raise InputValidationError("source language is required")
        if not data.target_language.strip():
            raise InputValidationError("target language is required")

        journey = await self.journeys.create(data, created_by=identity.user_id, status="draft")
        logger.info("Journey created", journey_id=journey.id)
        return journey

    async def update_journey(
        self,
        identity: RequestIdentity,
        journey_id: str,
        patch: dict[str, Any],
    ) -> JourneyDB:
        """
        Apply a partial update. Only the creator may do this.

        Raises:
            ResourceNotFoundError: If the journey does not exist
            PermissionDeniedError: If the caller is not the creator
            PatchValidationError: If the patch is invalid
        """
        journey = await self.resolver.ensure_journey_owner(identity, journey_id, "update")
        journey_merger.merge(journey, patch)
        return await self.journeys.save(journey)

    async def delete_journey(self, identity: RequestIdentity, journey_id: str) -> None:
        """
        Delete a journey and everything below it. Only the creator may do this.

        Raises:
            ResourceNotFoundError: If the journey does not exist
            PermissionDeniedError: If the caller is not the creator
        """
        await self.resolver.ensure_journey_owner(identity, journey_id, "delete")
        await self.journeys.delete_cascade(journey_id)
        logger.info("Journey deleted", journey_id=journey_id)

    async def _get(self, journey_id: str) -> JourneyDB:
        return await lookup_or_raise(
            self.journeys.get_by_id(journey_id),
            ResourceKind.JOURNEY,
            journey_id,
            self.resolver.timeout,
        )
