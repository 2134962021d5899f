"""Scenario use cases. Any authenticated user may change any scenario."""

from typing import Any

from learng.auth.ownership import ResourceKind, lookup_or_raise
from learng.errors import InputValidationError, ResourceNotFoundError
from learng.models import ScenarioDB
from learng.monitoring import get_logger
from learng.repositories import JourneyRepository, ScenarioRepository, WordRepository
from learng.schemas import ScenarioCreate, ScenarioWithWords, WordResponse
from learng.services.patch import scenario_merger

logger = get_logger(__name__)


class ScenarioService:
    """Create, read, change and remove scenarios."""

    def __init__(
        self,
        scenarios: ScenarioRepository,
        journeys: JourneyRepository,
        words: WordRepository,
        timeout: float,
    ) -> None:
        self.scenarios = scenarios
        self.journeys = journeys
        self.words = words
        self.timeout = timeout

    async def create_scenario(self, data: ScenarioCreate) -> ScenarioDB:
        """
        Add a scenario to an existing journey.

        Raises:
            InputValidationError: If a required field is blank or the journey
                does not exist
        """
        if not data.title.strip():
            raise InputValidationError("title is required")
        if not data.journey_id:
            raise InputValidationError("journey ID is required")
        if not await self.journeys.exists(data.journey_id):
            raise InputValidationError("journey not found")

        scenario = await self.scenarios.create(data)
        logger.info("Scenario created", scenario_id=scenario.id, journey_id=scenario.journey_id)
        return scenario

    async def get_scenario(self, scenario_id: str) -> ScenarioWithWords:
        """Load a scenario with its words in display order."""
        scenario = await self._get(scenario_id)
        words = await self.words.list_by_scenario(scenario.id)
        return ScenarioWithWords.model_validate(scenario).model_copy(
            update={"words": [WordResponse.model_validate(word) for word in words]},
        )

    async def list_for_journey(self, journey_id: str) -> list[ScenarioDB]:
        """
        List a journey's scenarios in display order.

        Raises:
            ResourceNotFoundError: If the journey does not exist
        """
        if not await self.journeys.exists(journey_id):
            raise ResourceNotFoundError(ResourceKind.JOURNEY, journey_id)
        return await self.scenarios.list_by_journey(journey_id)

    async def update_scenario(self, scenario_id: str, patch: dict[str, Any]) -> ScenarioDB:
        scenario = await self._get(scenario_id)
        scenario_merger.merge(scenario, patch)
        return await self.scenarios.save(scenario)

    async def delete_scenario(self, scenario_id: str) -> None:
        """Delete a scenario and its words."""
        if not await self.scenarios.delete_cascade(scenario_id):
            raise ResourceNotFoundError(ResourceKind.SCENARIO, scenario_id)
        logger.info("Scenario deleted", scenario_id=scenario_id)

    async def _get(self, scenario_id: str) -> ScenarioDB:
        return await lookup_or_raise(
            self.scenarios.get_by_id(scenario_id),
            ResourceKind.SCENARIO,
            scenario_id,
            self.timeout,
        )
