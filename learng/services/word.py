"""Word use cases. Any authenticated user may change any word."""

from typing import Any

from learng.auth.ownership import ResourceKind, lookup_or_raise
from learng.configs import GENERATION_METHODS
from learng.errors import InputValidationError, ResourceNotFoundError
from learng.models import WordDB
from learng.monitoring import get_logger
from learng.repositories import ScenarioRepository, WordRepository
from learng.schemas import WordCreate
from learng.services.patch import word_merger

logger = get_logger(__name__)

DEFAULT_GENERATION_METHOD = "manual"


class WordService:
    """Create, read, change and remove words."""

    def __init__(
        self,
        words: WordRepository,
        scenarios: ScenarioRepository,
        timeout: float,
    ) -> None:
        self.words = words
        self.scenarios = scenarios
        self.timeout = timeout

    async def create_word(self, data: WordCreate) -> WordDB:
        """
        Add a word to an existing scenario.

        Raises:
            InputValidationError: If a required field is blank, the generation
                method is unknown or the scenario does not exist
        """
        if not data.target_text.strip():
            raise InputValidationError("target text is required")
        if not data.scenario_id:
            raise InputValidationError("scenario ID is required")

        method = data.generation_method or DEFAULT_GENERATION_METHOD
        if method not in GENERATION_METHODS:
            raise InputValidationError("invalid generation method")
        if not await self.scenarios.exists(data.scenario_id):
            raise InputValidationError("scenario not found")

        word = await self.words.create(data, generation_method=method)
        logger.info("Word created", word_id=word.id, scenario_id=word.scenario_id)
        return word

    async def get_word(self, word_id: str) -> WordDB:
        return await lookup_or_raise(
            self.words.get_by_id(word_id),
            ResourceKind.WORD,
            word_id,
            self.timeout,
        )

    async def list_for_scenario(self, scenario_id: str) -> list[WordDB]:
        """
        List a scenario's words in display order.

        Raises:
            ResourceNotFoundError: If the scenario does not exist
        """
        if not await self.scenarios.exists(scenario_id):
            raise ResourceNotFoundError(ResourceKind.SCENARIO, scenario_id)
        return await self.words.list_by_scenario(scenario_id)

    async def update_word(self, word_id: str, patch: dict[str, Any]) -> WordDB:
        word = await self.get_word(word_id)
        word_merger.merge(word, patch)
        return await self.words.save(word)

    async def delete_word(self, word_id: str) -> None:
        if not await self.words.delete(word_id):
            raise ResourceNotFoundError(ResourceKind.WORD, word_id)
        logger.info("Word deleted", word_id=word_id)
