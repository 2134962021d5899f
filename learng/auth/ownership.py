"""Resolve who owns a node of the journey -> scenario -> word tree."""

from asyncio import timeout as async_timeout
from collections.abc import Awaitable
from dataclasses import dataclass
from enum import StrEnum

from learng.errors import LookupTimeoutError, PermissionDeniedError, ResourceNotFoundError
from learng.models import JourneyDB, ScenarioDB, WordDB
from learng.monitoring import get_logger
from learng.repositories import JourneyRepository, ScenarioRepository, WordRepository
from learng.schemas import RequestIdentity

logger = get_logger(__name__)


class ResourceKind(StrEnum):
    JOURNEY = "journey"
    SCENARIO = "scenario"
    WORD = "word"


@dataclass(frozen=True)
class ResourceRef:
    """Points at one node of the content tree."""

    kind: ResourceKind
    id: str


async def lookup_or_raise[T](
    query: Awaitable[T | None],
    kind: ResourceKind,
    record_id: str,
    timeout: float,
) -> T:
    """
    Await a single-record lookup with a deadline.

    Parameters
    ----------
    query : Awaitable[T | None]
        Repository call returning the record or None.
    kind : ResourceKind
        What is being looked up, for the not-found message.
    record_id : str
        Id being looked up.
    timeout : float
        Deadline in seconds.

    Returns
    -------
    T
        The record.

    Raises
    ------
    ResourceNotFoundError
        If the record does not exist.
    LookupTimeoutError
        If the lookup does not finish in time.
    """
    try:
        async with async_timeout(timeout):
            record = await query
    except TimeoutError as e:
        logger.error("Lookup timed out", kind=kind.value, id=record_id, timeout=timeout)
        raise LookupTimeoutError from e

    if record is None:
        raise ResourceNotFoundError(kind.value, record_id)
    return record


class OwnershipResolver:
    """
    Walk a resource up to its journey and compare the journey's creator.

    Only journeys record an owner. A scenario is one hop from its journey and
    a word two hops. Each lookup is bounded by ``timeout`` seconds.
    """

    def __init__(
        self,
        journeys: JourneyRepository,
        scenarios: ScenarioRepository,
        words: WordRepository,
        timeout: float,
    ) -> None:
        self.journeys = journeys
        self.scenarios = scenarios
        self.words = words
        self.timeout = timeout

    async def owns(self, identity: RequestIdentity, ref: ResourceRef) -> bool:
        """
        Tell whether ``identity`` created the journey that roots ``ref``.

        Raises
        ------
        ResourceNotFoundError
            If ``ref`` or any ancestor does not exist.
        LookupTimeoutError
            If a lookup exceeds the configured timeout.
        """
        journey = await self.root_journey(ref)
        return journey.created_by == identity.user_id

    async def root_journey(self, ref: ResourceRef) -> JourneyDB:
        """Return the journey at the top of ``ref``'s chain."""
        journey_id = ref.id

        if ref.kind is ResourceKind.WORD:
            word: WordDB = await lookup_or_raise(
                self.words.get_by_id(ref.id),
                ResourceKind.WORD,
                ref.id,
                self.timeout,
            )
            ref = ResourceRef(ResourceKind.SCENARIO, word.scenario_id)

        if ref.kind is ResourceKind.SCENARIO:
            scenario: ScenarioDB = await lookup_or_raise(
                self.scenarios.get_by_id(ref.id),
                ResourceKind.SCENARIO,
                ref.id,
                self.timeout,
            )
            journey_id = scenario.journey_id

        return await lookup_or_raise(
            self.journeys.get_by_id(journey_id),
            ResourceKind.JOURNEY,
            journey_id,
            self.timeout,
        )

    async def ensure_journey_owner(
        self,
        identity: RequestIdentity,
        journey_id: str,
        action: str,
    ) -> JourneyDB:
        """
        Load a journey the caller is about to change.

        Existence is checked first so a missing journey is a 404, never a 403.

        Returns
        -------
        JourneyDB
            The journey, owned by ``identity``.

        Raises
        ------
        ResourceNotFoundError
            If the journey does not exist.
        PermissionDeniedError
            If the caller did not create it.
        """
        journey = await self.root_journey(ResourceRef(ResourceKind.JOURNEY, journey_id))
        if journey.created_by != identity.user_id:
            logger.warning("Ownership check failed", journey_id=journey_id, action=action)
            raise PermissionDeniedError(action)
        return journey
