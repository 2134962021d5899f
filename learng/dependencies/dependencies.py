# learng/dependencies/dependencies.py

"""
Request-scoped wiring.

Every provider here is a FastAPI dependency. FastAPI caches a dependency per
request, so all repositories of one request share one session and one
transaction.
"""

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from learng.auth import OwnershipResolver, get_token_codec
from learng.configs import Settings
from learng.db import get_session
from learng.managers import TokenCodec
from learng.repositories import (
    JourneyRepository,
    ScenarioRepository,
    UserRepository,
    WordRepository,
)
from learng.services import AuthService, JourneyService, ScenarioService, WordService

SessionDep = Annotated[AsyncSession, Depends(get_session)]


def get_settings(request: Request) -> Settings:
    """Return the settings the application was built with."""
    return request.app.state.settings


def get_lookup_timeout(app_settings: Annotated[Settings, Depends(get_settings)]) -> float:
    return app_settings.LOOKUP_TIMEOUT_SECONDS


TimeoutDep = Annotated[float, Depends(get_lookup_timeout)]


def get_user_repository(session: SessionDep) -> UserRepository:
    return UserRepository(session)


def get_journey_repository(session: SessionDep) -> JourneyRepository:
    return JourneyRepository(session)


def get_scenario_repository(session: SessionDep) -> ScenarioRepository:
    return ScenarioRepository(session)


def get_word_repository(session: SessionDep) -> WordRepository:
    return WordRepository(session)


UserRepoDep = Annotated[UserRepository, Depends(get_user_repository)]
JourneyRepoDep = Annotated[JourneyRepository, Depends(get_journey_repository)]
ScenarioRepoDep = Annotated[ScenarioRepository, Depends(get_scenario_repository)]
WordRepoDep = Annotated[WordRepository, Depends(get_word_repository)]


def get_ownership_resolver(
    journeys: JourneyRepoDep,
    scenarios: ScenarioRepoDep,
    words: WordRepoDep,
    timeout: TimeoutDep,
) -> OwnershipResolver:
    return OwnershipResolver(journeys, scenarios, words, timeout)


ResolverDep = Annotated[OwnershipResolver, Depends(get_ownership_resolver)]


def get_auth_service(
    repo: UserRepoDep,
    codec: Annotated[TokenCodec, Depends(get_token_codec)],
) -> AuthService:
    """
    Dependency to get AuthService.

    Parameters
    ----------
    repo : UserRepository
        Repository bound to the request session.
    codec : TokenCodec
        Application token codec.

    Returns
    -------
    AuthService
        Service instance for this request.
    """
    return AuthService(repo, codec)


def get_journey_service(
    journeys: JourneyRepoDep,
    scenarios: ScenarioRepoDep,
    words: WordRepoDep,
    resolver: ResolverDep,
) -> JourneyService:
    return JourneyService(journeys, scenarios, words, resolver)


def get_scenario_service(
    scenarios: ScenarioRepoDep,
    journeys: JourneyRepoDep,
    words: WordRepoDep,
    timeout: TimeoutDep,
) -> ScenarioService:
    return ScenarioService(scenarios, journeys, words, timeout)


def get_word_service(
    words: WordRepoDep,
    scenarios: ScenarioRepoDep,
    timeout: TimeoutDep,
) -> WordService:
    return WordService(words, scenarios, timeout)


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
JourneyServiceDep = Annotated[JourneyService, Depends(get_journey_service)]
ScenarioServiceDep = Annotated[ScenarioService, Depends(get_scenario_service)]
WordServiceDep = Annotated[WordService, Depends(get_word_service)]
