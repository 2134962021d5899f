from learng.dependencies.dependencies import (
    AuthServiceDep,
    JourneyServiceDep,
    ResolverDep,
    ScenarioServiceDep,
    SessionDep,
    WordServiceDep,
    get_auth_service,
    get_journey_service,
    get_ownership_resolver,
    get_scenario_service,
    get_settings,
    get_word_service,
)

__all__ = [
    "AuthServiceDep",
    "JourneyServiceDep",
    "ResolverDep",
    "ScenarioServiceDep",
    "SessionDep",
    "WordServiceDep",
    "get_auth_service",
    "get_journey_service",
    "get_ownership_resolver",
    "get_scenario_service",
    "get_settings",
    "get_word_service",
]
