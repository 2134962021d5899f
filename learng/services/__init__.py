from learng.services.auth import AuthService
from learng.services.journey import JourneyService, normalize_page
from learng.services.patch import (
    JOURNEY_PATCH_RULES,
    SCENARIO_PATCH_RULES,
    WORD_PATCH_RULES,
    FieldKind,
    FieldRule,
    PatchMerger,
    journey_merger,
    scenario_merger,
    word_merger,
)
from learng.services.scenario import ScenarioService
from learng.services.word import WordService

__all__ = [
    "JOURNEY_PATCH_RULES",
    "SCENARIO_PATCH_RULES",
    "WORD_PATCH_RULES",
    "AuthService",
    "FieldKind",
    "FieldRule",
    "JourneyService",
    "PatchMerger",
    "ScenarioService",
    "WordService",
    "journey_merger",
    "normalize_page",
    "scenario_merger",
    "word_merger",
]
