from learng.repositories.base import BaseRepository
from learng.repositories.journey import JourneyFilters, JourneyRepository
from learng.repositories.scenario import ScenarioRepository
from learng.repositories.user import UserRepository
from learng.repositories.word import WordRepository

__all__ = [
    "BaseRepository",
    "JourneyFilters",
    "JourneyRepository",
    "ScenarioRepository",
    "UserRepository",
    "WordRepository",
]
