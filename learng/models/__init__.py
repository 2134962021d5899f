"""Database models for the application."""

from learng.models.journey import JourneyDB
from learng.models.scenario import ScenarioDB
from learng.models.user import UserDB
from learng.models.word import WordDB

__all__ = ["JourneyDB", "ScenarioDB", "UserDB", "WordDB"]
