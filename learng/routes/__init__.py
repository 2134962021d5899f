from learng.routes.auth import router as auth_router
from learng.routes.journey import router as journey_router
from learng.routes.scenario import router as scenario_router
from learng.routes.word import router as word_router

__all__ = [
    "auth_router",
    "journey_router",
    "scenario_router",
    "word_router",
]
