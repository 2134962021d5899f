from learng.schemas.auth import (
    AuthResponse,
    IdentityClaims,
    LoginRequest,
    RegisterRequest,
    RequestIdentity,
)
from learng.schemas.common import (
    UNAUTHORIZED_RESPONSES,
    ErrorResponse,
    HealthResponse,
    SuccessResponse,
)
from learng.schemas.journey import (
    JourneyCreate,
    JourneyDetail,
    JourneyListResponse,
    JourneyResponse,
)
from learng.schemas.scenario import ScenarioCreate, ScenarioResponse, ScenarioWithWords
from learng.schemas.user import UserResponse
from learng.schemas.word import WordCreate, WordResponse

__all__ = [
    "UNAUTHORIZED_RESPONSES",
    "AuthResponse",
    "ErrorResponse",
    "HealthResponse",
    "IdentityClaims",
    "JourneyCreate",
    "JourneyDetail",
    "JourneyListResponse",
    "JourneyResponse",
    "LoginRequest",
    "RegisterRequest",
    "RequestIdentity",
    "ScenarioCreate",
    "ScenarioResponse",
    "ScenarioWithWords",
    "SuccessResponse",
    "UserResponse",
    "WordCreate",
    "WordResponse",
]
