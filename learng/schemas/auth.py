"""Authentication request, response and identity schemas."""

from pydantic import BaseModel, ConfigDict, Field

from learng.schemas.user import UserResponse


class RegisterRequest(BaseModel):
    """Registration body. Business rules are checked by the auth service."""

    model_config = ConfigDict(populate_by_name=True)

    email: str = Field(default="", examples=["a@x.com"])
    password: str = Field(default="", examples=["Passw0rd"])
    display_name: str = Field(default="", alias="displayName", examples=["Alice"])
    role: str = Field(default="", examples=["admin", "learner"])


class LoginRequest(BaseModel):
    """Login body."""

    email: str = Field(default="", examples=["a@x.com"])
    password: str = Field(default="", examples=["Passw0rd"])


class AuthResponse(BaseModel):
    """User record plus a freshly issued access token."""

    user: UserResponse
    token: str


class IdentityClaims(BaseModel):
    """Decoded access token payload."""

    model_config = ConfigDict(frozen=True, strict=True)

    sub: str = Field(min_length=1)
    role: str
    iat: int
    exp: int


class RequestIdentity(BaseModel):
    """The authenticated caller, as attached to a request by the guard."""

    model_config = ConfigDict(frozen=True)

    user_id: str
    role: str

    @classmethod
    def from_claims(cls, claims: IdentityClaims) -> "RequestIdentity":
        return cls(user_id=claims.sub, role=claims.role)
