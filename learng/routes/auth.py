"""Authentication routes: registration, login and the current user."""

from fastapi import APIRouter
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_201_CREATED

from learng.auth import IdentityDep
from learng.dependencies import AuthServiceDep
from learng.schemas import AuthResponse, LoginRequest, RegisterRequest, UserResponse

router = APIRouter(prefix="/auth", tags=["🔐 Auth"])

_USER_EXAMPLE = {
    "id": "3f2b8c1e-4d5a-4f1b-9a0e-2c7d6e5f4a3b",
    "email": "a@x.com",
    "role": "admin",
    "displayName": "Alice",
    "createdAt": "2025-01-01T00:00:00Z",
    "updatedAt": "2025-01-01T00:00:00Z",
}


@router.post(
    "/register",
    response_class=ORJSONResponse,
    response_model=AuthResponse,
    status_code=HTTP_201_CREATED,
    summary="Register a new account",
    description="Create an account and return it with an access token.",
    responses={
        201: {
            "content": {
                "application/json": {"example": {"user": _USER_EXAMPLE, "token": "eyJ..."}},
            },
        },
        400: {
            "description": "Bad request",
            "content": {
                "application/json": {"example": {"error": "user with this email already exists"}},
            },
        },
    },
    operation_id="auth_register",
)
async def register(body: RegisterRequest, service: AuthServiceDep) -> AuthResponse:
    """
    Register a new account.

    Parameters
    ----------
    body : RegisterRequest
        Email, password, display name and role.
    service : AuthService
        Authentication service dependency.

    Returns
    -------
    AuthResponse
        The new user (without password hash) and an access token.
    """
    return await service.register(body)


@router.post(
    "/login",
    response_class=ORJSONResponse,
    response_model=AuthResponse,
    summary="Login for access token",
    description="Authenticate with email and password to obtain an access token.",
    responses={
        200: {
            "content": {
                "application/json": {"example": {"user": _USER_EXAMPLE, "token": "eyJ..."}},
            },
        },
        401: {
            "description": "Unauthorized",
            "content": {"application/json": {"example": {"error": "invalid email or password"}}},
        },
    },
    operation_id="auth_login",
)
async def login(body: LoginRequest, service: AuthServiceDep) -> AuthResponse:
    """
    Exchange credentials for an access token.

    The failure message is the same for an unknown email and a wrong password.
    """
    return await service.login(body)


@router.get(
    "/me",
    response_class=ORJSONResponse,
    response_model=UserResponse,
    summary="Get current user",
    responses={
        200: {"content": {"application/json": {"example": _USER_EXAMPLE}}},
        401: {
            "description": "Unauthorized",
            "content": {"application/json": {"example": {"error": "Invalid or expired token"}}},
        },
        404: {
            "description": "Not found",
            "content": {"application/json": {"example": {"error": "User not found"}}},
        },
    },
    operation_id="auth_me",
)
async def read_me(identity: IdentityDep, service: AuthServiceDep) -> UserResponse:
    """Return the account behind the bearer token."""
    user = await service.get_user(identity.user_id)
    return UserResponse.model_validate(user)
