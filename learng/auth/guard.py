"""
Request authentication.

``get_identity`` is the single entry point every protected router depends on.
It turns the ``Authorization`` header into a typed ``RequestIdentity`` or
stops the request with a 401 before any handler code runs.
"""

from collections.abc import Awaitable, Callable
from typing import Annotated

from fastapi import Depends, Header, Request

from learng.errors import (
    InsufficientRoleError,
    InvalidAuthorizationHeaderError,
    MissingAuthorizationHeaderError,
)
from learng.managers import TokenCodec
from learng.monitoring import bind_user_id, get_logger
from learng.schemas import RequestIdentity

logger = get_logger(__name__)

BEARER_SCHEME = "Bearer"


def get_token_codec(request: Request) -> TokenCodec:
    """Return the codec the application was built with."""
    return request.app.state.token_codec


def extract_bearer_token(authorization: str | None) -> str:
    """
    Pull the token out of an ``Authorization`` header value.

    Parameters
    ----------
    authorization : str | None
        Raw header value.

    Returns
    -------
    str
        The token part of ``Bearer <token>``.

    Raises
    ------
    MissingAuthorizationHeaderError
        If the header is absent or empty.
    InvalidAuthorizationHeaderError
        If the scheme is not ``Bearer`` or no token follows it.
    """
    if not authorization:
        raise MissingAuthorizationHeaderError

    scheme, _, token = authorization.partition(" ")
    if scheme != BEARER_SCHEME or not token.strip():
        raise InvalidAuthorizationHeaderError

    return token.strip()


async def get_identity(
    codec: Annotated[TokenCodec, Depends(get_token_codec)],
    authorization: Annotated[str | None, Header()] = None,
) -> RequestIdentity:
    """
    Authenticate the request from its bearer token.

    Parameters
    ----------
    codec : TokenCodec
        Application token codec.
    authorization : str | None
        ``Authorization`` header.

    Returns
    -------
    RequestIdentity
        The caller's user id and role.
    """
    token = extract_bearer_token(authorization)
    claims = codec.decode(token)
    identity = RequestIdentity.from_claims(claims)
    bind_user_id(identity.user_id)
    return identity


IdentityDep = Annotated[RequestIdentity, Depends(get_identity)]


def require_role(role: str) -> Callable[..., Awaitable[RequestIdentity]]:
    """
    Create a dependency that admits only callers with ``role``.

    Runs after ``get_identity``, so an unauthenticated request still gets a 401.

    Example:
        @router.delete("/purge", dependencies=[Depends(require_role("admin"))])
        async def purge() -> None:
            ...
    """

    async def role_checker(identity: IdentityDep) -> RequestIdentity:
        if identity.role != role:
            logger.warning(
                "Role check failed",
                required_role=role,
                actual_role=identity.role,
            )
            raise InsufficientRoleError
        return identity

    return role_checker
