"""Access token codec built on python-jose (HS256 JWT)."""

from collections.abc import Callable
from datetime import datetime, timedelta

from jose import JWTError, jws, jwt
from jose.exceptions import JWSError
from orjson import JSONDecodeError, loads
from pydantic import ValidationError

from learng.errors import (
    ConfigurationError,
    TokenExpiredError,
    TokenMalformedError,
    TokenSignatureError,
)
from learng.monitoring import get_logger
from learng.schemas import IdentityClaims
from learng.utils.helpers import utc_now

logger = get_logger(__name__)

ACCESS_TOKEN_TYPE = "access"


class TokenCodec:
    """
    Issue and verify stateless access tokens.

    The signing secret and lifetime are passed in, never read from a global,
    so each application (and each test) owns its codec.

    Parameters
    ----------
    secret : str
        HMAC signing secret. Must not be empty.
    ttl : timedelta
        Lifetime of issued tokens.
    algorithm : str
        JWS algorithm, ``HS256`` by default.
    clock : Callable[[], datetime]
        Source of the current time when a call does not pass ``now``.
    """

    def __init__(
        self,
        secret: str,
        ttl: timedelta = timedelta(hours=24),
        algorithm: str = "HS256",
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        if not secret:
            mssg = "JWT secret must not be empty"
            raise ConfigurationError(mssg)
        self._secret = secret
        self.ttl = ttl
        self.algorithm = algorithm
        self._clock = clock

    def issue(self, subject: str, role: str, now: datetime | None = None) -> str:
        """
        Create a signed access token for ``subject``.

        Parameters
        ----------
        subject : str
            User id carried in the ``sub`` claim.
        role : str
            Role carried in the ``role`` claim.
        now : datetime | None
            Issue time; defaults to the codec clock.

        Returns
        -------
        str
            Compact JWS string.
        """
        issued_at = now or self._clock()
        claims = {
            "sub": subject,
            "role": role,
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + self.ttl).timestamp()),
            "type": ACCESS_TOKEN_TYPE,
        }
        return jwt.encode(claims, self._secret, algorithm=self.algorithm)

    def decode(self, token: str, now: datetime | None = None) -> IdentityClaims:
        """
        Verify ``token`` and return its claims.

        Checks run in a fixed order: header structure, signature, claim
        shape, expiry. The first failing check decides the error.

        Raises
        ------
        TokenMalformedError
            The token cannot be parsed or its claims are missing or ill-typed.
        TokenSignatureError
            The signature does not match the signed content.
        TokenExpiredError
            ``now`` is past the ``exp`` claim.
        """
        # A header that no longer parses is malformed, not signature-invalid.
        # Header bytes that still parse fall through to the signature check.
        try:
            jwt.get_unverified_header(token)
        except JWTError as e:
            raise self._fail(TokenMalformedError(), e) from e

        try:
            payload = jws.verify(token, self._secret, algorithms=[self.algorithm])
        except JWSError as e:
            raise self._fail(TokenSignatureError(), e) from e

        try:
            data = loads(payload)
            if not isinstance(data, dict):
                mssg = "Token payload is not a JSON object"
                raise TypeError(mssg)  # noqa: TRY301
            if data.get("type", ACCESS_TOKEN_TYPE) != ACCESS_TOKEN_TYPE:
                mssg = "Token is not an access token"
                raise TypeError(mssg)  # noqa: TRY301
            claims = IdentityClaims.model_validate(data)
        except (JSONDecodeError, TypeError, ValidationError) as e:
            raise self._fail(TokenMalformedError(), e) from e

        current = (now or self._clock()).timestamp()
        if current > claims.exp:
            raise self._fail(TokenExpiredError(), None)

        return claims

    @staticmethod
    def _fail[E: Exception](error: E, cause: Exception | None) -> E:
        logger.warning(
            "Token rejected",
            reason=getattr(error, "reason", "invalid"),
            cause=str(cause) if cause else None,
        )
        return error
