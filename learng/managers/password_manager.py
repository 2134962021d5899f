"""
Password hashing module using Argon2 with passlib's CryptContext.

Hashing is CPU bound, so the module-level coroutines run it on a thread pool
to keep the event loop responsive.
"""

from asyncio import get_running_loop
from concurrent.futures import ThreadPoolExecutor

from passlib.context import CryptContext
from passlib.exc import InternalBackendError

from learng.configs import CONFIG_MAP, settings
from learng.decorators.with_retry import with_retry
from learng.errors import PasswordHashingError
from learng.monitoring import get_logger

executor = ThreadPoolExecutor(max_workers=4)
logger = get_logger(__name__)


class PasswordHasher:
    """
    A password hashing and verification manager using the Argon2id algorithm.

    This class wraps passlib's CryptContext to provide:
    - salted one-way hashing with Argon2id
    - verification that never raises on a bad stored hash
    - a dummy verification for unknown accounts
    """

    def __init__(self, level: str = settings.PASSWORD_SECURITY_LEVEL) -> None:
        """
        Initialize the PasswordHasher with Argon2id as the primary scheme.

        Args:
            level: Key of ``CONFIG_MAP`` selecting the Argon2 cost parameters.
        """
        self.level = level
        config = CONFIG_MAP[level]
        self.pwd_context = CryptContext(
            schemes=["argon2", "pbkdf2_sha256"],
            deprecated="pbkdf2_sha256",
            argon2__memory_cost=config.memory_cost,
            argon2__time_cost=config.time_cost,
            argon2__parallelism=config.parallelism,
        )
        logger.info("PasswordHasher initialized", level=level)

    def hash(self, password: str) -> str:
        """
        Hash a plaintext password using Argon2id.

        Args:
            password: The plaintext password to hash

        Returns:
            str: The hashed password in Argon2id format

        Raises:
            ValueError: If password is empty
            PasswordHashingError: If the backend fails

        Example:
            >>> hasher = PasswordHasher("low")
            >>> hasher.hash("Passw0rd")  # $argon2id$v=19$m=8192,t=1,p=1$...
        """
        if not password:
            mssg = "Password cannot be empty"
            raise ValueError(mssg)

        try:
            return self.pwd_context.hash(password)
        except (ValueError, InternalBackendError, UnicodeError) as e:
            logger.exception("Error hashing password", level=self.level)
            mssg = "Failed to hash password"
            raise PasswordHashingError(mssg) from e

    def verify(self, password: str, hashed_password: str) -> bool:
        """
        Verify a plaintext password against a hashed password.

        Returns ``False`` for an empty or unrecognised stored hash instead of
        raising.
        """
        if not isinstance(hashed_password, str) or not hashed_password.strip():
            logger.warning("Invalid hash format provided")
            return False

        try:
            return self.pwd_context.verify(password, hashed_password)
        except (ValueError, TypeError):
            logger.warning("Stored hash is corrupted or in an unknown format")
            return False
        except InternalBackendError as e:
            logger.exception("Password backend failure during verification")
            mssg = "Failed to verify password"
            raise PasswordHashingError(mssg) from e

    def dummy_verify(self) -> bool:
        """Spend the time of a real verification; always returns False."""
        self.pwd_context.dummy_verify()
        return False


_default_hasher: PasswordHasher | None = None


def get_password_hasher() -> PasswordHasher:
    """
    Get or create the default password hasher instance.

    Returns:
        PasswordHasher: The process-wide hasher built from settings
    """
    global _default_hasher  # noqa: PLW0603
    if _default_hasher is None:
        _default_hasher = PasswordHasher(settings.PASSWORD_SECURITY_LEVEL)
    return _default_hasher


@with_retry(base_delay=0.5, max_delay=5, exec_retry=PasswordHashingError)
async def hash_password(password: str) -> str:
    """Hash ``password`` on the worker pool with the default hasher."""
    return await get_running_loop().run_in_executor(
        executor,
        get_password_hasher().hash,
        password,
    )


async def verify_password(password: str, hashed_password: str) -> bool:
    """Verify ``password`` against ``hashed_password`` on the worker pool."""
    return await get_running_loop().run_in_executor(
        executor,
        get_password_hasher().verify,
        password,
        hashed_password,
    )


async def dummy_verify_password() -> bool:
    """Run a throwaway verification so unknown accounts cost the same time."""
    return await get_running_loop().run_in_executor(
        executor,
        get_password_hasher().dummy_verify,
    )
