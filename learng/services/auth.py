"""Authentication service: registration, login and account lookup."""

from learng.errors import (
    DuplicateEntryError,
    InputValidationError,
    InvalidCredentialsError,
    UserNotFoundError,
)
from learng.managers import TokenCodec, dummy_verify_password, hash_password, verify_password
from learng.models import UserDB
from learng.monitoring import get_logger
from learng.repositories import UserRepository
from learng.schemas import AuthResponse, LoginRequest, RegisterRequest, UserResponse
from learng.utils.validators import is_valid_email, is_valid_role, password_problem

logger = get_logger(__name__)

DUPLICATE_EMAIL_MESSAGE = "user with this email already exists"


class AuthService:
    """Service for account creation and credential checks."""

    def __init__(self, user_repo: UserRepository, codec: TokenCodec) -> None:
        """
        Initialize the auth service.

        Args:
            user_repo: User repository for database operations
            codec: Token codec used to issue access tokens
        """
        self.user_repo = user_repo
        self.codec = codec

    async def register(self, request: RegisterRequest) -> AuthResponse:
        """
        Create an account and sign the new user in.

        Args:
            request: Registration data

        Returns:
            AuthResponse: The stored user and an access token

        Raises:
            InputValidationError: For a bad email, weak password, unknown role
                or an email that is already registered
        """
        if not is_valid_email(request.email):
            raise InputValidationError("invalid email format")
        if problem := password_problem(request.password):
            raise InputValidationError(problem)
        if not is_valid_role(request.role):
            raise InputValidationError("invalid role")
        if await self.user_repo.email_exists(request.email):
            raise InputValidationError(DUPLICATE_EMAIL_MESSAGE)

        user = UserDB(
            email=request.email,
            password_hash=await hash_password(request.password),
            role=request.role,
            display_name=request.display_name,
        )
        try:
            user = await self.user_repo.add(user)
        except DuplicateEntryError as e:
            # Lost a race with a concurrent registration for the same email
            raise InputValidationError(DUPLICATE_EMAIL_MESSAGE) from e

        logger.info("User registered", user_id=user.id, role=user.role)
        return self._auth_response(user)

    async def login(self, request: LoginRequest) -> AuthResponse:
        """
        Check credentials and issue a token.

        Unknown email, malformed email and wrong password all fail the same
        way and take comparable time.

        Raises:
            InvalidCredentialsError: If the credentials do not match an account
        """
        user = None
        if is_valid_email(request.email) and request.password:
            user = await self.user_repo.get_by_email(request.email)

        if user is None:
            await dummy_verify_password()
            raise InvalidCredentialsError

        if not await verify_password(request.password, user.password_hash):
            raise InvalidCredentialsError

        logger.info("User logged in", user_id=user.id)
        return self._auth_response(user)

    async def get_user(self, user_id: str) -> UserDB:
        """
        Get the account behind a token subject.

        Raises:
            UserNotFoundError: If the account no longer exists
        """
        user = await self.user_repo.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError
        return user

    def _auth_response(self, user: UserDB) -> AuthResponse:
        return AuthResponse(
            user=UserResponse.model_validate(user),
            token=self.codec.issue(user.id, user.role),
        )
