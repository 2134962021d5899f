# learng/main.py

"""learng Backend - accounts and ownership of journey, scenario and word content."""

from datetime import timedelta

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from learng.configs import Settings, settings
from learng.errors import (
    AuthorizationError,
    ConfigurationError,
    DatabaseError,
    InputValidationError,
    PasswordHashingError,
    UserAuthenticationError,
    UserNotFoundError,
    auth_exception_handler,
    create_exception_handler,
    database_exception_handler,
    http_exception_handler,
    input_validation_exception_handler,
    password_hashing_exception_handler,
    validation_exception_handler,
)
from learng.managers import TokenCodec
from learng.middleware import (
    LoggingMiddleware,
    SecurityHeadersMiddleware,
    configure_cors,
    lifespan,
)
from learng.monitoring import get_logger
from learng.routes import auth_router, journey_router, scenario_router, word_router
from learng.schemas import HealthResponse

logger = get_logger(__name__)


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """
    Build the application.

    Parameters
    ----------
    app_settings : Settings | None
        Settings to build with; the process settings when omitted.

    Returns
    -------
    FastAPI
        Configured application.

    Raises
    ------
    ConfigurationError
        If no JWT signing secret is configured.
    """
    app_settings = app_settings or settings

    secret = app_settings.JWT_SECRET.get_secret_value()
    if not secret:
        mssg = "JWT_SECRET must be set"
        raise ConfigurationError(mssg)

    app = FastAPI(
        title=app_settings.APP_NAME,
        description="learng Backend API",
        version=app_settings.VERSION,
        debug=app_settings.DEBUG,
        lifespan=lifespan,
        swagger_ui_parameters={
            "docExpansion": "none",
            "operationsSorter": "method",
        },
    )

    app.state.settings = app_settings
    app.state.token_codec = TokenCodec(
        secret,
        ttl=timedelta(hours=app_settings.ACCESS_TOKEN_EXPIRE_HOURS),
        algorithm=app_settings.JWT_ALGORITHM,
    )

    configure_cors(app, app_settings)
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)

    routes = [auth_router, journey_router, scenario_router, word_router]
    _ = [app.include_router(router, prefix=app_settings.API_PREFIX) for router in routes]

    errors = [
        (UserAuthenticationError, auth_exception_handler),
        (AuthorizationError, auth_exception_handler),
        (UserNotFoundError, auth_exception_handler),
        (InputValidationError, input_validation_exception_handler),
        (PasswordHashingError, password_hashing_exception_handler),
        (DatabaseError, database_exception_handler),
        (RequestValidationError, validation_exception_handler),
        (StarletteHTTPException, http_exception_handler),
        (Exception, create_exception_handler(logger)),
    ]

    _ = [app.add_exception_handler(exc_type, handler) for exc_type, handler in errors]

    @app.get(
        "/health",
        tags=["🩺 Health"],
        summary="Health check endpoint",
        response_model=HealthResponse,
        response_class=ORJSONResponse,
        responses={
            200: {
                "content": {
                    "application/json": {
                        "example": {"status": "healthy", "version": "1.0.0"},
                    },
                },
            },
        },
        operation_id="health_check",
    )
    async def health_check() -> HealthResponse:
        """
        Liveness probe. Needs no token.

        Examples
        --------
        Request
            GET /health
        Response
            200 OK
            {"status": "healthy", "version": "1.0.0"}
        """
        return HealthResponse(version=app.version)

    return app


app = create_app()
