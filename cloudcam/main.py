# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# Local application imports
from .api.v1 import camera_router, device_router, health_router
from .core.config import get_settings
from .core.exceptions import CloudError, ValidationError, get_user_message
from .core.logging_config import configure_logging
from .di.container import get_container, reset_container
from .infrastructure.http_client_factory import close_shared_http_client

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Builds the DI container at startup so missing credentials stop the
    process before it serves traffic, and closes the shared HTTP client
    on shutdown.
    """
    # Startup: fails with ConfigurationError when credentials are absent
    get_container()
    logger.info("Device cloud clients initialized")

    yield

    # Shutdown: release pooled connections
    try:
        await close_shared_http_client()
    finally:
        reset_container()
    logger.info("Application shutdown complete")


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def register_exception_handlers(application: FastAPI) -> None:
    """
    Render every failure as {"error": message}.

    Request schema violations are reported as 400 like the other boundary
    checks.
    """

    @application.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return _error_response(exc.status_code, str(exc.detail))

    @application.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        message = "Invalid request"
        if errors:
            location = ".".join(str(part) for part in errors[0].get("loc", ()) if part != "body")
            message = f"Invalid request: {location} {errors[0].get('msg', '')}".strip()
        return _error_response(status.HTTP_400_BAD_REQUEST, message)

    @application.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        return _error_response(status.HTTP_400_BAD_REQUEST, exc.message)

    @application.exception_handler(CloudError)
    async def cloud_error_handler(request: Request, exc: CloudError):
        logger.error(f"Unhandled cloud error on {request.url.path}: {exc}")
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, get_user_message(exc))

    @application.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.error(f"Unexpected error on {request.url.path}: {exc}", exc_info=True)
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging configuration
    - CORS middleware configuration
    - Error handlers
    - API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)
    configure_logging()
    settings = get_settings()

    # Create FastAPI app
    application = FastAPI(
        title="Camera Cloud Backend API",
        version="1.0.0",
        description="Authenticated device cloud gateway for the camera app",
        lifespan=lifespan
    )

    # Add CORS middleware
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(application)

    # Register API routers
    application.include_router(health_router, prefix="/api")
    application.include_router(camera_router, prefix="/api/cameras")
    application.include_router(device_router, prefix="/api/devices")

    return application


# Create application instance
app = create_application()
