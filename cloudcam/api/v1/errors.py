# Standard library imports
import logging

# External package imports
from fastapi import HTTPException, status

# Local application imports
from ...application.dto.health_dto import ErrorResponse
from ...core.exceptions import CloudError, ValidationError

logger = logging.getLogger(__name__)

# OpenAPI description of the {"error": message} body every failure returns
ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}


def to_http_exception(action: str, exc: CloudError) -> HTTPException:
    """
    Map a cloud-layer error to the HTTP error returned to the app.

    Args:
        action: Human phrase for what failed, e.g. "Failed to fetch cameras"
        exc: The error raised below the facade

    Returns:
        400 for boundary validation failures, 500 for everything else
    """
    if isinstance(exc, ValidationError):
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=exc.message,
        )
    logger.error(f"{action}: {exc}")
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"{action}: {exc.user_message}",
    )
