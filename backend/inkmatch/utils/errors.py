from typing import Dict, Optional
from fastapi import HTTPException, status
import logging

logger = logging.getLogger(__name__)


class InkMatchError(Exception):
    """Base class for failures surfaced to API callers."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, field_errors: Optional[Dict[str, str]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.field_errors = field_errors or {}


class NotFound(InkMatchError):
    """Referenced artist/tattoo/document does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class PermissionDenied(InkMatchError):
    """Acting identity does not own the target resource."""

    status_code = status.HTTP_403_FORBIDDEN


class ValidationFailed(InkMatchError):
    """Payload rejected before any write was attempted."""

    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY


class StoreUnavailable(InkMatchError):
    """The document store call failed; safe to retry."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE


def error_response(
    message: str,
    field_errors: Dict[str, str],
    code: int = status.HTTP_422_UNPROCESSABLE_ENTITY,
) -> HTTPException:
    """Return an HTTPException with a consistent structure and log details."""
    logger.error("%s %s", message, field_errors)
    detail = {"message": message, "field_errors": field_errors}
    return HTTPException(status_code=code, detail=detail)
