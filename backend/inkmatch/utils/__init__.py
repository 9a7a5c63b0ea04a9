from .errors import (
    InkMatchError,
    NotFound,
    PermissionDenied,
    StoreUnavailable,
    ValidationFailed,
    error_response,
)
from .clock import now_ms

__all__ = [
    "InkMatchError",
    "NotFound",
    "PermissionDenied",
    "StoreUnavailable",
    "ValidationFailed",
    "error_response",
    "now_ms",
]
