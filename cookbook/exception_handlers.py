"""DRF exception handler that turns cookbook errors into HTTP responses."""

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from cookbook.errors import (
    CookbookError,
    DuplicateRating,
    RecipeNotFound,
    SelfRatingForbidden,
    TransportError,
    UnauthenticatedError,
    ValidationError,
)

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    UnauthenticatedError: status.HTTP_401_UNAUTHORIZED,
    SelfRatingForbidden: status.HTTP_403_FORBIDDEN,
    RecipeNotFound: status.HTTP_404_NOT_FOUND,
    DuplicateRating: status.HTTP_409_CONFLICT,
    TransportError: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def status_for(exc):
    for error_type, code in ERROR_STATUS.items():
        if isinstance(exc, error_type):
            return code
    return status.HTTP_400_BAD_REQUEST


def cookbook_exception_handler(exc, context):
    """Map CookbookError subclasses; defer everything else to DRF."""
    if not isinstance(exc, CookbookError):
        return exception_handler(exc, context)

    code = status_for(exc)
    if code >= 500:
        logger.warning("API request failed: %s", exc.message)
    response = Response(
        {
            "detail": exc.message,
            "code": type(exc).__name__,
            "retryable": exc.retryable,
        },
        status=code,
    )
    if code == status.HTTP_401_UNAUTHORIZED:
        response["WWW-Authenticate"] = "Bearer"
    return response
