import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler
from rest_framework.views import set_rollback

logger = logging.getLogger(__name__)


class MedRepError(Exception):
    def __init__(self, message, **context):
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self):
        return self.message


class ValidationError(MedRepError):
    """A request was malformed and was rejected before reaching the store."""


class StoreError(MedRepError):
    pass


class NotFoundError(StoreError):
    pass


class ConflictError(StoreError):
    pass


class StoreUnavailableError(StoreError):
    pass


class PartialResolutionWarning(UserWarning):
    """A secondary name lookup failed; the primary record is still returned."""


ERROR_STATUS_CODES = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ConflictError: status.HTTP_409_CONFLICT,
    StoreUnavailableError: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def get_status_code(exc):
    for error_class, status_code in ERROR_STATUS_CODES.items():
        if isinstance(exc, error_class):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def api_exception_handler(exc, context):
    if not isinstance(exc, MedRepError):
        return drf_exception_handler(exc, context)

    request = context.get("request")
    user_id = getattr(getattr(request, "user", None), "id", None)
    status_code = get_status_code(exc)
    logger.warning(
        "%s for user (ID: %s) on %s: %s",
        exc.__class__.__name__,
        user_id,
        getattr(request, "path", None),
        exc.message,
    )
    set_rollback()
    return Response({"detail": exc.message}, status=status_code)
