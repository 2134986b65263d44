"""Common exception handlers for the project."""
import logging

from rest_framework.views import exception_handler
from rest_framework.response import Response
from rest_framework import status

logger = logging.getLogger(__name__)


def custom_exception_handler(exc, context):
    """Return a consistent error response structure."""
    response = exception_handler(exc, context)

    if response is None:
        view = context.get("view")
        logger.exception(
            "Unhandled API error",
            exc_info=exc,
            extra={"view": view.__class__.__name__ if view else None},
        )
        # If DRF couldn't handle the exception, fall back to a generic 500.
        return Response(
            {"errors": [str(exc)]}, status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    return Response({"errors": response.data}, status=response.status_code, headers=_passthrough_headers(response))


def _passthrough_headers(response):
    return {
        key: response[key]
        for key in ("WWW-Authenticate", "Retry-After")
        if key in response
    }
