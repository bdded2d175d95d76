"""
DRF exception handler producing the API's ``{"message": ...}`` error shape.
"""

import logging

from rest_framework import exceptions, status
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


def _first_message(detail):
    if isinstance(detail, list) and detail:
        return _first_message(detail[0])
    if isinstance(detail, dict) and detail:
        key, value = next(iter(detail.items()))
        message = _first_message(value)
        return message if key in ("detail", "non_field_errors", "message") else f"{key}: {message}"
    return str(detail)


def api_exception_handler(exc, context):
    """
    Wrap DRF's default handler.

    Unauthenticated requests become 401 "Access token required"; serializer
    validation errors keep their field errors under ``errors``.
    """
    response = exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, exceptions.NotAuthenticated):
        response.status_code = status.HTTP_401_UNAUTHORIZED
        response.data = {"message": "Access token required"}
        return response

    if isinstance(exc, exceptions.ValidationError):
        response.data = {"message": _first_message(exc.detail), "errors": exc.detail}
        return response

    detail = getattr(exc, "detail", None)
    response.data = {"message": _first_message(detail) if detail is not None else str(exc)}
    if response.status_code >= 500:
        logger.error(f"Unhandled API error in {context.get('view').__class__.__name__}: {exc}")
    return response
