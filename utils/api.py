"""Small helpers shared by API views."""

from rest_framework.response import Response

from utils.service_base import ServiceResult, error_response_data, status_for


def error_response(result: ServiceResult) -> Response:
    """Render a failed ServiceResult as ``{"message": ...}`` with the mapped HTTP status."""
    return Response(error_response_data(result), status=status_for(result))


def parse_bool(value):
    """Query-string boolean: ``"true"``/``"false"`` (any case); anything else is None."""
    if value is None:
        return None
    lowered = str(value).strip().lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    return None


def parse_int(value, default: int, minimum: int = 1) -> int:
    try:
        return max(minimum, int(value))
    except (TypeError, ValueError):
        return default
