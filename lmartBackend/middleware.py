"""Request middleware for the L-Mart API."""

from typing import Callable


class JWTCSRFBypassMiddleware:
    """Mark bearer-token requests as exempt from CSRF checks.

    The API is stateless and authenticates with the Authorization header, so
    CSRF protection only applies to cookie-based sessions (the Django admin).
    """

    def __init__(self, get_response: Callable):
        self.get_response = get_response

    def __call__(self, request):
        if request.META.get("HTTP_AUTHORIZATION", "").lower().startswith("bearer "):
            request._dont_enforce_csrf_checks = True
        return self.get_response(request)
