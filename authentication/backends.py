"""
Bearer token authentication for the API.

A missing Authorization header leaves the request anonymous (views that need a
user answer 401 "Access token required"); a present but unusable token is
rejected with 403 "Invalid or expired token". Public views opt out of
authentication so a stale token never blocks login or the storefront.
"""

import logging

from rest_framework.exceptions import AuthenticationFailed, PermissionDenied
from rest_framework_simplejwt.authentication import JWTAuthentication
from rest_framework_simplejwt.exceptions import InvalidToken

logger = logging.getLogger(__name__)


class BearerJWTAuthentication(JWTAuthentication):
    def authenticate(self, request):
        try:
            return super().authenticate(request)
        except (InvalidToken, AuthenticationFailed) as e:
            logger.info(f"Rejected bearer token: {e.__class__.__name__}")
            raise PermissionDenied("Invalid or expired token")


class OptionalBearerJWTAuthentication(JWTAuthentication):
    """For public endpoints that attach the user when a valid token is sent."""

    def authenticate(self, request):
        try:
            return super().authenticate(request)
        except (InvalidToken, AuthenticationFailed):
            return None
