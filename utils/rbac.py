import logging

from django.contrib.auth import get_user_model

# Canonical role names
ROLE_CUSTOMER = "customer"
ROLE_SELLER = "seller"
ROLE_ADMIN = "admin"

ROLES = (ROLE_ADMIN, ROLE_CUSTOMER, ROLE_SELLER)

logger = logging.getLogger(__name__)


def _fetch_user_from_db(user):
    """Reload the user with only the fields needed for role checks.

    Token claims are never trusted for roles; the persisted role wins.
    """
    if not getattr(user, "is_authenticated", False):
        return None
    User = get_user_model()
    return User.objects.only("id", "role", "is_superuser").filter(pk=getattr(user, "pk", None)).first()


def current_role(user):
    db_user = _fetch_user_from_db(user)
    if db_user is None:
        return None
    if db_user.is_superuser:
        return ROLE_ADMIN
    return db_user.role

