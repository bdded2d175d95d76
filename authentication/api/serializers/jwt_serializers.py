from rest_framework_simplejwt.tokens import AccessToken


class LMartAccessToken(AccessToken):
    """Access token carrying the claims the storefront reads (email, role)."""

    @classmethod
    def for_user(cls, user):
        token = super().for_user(user)
        token["email"] = user.email
        token["role"] = "admin" if user.is_superuser else user.role
        return token


def issue_access_token(user) -> str:
    return str(LMartAccessToken.for_user(user))
