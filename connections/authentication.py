from django.conf import settings
from rest_framework_simplejwt.authentication import JWTAuthentication
from rest_framework_simplejwt.tokens import AccessToken


class CookieJWTAuthentication(JWTAuthentication):
    """DRF authentication backend validating the signed token in the auth cookie.

    Falls back to the Authorization header so API clients without a cookie jar
    can still authenticate with ``Bearer <token>``.
    """

    def authenticate(self, request):
        """Return (user, token) from the cookie or header, or None if absent."""
        raw_token = request.COOKIES.get(settings.AUTH_COOKIE_NAME)
        if not raw_token:
            return super().authenticate(request)

        validated_token = self.get_validated_token(raw_token)
        return self.get_user(validated_token), validated_token


def issue_token(user) -> str:
    """Sign an access token for ``user``."""
    return str(AccessToken.for_user(user))


def set_auth_cookie(response, user):
    """Attach a fresh HTTP-only auth cookie to ``response``."""
    response.set_cookie(
        settings.AUTH_COOKIE_NAME,
        issue_token(user),
        max_age=int(settings.AUTH_COOKIE_MAX_AGE.total_seconds()),
        httponly=True,
        samesite="Strict",
        secure=settings.AUTH_COOKIE_SECURE,
    )
    return response


def clear_auth_cookie(response):
    """Remove the auth cookie from the client."""
    response.delete_cookie(settings.AUTH_COOKIE_NAME, samesite="Strict")
    return response
