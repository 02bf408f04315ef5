import uuid

from django.conf import settings
from rest_framework.test import APIClient

from connections.authentication import issue_token
from connections.models import User


def make_user(**kwargs):
    """Create a user; every profile field can be overridden."""
    handle = kwargs.pop("username", f"user_{uuid.uuid4().hex[:8]}")
    email = kwargs.pop("email", f"{handle}@example.org")
    password = kwargs.pop("password", "Password123")

    return User.objects.create_user(
        username=handle,
        email=email,
        password=password,
        full_name=kwargs.pop("full_name", "John Doe"),
        bio=kwargs.pop("bio", "Test bio"),
        **kwargs,
    )


def make_learner(**kwargs):
    """Create a user who has completed onboarding."""
    kwargs.setdefault("native_language", "English")
    kwargs.setdefault("learning_languages", ["Spanish"])
    kwargs.setdefault("location", "London")
    kwargs.setdefault("is_onboarded", True)
    return make_user(**kwargs)


def cookie_client(user):
    """APIClient carrying a valid auth cookie for ``user``."""
    client = APIClient()
    client.cookies[settings.AUTH_COOKIE_NAME] = issue_token(user)
    return client
