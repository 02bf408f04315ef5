"""Custom user model with language-exchange profile fields and avatar helpers."""

from django.contrib.auth.models import AbstractUser
from django.core.validators import MaxLengthValidator
from django.db import models
from libgravatar import Gravatar


class User(AbstractUser):
    """Model for user auth and the public learner profile."""

    email = models.EmailField(unique=True, blank=False)
    full_name = models.CharField(max_length=100, blank=True)
    bio = models.TextField(
        max_length=500,
        blank=True,
        help_text="short user bio shown on profile",
        validators=[MaxLengthValidator(500)]
    )
    profile_pic = models.URLField(max_length=500, blank=True)
    native_language = models.CharField(max_length=50, blank=True)
    learning_languages = models.JSONField(default=list, blank=True)
    location = models.CharField(max_length=100, blank=True)
    is_onboarded = models.BooleanField(default=False)

    class Meta:
        """Default ordering for users."""
        ordering = ['full_name', 'id']

    def __str__(self):
        return self.full_name or self.email or self.username

    def gravatar(self, size=120):
        """Return gravatar URL for the user's email."""
        gravatar_object = Gravatar(self.email)
        return gravatar_object.get_image(size=size, default='mp')

    @property
    def avatar_url(self):
        """Uploaded profile picture, or a gravatar fallback."""
        return self.profile_pic or self.gravatar(size=200)

    @property
    def friends(self):
        """Users sharing a friendship edge with this user."""
        from connections.repos.friendship_repo import FriendshipRepo
        return FriendshipRepo().friends_of(self)
