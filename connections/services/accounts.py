"""Signup and credential checks for email/password accounts."""

import logging
import re
import uuid
from random import randint

from django.contrib.auth import authenticate
from django.db import IntegrityError, transaction

from connections.exceptions import (
    EmailTaken,
    InvalidCredentials,
    InvalidEmail,
    MissingFields,
    WeakPassword,
)
from connections.models import User
from connections.repos.user_repo import UserRepo

logger = logging.getLogger(__name__)

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MIN_PASSWORD_LENGTH = 8
AVATAR_URL = "https://avatar.iran.liara.run/public/{idx}.png"


def random_avatar():
    """Pick one of the 100 public placeholder avatars."""
    return AVATAR_URL.format(idx=randint(1, 100))


def _username_for(email):
    base = re.sub(r"[^a-zA-Z0-9_.]", "", email.split("@")[0]).lower() or "user"
    return f"{base[:120]}_{uuid.uuid4().hex[:8]}"


class AccountService:
    """Create accounts and verify email/password pairs."""

    def __init__(self, users=None):
        self.users = users or UserRepo()

    def signup(self, email, password, full_name):
        """Register a new user; raises a ValidationError subclass on bad input."""
        email = (email or "").strip()
        full_name = (full_name or "").strip()
        if not email or not password or not full_name:
            raise MissingFields()
        if len(password) < MIN_PASSWORD_LENGTH:
            raise WeakPassword()
        if not EMAIL_RE.match(email):
            raise InvalidEmail()
        if self.users.find_by_email(email):
            raise EmailTaken()

        try:
            with transaction.atomic():
                user = User.objects.create_user(
                    username=_username_for(email),
                    email=email,
                    password=password,
                    full_name=full_name,
                    profile_pic=random_avatar(),
                )
        except IntegrityError:
            raise EmailTaken()

        logger.info("New user registered: %s", user.pk)
        return user

    def authenticate_credentials(self, email, password):
        """Return the user owning the credentials or raise InvalidCredentials."""
        if not email or not password:
            raise MissingFields()
        user = self.users.find_by_email(email.strip())
        if user is None:
            raise InvalidCredentials()
        authenticated = authenticate(username=user.username, password=password)
        if authenticated is None:
            raise InvalidCredentials()
        return authenticated
