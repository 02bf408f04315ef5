"""Repository helpers for user lookups."""

from typing import Iterable, Optional

from django.db.models import QuerySet

from connections.db_accessor import DB_Accessor
from connections.models.user import User


class UserRepo(DB_Accessor):
    """Repository for basic user queries."""
    def __init__(self) -> None:
        """Initialise with the User model."""
        super().__init__(User)

    def find_by_id(self, user_id: int) -> Optional[User]:
        """Return a user by id, or None when there is no such user."""
        return self.first(id=user_id)

    def find_by_email(self, email: str) -> Optional[User]:
        """Return the user registered with ``email`` (case-insensitive), or None."""
        return self.first(email__iexact=email)

    def onboarded_excluding(self, user_ids: Iterable[int]) -> QuerySet:
        """Onboarded users whose id is not in ``user_ids``."""
        return self.list(
            filters={"is_onboarded": True},
            exclude={"id__in": list(user_ids)},
            order_by=("full_name", "id"),
        )
