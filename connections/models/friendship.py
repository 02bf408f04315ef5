"""Model for the symmetric friendship edge between two users."""

from __future__ import annotations
import uuid
from django.conf import settings
from django.db import models
from django.db.models import Q, F


def _uuid7_or_4() -> uuid.UUID:
    """Return uuid7 when available, else uuid4 (for primary keys)."""
    return getattr(uuid, "uuid7", uuid.uuid4)()


def ordered_pair(a_id, b_id):
    """Return the two ids sorted so the smaller one comes first."""
    return (a_id, b_id) if a_id < b_id else (b_id, a_id)


class Friendship(models.Model):
    """
    One row per unordered pair of friends.

    The pair is stored normalized (user_low.id < user_high.id) so the unique
    constraint covers both directions; per-user friend lists are derived
    from it.
    """
    id = models.UUIDField(primary_key=True, default=_uuid7_or_4, editable=False)

    user_low = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="friendships_low",
    )
    user_high = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="friendships_high",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """DB metadata and constraints for friendship edges."""
        db_table = "friendship"
        constraints = [
            models.UniqueConstraint(fields=["user_low", "user_high"], name="uniq_friendship_pair"),
            models.CheckConstraint(condition=Q(user_low__lt=F("user_high")), name="chk_friendship_ordered_pair"),
        ]
        indexes = [
            models.Index(fields=["user_low"], name="friendship_user_low_idx"),
            models.Index(fields=["user_high"], name="friendship_user_high_idx"),
        ]

    @classmethod
    def between(cls, a, b) -> Friendship:
        """Build an unsaved edge for the pair, normalizing the order."""
        low_id, high_id = ordered_pair(a.pk, b.pk)
        return cls(user_low_id=low_id, user_high_id=high_id)

    def __str__(self) -> str:
        """Readable representation for admin/debugging."""
        return f"Friendship({self.user_low_id} <-> {self.user_high_id})"
