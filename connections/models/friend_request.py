"""Model capturing friend requests between two users."""

import uuid
from django.conf import settings
from django.db import models
from django.db.models import Q, F

from .friendship import ordered_pair


def pair_key_for(a_id, b_id) -> str:
    """Normalized key for an unordered pair of user ids."""
    low, high = ordered_pair(a_id, b_id)
    return f"{low}:{high}"


class FriendRequest(models.Model):
    """A directed proposal from sender to recipient to become friends."""
    STATUS_PENDING = "pending"
    STATUS_ACCEPTED = "accepted"
    STATUS_REJECTED = "rejected"

    STATUSES = [
        (STATUS_PENDING, "Pending"),
        (STATUS_ACCEPTED, "Accepted"),
        (STATUS_REJECTED, "Rejected"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    sender = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="friend_requests_sent",
    )
    recipient = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="friend_requests_received",
    )
    status = models.CharField(max_length=20, choices=STATUSES, default=STATUS_PENDING)
    # one request per unordered pair, whatever its status
    pair_key = models.CharField(max_length=64, editable=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """Constraints for unique, non-self friend requests."""
        db_table = "friend_request"
        ordering = ["-created_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["pair_key"],
                name="uniq_friend_request_pair",
            ),
            models.CheckConstraint(
                condition=~Q(sender=F("recipient")),
                name="chk_friend_request_not_self",
            ),
        ]
        indexes = [
            models.Index(fields=["recipient", "status"], name="friend_req_recipient_idx"),
            models.Index(fields=["sender", "status"], name="friend_req_sender_idx"),
        ]

    @property
    def is_pending(self) -> bool:
        return self.status == self.STATUS_PENDING

    def save(self, *args, **kwargs):
        """Keep pair_key in sync with sender/recipient before writing."""
        self.pair_key = pair_key_for(self.sender_id, self.recipient_id)
        update_fields = kwargs.get("update_fields")
        if update_fields is not None and "updated_at" not in update_fields:
            kwargs["update_fields"] = list(update_fields) + ["updated_at"]
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        """Readable summary of the friend request and status."""
        return f"FriendRequest({self.sender_id} -> {self.recipient_id}, {self.status})"
