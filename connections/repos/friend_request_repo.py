"""Repository helpers for friend requests."""

from typing import Optional

from django.db.models import QuerySet

from connections.db_accessor import DB_Accessor
from connections.models.friend_request import FriendRequest, pair_key_for


class FriendRequestRepo(DB_Accessor):
    """Repository wrapper for friend requests."""
    def __init__(self) -> None:
        """Initialise with the FriendRequest model."""
        super().__init__(FriendRequest)

    def exists_between(self, a, b) -> bool:
        """Return True if any request, in either direction and any status, links the pair."""
        return self.exists(pair_key=pair_key_for(a.pk, b.pk))

    def find_for_update(self, request_id) -> Optional[FriendRequest]:
        """Fetch and lock a request row; must run inside a transaction."""
        return self.model.objects.select_for_update().filter(id=request_id).first()

    def incoming_pending(self, user) -> QuerySet:
        """Pending requests addressed to ``user`` with their senders."""
        return self.list(
            filters={"recipient": user, "status": FriendRequest.STATUS_PENDING},
            select_related=("sender",),
            order_by=("-created_at",),
        )

    def outgoing_pending(self, user) -> QuerySet:
        """Pending requests sent by ``user`` with their recipients."""
        return self.list(
            filters={"sender": user, "status": FriendRequest.STATUS_PENDING},
            select_related=("recipient",),
            order_by=("-created_at",),
        )

    def sent_and_accepted(self, user) -> QuerySet:
        """Requests sent by ``user`` that the recipient accepted."""
        return self.list(
            filters={"sender": user, "status": FriendRequest.STATUS_ACCEPTED},
            select_related=("recipient",),
            order_by=("-updated_at",),
        )
