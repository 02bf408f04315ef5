"""Repository helpers for friendship edges."""

from typing import List, Set, Tuple

from django.db.models import Q, QuerySet

from connections.db_accessor import DB_Accessor
from connections.models.friendship import Friendship, ordered_pair
from connections.models.user import User


class FriendshipRepo(DB_Accessor):
    """Repository wrapper for the normalized friendship table."""
    def __init__(self) -> None:
        """Initialise with the Friendship model."""
        super().__init__(Friendship)

    def edges_for(self, user) -> QuerySet:
        """Edges touching ``user`` in either column."""
        return self.model.objects.filter(Q(user_low=user) | Q(user_high=user))

    def friend_ids(self, user) -> Set[int]:
        """Ids of every user sharing an edge with ``user``."""
        ids = set()
        for low_id, high_id in self.edges_for(user).values_list("user_low_id", "user_high_id"):
            ids.add(high_id if low_id == user.pk else low_id)
        return ids

    def friends_of(self, user) -> List[User]:
        """Friends of ``user`` as User records, ordered by name."""
        return list(User.objects.filter(id__in=self.friend_ids(user)).order_by("full_name", "id"))

    def are_friends(self, a, b) -> bool:
        """Return True if an edge exists for the pair."""
        low_id, high_id = ordered_pair(a.pk, b.pk)
        return self.exists(user_low_id=low_id, user_high_id=high_id)

    def link(self, a, b) -> Tuple[Friendship, bool]:
        """Get or create the edge for the pair; returns (edge, created)."""
        low_id, high_id = ordered_pair(a.pk, b.pk)
        return self.model.objects.get_or_create(user_low_id=low_id, user_high_id=high_id)
