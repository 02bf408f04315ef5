"""Service helpers for friendship edges."""

from connections.exceptions import ValidationError
from connections.repos.friendship_repo import FriendshipRepo


class FriendService:
    """Read and extend the symmetric friend relation."""

    def __init__(self, friendships=None):
        self.friendships = friendships or FriendshipRepo()

    def friends_of(self, user):
        """Return the user's friends as User records."""
        return self.friendships.friends_of(user)

    def friend_ids(self, user):
        """Return the ids of the user's friends."""
        return self.friendships.friend_ids(user)

    def are_friends(self, a, b):
        """Return True if ``a`` and ``b`` are friends."""
        if a.pk == b.pk:
            return False
        return self.friendships.are_friends(a, b)

    def add_friendship(self, a, b):
        """Link ``a`` and ``b``; returns True if a new edge was created."""
        if a.pk == b.pk:
            raise ValidationError("A user cannot befriend themselves")
        _, created = self.friendships.link(a, b)
        return created
