from .user import User
from .friendship import Friendship
from .friend_request import FriendRequest

__all__ = [
    "User",
    "Friendship",
    "FriendRequest",
]
