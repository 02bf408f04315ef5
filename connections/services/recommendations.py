"""Recommend learners the user is not yet connected with."""

from connections.repos.user_repo import UserRepo
from connections.services.friends import FriendService


class RecommendationService:
    """Provide the list of users shown on the home page."""

    def __init__(self, users=None, friends=None):
        self.users = users or UserRepo()
        self.friends = friends or FriendService()

    def recommended_for(self, user):
        """Onboarded users other than ``user`` and its current friends."""
        excluded = self.friends.friend_ids(user) | {user.pk}
        return list(self.users.onboarded_excluding(excluded))
