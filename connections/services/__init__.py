from .friend_requests import FriendRequestService
from .friends import FriendService
from .recommendations import RecommendationService
from .accounts import AccountService
from .onboarding import OnboardingService

__all__ = [
    "FriendRequestService",
    "FriendService",
    "RecommendationService",
    "AccountService",
    "OnboardingService",
]
