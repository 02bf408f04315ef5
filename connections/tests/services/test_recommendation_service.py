from django.test import TestCase

from connections.services import FriendService, RecommendationService
from connections.tests.helpers import make_learner, make_user


class RecommendationServiceTestCase(TestCase):
    def setUp(self):
        self.me = make_learner(username="me", full_name="Me")
        self.friend = make_learner(username="friend", full_name="Friend")
        self.stranger = make_learner(username="stranger", full_name="Stranger")
        self.newcomer = make_user(username="newcomer", full_name="Newcomer")
        FriendService().add_friendship(self.me, self.friend)

    def test_excludes_self_friends_and_non_onboarded(self):
        users = RecommendationService().recommended_for(self.me)
        self.assertEqual(users, [self.stranger])

    def test_non_onboarded_caller_still_gets_recommendations(self):
        users = RecommendationService().recommended_for(self.newcomer)
        self.assertEqual(users, [self.friend, self.me, self.stranger])
