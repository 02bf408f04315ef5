from django.test import TestCase

from connections.models import Friendship
from connections.repos.friendship_repo import FriendshipRepo
from connections.tests.helpers import make_user


class FriendshipRepoTests(TestCase):
    def setUp(self):
        self.repo = FriendshipRepo()
        self.alice = make_user(username="alice", full_name="Alice")
        self.bob = make_user(username="bob", full_name="Bob")
        self.cara = make_user(username="cara", full_name="Cara")

    def test_link_creates_single_edge(self):
        _, created = self.repo.link(self.bob, self.alice)
        _, created_again = self.repo.link(self.alice, self.bob)
        self.assertTrue(created)
        self.assertFalse(created_again)
        self.assertEqual(Friendship.objects.count(), 1)

    def test_are_friends_is_symmetric(self):
        self.repo.link(self.alice, self.bob)
        self.assertTrue(self.repo.are_friends(self.alice, self.bob))
        self.assertTrue(self.repo.are_friends(self.bob, self.alice))
        self.assertFalse(self.repo.are_friends(self.alice, self.cara))

    def test_friend_ids_reads_both_columns(self):
        self.repo.link(self.alice, self.bob)
        self.repo.link(self.cara, self.bob)
        self.assertEqual(self.repo.friend_ids(self.bob), {self.alice.id, self.cara.id})
        self.assertEqual(self.repo.friend_ids(self.alice), {self.bob.id})

    def test_friends_of_orders_by_name(self):
        self.repo.link(self.bob, self.cara)
        self.repo.link(self.bob, self.alice)
        self.assertEqual(self.repo.friends_of(self.bob), [self.alice, self.cara])
