import uuid

from django.test import TestCase
from django.urls import reverse
from rest_framework.test import APIClient

from connections.models import FriendRequest, Friendship
from connections.tests.helpers import make_learner


class FriendRequestViewsTestCase(TestCase):
    def setUp(self):
        self.alice = make_learner(username="alice", full_name="Alice", native_language="Turkish")
        self.bob = make_learner(username="bob", full_name="Bob")
        self.cara = make_learner(username="cara", full_name="Cara")
        self.client = APIClient()

    def _as(self, user):
        self.client.force_authenticate(user=user)
        return self.client

    def _send(self, sender, recipient):
        url = reverse("send_friend_request", kwargs={"user_id": recipient.id})
        return self._as(sender).post(url)

    def _accept(self, user, request_id):
        url = reverse("accept_friend_request", kwargs={"request_id": request_id})
        return self._as(user).put(url)

    def test_send_returns_201_with_request_id(self):
        response = self._send(self.alice, self.bob)
        self.assertEqual(response.status_code, 201)
        body = response.json()
        self.assertEqual(body["message"], "Friend request sent")
        fr = FriendRequest.objects.get()
        self.assertEqual(body["requestId"], str(fr.id))
        self.assertEqual(body["friendRequest"]["status"], "pending")

    def test_send_to_self_is_400(self):
        response = self._send(self.alice, self.alice)
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["kind"], "self_request")
        self.assertFalse(FriendRequest.objects.exists())

    def test_send_to_missing_user_is_404(self):
        url = reverse("send_friend_request", kwargs={"user_id": 999999})
        response = self._as(self.alice).post(url)
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["kind"], "user_not_found")

    def test_send_duplicate_is_400(self):
        self._send(self.alice, self.bob)
        response = self._send(self.bob, self.alice)
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["kind"], "duplicate_request")

    def test_send_to_friend_is_400(self):
        Friendship.between(self.alice, self.bob).save()
        response = self._send(self.alice, self.bob)
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["kind"], "already_friends")

    def test_accept_by_recipient(self):
        fr_id = self._send(self.alice, self.bob).json()["requestId"]
        response = self._accept(self.bob, fr_id)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"message": "Friend request accepted"})
        self.assertEqual(self.alice.friends, [self.bob])

    def test_accept_by_sender_is_403(self):
        fr_id = self._send(self.alice, self.bob).json()["requestId"]
        response = self._accept(self.alice, fr_id)
        self.assertEqual(response.status_code, 403)
        self.assertEqual(response.json()["kind"], "not_recipient")

    def test_accept_missing_is_404(self):
        response = self._accept(self.bob, uuid.uuid4())
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["kind"], "request_not_found")

    def test_accept_requires_put(self):
        fr_id = self._send(self.alice, self.bob).json()["requestId"]
        url = reverse("accept_friend_request", kwargs={"request_id": fr_id})
        response = self._as(self.bob).post(url)
        self.assertEqual(response.status_code, 405)

    def test_reject_by_recipient(self):
        fr_id = self._send(self.alice, self.bob).json()["requestId"]
        url = reverse("reject_friend_request", kwargs={"request_id": fr_id})
        response = self._as(self.bob).put(url)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(FriendRequest.objects.get(id=fr_id).status, FriendRequest.STATUS_REJECTED)

    def test_list_friend_requests(self):
        self._send(self.alice, self.bob)
        accepted_id = self._send(self.bob, self.cara).json()["requestId"]
        self._accept(self.cara, accepted_id)

        response = self._as(self.bob).get(reverse("friend_requests"))
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(len(body["incomingRequests"]), 1)
        sender = body["incomingRequests"][0]["sender"]
        self.assertEqual(sender["fullName"], "Alice")
        self.assertEqual(sender["nativeLanguage"], "Turkish")
        self.assertEqual(sender["learningLanguages"], ["Spanish"])
        self.assertEqual(len(body["acceptedRequests"]), 1)
        self.assertEqual(body["acceptedRequests"][0]["recipient"]["id"], self.cara.id)

    def test_list_outgoing_friend_requests(self):
        self._send(self.alice, self.bob)
        response = self._as(self.alice).get(reverse("outgoing_friend_requests"))
        self.assertEqual(response.status_code, 200)
        outgoing = response.json()["outgoingRequests"]
        self.assertEqual([r["recipient"]["id"] for r in outgoing], [self.bob.id])

    def test_scenario_accept_then_resend(self):
        r1 = self._send(self.alice, self.bob).json()["requestId"]
        self.assertEqual(FriendRequest.objects.get(id=r1).status, "pending")
        self.assertEqual(self._accept(self.bob, r1).status_code, 200)
        self.assertEqual(self.alice.friends, [self.bob])
        self.assertEqual(self.bob.friends, [self.alice])
        response = self._send(self.alice, self.bob)
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["kind"], "already_friends")

    def test_resend_after_reject_is_duplicate(self):
        r1 = self._send(self.alice, self.bob).json()["requestId"]
        url = reverse("reject_friend_request", kwargs={"request_id": r1})
        self.assertEqual(self._as(self.bob).put(url).status_code, 200)
        response = self._send(self.alice, self.bob)
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["kind"], "duplicate_request")
        self.assertEqual(FriendRequest.objects.count(), 1)
        self.assertEqual(FriendRequest.objects.get().status, "rejected")

    def test_endpoints_require_authentication(self):
        anonymous = APIClient()
        fr = FriendRequest.objects.create(sender=self.alice, recipient=self.bob)
        responses = [
            anonymous.get(reverse("recommended_users")),
            anonymous.get(reverse("my_friends")),
            anonymous.get(reverse("friend_requests")),
            anonymous.post(reverse("send_friend_request", kwargs={"user_id": self.bob.id})),
            anonymous.put(reverse("accept_friend_request", kwargs={"request_id": fr.id})),
        ]
        for response in responses:
            self.assertEqual(response.status_code, 401)
            self.assertEqual(response.json()["kind"], "unauthorized")
