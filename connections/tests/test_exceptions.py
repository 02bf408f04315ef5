from unittest.mock import MagicMock

from django.test import SimpleTestCase
from rest_framework.exceptions import NotAuthenticated

from connections.exceptions import (
    AlreadyFriends,
    DuplicateRequest,
    MissingFields,
    NotRecipient,
    RequestNotFound,
    SelfRequest,
    exception_handler,
)


class ExceptionHandlerTests(SimpleTestCase):
    def setUp(self):
        self.context = {"request": MagicMock(method="POST", path="/api/users/friend-requests/1"), "view": None}

    def test_status_codes_follow_taxonomy(self):
        cases = [
            (SelfRequest(), 400, "self_request"),
            (AlreadyFriends(), 400, "already_friends"),
            (DuplicateRequest(), 400, "duplicate_request"),
            (RequestNotFound(), 404, "request_not_found"),
            (NotRecipient(), 403, "not_recipient"),
        ]
        for exc, status_code, kind in cases:
            response = exception_handler(exc, self.context)
            self.assertEqual(response.status_code, status_code)
            self.assertEqual(response.data["kind"], kind)
            self.assertEqual(response.data["message"], exc.message)

    def test_missing_fields_payload(self):
        response = exception_handler(MissingFields(["bio"]), self.context)
        self.assertEqual(response.data["missingFields"], ["bio"])

    def test_custom_message(self):
        response = exception_handler(SelfRequest("nope"), self.context)
        self.assertEqual(response.data["message"], "nope")

    def test_drf_exceptions_keep_status(self):
        response = exception_handler(NotAuthenticated(), self.context)
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.data["kind"], "unauthorized")

    def test_unexpected_errors_become_opaque_500(self):
        with self.assertLogs("connections.exceptions", level="ERROR"):
            response = exception_handler(RuntimeError("db password is hunter2"), self.context)
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.data, {"kind": "internal_error", "message": "Internal Server Error"})
