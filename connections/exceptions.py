"""Error taxonomy for the social API and the DRF handler that renders it."""

import logging

from rest_framework import status
from rest_framework.exceptions import NotAuthenticated, PermissionDenied
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler
from rest_framework_simplejwt.exceptions import InvalidToken, TokenError

logger = logging.getLogger(__name__)


class SocialError(Exception):
    """Base class for errors recovered at the HTTP boundary."""
    status_code = status.HTTP_400_BAD_REQUEST
    kind = "error"
    default_message = "Request could not be completed"

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def as_payload(self):
        """Body returned to the caller."""
        return {"kind": self.kind, "message": self.message}


class ValidationError(SocialError):
    kind = "validation_error"
    default_message = "Invalid request"


class NotFoundError(SocialError):
    status_code = status.HTTP_404_NOT_FOUND
    kind = "not_found"
    default_message = "Not found"


class ConflictError(SocialError):
    # conflicts are reported as 400, the status clients already handle
    kind = "conflict"
    default_message = "Conflicting request"


class ForbiddenError(SocialError):
    status_code = status.HTTP_403_FORBIDDEN
    kind = "forbidden"
    default_message = "You are not allowed to do that"


class InvalidCredentials(SocialError):
    status_code = status.HTTP_401_UNAUTHORIZED
    kind = "invalid_credentials"
    default_message = "Invalid email or password"


class SelfRequest(ValidationError):
    kind = "self_request"
    default_message = "You can't send a friend request to yourself"


class MissingFields(ValidationError):
    """Required fields absent; carries the field names for the client."""
    kind = "missing_fields"
    default_message = "All fields are required"

    def __init__(self, missing_fields=(), message=None):
        self.missing_fields = list(missing_fields)
        super().__init__(message)

    def as_payload(self):
        payload = super().as_payload()
        if self.missing_fields:
            payload["missingFields"] = self.missing_fields
        return payload


class WeakPassword(ValidationError):
    kind = "weak_password"
    default_message = "Password must be at least 8 characters long"


class InvalidEmail(ValidationError):
    kind = "invalid_email"
    default_message = "Invalid email format"


class EmailTaken(ValidationError):
    kind = "email_taken"
    default_message = "Email is already registered"


class UserNotFound(NotFoundError):
    kind = "user_not_found"
    default_message = "Recipient not found"


class RequestNotFound(NotFoundError):
    kind = "request_not_found"
    default_message = "Friend request not found"


class AlreadyFriends(ConflictError):
    kind = "already_friends"
    default_message = "You are already friends with this user"


class DuplicateRequest(ConflictError):
    kind = "duplicate_request"
    default_message = "A friend request already exists between you and this user"


class RequestNotPending(ConflictError):
    kind = "request_not_pending"
    default_message = "This friend request has already been answered"


class NotRecipient(ForbiddenError):
    kind = "not_recipient"
    default_message = "You are not authorized to answer this request"


def _drf_kind(exc):
    if isinstance(exc, (InvalidToken, TokenError)):
        return "invalid_token"
    if isinstance(exc, NotAuthenticated):
        return "unauthorized"
    if isinstance(exc, PermissionDenied):
        return "forbidden"
    return getattr(exc, "default_code", "error")


def exception_handler(exc, context):
    """
    Render SocialError subclasses as {"kind", "message"} responses.

    DRF exceptions keep DRF's status code but share the same body shape;
    anything unexpected is logged and answered with a bare 500.
    """
    if isinstance(exc, SocialError):
        request = context.get("request")
        logger.warning(
            "Refused %s %s: %s",
            getattr(request, "method", "-"),
            getattr(request, "path", "-"),
            exc.kind,
        )
        return Response(exc.as_payload(), status=exc.status_code)

    response = drf_exception_handler(exc, context)
    if response is None:
        logger.exception("Unhandled error while serving request", exc_info=exc)
        return Response(
            {"kind": "internal_error", "message": "Internal Server Error"},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    detail = response.data.get("detail") if isinstance(response.data, dict) else None
    if detail is None:
        detail = response.data
    response.data = {"kind": _drf_kind(exc), "message": detail}
    return response
