import logging

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import IntegrityError, transaction

from connections.exceptions import (
    AlreadyFriends,
    DuplicateRequest,
    NotRecipient,
    RequestNotFound,
    RequestNotPending,
    SelfRequest,
    UserNotFound,
)
from connections.models import FriendRequest
from connections.repos.friend_request_repo import FriendRequestRepo
from connections.repos.friendship_repo import FriendshipRepo
from connections.repos.user_repo import UserRepo

logger = logging.getLogger(__name__)


class FriendRequestService:
    """Send, answer and list friend requests on behalf of ``actor``.

    The caller is trusted to be authenticated already; nothing here looks at
    credentials.
    """

    def __init__(self, actor, users=None, requests=None, friendships=None):
        self.actor = actor
        self.users = users or UserRepo()
        self.requests = requests or FriendRequestRepo()
        self.friendships = friendships or FriendshipRepo()

    def send_request(self, recipient_id):
        """Create a pending request from the actor to ``recipient_id``."""
        if str(recipient_id) == str(self.actor.pk):
            raise SelfRequest()

        try:
            recipient = self.users.find_by_id(recipient_id)
        except (TypeError, ValueError):
            raise UserNotFound()
        if recipient is None:
            raise UserNotFound()

        if self.friendships.are_friends(self.actor, recipient):
            raise AlreadyFriends()

        # Any earlier request blocks a new one, even after a rejection.
        if self.requests.exists_between(self.actor, recipient):
            raise DuplicateRequest()

        try:
            with transaction.atomic():
                fr = self.requests.create(sender=self.actor, recipient=recipient)
        except IntegrityError:
            # lost a race against a concurrent request for the same pair
            raise DuplicateRequest()

        logger.info("Friend request %s sent: %s -> %s", fr.id, self.actor.pk, recipient.pk)
        return fr

    def _locked_request_for_recipient(self, request_id):
        try:
            fr = self.requests.find_for_update(request_id)
        except DjangoValidationError:
            raise RequestNotFound()
        if fr is None:
            raise RequestNotFound()
        if fr.recipient_id != self.actor.pk:
            raise NotRecipient()
        return fr

    @transaction.atomic
    def accept_request(self, request_id):
        """Accept a request addressed to the actor and link both users.

        Accepting twice is harmless: the edge is fetched or created, never
        duplicated.
        """
        fr = self._locked_request_for_recipient(request_id)
        if fr.status == FriendRequest.STATUS_REJECTED:
            raise RequestNotPending()

        if fr.is_pending:
            fr.status = FriendRequest.STATUS_ACCEPTED
            fr.save(update_fields=["status"])
            logger.info("Friend request %s accepted by %s", fr.id, self.actor.pk)

        self.friendships.link(fr.sender, fr.recipient)
        return fr

    @transaction.atomic
    def reject_request(self, request_id):
        """Reject a pending request addressed to the actor."""
        fr = self._locked_request_for_recipient(request_id)
        if fr.status == FriendRequest.STATUS_ACCEPTED:
            raise RequestNotPending()

        if fr.is_pending:
            fr.status = FriendRequest.STATUS_REJECTED
            fr.save(update_fields=["status"])
            logger.info("Friend request %s rejected by %s", fr.id, self.actor.pk)
        return fr

    def incoming_requests(self):
        """Pending requests waiting for the actor's answer."""
        return list(self.requests.incoming_pending(self.actor))

    def outgoing_requests(self):
        """Pending requests the actor has sent."""
        return list(self.requests.outgoing_pending(self.actor))

    def accepted_requests(self):
        """Requests the actor sent that have been accepted."""
        return list(self.requests.sent_and_accepted(self.actor))
