from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from connections.serializers import FriendRequestSerializer, PublicUserSerializer
from connections.services import FriendRequestService, FriendService, RecommendationService


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def recommended_users(request):
    """Onboarded learners the caller is not friends with yet."""
    users = RecommendationService().recommended_for(request.user)
    return Response({"recommendedUsers": PublicUserSerializer(users, many=True).data})


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def my_friends(request):
    """The caller's friends as public profiles."""
    friends = FriendService().friends_of(request.user)
    return Response({"friends": PublicUserSerializer(friends, many=True).data})


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def send_friend_request(request, user_id):
    """Send a friend request from the caller to ``user_id``."""
    fr = FriendRequestService(request.user).send_request(user_id)
    return Response(
        {
            "message": "Friend request sent",
            "requestId": str(fr.id),
            "friendRequest": FriendRequestSerializer(fr).data,
        },
        status=status.HTTP_201_CREATED,
    )


@api_view(['PUT'])
@permission_classes([IsAuthenticated])
def accept_friend_request(request, request_id):
    """Accept a request addressed to the caller."""
    FriendRequestService(request.user).accept_request(request_id)
    return Response({"message": "Friend request accepted"})


@api_view(['PUT'])
@permission_classes([IsAuthenticated])
def reject_friend_request(request, request_id):
    """Reject a request addressed to the caller."""
    FriendRequestService(request.user).reject_request(request_id)
    return Response({"message": "Friend request rejected"})


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def friend_requests(request):
    """Pending requests for the caller, plus the caller's requests that were accepted."""
    service = FriendRequestService(request.user)
    return Response({
        "incomingRequests": FriendRequestSerializer(service.incoming_requests(), many=True).data,
        "acceptedRequests": FriendRequestSerializer(service.accepted_requests(), many=True).data,
    })


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def outgoing_friend_requests(request):
    """Pending requests the caller has sent."""
    service = FriendRequestService(request.user)
    return Response({
        "outgoingRequests": FriendRequestSerializer(service.outgoing_requests(), many=True).data,
    })
