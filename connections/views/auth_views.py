from rest_framework import status
from rest_framework.decorators import api_view, authentication_classes, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response

from connections.authentication import clear_auth_cookie, set_auth_cookie
from connections.serializers import (
    AccountSerializer,
    LoginSerializer,
    OnboardingSerializer,
    SignupSerializer,
)
from connections.services import AccountService, OnboardingService


@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
def signup(request):
    """Create an account and log the new user in."""
    serializer = SignupSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    data = serializer.validated_data
    user = AccountService().signup(data["email"], data["password"], data["fullName"])
    response = Response(
        {"success": True, "user": AccountSerializer(user).data},
        status=status.HTTP_201_CREATED,
    )
    return set_auth_cookie(response, user)


@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
def login(request):
    """Check email/password and set the auth cookie."""
    serializer = LoginSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    data = serializer.validated_data
    user = AccountService().authenticate_credentials(data["email"], data["password"])
    response = Response({"success": True, "user": AccountSerializer(user).data})
    return set_auth_cookie(response, user)


@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
def logout(request):
    """Clear the auth cookie."""
    response = Response({"message": "Logged out successfully"})
    return clear_auth_cookie(response)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def me(request):
    """The authenticated caller's own account."""
    return Response({"success": True, "user": AccountSerializer(request.user).data})


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def onboard(request):
    """Complete the caller's learner profile."""
    serializer = OnboardingSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    user = OnboardingService(request.user).onboard(serializer.validated_data)
    return Response({"success": True, "user": AccountSerializer(user).data})
