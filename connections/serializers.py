from rest_framework import serializers
from connections.models import FriendRequest, User


class PublicUserSerializer(serializers.ModelSerializer):
    """Public profile fields, named the way the web client expects them."""
    fullName = serializers.CharField(source="full_name", read_only=True)
    profilePic = serializers.CharField(source="avatar_url", read_only=True)
    nativeLanguage = serializers.CharField(source="native_language", read_only=True)
    learningLanguages = serializers.ListField(source="learning_languages", child=serializers.CharField(), read_only=True)

    class Meta:
        model = User
        fields = [
            "id",
            "fullName",
            "profilePic",
            "bio",
            "nativeLanguage",
            "learningLanguages",
            "location",
        ]
        read_only_fields = fields


class AccountSerializer(PublicUserSerializer):
    """The caller's own account: public profile plus private fields."""
    isOnboarded = serializers.BooleanField(source="is_onboarded", read_only=True)

    class Meta(PublicUserSerializer.Meta):
        fields = PublicUserSerializer.Meta.fields + ["email", "isOnboarded"]
        read_only_fields = fields


class FriendRequestSerializer(serializers.ModelSerializer):
    """Friend request with both parties rendered as public profiles."""
    sender = PublicUserSerializer(read_only=True)
    recipient = PublicUserSerializer(read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = FriendRequest
        fields = ["id", "sender", "recipient", "status", "createdAt", "updatedAt"]
        read_only_fields = fields


class SignupSerializer(serializers.Serializer):
    email = serializers.CharField(required=False, allow_blank=True, default="")
    password = serializers.CharField(required=False, allow_blank=True, default="", trim_whitespace=False)
    fullName = serializers.CharField(required=False, allow_blank=True, default="")


class LoginSerializer(serializers.Serializer):
    email = serializers.CharField(required=False, allow_blank=True, default="")
    password = serializers.CharField(required=False, allow_blank=True, default="", trim_whitespace=False)


class OnboardingSerializer(serializers.Serializer):
    """Maps the client's camelCase onboarding payload to model attributes."""
    fullName = serializers.CharField(source="full_name", required=False, allow_blank=True)
    bio = serializers.CharField(required=False, allow_blank=True)
    nativeLanguage = serializers.CharField(source="native_language", required=False, allow_blank=True)
    learningLanguages = serializers.ListField(
        source="learning_languages", child=serializers.CharField(allow_blank=True), required=False, allow_empty=True
    )
    location = serializers.CharField(required=False, allow_blank=True)
    profilePic = serializers.CharField(source="profile_pic", required=False, allow_blank=True)
