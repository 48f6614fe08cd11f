# apps/accounts/serializers.py
from rest_framework import serializers

from apps.recipes.models import Ingredient
from .models import User


class SignUpOrLoginRequestSerializer(serializers.Serializer):
    """
    Identity assertion posted by the client after the provider handshake.

    Fields are optional here so that absence is reported by AuthService as
    a missing-field error rather than a generic validation error.
    """
    email = serializers.EmailField(required=False, allow_null=True, allow_blank=True)
    socialKey = serializers.CharField(
        source="social_key", required=False, allow_null=True, allow_blank=True
    )
    provider = serializers.CharField(
        required=False, allow_null=True, allow_blank=True, trim_whitespace=False,
        help_text='Social login provider: exactly "kakao" or "google"'
    )


class SignUpOrLoginResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    accessToken = serializers.CharField(source="access_token")
    isNewUser = serializers.BooleanField(source="is_new_user")


class TokenRefreshRequestSerializer(serializers.Serializer):
    refreshToken = serializers.CharField(
        required=False,
        help_text="Only needed when the refresh token cookie is not sent"
    )


class TokenRefreshResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    accessToken = serializers.CharField(source="access_token")


class MessageResponseSerializer(serializers.Serializer):
    message = serializers.CharField()


class UserSerializer(serializers.ModelSerializer):
    profileImage = serializers.SerializerMethodField()
    personalInfoAgreement = serializers.BooleanField(source="personal_info_agreement")
    preferredIngredients = serializers.PrimaryKeyRelatedField(
        source="preferred_ingredients", many=True, read_only=True
    )
    dislikedIngredients = serializers.PrimaryKeyRelatedField(
        source="disliked_ingredients", many=True, read_only=True
    )
    providers = serializers.SerializerMethodField()
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = User
        fields = [
            "id",
            "email",
            "nickname",
            "profileImage",
            "personalInfoAgreement",
            "preferredIngredients",
            "dislikedIngredients",
            "providers",
            "createdAt",
        ]
        read_only_fields = fields

    def get_profileImage(self, obj):
        if not obj.profile_image:
            return None
        return obj.profile_image.url

    def get_providers(self, obj):
        return sorted(obj.social_accounts.values_list("provider", flat=True))


class UserUpdateRequestSerializer(serializers.ModelSerializer):
    """Partial profile update. Every field is optional."""

    nickname = serializers.CharField(max_length=30, required=False)
    profileImage = serializers.FileField(source="profile_image", required=False)
    preferredIngredients = serializers.PrimaryKeyRelatedField(
        source="preferred_ingredients",
        many=True,
        required=False,
        queryset=Ingredient.objects.all(),
    )
    dislikedIngredients = serializers.PrimaryKeyRelatedField(
        source="disliked_ingredients",
        many=True,
        required=False,
        queryset=Ingredient.objects.all(),
    )
    personalInfoAgreement = serializers.BooleanField(
        source="personal_info_agreement", required=False
    )

    class Meta:
        model = User
        fields = [
            "nickname",
            "profileImage",
            "preferredIngredients",
            "dislikedIngredients",
            "personalInfoAgreement",
        ]

    def validate(self, data):
        preferred = data.get("preferred_ingredients")
        disliked = data.get("disliked_ingredients")
        if self.instance is not None:
            if preferred is None:
                preferred = list(self.instance.preferred_ingredients.all())
            if disliked is None:
                disliked = list(self.instance.disliked_ingredients.all())

        overlap = {i.pk for i in preferred or []} & {i.pk for i in disliked or []}
        if overlap:
            raise serializers.ValidationError(
                {"dislikedIngredients": f"선호 재료와 비선호 재료가 겹칩니다: {sorted(overlap)}"}
            )
        return data
