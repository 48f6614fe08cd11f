# apps/reviews/serializers.py
"""
DRF Serializers for the review API.

Wire names are camelCase; `source=` maps them onto the model fields so the
validated_data handed to ReviewService is snake_case.
"""

from rest_framework import serializers
from .models import Review


class ReviewAuthorSerializer(serializers.Serializer):
    id = serializers.IntegerField(read_only=True)
    nickname = serializers.CharField(read_only=True)
    profileImage = serializers.SerializerMethodField()

    def get_profileImage(self, obj):
        if not obj.profile_image:
            return None
        return obj.profile_image.url


class ReviewSerializer(serializers.ModelSerializer):
    """Read serializer used for every review response."""

    recipeId = serializers.IntegerField(source='recipe_id', read_only=True)
    author = ReviewAuthorSerializer(source='user', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Review
        fields = [
            'id',
            'recipeId',
            'author',
            'score',
            'comment',
            'createdAt',
            'updatedAt',
        ]
        read_only_fields = fields


class CreateReviewRequestSerializer(serializers.Serializer):
    recipeId = serializers.IntegerField(source='recipe_id', min_value=1)
    score = serializers.IntegerField(
        min_value=1, max_value=5,
        help_text='Rating 1-5'
    )
    comment = serializers.CharField(
        max_length=1000,
        help_text='Review text (required, non-blank)'
    )


class UpdateReviewRequestSerializer(serializers.Serializer):
    score = serializers.IntegerField(min_value=1, max_value=5, required=False)
    comment = serializers.CharField(max_length=1000, required=False)

    def validate(self, data):
        if not data:
            raise serializers.ValidationError(
                "수정할 항목(score, comment)을 하나 이상 입력해야 합니다."
            )
        return data
