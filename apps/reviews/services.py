# apps/reviews/services.py
"""
Review service for recipe review writes.

Provides:
- create_review: new review on an existing recipe
- modify_review: partial update (score/comment) by the author
- delete_review: removal by the author

Reads go straight through the API views.
"""

import logging
from django.db import transaction
from django.shortcuts import get_object_or_404

from apps.common.exceptions import ReviewPermissionDenied
from apps.recipes.models import Recipe
from .models import Review

logger = logging.getLogger(__name__)


class ReviewService:
    """
    Service class for review writes.

    Each method expects validated_data from the matching request serializer.
    Missing recipes/reviews raise Http404; writes on someone else's review
    raise ReviewPermissionDenied.
    """

    EDITABLE_FIELDS = ('score', 'comment')

    @staticmethod
    @transaction.atomic
    def create_review(data, user):
        recipe = get_object_or_404(Recipe, pk=data['recipe_id'])

        review = Review.objects.create(
            user=user,
            recipe=recipe,
            score=data['score'],
            comment=data['comment'],
        )
        logger.info(f"Review {review.pk} created on recipe {recipe.pk} by user {user.pk}")
        return review

    @classmethod
    @transaction.atomic
    def modify_review(cls, data, user, review_id):
        review = cls._get_own_review(user, review_id)

        update_fields = []
        for field in cls.EDITABLE_FIELDS:
            if field in data:
                setattr(review, field, data[field])
                update_fields.append(field)

        if update_fields:
            review.save(update_fields=update_fields + ['updated_at'])
            logger.info(f"Review {review.pk} modified by user {user.pk}: {update_fields}")

        return review

    @classmethod
    @transaction.atomic
    def delete_review(cls, user, review_id) -> bool:
        review = cls._get_own_review(user, review_id)
        deleted, _ = review.delete()
        logger.info(f"Review {review_id} deleted by user {user.pk}")
        return deleted > 0

    @staticmethod
    def _get_own_review(user, review_id):
        review = get_object_or_404(
            Review.objects.select_for_update(),
            pk=review_id,
        )
        if not review.is_written_by(user):
            logger.warning(f"User {user.pk} tried to change review {review_id} owned by {review.user_id}")
            raise ReviewPermissionDenied()
        return review
