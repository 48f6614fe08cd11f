# apps/reviews/api.py
"""
Review write endpoints.

POST   /api/reviews/          - create a review
PATCH  /api/reviews/{id}/     - modify own review
DELETE /api/reviews/{id}/     - delete own review

Listing lives under /api/recipes/{id}/reviews/.
"""

import logging
from rest_framework import status
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated
from drf_yasg.utils import swagger_auto_schema
from drf_yasg import openapi

from .serializers import (
    ReviewSerializer,
    CreateReviewRequestSerializer,
    UpdateReviewRequestSerializer,
)
from .services import ReviewService

logger = logging.getLogger(__name__)


class ReviewCreateAPI(APIView):
    permission_classes = [IsAuthenticated]

    @swagger_auto_schema(
        operation_summary="Create Review",
        tags=["Reviews"],
        request_body=CreateReviewRequestSerializer,
        responses={
            201: ReviewSerializer,
            400: openapi.Response(description="Validation error"),
            404: openapi.Response(description="Recipe not found"),
        },
    )
    def post(self, request):
        serializer = CreateReviewRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        review = ReviewService.create_review(serializer.validated_data, request.user)

        return Response(ReviewSerializer(review).data, status=status.HTTP_201_CREATED)


class ReviewDetailAPI(APIView):
    permission_classes = [IsAuthenticated]

    @swagger_auto_schema(
        operation_summary="Modify Review",
        tags=["Reviews"],
        request_body=UpdateReviewRequestSerializer,
        responses={
            200: ReviewSerializer,
            403: openapi.Response(description="Not the author of this review"),
            404: openapi.Response(description="Review not found"),
        },
    )
    def patch(self, request, review_id):
        serializer = UpdateReviewRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        review = ReviewService.modify_review(
            serializer.validated_data, request.user, review_id
        )

        return Response(ReviewSerializer(review).data, status=status.HTTP_200_OK)

    @swagger_auto_schema(
        operation_summary="Delete Review",
        tags=["Reviews"],
        responses={
            204: openapi.Response(description="Review deleted"),
            403: openapi.Response(description="Not the author of this review"),
            404: openapi.Response(description="Review not found"),
        },
    )
    def delete(self, request, review_id):
        ReviewService.delete_review(request.user, review_id)
        return Response(status=status.HTTP_204_NO_CONTENT)
