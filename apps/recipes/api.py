# apps/recipes/api.py
"""
Read-only recipe catalogue endpoints. No authentication required.
"""

from rest_framework import generics
from rest_framework.permissions import AllowAny
from django.shortcuts import get_object_or_404
from drf_yasg.utils import swagger_auto_schema

from apps.reviews.models import Review
from apps.reviews.serializers import ReviewSerializer
from .models import Recipe
from .serializers import RecipeListSerializer, RecipeDetailSerializer


class RecipeListAPI(generics.ListAPIView):
    permission_classes = [AllowAny]
    serializer_class = RecipeListSerializer

    def get_queryset(self):
        return Recipe.objects.with_review_stats()

    @swagger_auto_schema(operation_summary="List Recipes", tags=["Recipes"])
    def get(self, request, *args, **kwargs):
        return super().get(request, *args, **kwargs)


class RecipeDetailAPI(generics.RetrieveAPIView):
    permission_classes = [AllowAny]
    serializer_class = RecipeDetailSerializer
    lookup_url_kwarg = 'recipe_id'

    def get_queryset(self):
        return (
            Recipe.objects.with_review_stats()
            .prefetch_related('ingredients__unit')
        )

    @swagger_auto_schema(operation_summary="Get Recipe", tags=["Recipes"])
    def get(self, request, *args, **kwargs):
        return super().get(request, *args, **kwargs)


class RecipeReviewListAPI(generics.ListAPIView):
    """Reviews of one recipe, newest first."""

    permission_classes = [AllowAny]
    serializer_class = ReviewSerializer

    def get_queryset(self):
        recipe = get_object_or_404(Recipe, pk=self.kwargs['recipe_id'])
        return Review.objects.filter(recipe=recipe).select_related('user')

    @swagger_auto_schema(operation_summary="List Recipe Reviews", tags=["Recipes", "Reviews"])
    def get(self, request, *args, **kwargs):
        return super().get(request, *args, **kwargs)
