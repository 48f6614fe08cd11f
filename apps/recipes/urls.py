# apps/recipes/urls.py
from django.urls import path
from .api import RecipeListAPI, RecipeDetailAPI, RecipeReviewListAPI

app_name = 'recipes'

urlpatterns = [
    path('', RecipeListAPI.as_view(), name='list'),
    path('<int:recipe_id>/', RecipeDetailAPI.as_view(), name='detail'),
    path('<int:recipe_id>/reviews/', RecipeReviewListAPI.as_view(), name='reviews'),
]
