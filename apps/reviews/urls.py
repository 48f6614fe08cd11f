# apps/reviews/urls.py
from django.urls import path
from .api import ReviewCreateAPI, ReviewDetailAPI

app_name = 'reviews'

urlpatterns = [
    path('', ReviewCreateAPI.as_view(), name='create'),
    path('<int:review_id>/', ReviewDetailAPI.as_view(), name='detail'),
]
