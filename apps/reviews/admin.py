# apps/reviews/admin.py
from django.contrib import admin
from .models import Review


@admin.register(Review)
class ReviewAdmin(admin.ModelAdmin):
    list_display = ['id', 'recipe', 'user', 'score', 'created_at']
    list_filter = ['score', 'created_at']
    search_fields = ['user__email', 'recipe__title', 'comment']
    readonly_fields = ['created_at', 'updated_at']
    ordering = ['-created_at']
