# apps/recipes/admin.py
from django.contrib import admin
from .models import Unit, Ingredient, Recipe


@admin.register(Unit)
class UnitAdmin(admin.ModelAdmin):
    list_display = ['id', 'name']


@admin.register(Ingredient)
class IngredientAdmin(admin.ModelAdmin):
    list_display = ['id', 'name', 'unit', 'price']
    search_fields = ['name']


@admin.register(Recipe)
class RecipeAdmin(admin.ModelAdmin):
    list_display = ['id', 'title', 'servings', 'price', 'created_at']
    search_fields = ['title']
    filter_horizontal = ['ingredients']
    readonly_fields = ['created_at', 'updated_at']
