# apps/recipes/serializers.py
from rest_framework import serializers
from .models import Unit, Ingredient, Recipe


class UnitSerializer(serializers.ModelSerializer):
    class Meta:
        model = Unit
        fields = ['id', 'name']
        read_only_fields = fields


class IngredientSerializer(serializers.ModelSerializer):
    unit = UnitSerializer(read_only=True)

    class Meta:
        model = Ingredient
        fields = ['id', 'name', 'unit', 'price']
        read_only_fields = fields


class RecipeListSerializer(serializers.ModelSerializer):
    """Recipe card for list endpoints, with review statistics."""

    reviewCount = serializers.IntegerField(source='review_count', read_only=True)
    averageScore = serializers.SerializerMethodField()
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = Recipe
        fields = [
            'id',
            'title',
            'servings',
            'price',
            'reviewCount',
            'averageScore',
            'createdAt',
        ]
        read_only_fields = fields

    def get_averageScore(self, obj):
        if obj.average_score is None:
            return 0.0
        return round(float(obj.average_score), 1)


class RecipeDetailSerializer(RecipeListSerializer):
    ingredients = IngredientSerializer(many=True, read_only=True)

    class Meta(RecipeListSerializer.Meta):
        fields = RecipeListSerializer.Meta.fields + ['description', 'ingredients']
        read_only_fields = fields
