# apps/recipes/models.py
"""
Recipe catalogue models.

Models:
- Unit: Measuring unit for an ingredient (g, ml, 개, ...)
- Ingredient: Priced ingredient, price is won per unit
- Recipe: Recipe with an estimated total cost; reviews attach here
"""

from django.db import models
from django.db.models import Avg, Count
from django.core.validators import MinValueValidator


class Unit(models.Model):
    name = models.CharField(max_length=10)

    class Meta:
        db_table = 'units'
        ordering = ['id']

    def __str__(self):
        return self.name


class Ingredient(models.Model):
    name = models.CharField(max_length=100)
    unit = models.ForeignKey(
        Unit,
        on_delete=models.PROTECT,
        related_name='ingredients',
    )
    price = models.PositiveIntegerField(
        default=0,
        help_text='Price in won per unit'
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'ingredients'
        ordering = ['name']

    def __str__(self):
        return self.name


class RecipeQuerySet(models.QuerySet):
    def with_review_stats(self):
        """Annotate review_count and average_score (None when unreviewed)."""
        return self.annotate(
            review_count=Count('reviews', distinct=True),
            average_score=Avg('reviews__score'),
        )


class Recipe(models.Model):
    title = models.CharField(max_length=100)
    description = models.TextField(blank=True, default='')
    servings = models.PositiveSmallIntegerField(
        default=1,
        validators=[MinValueValidator(1)],
    )
    price = models.PositiveIntegerField(
        default=0,
        help_text='Estimated total cost in won'
    )
    ingredients = models.ManyToManyField(
        Ingredient,
        blank=True,
        related_name='recipes',
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = RecipeQuerySet.as_manager()

    class Meta:
        db_table = 'recipes'
        ordering = ['-created_at', '-id']

    def __str__(self):
        return self.title
