# apps/reviews/models.py
from django.db import models
from django.core.validators import MinValueValidator, MaxValueValidator
from django.conf import settings


class Review(models.Model):
    """
    A user's score (1-5) and comment on a recipe.

    Only the author may modify or delete it; see ReviewService.
    """

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='reviews',
    )
    recipe = models.ForeignKey(
        'recipes.Recipe',
        on_delete=models.CASCADE,
        related_name='reviews',
    )
    score = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(1), MaxValueValidator(5)],
        help_text='Rating 1-5'
    )
    comment = models.TextField()

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'reviews'
        ordering = ['-created_at', '-id']
        indexes = [
            models.Index(fields=['recipe', 'created_at'], name='reviews_recipe_created_idx'),
        ]

    def __str__(self):
        return f"Review {self.pk} on {self.recipe_id} by {self.user_id}"

    def is_written_by(self, user) -> bool:
        return self.user_id == getattr(user, 'pk', None)
