# apps/accounts/models.py
from django.contrib.auth.models import AbstractUser, BaseUserManager
from django.db import models


class Provider(models.TextChoices):
    """Supported social login providers."""

    KAKAO = "kakao", "Kakao"
    GOOGLE = "google", "Google"


class UserManager(BaseUserManager):
    """Manager for email-identified users; social users have no password."""

    use_in_migrations = True

    def create_user(self, email, password=None, **extra_fields):
        if not email:
            raise ValueError("Email is required")
        email = self.normalize_email(email)
        extra_fields.setdefault("is_staff", False)
        extra_fields.setdefault("is_superuser", False)

        user = self.model(email=email, **extra_fields)
        if password:
            user.set_password(password)
        else:
            user.set_unusable_password()
        user.save(using=self._db)
        return user

    def create_superuser(self, email, password=None, **extra_fields):
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)
        return self.create_user(email, password, **extra_fields)


class User(AbstractUser):
    """
    Authentication model.
    - Email is the only identifier (no username)
    - Accounts are created by social sign-up; see AuthService
    - At most one valid refresh token, stored on the row
    """

    username = None
    email = models.EmailField(unique=True)

    nickname = models.CharField(max_length=30, blank=True, null=True)
    profile_image = models.FileField(upload_to="profile_images/", blank=True, null=True)
    personal_info_agreement = models.BooleanField(default=False)

    preferred_ingredients = models.ManyToManyField(
        "recipes.Ingredient",
        blank=True,
        related_name="preferred_by",
    )
    disliked_ingredients = models.ManyToManyField(
        "recipes.Ingredient",
        blank=True,
        related_name="disliked_by",
    )

    refresh_token = models.TextField(blank=True, null=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = UserManager()

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS = []

    class Meta:
        db_table = "accounts_user"

    def __str__(self):
        return self.email


class SocialAccount(models.Model):
    """
    Link between a User and one provider-scoped identity.
    A user may hold several; each (provider, social_key) pair maps to one user.
    """

    user = models.ForeignKey(
        User,
        on_delete=models.CASCADE,
        related_name="social_accounts",
    )
    provider = models.CharField(max_length=20, choices=Provider.choices)
    social_key = models.CharField(max_length=255)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "accounts_social_account"
        constraints = [
            models.UniqueConstraint(
                fields=["provider", "social_key"],
                name="unique_provider_social_key",
            )
        ]

    def __str__(self):
        return f"{self.provider}:{self.social_key} -> {self.user}"
