# apps/accounts/tests/test_auth_service.py
"""
Tests for AuthService.sign_up_or_login.

Tests cover:
1. Validation (missing fields, unsupported provider) before any write
2. New user / existing user / new provider link paths
3. Idempotent re-login
4. Identity already owned by another account
5. Losing a concurrent insert race
"""

from unittest.mock import patch

from django.conf import settings
from django.contrib.auth import get_user_model
from django.http import HttpResponse
from django.test import TestCase

from apps.accounts.models import Provider, SocialAccount
from apps.accounts.services import (
    AuthService,
    LOGGED_IN_MESSAGE,
    SIGNED_UP_MESSAGE,
)
from apps.common.exceptions import (
    InvalidProviderError,
    MissingFieldError,
    SocialAccountConflictError,
)

User = get_user_model()


def assertion(email="a@x.com", social_key="sk1", provider="kakao"):
    return {"email": email, "social_key": social_key, "provider": provider}


class SignUpOrLoginValidationTestCase(TestCase):

    def test_missing_each_required_field(self):
        """Test that each absent field is reported and nothing is written."""
        for field in ("email", "social_key", "provider"):
            data = assertion()
            data.pop(field)
            with self.subTest(field=field):
                with self.assertRaises(MissingFieldError) as ctx:
                    AuthService.sign_up_or_login(data, HttpResponse())
                self.assertEqual(ctx.exception.fields, [field])

        self.assertEqual(User.objects.count(), 0)
        self.assertEqual(SocialAccount.objects.count(), 0)

    def test_null_and_blank_fields_are_missing(self):
        """Test that null and whitespace-only values count as missing."""
        data = {"email": None, "social_key": "  ", "provider": "kakao"}

        with self.assertRaises(MissingFieldError) as ctx:
            AuthService.sign_up_or_login(data, HttpResponse())

        self.assertEqual(ctx.exception.fields, ["email", "social_key"])
        self.assertEqual(User.objects.count(), 0)

    def test_unsupported_provider(self):
        """Test that unknown or wrongly-cased providers are rejected."""
        for provider in ("naver", "KAKAO", "apple"):
            with self.subTest(provider=provider):
                with self.assertRaises(InvalidProviderError):
                    AuthService.sign_up_or_login(
                        assertion(provider=provider), HttpResponse()
                    )

        self.assertEqual(User.objects.count(), 0)
        self.assertEqual(SocialAccount.objects.count(), 0)

    def test_missing_field_checked_before_provider(self):
        """Test that a missing field wins over a bad provider."""
        with self.assertRaises(MissingFieldError):
            AuthService.sign_up_or_login(
                {"email": "a@x.com", "provider": "naver"}, HttpResponse()
            )

    def test_validation_runs_before_database_access(self):
        """Test that invalid input is rejected without touching the database."""
        with self.assertNumQueries(0):
            with self.assertRaises(InvalidProviderError):
                AuthService.sign_up_or_login(assertion(provider="naver"), HttpResponse())


class SignUpOrLoginFlowTestCase(TestCase):

    def test_new_user_on_empty_storage(self):
        """Test that the first login creates the user and the link."""
        response = HttpResponse()

        result = AuthService.sign_up_or_login(assertion(), response)

        self.assertTrue(result["is_new_user"])
        self.assertEqual(result["message"], SIGNED_UP_MESSAGE)
        self.assertTrue(result["access_token"])

        user = User.objects.get(email="a@x.com")
        self.assertFalse(user.has_usable_password())
        self.assertEqual(SocialAccount.objects.count(), 1)
        link = SocialAccount.objects.get()
        self.assertEqual(link.user, user)
        self.assertEqual(link.provider, Provider.KAKAO)
        self.assertEqual(link.social_key, "sk1")

    def test_refresh_token_persisted_and_cookies_set(self):
        """Test that the refresh token is stored and both cookies are set."""
        response = HttpResponse()

        result = AuthService.sign_up_or_login(assertion(), response)

        user = User.objects.get(email="a@x.com")
        refresh_cookie = response.cookies[settings.AUTH_COOKIES["REFRESH_TOKEN_NAME"]]
        access_cookie = response.cookies[settings.AUTH_COOKIES["ACCESS_TOKEN_NAME"]]
        self.assertEqual(refresh_cookie.value, user.refresh_token)
        self.assertEqual(access_cookie.value, result["access_token"])
        self.assertTrue(refresh_cookie["httponly"])

    def test_existing_user_already_linked(self):
        """Test that a linked user logs in and gets a new refresh token."""
        AuthService.sign_up_or_login(assertion(), HttpResponse())
        first_refresh = User.objects.get(email="a@x.com").refresh_token

        result = AuthService.sign_up_or_login(assertion(), HttpResponse())

        self.assertFalse(result["is_new_user"])
        self.assertEqual(result["message"], LOGGED_IN_MESSAGE)
        self.assertEqual(User.objects.count(), 1)
        self.assertEqual(
            SocialAccount.objects.filter(provider="kakao", social_key="sk1").count(), 1
        )
        # Only the latest refresh token is kept
        self.assertNotEqual(User.objects.get(email="a@x.com").refresh_token, first_refresh)

    def test_existing_user_with_new_provider_gets_linked(self):
        """Test that a second provider is linked to the same user."""
        AuthService.sign_up_or_login(assertion(), HttpResponse())

        result = AuthService.sign_up_or_login(
            assertion(social_key="g-123", provider="google"), HttpResponse()
        )

        self.assertFalse(result["is_new_user"])
        self.assertEqual(User.objects.count(), 1)
        user = User.objects.get(email="a@x.com")
        self.assertEqual(user.social_accounts.count(), 2)
        self.assertTrue(
            SocialAccount.objects.filter(
                user=user, provider="google", social_key="g-123"
            ).exists()
        )

    def test_user_created_elsewhere_is_linked_and_not_new(self):
        """Test that a user created by another path is not reported as new."""
        # Account created moments ago through another path
        user = User.objects.create_user(email="a@x.com")

        result = AuthService.sign_up_or_login(assertion(), HttpResponse())

        self.assertFalse(result["is_new_user"])
        self.assertEqual(result["message"], LOGGED_IN_MESSAGE)
        self.assertEqual(user.social_accounts.count(), 1)

    def test_repeated_login_creates_no_duplicate_link(self):
        """Test that repeated logins create no duplicate rows."""
        AuthService.sign_up_or_login(assertion(), HttpResponse())
        AuthService.sign_up_or_login(assertion(), HttpResponse())

        self.assertEqual(User.objects.count(), 1)
        self.assertEqual(SocialAccount.objects.count(), 1)

    def test_identity_linked_to_other_user_is_rejected(self):
        """Test that a fresh email presenting another user's identity creates no account."""
        AuthService.sign_up_or_login(assertion(email="owner@x.com"), HttpResponse())

        with self.assertRaises(SocialAccountConflictError):
            AuthService.sign_up_or_login(assertion(email="other@x.com"), HttpResponse())

        self.assertEqual(User.objects.count(), 1)
        self.assertFalse(User.objects.filter(email="other@x.com").exists())
        link = SocialAccount.objects.get(provider="kakao", social_key="sk1")
        self.assertEqual(link.user.email, "owner@x.com")

    def test_identity_linked_to_other_existing_user_is_rejected(self):
        """Test that the owner keeps the link and the other user gets no tokens."""
        AuthService.sign_up_or_login(assertion(email="owner@x.com"), HttpResponse())
        other = User.objects.create_user(email="other@x.com")
        response = HttpResponse()

        with self.assertRaises(SocialAccountConflictError):
            AuthService.sign_up_or_login(assertion(email="other@x.com"), response)

        other.refresh_from_db()
        self.assertIsNone(other.refresh_token)
        self.assertNotIn(settings.AUTH_COOKIES["ACCESS_TOKEN_NAME"], response.cookies)
        self.assertEqual(other.social_accounts.count(), 0)

    def test_email_domain_is_normalized(self):
        """Test that emails differing only in domain case resolve to one user."""
        AuthService.sign_up_or_login(assertion(email="a@X.COM"), HttpResponse())

        result = AuthService.sign_up_or_login(assertion(email="a@x.com"), HttpResponse())

        self.assertFalse(result["is_new_user"])
        self.assertEqual(User.objects.count(), 1)


class ConcurrentRegistrationTestCase(TestCase):
    """A create that loses to a concurrent insert falls back to the existing row."""

    def test_user_insert_race_uses_existing_row(self):
        """Test that losing the user insert race returns the existing user."""
        existing = User.objects.create_user(email="race@x.com")

        with patch("apps.accounts.services.User.objects.filter") as mock_filter:
            mock_filter.return_value.first.return_value = None
            user, created = AuthService.get_or_register_user("race@x.com")

        self.assertFalse(created)
        self.assertEqual(user, existing)
        self.assertEqual(User.objects.filter(email="race@x.com").count(), 1)

    def test_social_account_insert_race_uses_existing_row(self):
        """Test that losing the link insert race returns the existing link."""
        user = User.objects.create_user(email="race@x.com")
        existing = SocialAccount.objects.create(
            user=user, provider=Provider.GOOGLE, social_key="g-1"
        )

        with patch("apps.accounts.services.SocialAccount.objects.filter") as mock_filter:
            mock_filter.return_value.first.return_value = None
            link, created = AuthService.link_social_account(user, Provider.GOOGLE, "g-1")

        self.assertFalse(created)
        self.assertEqual(link, existing)
        self.assertEqual(SocialAccount.objects.count(), 1)

    def test_link_owned_by_other_user_raises_conflict(self):
        """Test that linking an identity owned by another user raises a conflict."""
        owner = User.objects.create_user(email="owner@x.com")
        SocialAccount.objects.create(user=owner, provider=Provider.KAKAO, social_key="sk1")
        other = User.objects.create_user(email="other@x.com")

        with self.assertRaises(SocialAccountConflictError):
            AuthService.link_social_account(other, Provider.KAKAO, "sk1")

        self.assertEqual(SocialAccount.objects.get().user, owner)

    def test_conflict_found_after_user_insert_rolls_back_user(self):
        """Test that a link appearing after the pre-check rolls back the new user."""
        owner = User.objects.create_user(email="owner@x.com")
        SocialAccount.objects.create(user=owner, provider=Provider.KAKAO, social_key="sk1")

        with patch("apps.accounts.services.SocialAccount.objects.select_related") as mock_select:
            mock_select.return_value.filter.return_value.first.return_value = None
            with self.assertRaises(SocialAccountConflictError):
                AuthService.sign_up_or_login(assertion(email="late@x.com"), HttpResponse())

        self.assertFalse(User.objects.filter(email="late@x.com").exists())
        self.assertEqual(User.objects.count(), 1)
