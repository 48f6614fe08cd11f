# apps/accounts/services.py
"""
Social sign-up / login.

AuthService.sign_up_or_login takes an identity assertion
(email, social_key, provider) from the client, finds or creates the user
for the email, makes sure the (provider, social_key) identity is linked to
that user, then issues a token pair and sets it on the response cookies.
An identity already owned by another account is rejected with a 409.

Uniqueness of User.email and of (provider, social_key) is enforced by the
database. A create that loses a race re-reads the winning row.
"""

import logging
from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction

from apps.common.exceptions import (
    InvalidProviderError,
    MissingFieldError,
    SocialAccountConflictError,
)
from .models import Provider, SocialAccount
from .tokens import TokenService, set_access_token_cookie, set_refresh_token_cookie

logger = logging.getLogger(__name__)
User = get_user_model()

SIGNED_UP_MESSAGE = "회원가입 후 로그인이 완료되었습니다."
LOGGED_IN_MESSAGE = "로그인에 성공했습니다."

REQUIRED_FIELDS = ("email", "social_key", "provider")


class AuthService:

    @classmethod
    def sign_up_or_login(cls, data, response):
        """
        Resolve the account for an identity assertion and log it in.

        Args:
            data: dict with "email", "social_key", "provider"
            response: HTTP response that receives the token cookies

        Returns:
            dict with "message", "access_token", "is_new_user"

        Raises:
            MissingFieldError: a required field is absent or blank
            InvalidProviderError: provider is not a supported Provider
            SocialAccountConflictError: the identity is linked to another email
        """
        email, social_key, provider = cls.validate_sign_up_or_login(data)
        email = User.objects.normalize_email(email)

        linked = SocialAccount.objects.select_related("user").filter(
            provider=provider, social_key=social_key
        ).first()
        if linked is not None and linked.user.email != email:
            logger.warning(
                f"{provider} identity belongs to user {linked.user_id}, rejecting login as {email}"
            )
            raise SocialAccountConflictError()

        with transaction.atomic():
            user, created = cls.get_or_register_user(email)
            cls.link_social_account(user, provider, social_key)
            tokens = TokenService.issue(user)

        set_refresh_token_cookie(response, tokens["refresh"])
        set_access_token_cookie(response, tokens["access"])

        return {
            "message": SIGNED_UP_MESSAGE if created else LOGGED_IN_MESSAGE,
            "access_token": tokens["access"],
            "is_new_user": created,
        }

    @staticmethod
    def validate_sign_up_or_login(data):
        """Return (email, social_key, Provider). Runs before any database access."""
        missing = [
            field for field in REQUIRED_FIELDS
            if data.get(field) is None or not str(data.get(field)).strip()
        ]
        if missing:
            logger.info(f"Sign-up/login rejected, missing fields: {missing}")
            raise MissingFieldError(fields=missing)

        try:
            provider = Provider(data["provider"])
        except ValueError:
            logger.info(f"Sign-up/login rejected, unsupported provider: {data['provider']!r}")
            raise InvalidProviderError()

        return data["email"].strip(), data["social_key"].strip(), provider

    @staticmethod
    def get_or_register_user(email):
        """
        Find the user by email or create one.

        Returns:
            (user, created)
        """
        email = User.objects.normalize_email(email)
        user = User.objects.filter(email=email).first()
        if user is not None:
            return user, False

        try:
            with transaction.atomic():
                user = User.objects.create_user(email=email)
        except IntegrityError:
            # Concurrent sign-up with the same email won
            logger.info(f"User for {email} created concurrently, using existing row")
            return User.objects.get(email=email), False

        logger.info(f"Registered new user {user.pk} ({email})")
        return user, True

    @staticmethod
    def link_social_account(user, provider, social_key):
        """
        Ensure (provider, social_key) is linked to user.

        Raises SocialAccountConflictError when it is linked to someone else.

        Returns:
            (social_account, created)
        """
        social_account = SocialAccount.objects.filter(
            provider=provider, social_key=social_key
        ).first()

        if social_account is None:
            try:
                with transaction.atomic():
                    social_account = SocialAccount.objects.create(
                        user=user, provider=provider, social_key=social_key
                    )
            except IntegrityError:
                logger.info(f"{provider}:{social_key} linked concurrently, using existing row")
                social_account = SocialAccount.objects.get(
                    provider=provider, social_key=social_key
                )
            else:
                logger.info(f"Linked {provider} account to user {user.pk}")
                return social_account, True

        if social_account.user_id != user.pk:
            logger.warning(
                f"{provider} identity already linked to user {social_account.user_id}, "
                f"not to {user.pk}"
            )
            raise SocialAccountConflictError()

        return social_account, False
