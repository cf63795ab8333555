# src/apps/core/services/auth_service.py
"""
Authentication Service

Checks demo account credentials and issues signed access tokens.
"""

import logging
from typing import Any, Dict

from django.conf import settings

from apps.core.models import AppUser
from common.authentication import JWTTokenGenerator

logger = logging.getLogger(__name__)


class AuthService:
    """Login with username and password."""

    def authenticate(self, username: str, password: str) -> AppUser:
        """
        Verify credentials.

        Raises:
            InvalidCredentialsError: Unknown user, inactive user or wrong password
        """
        from . import InvalidCredentialsError

        user = AppUser.objects.filter(username=username, is_active=True).first()
        if user is None or not user.check_password(password):
            logger.warning(f"Failed login attempt for {username}")
            raise InvalidCredentialsError("Invalid username or password")

        return user

    def login(self, username: str, password: str) -> Dict[str, Any]:
        """Authenticate and return an access token with the user profile."""
        user = self.authenticate(username, password)

        token = JWTTokenGenerator.generate_access_token(
            user_id=str(user.id),
            username=user.username,
            name=user.name,
            roles=[user.role]
        )

        logger.info(f"User {user.username} logged in")
        return {
            'access_token': token,
            'token_type': 'Bearer',
            'expires_in': int(settings.JWT_SETTINGS['ACCESS_TOKEN_LIFETIME'].total_seconds()),
            'user': user,
        }
