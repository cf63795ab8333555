# src/apps/api/views/auth_views.py
"""
Authentication Views

Login with username and password, and the current user profile.
"""

import logging

from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from apps.core.services import AuthService
from apps.api.serializers import LoginSerializer, UserSerializer, TokenUserSerializer
from .base import ServiceErrorMixin

logger = logging.getLogger(__name__)


class AuthViewSet(ServiceErrorMixin, viewsets.ViewSet):
    """
    Authentication endpoints.

    - POST /auth/login/ - Exchange credentials for an access token
    - GET /auth/me/ - Current user from the token
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.auth_service = AuthService()

    @action(
        detail=False,
        methods=['post'],
        permission_classes=[AllowAny],
        authentication_classes=[]
    )
    def login(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = self.auth_service.login(
            serializer.validated_data['username'],
            serializer.validated_data['password']
        )

        return Response({
            'access_token': result['access_token'],
            'token_type': result['token_type'],
            'expires_in': result['expires_in'],
            'user': UserSerializer(result['user']).data,
        }, status=status.HTTP_200_OK)

    @action(detail=False, methods=['get'])
    def me(self, request):
        return Response(TokenUserSerializer(request.user).data)
