# src/apps/api/serializers/auth_serializers.py
"""
Authentication Serializers
"""

from rest_framework import serializers

from apps.core.models import AppUser
from .base import required_error


class LoginSerializer(serializers.Serializer):
    username = serializers.CharField(error_messages=required_error('Username is required'))
    password = serializers.CharField(
        write_only=True,
        trim_whitespace=False,
        error_messages=required_error('Password is required')
    )


class UserSerializer(serializers.ModelSerializer):
    can_edit = serializers.BooleanField(read_only=True)
    can_admin = serializers.BooleanField(read_only=True)

    class Meta:
        model = AppUser
        fields = ['id', 'username', 'name', 'role', 'can_edit', 'can_admin']


class TokenUserSerializer(serializers.Serializer):
    """Authenticated user as carried by the access token."""

    id = serializers.CharField()
    username = serializers.CharField()
    name = serializers.CharField()
    roles = serializers.ListField(child=serializers.CharField())
