# src/common/permissions.py
"""
Custom Permission Classes for Role-Based Access Control (RBAC)
"""

from typing import List, TYPE_CHECKING
from rest_framework import permissions
from rest_framework.request import Request
import logging

from common.constants import UserRole, EDITOR_ROLES

if TYPE_CHECKING:
    from rest_framework.views import APIView

logger = logging.getLogger(__name__)


class BasePermission(permissions.BasePermission):
    """Base permission class with utility methods"""

    def get_user_roles(self, request: Request) -> List[str]:
        """Get roles from user object or JWT payload"""
        if hasattr(request.user, 'roles'):
            return request.user.roles
        if hasattr(request, 'auth') and isinstance(request.auth, dict):
            return request.auth.get('roles', [])
        return []

    def is_authenticated(self, request: Request) -> bool:
        return bool(
            request.user and
            hasattr(request.user, 'is_authenticated') and
            request.user.is_authenticated
        )


class IsAuthenticated(BasePermission):
    """Verify that user is authenticated"""

    def has_permission(self, request: Request, view: 'APIView') -> bool:
        return self.is_authenticated(request)


class HasRole(BasePermission):
    """Check if user has required role(s)"""

    required_roles: List[str] = []

    def has_permission(self, request: Request, view: 'APIView') -> bool:
        if not self.is_authenticated(request):
            return False

        user_roles = self.get_user_roles(request)
        return bool(set(self.required_roles) & set(user_roles))


# =============================================================================
# ROLE-SPECIFIC PERMISSIONS
# =============================================================================

class IsAdministrator(HasRole):
    """Only administrators (data reset, user management)"""
    required_roles = [UserRole.ADMINISTRATOR.value]


# =============================================================================
# COMBINED PERMISSIONS
# =============================================================================

class CanEditOrReadOnly(BasePermission):
    """
    Read access for any authenticated user,
    write access for administrators and data-entry users.
    """

    def has_permission(self, request: Request, view: 'APIView') -> bool:
        if not self.is_authenticated(request):
            return False

        if request.method in permissions.SAFE_METHODS:
            return True

        user_roles = self.get_user_roles(request)
        allowed = bool(set(user_roles) & set(EDITOR_ROLES))
        if not allowed:
            logger.info(
                f"Write access denied for {request.user}: {request.method} {request.path}"
            )
        return allowed
