"""
Shared Constants Module.

Constants shared by models, permissions and services.
"""
from enum import Enum
from typing import List

# =============================================================================
# USER & AUTHENTICATION
# =============================================================================

class UserRole(str, Enum):
    """User roles in the system."""
    ADMINISTRATOR = "administrator"
    DATA_ENTRY = "data-entry"
    VIEWER = "viewer"


# Roles allowed to create, update and delete records
EDITOR_ROLES: List[str] = [UserRole.ADMINISTRATOR.value, UserRole.DATA_ENTRY.value]


# =============================================================================
# EXPORT FORMATS
# =============================================================================

FORMAT_CSV = 'csv'
FORMAT_EXCEL = 'xlsx'
