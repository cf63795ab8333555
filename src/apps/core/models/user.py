# src/apps/core/models/user.py
"""
Application User Model

Demo accounts that sign in to the records API.
"""

from django.contrib.auth.hashers import make_password, check_password
from django.db import models

from common.mixins import UUIDPrimaryKeyMixin, TimestampMixin
from common.constants import UserRole, EDITOR_ROLES


class AppUser(UUIDPrimaryKeyMixin, TimestampMixin):
    """
    User account with a single role.

    Administrators and data-entry users may change records; viewers read only.
    """

    class Role(models.TextChoices):
        ADMINISTRATOR = UserRole.ADMINISTRATOR.value, 'Administrator'
        DATA_ENTRY = UserRole.DATA_ENTRY.value, 'Data Entry'
        VIEWER = UserRole.VIEWER.value, 'Viewer'

    username = models.CharField(max_length=150, unique=True)
    password = models.CharField(max_length=128)
    name = models.CharField(max_length=255)
    role = models.CharField(
        max_length=20,
        choices=Role.choices,
        default=Role.VIEWER
    )
    is_active = models.BooleanField(default=True)

    class Meta:
        db_table = 'app_users'
        ordering = ['username']

    def __str__(self):
        return self.username

    def set_password(self, raw_password: str) -> None:
        self.password = make_password(raw_password)

    def check_password(self, raw_password: str) -> bool:
        return check_password(raw_password, self.password)

    @property
    def can_edit(self) -> bool:
        return self.role in EDITOR_ROLES

    @property
    def can_admin(self) -> bool:
        return self.role == self.Role.ADMINISTRATOR
