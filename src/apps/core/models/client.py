# src/apps/core/models/client.py
"""
Client Models

Charter clients and their engagements with management companies.
"""

from django.db import models

from common.mixins import UUIDPrimaryKeyMixin, TimestampMixin, TimeBoundedMixin


class Client(UUIDPrimaryKeyMixin, TimestampMixin):
    """Client flown on managed aircraft."""

    name = models.CharField(max_length=255)
    email = models.EmailField(max_length=255)
    phone = models.CharField(max_length=50)

    class Meta:
        db_table = 'clients'
        ordering = ['name']

    def __str__(self):
        return self.name

    @property
    def current_engagement(self):
        from apps.core.services.validity_service import ValidityService
        return ValidityService.get_current(self.engagements.all())

    @property
    def current_management_company(self):
        engagement = self.current_engagement
        return engagement.management_company if engagement else None


class ClientEngagement(UUIDPrimaryKeyMixin, TimestampMixin, TimeBoundedMixin):
    """Time-bounded link between a client and a management company."""

    client = models.ForeignKey(
        'Client',
        on_delete=models.CASCADE,
        related_name='engagements'
    )
    management_company = models.ForeignKey(
        'ManagementCompany',
        on_delete=models.CASCADE,
        related_name='engagements'
    )

    class Meta:
        db_table = 'client_engagements'
        ordering = ['client', '-start_date']

    def __str__(self):
        return f"{self.client} with {self.management_company}"
