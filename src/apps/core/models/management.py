# src/apps/core/models/management.py
"""
Management Company Models

Management companies and the aircraft they manage over time.
"""

from django.db import models

from common.mixins import UUIDPrimaryKeyMixin, TimestampMixin, TimeBoundedMixin


class ManagementCompany(UUIDPrimaryKeyMixin, TimestampMixin):
    """Company operating aircraft on behalf of owners and serving clients."""

    name = models.CharField(max_length=255)
    email = models.EmailField(max_length=255)
    phone = models.CharField(max_length=50)
    address = models.TextField(blank=True, default='')

    class Meta:
        db_table = 'management_companies'
        ordering = ['name']
        verbose_name_plural = 'Management Companies'

    def __str__(self):
        return self.name

    @property
    def current_aircraft(self):
        """Aircraft currently under this company's management."""
        from apps.core.models import Aircraft
        return Aircraft.objects.filter(
            managements__management_company=self,
            managements__end_date__isnull=True
        ).distinct()

    @property
    def current_client_count(self) -> int:
        return self.engagements.filter(end_date__isnull=True).values('client').distinct().count()


class AircraftManagement(UUIDPrimaryKeyMixin, TimestampMixin, TimeBoundedMixin):
    """Time-bounded link between an aircraft and its management company."""

    aircraft = models.ForeignKey(
        'Aircraft',
        on_delete=models.CASCADE,
        related_name='managements'
    )
    management_company = models.ForeignKey(
        'ManagementCompany',
        on_delete=models.CASCADE,
        related_name='aircraft_managements'
    )

    class Meta:
        db_table = 'aircraft_managements'
        ordering = ['aircraft', '-start_date']
        indexes = [
            models.Index(fields=['aircraft', 'start_date']),
        ]

    def __str__(self):
        return f"{self.aircraft} managed by {self.management_company}"
