# src/apps/core/models/owner.py
"""
Owner Models

Aircraft owners and the ownership history linking them to aircraft.
"""

from django.db import models

from common.mixins import UUIDPrimaryKeyMixin, TimestampMixin, TimeBoundedMixin


class Owner(UUIDPrimaryKeyMixin, TimestampMixin):
    """Registered owner of one or more aircraft."""

    name = models.CharField(max_length=255)
    email = models.EmailField(max_length=255)
    phone = models.CharField(max_length=50)
    address = models.TextField(blank=True, default='')

    class Meta:
        db_table = 'owners'
        ordering = ['name']

    def __str__(self):
        return self.name

    @property
    def current_aircraft(self):
        """Aircraft this owner currently holds (open ownership records)."""
        from apps.core.models import Aircraft
        return Aircraft.objects.filter(
            ownerships__owner=self,
            ownerships__end_date__isnull=True
        ).distinct()


class AircraftOwnership(UUIDPrimaryKeyMixin, TimestampMixin, TimeBoundedMixin):
    """
    Time-bounded link between an aircraft and its owner.

    The record without an end date is the current ownership.
    """

    aircraft = models.ForeignKey(
        'Aircraft',
        on_delete=models.CASCADE,
        related_name='ownerships'
    )
    owner = models.ForeignKey(
        'Owner',
        on_delete=models.CASCADE,
        related_name='ownerships'
    )

    class Meta:
        db_table = 'aircraft_ownerships'
        ordering = ['aircraft', '-start_date']
        indexes = [
            models.Index(fields=['aircraft', 'start_date']),
        ]

    def __str__(self):
        end = self.end_date.isoformat() if self.end_date else 'present'
        return f"{self.aircraft} owned by {self.owner} ({self.start_date.isoformat()} - {end})"
