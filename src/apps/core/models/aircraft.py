# src/apps/core/models/aircraft.py
"""
Aircraft Model

Core model for the aircraft whose flights are tracked for MOT refunds.
"""

from datetime import date
from typing import Optional

from django.db import models

from common.mixins import UUIDPrimaryKeyMixin, TimestampMixin


class Aircraft(UUIDPrimaryKeyMixin, TimestampMixin):
    """
    Aircraft model.

    Ownership and management history hang off the aircraft as
    time-bounded relationship records (see AircraftOwnership and
    AircraftManagement).
    """

    # ==========================================================================
    # Identification
    # ==========================================================================

    tail_number = models.CharField(
        max_length=20,
        unique=True,
        help_text='Registration mark, stored upper-case (e.g. N123AB)'
    )
    make = models.CharField(max_length=100)
    model = models.CharField(max_length=100)
    year_of_manufacture = models.PositiveIntegerField()

    class Meta:
        db_table = 'aircraft'
        ordering = ['tail_number']
        verbose_name = 'Aircraft'
        verbose_name_plural = 'Aircraft'

    def __str__(self):
        return self.tail_number

    def save(self, *args, **kwargs):
        if self.tail_number:
            self.tail_number = self.tail_number.upper().strip()
        super().save(*args, **kwargs)

    # ==========================================================================
    # Properties
    # ==========================================================================

    @property
    def display_name(self) -> str:
        return f"{self.tail_number} - {self.make} {self.model}"

    @property
    def current_ownership(self):
        """Ownership record without an end date, if any."""
        from apps.core.services.validity_service import ValidityService
        return ValidityService.get_current(self.ownerships.all())

    @property
    def current_management(self):
        """Management record without an end date, if any."""
        from apps.core.services.validity_service import ValidityService
        return ValidityService.get_current(self.managements.all())

    @property
    def current_owner(self):
        ownership = self.current_ownership
        return ownership.owner if ownership else None

    @property
    def current_management_company(self):
        management = self.current_management
        return management.management_company if management else None

    # ==========================================================================
    # Methods
    # ==========================================================================

    def owner_on(self, day: date):
        """Owner whose ownership interval contains the given day."""
        from apps.core.services.validity_service import ValidityService
        ownership = ValidityService.resolve_as_of(self.ownerships.all(), day)
        return ownership.owner if ownership else None

    def management_company_on(self, day: date):
        """Management company whose interval contains the given day."""
        from apps.core.services.validity_service import ValidityService
        management = ValidityService.resolve_as_of(self.managements.all(), day)
        return management.management_company if management else None

    def has_flights(self) -> bool:
        return self.flights.exists()

    @classmethod
    def find_by_tail_number(cls, tail_number: str) -> Optional['Aircraft']:
        return cls.objects.filter(tail_number=tail_number.upper().strip()).first()
