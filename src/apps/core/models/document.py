# src/apps/core/models/document.py
"""
Aircraft Document Model

Typed, time-bounded documents that an aircraft must hold to fly.
"""

from datetime import date, timedelta

from django.conf import settings
from django.db import models

from common.mixins import UUIDPrimaryKeyMixin, TimestampMixin


class AircraftDocument(UUIDPrimaryKeyMixin, TimestampMixin):
    """
    Aircraft document (registration, airworthiness, insurance).

    A document covers every day from valid_from through valid_to,
    both days included.
    """

    class DocumentType(models.TextChoices):
        REGISTRATION = 'registration', 'Registration'
        AIRWORTHINESS = 'airworthiness', 'Airworthiness'
        INSURANCE = 'insurance', 'Insurance'

    REQUIRED_TYPES = [
        DocumentType.REGISTRATION,
        DocumentType.AIRWORTHINESS,
        DocumentType.INSURANCE,
    ]

    aircraft = models.ForeignKey(
        'Aircraft',
        on_delete=models.CASCADE,
        related_name='documents'
    )

    # ==========================================================================
    # Document Information
    # ==========================================================================

    document_type = models.CharField(
        max_length=20,
        choices=DocumentType.choices
    )
    document_number = models.CharField(
        max_length=100,
        blank=True,
        default='',
        help_text='Official document/certificate number'
    )
    document_url = models.URLField(max_length=500, blank=True, default='')

    # ==========================================================================
    # Validity
    # ==========================================================================

    valid_from = models.DateField()
    valid_to = models.DateField()

    class Meta:
        db_table = 'aircraft_documents'
        ordering = ['aircraft', 'document_type', '-valid_to']
        verbose_name = 'Aircraft Document'
        verbose_name_plural = 'Aircraft Documents'
        indexes = [
            models.Index(fields=['aircraft', 'document_type']),
            models.Index(fields=['valid_to']),
        ]

    def __str__(self):
        return f"{self.aircraft.tail_number} - {self.get_document_type_display()}"

    # ==========================================================================
    # Properties
    # ==========================================================================

    @property
    def is_valid(self) -> bool:
        return self.is_valid_on(date.today())

    @property
    def is_expired(self) -> bool:
        """Check if document is expired."""
        return self.valid_to < date.today()

    @property
    def days_until_expiry(self) -> int:
        """Days until document expires."""
        return (self.valid_to - date.today()).days

    @property
    def is_expiring_soon(self) -> bool:
        return self.is_expiring_soon_on(date.today())

    # ==========================================================================
    # Methods
    # ==========================================================================

    def is_valid_on(self, day: date) -> bool:
        """Check whether the document covers the given day."""
        return self.valid_from <= day <= self.valid_to

    def is_expiring_soon_on(self, day: date, warning_days: int = None) -> bool:
        """Check whether the document runs out inside the warning window."""
        if warning_days is None:
            warning_days = settings.DOCUMENT_EXPIRY_WARNING_DAYS
        return day <= self.valid_to <= day + timedelta(days=warning_days)
