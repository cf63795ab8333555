# src/apps/core/models/flight.py
"""
Flight and Fuel Receipt Models

Flights flown by an aircraft and the fuel receipts that carry the MOT
amounts reclaimed in the refund report.
"""

from decimal import Decimal

from django.db import models
from django.db.models import Sum

from common.mixins import UUIDPrimaryKeyMixin, TimestampMixin


class Flight(UUIDPrimaryKeyMixin, TimestampMixin):
    """
    Single flight leg.

    Departure and arrival are airport codes stored upper-case.
    """

    aircraft = models.ForeignKey(
        'Aircraft',
        on_delete=models.PROTECT,
        related_name='flights'
    )
    client = models.ForeignKey(
        'Client',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='flights'
    )

    # ==========================================================================
    # Flight Details
    # ==========================================================================

    flight_date = models.DateField(db_index=True)
    departure = models.CharField(max_length=10)
    arrival = models.CharField(max_length=10)
    notes = models.TextField(blank=True, default='')

    class Meta:
        db_table = 'flights'
        ordering = ['-flight_date', '-created_at']
        indexes = [
            models.Index(fields=['aircraft', 'flight_date']),
        ]

    def __str__(self):
        return f"{self.flight_date.isoformat()} {self.route}"

    def save(self, *args, **kwargs):
        self.departure = (self.departure or '').upper().strip()
        self.arrival = (self.arrival or '').upper().strip()
        super().save(*args, **kwargs)

    @property
    def route(self) -> str:
        return f"{self.departure}-{self.arrival}"

    @property
    def total_fuel_liters(self) -> Decimal:
        return self.fuel_receipts.aggregate(total=Sum('fuel_liters'))['total'] or Decimal('0')

    @property
    def total_mot_paid(self) -> Decimal:
        return self.fuel_receipts.aggregate(total=Sum('mot_amount_paid'))['total'] or Decimal('0')


class FuelReceipt(UUIDPrimaryKeyMixin, TimestampMixin):
    """Fuel purchase receipt recorded against a flight."""

    flight = models.ForeignKey(
        'Flight',
        on_delete=models.CASCADE,
        related_name='fuel_receipts'
    )

    # ==========================================================================
    # Receipt Details
    # ==========================================================================

    receipt_number = models.CharField(max_length=100)
    receipt_date = models.DateField()
    vendor = models.CharField(max_length=255, blank=True, default='')

    # ==========================================================================
    # Amounts
    # ==========================================================================

    fuel_liters = models.DecimalField(max_digits=12, decimal_places=2)
    receipt_total = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        help_text='Total amount on the receipt'
    )
    mot_amount_paid = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        help_text='MOT tax included in the receipt total'
    )

    # Base64 data URL or external URL
    receipt_image_url = models.TextField(blank=True, default='')

    class Meta:
        db_table = 'fuel_receipts'
        ordering = ['-receipt_date', 'receipt_number']

    def __str__(self):
        return f"{self.receipt_number} ({self.receipt_date.isoformat()})"
