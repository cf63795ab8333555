# src/common/mixins.py
"""
Reusable Mixins for Models
"""

import uuid
from datetime import date
from typing import Optional

from django.db import models


# =============================================================================
# MODEL MIXINS
# =============================================================================

class UUIDPrimaryKeyMixin(models.Model):
    """
    Mixin that provides UUID as primary key instead of auto-increment integer.
    """

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        help_text="Unique identifier for this record"
    )

    class Meta:
        abstract = True


class TimestampMixin(models.Model):
    """
    Mixin that provides created_at and updated_at timestamp fields.
    """

    created_at = models.DateTimeField(
        auto_now_add=True,
        db_index=True,
        help_text="When this record was created"
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        help_text="When this record was last updated"
    )

    class Meta:
        abstract = True


class TimeBoundedMixin(models.Model):
    """
    Mixin for relationship records that hold over an interval.

    The interval is closed on both ends. A missing end_date means the
    relationship is still in force.
    """

    start_date = models.DateField(
        db_index=True,
        help_text="First day the relationship is in force"
    )
    end_date = models.DateField(
        null=True,
        blank=True,
        help_text="Last day the relationship is in force (empty while current)"
    )

    class Meta:
        abstract = True

    @property
    def is_current(self) -> bool:
        """A record without an end date is the current one."""
        return self.end_date is None

    def is_active_on(self, day: date) -> bool:
        """Check whether the interval contains the given day."""
        if day < self.start_date:
            return False
        return self.end_date is None or day <= self.end_date

    def close(self, end_date: Optional[date] = None) -> None:
        """End the relationship (today unless a date is given)."""
        self.end_date = end_date or date.today()
        self.save(update_fields=['end_date', 'updated_at'])
