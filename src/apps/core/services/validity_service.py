# src/apps/core/services/validity_service.py
"""
Validity Service

Resolves which time-bounded relationship record (ownership, management,
client engagement) is current, or was in force on a given day.

Records are plain model instances; any iterable works (querysets,
prefetched lists). Collections are small, so resolution is a linear scan.
"""

from datetime import date
from typing import Any, Iterable, List, Optional


def _matches(record: Any, match: dict) -> bool:
    """Compare record attributes against keyword filters (ids compared as text)."""
    for field, expected in match.items():
        if str(getattr(record, field)) != str(expected):
            return False
    return True


class ValidityService:
    """
    Temporal validity resolution for relationship records.

    Every record exposes ``start_date`` and an optional ``end_date``.
    Both bounds are inclusive; a missing end date extends indefinitely.
    """

    @staticmethod
    def is_active_on(record: Any, day: date) -> bool:
        """Check whether the record's interval contains the given day."""
        if day < record.start_date:
            return False
        return record.end_date is None or day <= record.end_date

    @staticmethod
    def get_current(records: Iterable[Any], **match) -> Optional[Any]:
        """
        Get the current record (no end date).

        When several open records qualify, the latest start date wins.

        Args:
            records: Relationship records to search
            **match: Attribute filters, e.g. ``aircraft_id=...``

        Returns:
            The current record or None
        """
        candidates = [
            record for record in records
            if record.end_date is None and _matches(record, match)
        ]
        return max(candidates, key=lambda record: record.start_date, default=None)

    @staticmethod
    def resolve_as_of(records: Iterable[Any], day: date, **match) -> Optional[Any]:
        """
        Get the record in force on a given day.

        Overlapping records resolve to the one with the latest start date.
        """
        candidates = [
            record for record in records
            if _matches(record, match) and ValidityService.is_active_on(record, day)
        ]
        return max(candidates, key=lambda record: record.start_date, default=None)

    @staticmethod
    def history(records: Iterable[Any], **match) -> List[Any]:
        """All matching records, most recent start first."""
        return sorted(
            (record for record in records if _matches(record, match)),
            key=lambda record: record.start_date,
            reverse=True
        )
