# src/apps/api/serializers/base.py
"""
Serializer Helpers

Shared error messages and validation for the record serializers.
"""

from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import serializers

from common.validators import validate_date_order


def required_error(message: str) -> dict:
    """Same message whether the field is missing, blank or null."""
    return {'required': message, 'blank': message, 'null': message}


def party_ref(party):
    """Compact {id, name} reference, or None."""
    if party is None:
        return None
    return {'id': str(party.id), 'name': party.name}


class IntervalValidationMixin:
    """Rejects relationship intervals that end before they start."""

    def validate(self, attrs):
        attrs = super().validate(attrs)

        start_date = attrs.get('start_date', getattr(self.instance, 'start_date', None))
        if 'end_date' in attrs:
            end_date = attrs['end_date']
        else:
            end_date = getattr(self.instance, 'end_date', None)

        try:
            validate_date_order(start_date, end_date)
        except DjangoValidationError as e:
            raise serializers.ValidationError({'end_date': e.messages})

        return attrs
