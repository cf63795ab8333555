# src/apps/api/serializers/flight_serializers.py
"""
Flight Serializers

Serializers for flights and fuel receipts.
"""

from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import serializers

from apps.core.models import Aircraft, Client, Flight, FuelReceipt
from apps.core.services import DocumentService
from common.validators import (
    validate_airport_code,
    validate_positive_decimal,
    validate_receipt_image,
)
from .base import required_error


# =============================================================================
# Fuel Receipts
# =============================================================================

class FuelReceiptSerializer(serializers.ModelSerializer):
    """Serializer for fuel receipt responses."""

    class Meta:
        model = FuelReceipt
        fields = [
            'id', 'flight', 'receipt_number', 'receipt_date', 'vendor',
            'fuel_liters', 'receipt_total', 'mot_amount_paid',
            'receipt_image_url',
            'created_at', 'updated_at',
        ]


class FuelReceiptWriteSerializer(serializers.ModelSerializer):
    """Serializer for adding or editing a fuel receipt."""

    receipt_number = serializers.CharField(
        max_length=100, error_messages=required_error('Receipt number is required')
    )
    receipt_date = serializers.DateField(
        error_messages=required_error('Receipt date is required')
    )
    fuel_liters = serializers.DecimalField(
        max_digits=12, decimal_places=2,
        error_messages={**required_error('Valid fuel amount is required'),
                        'invalid': 'Valid fuel amount is required'}
    )
    receipt_total = serializers.DecimalField(
        max_digits=12, decimal_places=2,
        error_messages={**required_error('Valid receipt total is required'),
                        'invalid': 'Valid receipt total is required'}
    )
    mot_amount_paid = serializers.DecimalField(
        max_digits=12, decimal_places=2,
        error_messages={**required_error('Valid MOT amount is required'),
                        'invalid': 'Valid MOT amount is required'}
    )
    vendor = serializers.CharField(max_length=255, required=False, allow_blank=True, default='')
    receipt_image_url = serializers.CharField(required=False, allow_blank=True, default='')

    class Meta:
        model = FuelReceipt
        fields = [
            'receipt_number', 'receipt_date', 'vendor',
            'fuel_liters', 'receipt_total', 'mot_amount_paid',
            'receipt_image_url',
        ]

    def _positive(self, value, message, allow_zero=False):
        try:
            return validate_positive_decimal(value, allow_zero=allow_zero)
        except DjangoValidationError:
            raise serializers.ValidationError(message)

    def validate_fuel_liters(self, value):
        return self._positive(value, 'Valid fuel amount is required')

    def validate_receipt_total(self, value):
        return self._positive(value, 'Valid receipt total is required')

    def validate_mot_amount_paid(self, value):
        return self._positive(value, 'Valid MOT amount is required', allow_zero=True)

    def validate_receipt_image_url(self, value):
        return validate_receipt_image(value)


# =============================================================================
# Flights
# =============================================================================

class FlightListSerializer(serializers.ModelSerializer):
    """Serializer for flight list view."""

    tail_number = serializers.CharField(source='aircraft.tail_number', read_only=True)
    client_name = serializers.CharField(source='client.name', read_only=True, default=None)
    route = serializers.CharField(read_only=True)
    total_fuel_liters = serializers.DecimalField(max_digits=14, decimal_places=2, read_only=True)
    total_mot_paid = serializers.DecimalField(max_digits=14, decimal_places=2, read_only=True)

    class Meta:
        model = Flight
        fields = [
            'id', 'flight_date', 'aircraft', 'tail_number',
            'client', 'client_name',
            'departure', 'arrival', 'route',
            'total_fuel_liters', 'total_mot_paid',
        ]


class FlightDetailSerializer(FlightListSerializer):
    """Serializer for flight detail view, with receipts and coverage."""

    fuel_receipts = FuelReceiptSerializer(many=True, read_only=True)
    coverage = serializers.SerializerMethodField()

    class Meta(FlightListSerializer.Meta):
        fields = FlightListSerializer.Meta.fields + [
            'notes', 'fuel_receipts', 'coverage', 'created_at', 'updated_at',
        ]

    def get_coverage(self, obj):
        valid, missing_types = DocumentService().flight_has_valid_coverage(
            obj.aircraft.documents.all(), obj
        )
        return {'valid': valid, 'missing_types': missing_types}


class FlightWriteSerializer(serializers.ModelSerializer):
    """Serializer for recording or editing a flight."""

    aircraft = serializers.PrimaryKeyRelatedField(
        queryset=Aircraft.objects.all(),
        error_messages={**required_error('Aircraft is required'),
                        'does_not_exist': 'Aircraft not found'}
    )
    client = serializers.PrimaryKeyRelatedField(
        queryset=Client.objects.all(),
        required=False,
        allow_null=True,
        error_messages={'does_not_exist': 'Client not found'}
    )
    flight_date = serializers.DateField(error_messages=required_error('Flight date is required'))
    departure = serializers.CharField(
        max_length=10, error_messages=required_error('Departure is required')
    )
    arrival = serializers.CharField(
        max_length=10, error_messages=required_error('Arrival is required')
    )
    notes = serializers.CharField(required=False, allow_blank=True, default='')

    class Meta:
        model = Flight
        fields = ['aircraft', 'client', 'flight_date', 'departure', 'arrival', 'notes']

    def validate_departure(self, value):
        return validate_airport_code(value, 'departure')

    def validate_arrival(self, value):
        return validate_airport_code(value, 'arrival')
