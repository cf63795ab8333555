# src/apps/api/serializers/aircraft_serializers.py
"""
Aircraft Serializers

Serializers for aircraft records.
"""

from rest_framework import serializers

from apps.core.models import Aircraft
from apps.core.services import DocumentService
from common.validators import validate_tail_number, validate_year_of_manufacture
from .base import required_error, party_ref
from .document_serializers import DocumentListSerializer, DocumentStatusSerializer


class AircraftListSerializer(serializers.ModelSerializer):
    """Serializer for aircraft list view."""

    current_owner = serializers.SerializerMethodField()
    current_management_company = serializers.SerializerMethodField()

    class Meta:
        model = Aircraft
        fields = [
            'id', 'tail_number', 'make', 'model', 'year_of_manufacture',
            'current_owner', 'current_management_company',
            'created_at',
        ]

    def get_current_owner(self, obj):
        return party_ref(obj.current_owner)

    def get_current_management_company(self, obj):
        return party_ref(obj.current_management_company)


class AircraftDetailSerializer(AircraftListSerializer):
    """Serializer for aircraft detail view, with documents and their status."""

    display_name = serializers.CharField(read_only=True)
    documents = DocumentListSerializer(many=True, read_only=True)
    document_status = serializers.SerializerMethodField()

    class Meta(AircraftListSerializer.Meta):
        fields = [
            'id', 'tail_number', 'make', 'model', 'year_of_manufacture',
            'display_name',
            'current_owner', 'current_management_company',
            'documents', 'document_status',
            'created_at', 'updated_at',
        ]

    def get_document_status(self, obj):
        statuses = DocumentService().get_aircraft_document_status(obj.documents.all(), obj.id)
        return DocumentStatusSerializer(statuses, many=True).data


class AircraftCreateSerializer(serializers.ModelSerializer):
    """Serializer for creating an aircraft."""

    # Declared explicitly so duplicates reach the service as a conflict
    tail_number = serializers.CharField(
        max_length=20, error_messages=required_error('Tail number is required')
    )
    make = serializers.CharField(max_length=100, error_messages=required_error('Make is required'))
    model = serializers.CharField(max_length=100, error_messages=required_error('Model is required'))
    year_of_manufacture = serializers.IntegerField(
        error_messages={**required_error('Invalid year'), 'invalid': 'Invalid year'}
    )

    class Meta:
        model = Aircraft
        fields = ['tail_number', 'make', 'model', 'year_of_manufacture']

    def validate_tail_number(self, value):
        return validate_tail_number(value)

    def validate_year_of_manufacture(self, value):
        return validate_year_of_manufacture(value)


class AircraftUpdateSerializer(AircraftCreateSerializer):
    """Serializer for updating an aircraft."""
    pass
