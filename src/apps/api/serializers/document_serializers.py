# src/apps/api/serializers/document_serializers.py
"""
Document Serializers

Serializers for aircraft documents and their status.
"""

from rest_framework import serializers

from apps.core.models import AircraftDocument
from .base import required_error


class DocumentListSerializer(serializers.ModelSerializer):
    """Serializer for document list view."""

    document_type_display = serializers.CharField(
        source='get_document_type_display', read_only=True
    )
    is_valid = serializers.BooleanField(read_only=True)
    is_expired = serializers.BooleanField(read_only=True)
    is_expiring_soon = serializers.BooleanField(read_only=True)
    days_until_expiry = serializers.IntegerField(read_only=True)

    class Meta:
        model = AircraftDocument
        fields = [
            'id', 'aircraft', 'document_type', 'document_type_display',
            'document_number', 'document_url',
            'valid_from', 'valid_to',
            'is_valid', 'is_expired', 'is_expiring_soon', 'days_until_expiry',
        ]


class DocumentDetailSerializer(DocumentListSerializer):
    """Serializer for document detail view."""

    class Meta(DocumentListSerializer.Meta):
        fields = DocumentListSerializer.Meta.fields + ['created_at', 'updated_at']


class DocumentCreateSerializer(serializers.ModelSerializer):
    """Serializer for adding a document to an aircraft."""

    document_type = serializers.ChoiceField(
        choices=AircraftDocument.DocumentType.choices,
        error_messages={
            **required_error('Document type is required'),
            'invalid_choice': 'Invalid document type: {input}',
        }
    )
    valid_from = serializers.DateField(error_messages=required_error('Valid from date is required'))
    valid_to = serializers.DateField(error_messages=required_error('Valid to date is required'))
    document_number = serializers.CharField(
        max_length=100, required=False, allow_blank=True, default=''
    )
    document_url = serializers.URLField(
        max_length=500, required=False, allow_blank=True, default=''
    )

    class Meta:
        model = AircraftDocument
        fields = ['document_type', 'valid_from', 'valid_to', 'document_number', 'document_url']

    def validate(self, attrs):
        valid_from = attrs.get('valid_from', getattr(self.instance, 'valid_from', None))
        valid_to = attrs.get('valid_to', getattr(self.instance, 'valid_to', None))

        if valid_from and valid_to and valid_to < valid_from:
            raise serializers.ValidationError({
                'valid_to': 'Valid to date must be after valid from date'
            })

        return attrs


class DocumentUpdateSerializer(DocumentCreateSerializer):
    """Serializer for updating a document."""
    pass


class DocumentStatusSerializer(serializers.Serializer):
    """Status of one required document type."""

    type = serializers.CharField()
    status = serializers.ChoiceField(choices=['valid', 'expiring', 'expired', 'missing'])
    document = DocumentListSerializer(allow_null=True)
