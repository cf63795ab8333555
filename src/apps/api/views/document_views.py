# src/apps/api/views/document_views.py
"""
Document Views

ViewSet for aircraft document management.
"""

import logging
from datetime import date, timedelta

from django.conf import settings
from django.db import models
from django_filters import rest_framework as filters
from rest_framework import viewsets

from apps.core.models import AircraftDocument
from apps.core.services import DocumentService
from apps.api.serializers import (
    DocumentListSerializer,
    DocumentDetailSerializer,
    DocumentCreateSerializer,
    DocumentUpdateSerializer,
)
from common.permissions import CanEditOrReadOnly
from .base import RecordViewSetMixin

logger = logging.getLogger(__name__)


class DocumentFilter(filters.FilterSet):
    """Filter for documents."""

    document_type = filters.ChoiceFilter(choices=AircraftDocument.DocumentType.choices)
    is_valid = filters.BooleanFilter(method='filter_is_valid')
    is_expired = filters.BooleanFilter(method='filter_is_expired')
    expiring_soon = filters.BooleanFilter(method='filter_expiring_soon')

    class Meta:
        model = AircraftDocument
        fields = ['document_type']

    def filter_is_valid(self, queryset, name, value):
        today = date.today()
        valid = models.Q(valid_from__lte=today, valid_to__gte=today)
        return queryset.filter(valid) if value else queryset.exclude(valid)

    def filter_is_expired(self, queryset, name, value):
        if value:
            return queryset.filter(valid_to__lt=date.today())
        return queryset.filter(valid_to__gte=date.today())

    def filter_expiring_soon(self, queryset, name, value):
        today = date.today()
        window_end = today + timedelta(days=settings.DOCUMENT_EXPIRY_WARNING_DAYS)
        expiring = models.Q(valid_to__gte=today, valid_to__lte=window_end)
        return queryset.filter(expiring) if value else queryset.exclude(expiring)


class DocumentViewSet(RecordViewSetMixin, viewsets.ModelViewSet):
    """
    ViewSet for document management.

    Nested under aircraft: /aircraft/{aircraft_pk}/documents/
    """

    permission_classes = [CanEditOrReadOnly]
    pagination_class = None
    filterset_class = DocumentFilter
    search_fields = ['document_number']
    ordering_fields = ['document_type', 'valid_from', 'valid_to', 'created_at']
    ordering = ['document_type', '-valid_to']
    detail_serializer_class = DocumentDetailSerializer

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.document_service = DocumentService()

    def get_queryset(self):
        """Get documents for the aircraft."""
        aircraft_pk = self.kwargs.get('aircraft_pk')
        if not aircraft_pk:
            return AircraftDocument.objects.none()

        return AircraftDocument.objects.filter(
            aircraft_id=aircraft_pk
        ).select_related('aircraft')

    def get_serializer_class(self):
        """Return appropriate serializer based on action."""
        if self.action == 'list':
            return DocumentListSerializer
        elif self.action == 'create':
            return DocumentCreateSerializer
        elif self.action in ['update', 'partial_update']:
            return DocumentUpdateSerializer
        return DocumentDetailSerializer

    def perform_create(self, serializer):
        serializer.instance = self.document_service.add_document(
            aircraft_id=self.kwargs.get('aircraft_pk'),
            **serializer.validated_data
        )

    def perform_update(self, serializer):
        serializer.instance = self.document_service.update_document(
            document_id=serializer.instance.id,
            **serializer.validated_data
        )

    def perform_destroy(self, instance):
        self.document_service.delete_document(instance.id)
