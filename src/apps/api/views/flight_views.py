# src/apps/api/views/flight_views.py
"""
Flight Views

ViewSets for flights and their fuel receipts.
"""

import logging

from django_filters import rest_framework as filters
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from apps.core.models import Flight, FuelReceipt
from apps.core.services import FlightService, DocumentService
from apps.api.serializers import (
    FlightListSerializer,
    FlightDetailSerializer,
    FlightWriteSerializer,
    FuelReceiptSerializer,
    FuelReceiptWriteSerializer,
)
from common.permissions import CanEditOrReadOnly
from .base import RecordViewSetMixin

logger = logging.getLogger(__name__)


class FlightFilter(filters.FilterSet):
    """Filter for flights."""

    aircraft = filters.UUIDFilter(field_name='aircraft_id')
    client = filters.UUIDFilter(field_name='client_id')
    date_from = filters.DateFilter(field_name='flight_date', lookup_expr='gte')
    date_to = filters.DateFilter(field_name='flight_date', lookup_expr='lte')
    departure = filters.CharFilter(lookup_expr='iexact')
    arrival = filters.CharFilter(lookup_expr='iexact')

    class Meta:
        model = Flight
        fields = ['aircraft', 'client', 'departure', 'arrival']


class FlightViewSet(RecordViewSetMixin, viewsets.ModelViewSet):
    """
    ViewSet for flights.

    Custom actions:
    - coverage: Whether the aircraft's documents covered the flight date
    """

    permission_classes = [CanEditOrReadOnly]
    filterset_class = FlightFilter
    search_fields = ['departure', 'arrival', 'aircraft__tail_number', 'client__name']
    ordering_fields = ['flight_date', 'created_at']
    ordering = ['-flight_date', '-created_at']
    detail_serializer_class = FlightDetailSerializer

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.flight_service = FlightService()
        self.document_service = DocumentService()

    def get_queryset(self):
        return Flight.objects.select_related('aircraft', 'client')

    def get_serializer_class(self):
        if self.action == 'list':
            return FlightListSerializer
        elif self.action in ['create', 'update', 'partial_update']:
            return FlightWriteSerializer
        return FlightDetailSerializer

    def _to_ids(self, validated_data):
        data = dict(validated_data)
        if 'aircraft' in data:
            data['aircraft_id'] = data.pop('aircraft').id
        if 'client' in data:
            client = data.pop('client')
            data['client_id'] = client.id if client else None
        return data

    def perform_create(self, serializer):
        serializer.instance = self.flight_service.create_flight(
            **self._to_ids(serializer.validated_data)
        )

    def perform_update(self, serializer):
        serializer.instance = self.flight_service.update_flight(
            serializer.instance.id, **self._to_ids(serializer.validated_data)
        )

    def perform_destroy(self, instance):
        self.flight_service.delete_flight(instance.id)

    @action(detail=True, methods=['get'])
    def coverage(self, request, pk=None):
        flight = self.get_object()
        valid, missing_types = self.document_service.flight_has_valid_coverage(
            flight.aircraft.documents.all(), flight
        )
        return Response({
            'flight_id': flight.id,
            'aircraft_id': flight.aircraft_id,
            'flight_date': flight.flight_date,
            'valid': valid,
            'missing_types': missing_types,
        })


class FuelReceiptViewSet(RecordViewSetMixin, viewsets.ModelViewSet):
    """
    Fuel receipts of a flight.

    Nested under flights: /flights/{flight_pk}/receipts/
    """

    permission_classes = [CanEditOrReadOnly]
    pagination_class = None
    detail_serializer_class = FuelReceiptSerializer

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.flight_service = FlightService()

    def get_queryset(self):
        return FuelReceipt.objects.filter(
            flight_id=self.kwargs.get('flight_pk')
        ).order_by('receipt_date', 'receipt_number')

    def get_serializer_class(self):
        if self.action in ['create', 'update', 'partial_update']:
            return FuelReceiptWriteSerializer
        return FuelReceiptSerializer

    def perform_create(self, serializer):
        serializer.instance = self.flight_service.add_receipt(
            flight_id=self.kwargs.get('flight_pk'),
            **serializer.validated_data
        )

    def perform_update(self, serializer):
        serializer.instance = self.flight_service.update_receipt(
            serializer.instance.id, **serializer.validated_data
        )

    def perform_destroy(self, instance):
        self.flight_service.delete_receipt(instance.id)
