# src/apps/api/views/aircraft_views.py
"""
Aircraft Views

ViewSets for aircraft records and their ownership and management history.
"""

import logging
from datetime import date

from rest_framework import viewsets, serializers
from rest_framework.decorators import action
from rest_framework.response import Response
from django_filters import rest_framework as filters

from apps.core.models import Aircraft, AircraftOwnership, AircraftManagement
from apps.core.services import AircraftService, DocumentService
from apps.api.serializers import (
    AircraftListSerializer,
    AircraftDetailSerializer,
    AircraftCreateSerializer,
    AircraftUpdateSerializer,
    DocumentStatusSerializer,
    FlightListSerializer,
    OwnershipSerializer,
    OwnershipWriteSerializer,
    ManagementSerializer,
    ManagementWriteSerializer,
)
from common.permissions import CanEditOrReadOnly
from .base import RecordViewSetMixin

logger = logging.getLogger(__name__)


def _date_param(request, name='date'):
    """Optional ISO date query parameter."""
    value = request.query_params.get(name)
    if not value:
        return None
    field = serializers.DateField()
    try:
        return field.to_internal_value(value)
    except serializers.ValidationError as e:
        raise serializers.ValidationError({name: e.detail})


class AircraftFilter(filters.FilterSet):
    """Filter for aircraft."""

    tail_number = filters.CharFilter(lookup_expr='icontains')
    make = filters.CharFilter(lookup_expr='icontains')
    model = filters.CharFilter(lookup_expr='icontains')
    year_of_manufacture = filters.NumberFilter()
    owner = filters.UUIDFilter(method='filter_owner')
    management_company = filters.UUIDFilter(method='filter_management_company')

    class Meta:
        model = Aircraft
        fields = ['tail_number', 'make', 'model', 'year_of_manufacture']

    def filter_owner(self, queryset, name, value):
        """Aircraft currently owned by the given owner."""
        return queryset.filter(
            ownerships__owner_id=value,
            ownerships__end_date__isnull=True
        ).distinct()

    def filter_management_company(self, queryset, name, value):
        """Aircraft currently managed by the given company."""
        return queryset.filter(
            managements__management_company_id=value,
            managements__end_date__isnull=True
        ).distinct()


class AircraftViewSet(RecordViewSetMixin, viewsets.ModelViewSet):
    """
    ViewSet for aircraft records.

    list: Get all aircraft
    retrieve: Get aircraft details with documents and their status
    create: Register an aircraft
    update: Update aircraft
    partial_update: Partial update aircraft
    destroy: Delete aircraft (refused while flights reference it)

    Custom actions:
    - document-status: Status of each required document
    - coverage: Document coverage on a date
    - relationships: Owner and management company, current or on a date
    - flights: Flights of the aircraft
    """

    queryset = Aircraft.objects.all()
    permission_classes = [CanEditOrReadOnly]
    filterset_class = AircraftFilter
    search_fields = ['tail_number', 'make', 'model']
    ordering_fields = ['tail_number', 'make', 'model', 'year_of_manufacture', 'created_at']
    ordering = ['tail_number']
    detail_serializer_class = AircraftDetailSerializer

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.aircraft_service = AircraftService()
        self.document_service = DocumentService()

    def get_serializer_class(self):
        """Return appropriate serializer based on action."""
        if self.action == 'list':
            return AircraftListSerializer
        elif self.action == 'create':
            return AircraftCreateSerializer
        elif self.action in ['update', 'partial_update']:
            return AircraftUpdateSerializer
        return AircraftDetailSerializer

    def perform_create(self, serializer):
        serializer.instance = self.aircraft_service.create_aircraft(**serializer.validated_data)

    def perform_update(self, serializer):
        serializer.instance = self.aircraft_service.update_aircraft(
            aircraft_id=serializer.instance.id,
            **serializer.validated_data
        )

    def perform_destroy(self, instance):
        self.aircraft_service.delete_aircraft(instance.id)

    # ==========================================================================
    # Documents
    # ==========================================================================

    @action(detail=True, methods=['get'], url_path='document-status')
    def document_status(self, request, pk=None):
        """Status (valid, expiring, expired, missing) of each required document."""
        aircraft = self.get_object()
        statuses = self.document_service.get_aircraft_document_status(
            aircraft.documents.all(), aircraft.id
        )
        return Response(DocumentStatusSerializer(statuses, many=True).data)

    @action(detail=True, methods=['get'])
    def coverage(self, request, pk=None):
        """Whether every required document is valid on ?date= (default today)."""
        aircraft = self.get_object()
        day = _date_param(request) or date.today()
        valid, missing_types = self.document_service.has_valid_coverage(
            aircraft.documents.all(), aircraft.id, day
        )
        return Response({
            'aircraft_id': aircraft.id,
            'date': day,
            'valid': valid,
            'missing_types': missing_types,
        })

    # ==========================================================================
    # Relationships & Flights
    # ==========================================================================

    @action(detail=True, methods=['get'])
    def relationships(self, request, pk=None):
        """Owner and management company, current or as of ?date=."""
        aircraft = self.get_object()
        result = self.aircraft_service.get_relationships(aircraft.id, _date_param(request))
        owner = result['owner']
        company = result['management_company']
        return Response({
            'aircraft_id': aircraft.id,
            'date': result['date'],
            'owner': {'id': owner.id, 'name': owner.name} if owner else None,
            'management_company': (
                {'id': company.id, 'name': company.name} if company else None
            ),
        })

    @action(detail=True, methods=['get'])
    def flights(self, request, pk=None):
        aircraft = self.get_object()
        flights = aircraft.flights.select_related('aircraft', 'client')
        return Response(FlightListSerializer(flights, many=True).data)


class AircraftOwnershipViewSet(RecordViewSetMixin, viewsets.ModelViewSet):
    """
    Ownership history of an aircraft.

    Nested under aircraft: /aircraft/{aircraft_pk}/ownerships/
    Listed most recent start first.
    """

    permission_classes = [CanEditOrReadOnly]
    pagination_class = None
    detail_serializer_class = OwnershipSerializer

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.aircraft_service = AircraftService()

    def get_queryset(self):
        return AircraftOwnership.objects.filter(
            aircraft_id=self.kwargs.get('aircraft_pk')
        ).select_related('owner').order_by('-start_date')

    def get_serializer_class(self):
        if self.action in ['create', 'update', 'partial_update']:
            return OwnershipWriteSerializer
        return OwnershipSerializer

    def perform_create(self, serializer):
        data = serializer.validated_data
        serializer.instance = self.aircraft_service.add_ownership(
            aircraft_id=self.kwargs.get('aircraft_pk'),
            owner_id=data['owner'].id,
            start_date=data['start_date'],
            end_date=data.get('end_date')
        )

    def perform_update(self, serializer):
        serializer.instance = self.aircraft_service.update_ownership(
            serializer.instance.id, **serializer.validated_data
        )

    def perform_destroy(self, instance):
        self.aircraft_service.delete_ownership(instance.id)


class AircraftManagementViewSet(RecordViewSetMixin, viewsets.ModelViewSet):
    """
    Management history of an aircraft.

    Nested under aircraft: /aircraft/{aircraft_pk}/managements/
    """

    permission_classes = [CanEditOrReadOnly]
    pagination_class = None
    detail_serializer_class = ManagementSerializer

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.aircraft_service = AircraftService()

    def get_queryset(self):
        return AircraftManagement.objects.filter(
            aircraft_id=self.kwargs.get('aircraft_pk')
        ).select_related('management_company').order_by('-start_date')

    def get_serializer_class(self):
        if self.action in ['create', 'update', 'partial_update']:
            return ManagementWriteSerializer
        return ManagementSerializer

    def perform_create(self, serializer):
        data = serializer.validated_data
        serializer.instance = self.aircraft_service.add_management(
            aircraft_id=self.kwargs.get('aircraft_pk'),
            management_company_id=data['management_company'].id,
            start_date=data['start_date'],
            end_date=data.get('end_date')
        )

    def perform_update(self, serializer):
        serializer.instance = self.aircraft_service.update_management(
            serializer.instance.id, **serializer.validated_data
        )

    def perform_destroy(self, instance):
        self.aircraft_service.delete_management(instance.id)
