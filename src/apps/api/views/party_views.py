# src/apps/api/views/party_views.py
"""
Party Views

ViewSets for owners, management companies, clients and client engagements.
"""

import logging

from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.response import Response

from apps.core.models import Owner, ManagementCompany, Client, ClientEngagement
from apps.core.services import OwnerService, ManagementService, ClientService
from apps.api.serializers import (
    OwnerSerializer,
    OwnerWriteSerializer,
    ManagementCompanySerializer,
    ManagementCompanyWriteSerializer,
    ClientSerializer,
    ClientWriteSerializer,
    EngagementSerializer,
    EngagementWriteSerializer,
    AssignManagementCompanySerializer,
    AircraftListSerializer,
)
from common.permissions import CanEditOrReadOnly
from .base import RecordViewSetMixin

logger = logging.getLogger(__name__)

WRITE_ACTIONS = ['create', 'update', 'partial_update']


class OwnerViewSet(RecordViewSetMixin, viewsets.ModelViewSet):
    """
    ViewSet for aircraft owners.

    Custom actions:
    - aircraft: Aircraft currently owned
    """

    queryset = Owner.objects.all()
    permission_classes = [CanEditOrReadOnly]
    search_fields = ['name', 'email']
    ordering_fields = ['name', 'created_at']
    ordering = ['name']
    detail_serializer_class = OwnerSerializer

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.owner_service = OwnerService()

    def get_serializer_class(self):
        if self.action in WRITE_ACTIONS:
            return OwnerWriteSerializer
        return OwnerSerializer

    def perform_create(self, serializer):
        serializer.instance = self.owner_service.create_owner(**serializer.validated_data)

    def perform_update(self, serializer):
        serializer.instance = self.owner_service.update_owner(
            serializer.instance.id, **serializer.validated_data
        )

    def perform_destroy(self, instance):
        self.owner_service.delete_owner(instance.id)

    @action(detail=True, methods=['get'])
    def aircraft(self, request, pk=None):
        owner = self.get_object()
        aircraft = self.owner_service.get_current_aircraft(owner.id)
        return Response(AircraftListSerializer(aircraft, many=True).data)


class ManagementCompanyViewSet(RecordViewSetMixin, viewsets.ModelViewSet):
    """
    ViewSet for management companies.

    Custom actions:
    - aircraft: Aircraft currently managed
    - clients: Clients currently engaged
    """

    queryset = ManagementCompany.objects.all()
    permission_classes = [CanEditOrReadOnly]
    search_fields = ['name', 'email']
    ordering_fields = ['name', 'created_at']
    ordering = ['name']
    detail_serializer_class = ManagementCompanySerializer

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.management_service = ManagementService()

    def get_serializer_class(self):
        if self.action in WRITE_ACTIONS:
            return ManagementCompanyWriteSerializer
        return ManagementCompanySerializer

    def perform_create(self, serializer):
        serializer.instance = self.management_service.create_company(**serializer.validated_data)

    def perform_update(self, serializer):
        serializer.instance = self.management_service.update_company(
            serializer.instance.id, **serializer.validated_data
        )

    def perform_destroy(self, instance):
        self.management_service.delete_company(instance.id)

    @action(detail=True, methods=['get'])
    def aircraft(self, request, pk=None):
        company = self.get_object()
        aircraft = self.management_service.get_managed_aircraft(company.id)
        return Response(AircraftListSerializer(aircraft, many=True).data)

    @action(detail=True, methods=['get'])
    def clients(self, request, pk=None):
        company = self.get_object()
        clients = self.management_service.get_current_clients(company.id)
        return Response(ClientSerializer(clients, many=True).data)


class ClientViewSet(RecordViewSetMixin, viewsets.ModelViewSet):
    """
    ViewSet for clients.

    Create and update accept an optional management_company (and
    engagement_start_date) which switches the client's engagement.

    Custom actions:
    - assign-company: Switch the client to a management company
    """

    queryset = Client.objects.all()
    permission_classes = [CanEditOrReadOnly]
    search_fields = ['name', 'email']
    ordering_fields = ['name', 'created_at']
    ordering = ['name']
    detail_serializer_class = ClientSerializer

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.client_service = ClientService()

    def get_serializer_class(self):
        if self.action in WRITE_ACTIONS:
            return ClientWriteSerializer
        return ClientSerializer

    def _split_engagement(self, validated_data):
        data = dict(validated_data)
        company = data.pop('management_company', None)
        start_date = data.pop('engagement_start_date', None)
        return data, (company.id if company else None), start_date

    def perform_create(self, serializer):
        data, company_id, start_date = self._split_engagement(serializer.validated_data)
        serializer.instance = self.client_service.create_client(
            management_company_id=company_id,
            engagement_start_date=start_date,
            **data
        )

    def perform_update(self, serializer):
        data, company_id, start_date = self._split_engagement(serializer.validated_data)
        serializer.instance = self.client_service.update_client(
            serializer.instance.id,
            management_company_id=company_id,
            engagement_start_date=start_date,
            **data
        )

    def perform_destroy(self, instance):
        self.client_service.delete_client(instance.id)

    @action(detail=True, methods=['post'], url_path='assign-company')
    def assign_company(self, request, pk=None):
        """End the current engagement (if another company) and open a new one."""
        client = self.get_object()
        serializer = AssignManagementCompanySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        engagement = self.client_service.assign_management_company(
            client.id,
            serializer.validated_data['management_company'].id,
            serializer.validated_data.get('start_date')
        )
        return Response(EngagementSerializer(engagement).data, status=status.HTTP_200_OK)


class ClientEngagementViewSet(RecordViewSetMixin, viewsets.ModelViewSet):
    """
    Engagement history of a client.

    Nested under clients: /clients/{client_pk}/engagements/
    """

    permission_classes = [CanEditOrReadOnly]
    pagination_class = None
    detail_serializer_class = EngagementSerializer

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.client_service = ClientService()

    def get_queryset(self):
        return ClientEngagement.objects.filter(
            client_id=self.kwargs.get('client_pk')
        ).select_related('management_company').order_by('-start_date')

    def get_serializer_class(self):
        if self.action in WRITE_ACTIONS:
            return EngagementWriteSerializer
        return EngagementSerializer

    def perform_create(self, serializer):
        data = serializer.validated_data
        serializer.instance = self.client_service.add_engagement(
            client_id=self.kwargs.get('client_pk'),
            management_company_id=data['management_company'].id,
            start_date=data['start_date'],
            end_date=data.get('end_date')
        )

    def perform_update(self, serializer):
        serializer.instance = self.client_service.update_engagement(
            serializer.instance.id, **serializer.validated_data
        )

    def perform_destroy(self, instance):
        self.client_service.delete_engagement(instance.id)
