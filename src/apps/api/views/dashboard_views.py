# src/apps/api/views/dashboard_views.py
"""
Dashboard Views

Summary counts, recent flights and document alerts.
"""

import logging

from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from apps.core.services import DashboardService
from apps.api.serializers import (
    DashboardSummarySerializer,
    RecentFlightSerializer,
    DocumentAlertSerializer,
)
from .aircraft_views import _date_param

logger = logging.getLogger(__name__)


class DashboardViewSet(viewsets.ViewSet):
    """
    Dashboard endpoints.

    - GET /dashboard/summary/
    - GET /dashboard/recent-flights/?limit=
    - GET /dashboard/alerts/?date=
    """

    @action(detail=False, methods=['get'])
    def summary(self, request):
        return Response(DashboardSummarySerializer(DashboardService.get_summary()).data)

    @action(detail=False, methods=['get'], url_path='recent-flights')
    def recent_flights(self, request):
        try:
            limit = int(request.query_params.get('limit', 0))
        except ValueError:
            limit = 0

        flights = DashboardService.get_recent_flights(limit if limit > 0 else None)
        return Response(RecentFlightSerializer(flights, many=True).data)

    @action(detail=False, methods=['get'])
    def alerts(self, request):
        alerts = DashboardService.get_document_alerts(_date_param(request))
        return Response(DocumentAlertSerializer(alerts, many=True).data)
