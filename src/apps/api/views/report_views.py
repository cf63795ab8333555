# src/apps/api/views/report_views.py
"""
Report Views

MOT refund report and its CSV / Excel export.
"""

import logging

from django.http import HttpResponse
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from apps.core.services import ReportService, ExportService
from apps.api.serializers import (
    ReportQuerySerializer,
    ReportExportQuerySerializer,
    ReportSerializer,
)
from .base import ServiceErrorMixin

logger = logging.getLogger(__name__)

ID_FILTERS = ['aircraft_ids', 'owner_ids', 'management_company_ids', 'client_ids']


def parse_report_query(query_params, serializer_class=ReportQuerySerializer):
    """
    Validate report query parameters.

    Id filters may be repeated (?owner_ids=a&owner_ids=b) or comma
    separated (?owner_ids=a,b).
    """
    data = {}
    for key in query_params:
        if key in ID_FILTERS:
            data[key] = [
                value.strip()
                for raw in query_params.getlist(key)
                for value in raw.split(',')
                if value.strip()
            ]
        elif query_params.get(key):
            data[key] = query_params.get(key)

    serializer = serializer_class(data=data)
    serializer.is_valid(raise_exception=True)
    return dict(serializer.validated_data)


class ReportViewSet(ServiceErrorMixin, viewsets.ViewSet):
    """
    MOT refund report.

    Endpoints:
    - GET /reports/mot-refund/ - Report as JSON
    - GET /reports/mot-refund/export/?export_format=csv|xlsx - Report file

    Query parameters: start_date, end_date, aircraft_ids, owner_ids,
    management_company_ids, client_ids.
    """

    @action(detail=False, methods=['get'], url_path='mot-refund')
    def mot_refund(self, request):
        filters = parse_report_query(request.query_params)
        report = ReportService.generate_mot_report(**filters)
        return Response(ReportSerializer(report).data)

    @action(detail=False, methods=['get'], url_path='mot-refund/export')
    def mot_refund_export(self, request):
        filters = parse_report_query(request.query_params, ReportExportQuerySerializer)
        export_format = filters.pop('export_format')

        report = ReportService.generate_mot_report(**filters)
        export = ExportService.export(report, export_format)

        response = HttpResponse(export['content'], content_type=export['content_type'])
        response['Content-Disposition'] = f'attachment; filename="{export["filename"]}"'
        return response
