# src/apps/core/services/dashboard_service.py
"""
Dashboard Service

Summary counts, recent flights and fleet document alerts.
"""

import logging
from datetime import date
from decimal import Decimal
from typing import Any, Dict, List, Optional

from django.conf import settings
from django.db.models import Sum

from apps.core.models import (
    Aircraft,
    AircraftDocument,
    Client,
    Flight,
    FuelReceipt,
    ManagementCompany,
    Owner,
)
from apps.core.services.document_service import DocumentService

logger = logging.getLogger(__name__)

SEVERITY_ORDER = {'error': 0, 'warning': 1, 'info': 2}


class DashboardService:
    """Read-only aggregates for the dashboard."""

    @staticmethod
    def get_summary() -> Dict[str, Any]:
        total_mot = FuelReceipt.objects.aggregate(total=Sum('mot_amount_paid'))['total']

        return {
            'aircraft_count': Aircraft.objects.count(),
            'owner_count': Owner.objects.count(),
            'management_company_count': ManagementCompany.objects.count(),
            'client_count': Client.objects.count(),
            'flight_count': Flight.objects.count(),
            'total_mot_paid': total_mot or Decimal('0'),
        }

    @staticmethod
    def get_recent_flights(limit: Optional[int] = None) -> List[Dict[str, Any]]:
        """Most recent flights by flight date with their MOT total."""
        limit = limit or settings.RECENT_FLIGHTS_LIMIT
        flights = (
            Flight.objects
            .select_related('aircraft', 'client')
            .annotate(mot_paid=Sum('fuel_receipts__mot_amount_paid'))
            .order_by('-flight_date', '-created_at')[:limit]
        )

        return [
            {
                'id': flight.id,
                'flight_date': flight.flight_date,
                'aircraft_id': flight.aircraft_id,
                'tail_number': flight.aircraft.tail_number,
                'departure': flight.departure,
                'arrival': flight.arrival,
                'client_name': flight.client.name if flight.client else None,
                'mot_paid': flight.mot_paid or Decimal('0'),
            }
            for flight in flights
        ]

    @staticmethod
    def get_document_alerts(day: Optional[date] = None) -> List[Dict[str, Any]]:
        """Fleet-wide document alerts, errors before warnings."""
        alerts = DocumentService().generate_document_alerts(
            Aircraft.objects.all(),
            AircraftDocument.objects.all(),
            Flight.objects.all(),
            day=day
        )
        return sorted(alerts, key=lambda alert: SEVERITY_ORDER.get(alert['severity'], 3))
