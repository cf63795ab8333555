# src/apps/core/services/report_service.py
"""
Report Service

Builds the MOT refund report: flights in a date range, attributed to the
owner and management company in force on each flight date, with the MOT
paid on their fuel receipts.
"""

import logging
from collections import defaultdict
from datetime import date
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Optional, Tuple

from dateutil.relativedelta import relativedelta
from django.conf import settings

from apps.core.models import Aircraft, AircraftOwnership, AircraftManagement, Flight
from apps.core.services.validity_service import ValidityService

logger = logging.getLogger(__name__)


def _id_set(values: Optional[Iterable[Any]]) -> set:
    return {str(value) for value in values or []}


class ReportService:
    """
    MOT refund report generation.

    Filters combine with AND; an empty multi-select means no restriction.
    """

    @staticmethod
    def default_date_range(today: Optional[date] = None) -> Tuple[date, date]:
        """Last REPORT_DEFAULT_DAYS days up to and including today."""
        today = today or date.today()
        return today - relativedelta(days=settings.REPORT_DEFAULT_DAYS), today

    @classmethod
    def generate_mot_report(
        cls,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        aircraft_ids: Optional[Iterable[Any]] = None,
        owner_ids: Optional[Iterable[Any]] = None,
        management_company_ids: Optional[Iterable[Any]] = None,
        client_ids: Optional[Iterable[Any]] = None,
    ) -> Dict[str, Any]:
        """
        Generate the MOT refund report.

        Args:
            start_date: First flight date included (defaults to 90 days ago)
            end_date: Last flight date included (defaults to today)
            aircraft_ids: Restrict to these aircraft
            owner_ids: Restrict to flights whose aircraft was owned by one
                of these owners on the flight date
            management_company_ids: Same for the management company
            client_ids: Restrict to flights of these clients

        Returns:
            Dict with the applied range, totals and one row per flight,
            most recent flight first

        Raises:
            ReportError: If start_date falls after end_date
        """
        default_start, default_end = cls.default_date_range()
        end_date = end_date or default_end
        start_date = start_date or (end_date - (default_end - default_start))

        if start_date > end_date:
            from . import ReportError
            raise ReportError(
                "End date must be after start date",
                code='INVALID_DATE_RANGE',
                field='end_date'
            )

        aircraft_filter = _id_set(aircraft_ids)
        owner_filter = _id_set(owner_ids)
        company_filter = _id_set(management_company_ids)
        client_filter = _id_set(client_ids)

        flights = (
            Flight.objects
            .filter(flight_date__gte=start_date, flight_date__lte=end_date)
            .select_related('client')
            .prefetch_related('fuel_receipts')
            .order_by('-flight_date', '-created_at')
        )

        aircraft_ids_in_range = {flight.aircraft_id for flight in flights}
        fleet = Aircraft.objects.in_bulk(aircraft_ids_in_range)

        ownerships = defaultdict(list)
        for ownership in AircraftOwnership.objects.filter(
            aircraft_id__in=aircraft_ids_in_range
        ).select_related('owner'):
            ownerships[ownership.aircraft_id].append(ownership)

        managements = defaultdict(list)
        for management in AircraftManagement.objects.filter(
            aircraft_id__in=aircraft_ids_in_range
        ).select_related('management_company'):
            managements[management.aircraft_id].append(management)

        rows = []
        for flight in flights:
            if aircraft_filter and str(flight.aircraft_id) not in aircraft_filter:
                continue

            ownership = ValidityService.resolve_as_of(
                ownerships[flight.aircraft_id], flight.flight_date
            )
            if owner_filter and (ownership is None or str(ownership.owner_id) not in owner_filter):
                continue

            management = ValidityService.resolve_as_of(
                managements[flight.aircraft_id], flight.flight_date
            )
            if company_filter and (
                management is None
                or str(management.management_company_id) not in company_filter
            ):
                continue

            if client_filter and (
                flight.client_id is None or str(flight.client_id) not in client_filter
            ):
                continue

            rows.append(cls._build_row(flight, fleet.get(flight.aircraft_id), ownership, management))

        report = {
            'start_date': start_date,
            'end_date': end_date,
            'total_flights': len(rows),
            'total_fuel_liters': sum((row['fuel_liters'] for row in rows), Decimal('0')),
            'total_mot_paid': sum((row['mot_amount_paid'] for row in rows), Decimal('0')),
            'rows': rows,
        }

        logger.info(
            f"MOT report {start_date} to {end_date}: {report['total_flights']} flights, "
            f"MOT {report['total_mot_paid']}"
        )
        return report

    @staticmethod
    def _build_row(flight: Flight, aircraft, ownership, management) -> Dict[str, Any]:
        receipts = list(flight.fuel_receipts.all())

        return {
            'flight_id': flight.id,
            'flight_date': flight.flight_date,
            'aircraft_id': flight.aircraft_id,
            'tail_number': aircraft.tail_number if aircraft else 'Unknown',
            'departure': flight.departure,
            'arrival': flight.arrival,
            'client_name': flight.client.name if flight.client else None,
            'owner_name': ownership.owner.name if ownership else None,
            'management_company_name': (
                management.management_company.name if management else None
            ),
            'fuel_liters': sum((r.fuel_liters for r in receipts), Decimal('0')),
            'mot_amount_paid': sum((r.mot_amount_paid for r in receipts), Decimal('0')),
        }
