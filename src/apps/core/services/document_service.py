# src/apps/core/services/document_service.py
"""
Document Service

Manages aircraft documents, validity checks, coverage and expiry alerts.
"""

import uuid
import logging
from datetime import date, timedelta
from typing import Any, Dict, Iterable, List, Optional, Tuple

from django.conf import settings
from django.db import transaction

from apps.core.models import Aircraft, AircraftDocument, Flight

logger = logging.getLogger(__name__)


class DocumentService:
    """
    Service for managing aircraft documents.

    Handles:
    - Document CRUD operations
    - Validity, expiry and expiring-soon checks
    - Flight coverage checks
    - Fleet-wide document alerts

    The check methods work on any iterable of documents so that callers
    can pass a queryset or an already loaded list.
    """

    REQUIRED_TYPES = [doc_type.value for doc_type in AircraftDocument.REQUIRED_TYPES]

    # ==========================================================================
    # Document CRUD
    # ==========================================================================

    @transaction.atomic
    def add_document(
        self,
        aircraft_id: uuid.UUID,
        document_type: str,
        valid_from: date,
        valid_to: date,
        document_number: str = '',
        document_url: str = ''
    ) -> AircraftDocument:
        """Add a new document to an aircraft."""
        try:
            aircraft = Aircraft.objects.get(id=aircraft_id)
        except Aircraft.DoesNotExist:
            from . import RecordNotFoundError
            raise RecordNotFoundError(f"Aircraft {aircraft_id} not found")

        self._validate_document(document_type, valid_from, valid_to)

        document = AircraftDocument.objects.create(
            aircraft=aircraft,
            document_type=document_type,
            valid_from=valid_from,
            valid_to=valid_to,
            document_number=document_number or '',
            document_url=document_url or ''
        )

        logger.info(
            f"Added {document_type} document {document.id} to aircraft {aircraft.tail_number}"
        )
        return document

    @transaction.atomic
    def update_document(self, document_id: uuid.UUID, **kwargs) -> AircraftDocument:
        """Update document fields."""
        document = self.get_document(document_id)

        self._validate_document(
            kwargs.get('document_type', document.document_type),
            kwargs.get('valid_from', document.valid_from),
            kwargs.get('valid_to', document.valid_to)
        )

        for field, value in kwargs.items():
            if hasattr(document, field):
                setattr(document, field, value)

        document.save()
        logger.info(f"Updated document {document_id}")
        return document

    @transaction.atomic
    def delete_document(self, document_id: uuid.UUID) -> None:
        document = self.get_document(document_id)
        document.delete()
        logger.info(f"Deleted document {document_id}")

    def get_document(self, document_id: uuid.UUID) -> AircraftDocument:
        try:
            return AircraftDocument.objects.select_related('aircraft').get(id=document_id)
        except AircraftDocument.DoesNotExist:
            from . import RecordNotFoundError
            raise RecordNotFoundError(f"Document {document_id} not found")

    def _validate_document(self, document_type: str, valid_from: date, valid_to: date) -> None:
        from . import RecordValidationError

        if document_type not in self.REQUIRED_TYPES:
            raise RecordValidationError(
                f"Invalid document type: {document_type}", field='document_type'
            )
        if valid_from and valid_to and valid_to < valid_from:
            raise RecordValidationError(
                "Valid to date must be after valid from date", field='valid_to'
            )

    # ==========================================================================
    # Validity Checks
    # ==========================================================================

    @staticmethod
    def is_document_valid(document: AircraftDocument, day: date) -> bool:
        """Check if the document covers the given day (both ends included)."""
        return document.valid_from <= day <= document.valid_to

    @staticmethod
    def is_document_expired(document: AircraftDocument, day: date) -> bool:
        return document.valid_to < day

    @staticmethod
    def is_document_expiring_soon(
        document: AircraftDocument,
        day: date,
        warning_days: Optional[int] = None
    ) -> bool:
        """Check if the document runs out within the warning window."""
        if warning_days is None:
            warning_days = settings.DOCUMENT_EXPIRY_WARNING_DAYS
        return day <= document.valid_to <= day + timedelta(days=warning_days)

    # ==========================================================================
    # Coverage
    # ==========================================================================

    def get_current_document(
        self,
        documents: Iterable[AircraftDocument],
        aircraft_id: uuid.UUID,
        document_type: str,
        day: date
    ) -> Optional[AircraftDocument]:
        """Get the valid document of a type for an aircraft on a day."""
        for document in documents:
            if (
                str(document.aircraft_id) == str(aircraft_id)
                and document.document_type == document_type
                and self.is_document_valid(document, day)
            ):
                return document
        return None

    def has_valid_coverage(
        self,
        documents: Iterable[AircraftDocument],
        aircraft_id: uuid.UUID,
        day: date
    ) -> Tuple[bool, List[str]]:
        """
        Check that every required document type is valid on a day.

        Returns:
            (valid, missing_types) with missing types in required-type order
        """
        documents = list(documents)
        missing_types = [
            doc_type for doc_type in self.REQUIRED_TYPES
            if self.get_current_document(documents, aircraft_id, doc_type, day) is None
        ]
        return not missing_types, missing_types

    def flight_has_valid_coverage(
        self,
        documents: Iterable[AircraftDocument],
        flight: Flight
    ) -> Tuple[bool, List[str]]:
        """Coverage of the flight's aircraft on the flight date."""
        return self.has_valid_coverage(documents, flight.aircraft_id, flight.flight_date)

    # ==========================================================================
    # Status & Alerts
    # ==========================================================================

    def get_aircraft_document_status(
        self,
        documents: Iterable[AircraftDocument],
        aircraft_id: uuid.UUID,
        day: Optional[date] = None
    ) -> List[Dict[str, Any]]:
        """
        Status of each required document type for an aircraft.

        Status is one of missing, expired, expiring or valid. For expired
        types the document ending last is reported.
        """
        day = day or date.today()
        documents = list(documents)
        statuses = []

        for doc_type in self.REQUIRED_TYPES:
            type_docs = [
                document for document in documents
                if str(document.aircraft_id) == str(aircraft_id)
                and document.document_type == doc_type
            ]

            if not type_docs:
                statuses.append({'type': doc_type, 'status': 'missing', 'document': None})
                continue

            valid_doc = self.get_current_document(type_docs, aircraft_id, doc_type, day)
            if valid_doc is None:
                latest = max(type_docs, key=lambda document: document.valid_to)
                statuses.append({'type': doc_type, 'status': 'expired', 'document': latest})
            elif self.is_document_expiring_soon(valid_doc, day):
                statuses.append({'type': doc_type, 'status': 'expiring', 'document': valid_doc})
            else:
                statuses.append({'type': doc_type, 'status': 'valid', 'document': valid_doc})

        return statuses

    def generate_document_alerts(
        self,
        aircraft: Iterable[Aircraft],
        documents: Iterable[AircraftDocument],
        flights: Iterable[Flight] = (),
        day: Optional[date] = None
    ) -> List[Dict[str, Any]]:
        """
        Generate document alerts for a fleet.

        Aircraft alerts come first (per aircraft, per required type),
        followed by coverage-gap warnings for flights. Flights of aircraft
        outside the given fleet are skipped.
        """
        day = day or date.today()
        aircraft = list(aircraft)
        documents = list(documents)
        alerts = []

        for ac in aircraft:
            for status in self.get_aircraft_document_status(documents, ac.id, day):
                doc_type = status['type']
                label = doc_type.capitalize()
                alert = {
                    'id': f"{ac.id}-{doc_type}-{status['status']}",
                    'aircraft_id': ac.id,
                    'tail_number': ac.tail_number,
                    'document_type': doc_type,
                }

                if status['status'] == 'missing':
                    alert.update(severity='error', message=f"Missing {doc_type} document")
                elif status['status'] == 'expired':
                    alert.update(severity='error', message=f"{label} document has expired")
                elif status['status'] == 'expiring':
                    alert.update(
                        severity='warning',
                        message=f"{label} document expiring soon",
                        expiration_date=status['document'].valid_to
                    )
                else:
                    continue

                alerts.append(alert)

        fleet = {str(ac.id): ac for ac in aircraft}
        for flight in flights:
            ac = fleet.get(str(flight.aircraft_id))
            if ac is None:
                continue

            valid, missing_types = self.flight_has_valid_coverage(documents, flight)
            if valid:
                continue

            alerts.append({
                'id': f"{flight.id}-coverage-gap",
                'aircraft_id': ac.id,
                'tail_number': ac.tail_number,
                'document_type': missing_types[0],
                'severity': 'warning',
                'message': (
                    f"Flight on {flight.flight_date.isoformat()} has coverage gap for: "
                    f"{', '.join(missing_types)}"
                ),
            })

        logger.debug(f"Generated {len(alerts)} document alerts for {len(aircraft)} aircraft")
        return alerts
