# src/apps/core/services/flight_service.py
"""
Flight Service

Business logic for flights and their fuel receipts.
"""

import logging
from datetime import date
from decimal import Decimal
from typing import Optional
from uuid import UUID

from django.db import transaction

from apps.core.models import Aircraft, Client, Flight, FuelReceipt

logger = logging.getLogger(__name__)


class FlightService:
    """
    Service for flight operations.

    Handles:
    - Flight CRUD operations
    - Fuel receipt CRUD operations (receipts belong to a flight)
    """

    # ==========================================================================
    # Flights
    # ==========================================================================

    @transaction.atomic
    def create_flight(
        self,
        aircraft_id: UUID,
        flight_date: date,
        departure: str,
        arrival: str,
        client_id: Optional[UUID] = None,
        notes: str = ''
    ) -> Flight:
        """
        Record a flight.

        Raises:
            RecordValidationError: If the aircraft or client does not exist
        """
        aircraft = self._get_aircraft(aircraft_id)
        client = self._get_client(client_id) if client_id else None

        flight = Flight.objects.create(
            aircraft=aircraft,
            client=client,
            flight_date=flight_date,
            departure=departure,
            arrival=arrival,
            notes=notes or ''
        )

        logger.info(
            f"Recorded flight {flight.route} on {flight_date} for {aircraft.tail_number}"
        )
        return flight

    def get_flight(self, flight_id: UUID) -> Flight:
        try:
            return Flight.objects.select_related('aircraft', 'client').get(id=flight_id)
        except Flight.DoesNotExist:
            from . import RecordNotFoundError
            raise RecordNotFoundError(f"Flight {flight_id} not found")

    @transaction.atomic
    def update_flight(self, flight_id: UUID, **kwargs) -> Flight:
        flight = self.get_flight(flight_id)

        if 'aircraft_id' in kwargs:
            kwargs['aircraft'] = self._get_aircraft(kwargs.pop('aircraft_id'))
        if 'client_id' in kwargs:
            client_id = kwargs.pop('client_id')
            kwargs['client'] = self._get_client(client_id) if client_id else None

        for field, value in kwargs.items():
            if hasattr(flight, field):
                setattr(flight, field, value)

        flight.save()
        logger.info(f"Updated flight {flight_id}")
        return flight

    @transaction.atomic
    def delete_flight(self, flight_id: UUID) -> None:
        """Delete a flight and its fuel receipts."""
        flight = self.get_flight(flight_id)
        receipt_count = flight.fuel_receipts.count()
        flight.delete()
        logger.info(f"Deleted flight {flight_id} with {receipt_count} fuel receipts")

    # ==========================================================================
    # Fuel Receipts
    # ==========================================================================

    @transaction.atomic
    def add_receipt(
        self,
        flight_id: UUID,
        receipt_number: str,
        receipt_date: date,
        fuel_liters: Decimal,
        receipt_total: Decimal,
        mot_amount_paid: Decimal,
        vendor: str = '',
        receipt_image_url: str = ''
    ) -> FuelReceipt:
        """Attach a fuel receipt to a flight."""
        flight = self.get_flight(flight_id)
        self._validate_amounts(fuel_liters, receipt_total, mot_amount_paid)

        receipt = FuelReceipt.objects.create(
            flight=flight,
            receipt_number=receipt_number,
            receipt_date=receipt_date,
            fuel_liters=fuel_liters,
            receipt_total=receipt_total,
            mot_amount_paid=mot_amount_paid,
            vendor=vendor or '',
            receipt_image_url=receipt_image_url or ''
        )

        logger.info(
            f"Added fuel receipt {receipt.receipt_number} to flight {flight.id} "
            f"(MOT {receipt.mot_amount_paid})"
        )
        return receipt

    def get_receipt(self, receipt_id: UUID) -> FuelReceipt:
        try:
            return FuelReceipt.objects.select_related('flight').get(id=receipt_id)
        except FuelReceipt.DoesNotExist:
            from . import RecordNotFoundError
            raise RecordNotFoundError(f"Fuel receipt {receipt_id} not found")

    @transaction.atomic
    def update_receipt(self, receipt_id: UUID, **kwargs) -> FuelReceipt:
        receipt = self.get_receipt(receipt_id)

        self._validate_amounts(
            kwargs.get('fuel_liters', receipt.fuel_liters),
            kwargs.get('receipt_total', receipt.receipt_total),
            kwargs.get('mot_amount_paid', receipt.mot_amount_paid)
        )

        for field, value in kwargs.items():
            if hasattr(receipt, field):
                setattr(receipt, field, value)

        receipt.save()
        logger.info(f"Updated fuel receipt {receipt.receipt_number}")
        return receipt

    @transaction.atomic
    def delete_receipt(self, receipt_id: UUID) -> None:
        receipt = self.get_receipt(receipt_id)
        receipt.delete()
        logger.info(f"Deleted fuel receipt {receipt_id}")

    # ==========================================================================
    # Helpers
    # ==========================================================================

    def _get_aircraft(self, aircraft_id: UUID) -> Aircraft:
        try:
            return Aircraft.objects.get(id=aircraft_id)
        except Aircraft.DoesNotExist:
            from . import RecordValidationError
            raise RecordValidationError(f"Aircraft {aircraft_id} not found", field='aircraft')

    def _get_client(self, client_id: UUID) -> Client:
        try:
            return Client.objects.get(id=client_id)
        except Client.DoesNotExist:
            from . import RecordValidationError
            raise RecordValidationError(f"Client {client_id} not found", field='client')

    def _validate_amounts(
        self,
        fuel_liters: Decimal,
        receipt_total: Decimal,
        mot_amount_paid: Decimal
    ) -> None:
        from . import RecordValidationError

        if fuel_liters is None or fuel_liters <= 0:
            raise RecordValidationError("Valid fuel amount is required", field='fuel_liters')
        if receipt_total is None or receipt_total <= 0:
            raise RecordValidationError("Valid receipt total is required", field='receipt_total')
        if mot_amount_paid is None or mot_amount_paid < 0:
            raise RecordValidationError("Valid MOT amount is required", field='mot_amount_paid')
