# src/apps/core/services/aircraft_service.py
"""
Aircraft Service

Core business logic for aircraft records and their ownership and
management history.
"""

import logging
from datetime import date
from typing import Any, Dict, List, Optional
from uuid import UUID

from django.db import transaction

from apps.core.models import (
    Aircraft,
    AircraftOwnership,
    AircraftManagement,
    Owner,
    ManagementCompany,
)
from apps.core.services.validity_service import ValidityService

logger = logging.getLogger(__name__)


class AircraftService:
    """
    Service class for aircraft operations.

    Handles:
    - Aircraft CRUD operations
    - Tail number uniqueness
    - Ownership history (add / update / remove / resolve)
    - Management history (add / update / remove / resolve)
    """

    # ==========================================================================
    # CRUD Operations
    # ==========================================================================

    @transaction.atomic
    def create_aircraft(
        self,
        tail_number: str,
        make: str,
        model: str,
        year_of_manufacture: int
    ) -> Aircraft:
        """
        Create a new aircraft.

        Raises:
            RecordConflictError: If the tail number is already registered
        """
        tail_number = tail_number.upper().strip()
        self._check_tail_number(tail_number)

        aircraft = Aircraft.objects.create(
            tail_number=tail_number,
            make=make,
            model=model,
            year_of_manufacture=year_of_manufacture
        )

        logger.info(f"Created aircraft {aircraft.tail_number} ({aircraft.id})")
        return aircraft

    def get_aircraft(self, aircraft_id: UUID) -> Aircraft:
        try:
            return Aircraft.objects.get(id=aircraft_id)
        except Aircraft.DoesNotExist:
            from . import RecordNotFoundError
            raise RecordNotFoundError(f"Aircraft {aircraft_id} not found")

    @transaction.atomic
    def update_aircraft(self, aircraft_id: UUID, **kwargs) -> Aircraft:
        """Update aircraft fields; a changed tail number must stay unique."""
        aircraft = self.get_aircraft(aircraft_id)

        tail_number = kwargs.get('tail_number')
        if tail_number:
            kwargs['tail_number'] = tail_number.upper().strip()
            self._check_tail_number(kwargs['tail_number'], exclude_id=aircraft.id)

        for field, value in kwargs.items():
            if hasattr(aircraft, field):
                setattr(aircraft, field, value)

        aircraft.save()
        logger.info(f"Updated aircraft {aircraft.tail_number}")
        return aircraft

    @transaction.atomic
    def delete_aircraft(self, aircraft_id: UUID) -> None:
        """
        Delete an aircraft with its documents and relationship history.

        Raises:
            RecordConflictError: If flights still reference the aircraft
        """
        aircraft = self.get_aircraft(aircraft_id)

        if aircraft.has_flights():
            from . import RecordConflictError
            raise RecordConflictError(
                f"Aircraft {aircraft.tail_number} has recorded flights and cannot be deleted",
                code='AIRCRAFT_IN_USE'
            )

        tail_number = aircraft.tail_number
        aircraft.delete()
        logger.info(f"Deleted aircraft {tail_number}")

    def _check_tail_number(self, tail_number: str, exclude_id: Optional[UUID] = None) -> None:
        queryset = Aircraft.objects.filter(tail_number=tail_number)
        if exclude_id:
            queryset = queryset.exclude(id=exclude_id)
        if queryset.exists():
            from . import RecordConflictError
            raise RecordConflictError(
                f"Aircraft with tail number {tail_number} already exists",
                code='DUPLICATE_TAIL_NUMBER',
                field='tail_number'
            )

    # ==========================================================================
    # Ownership History
    # ==========================================================================

    @transaction.atomic
    def add_ownership(
        self,
        aircraft_id: UUID,
        owner_id: UUID,
        start_date: date,
        end_date: Optional[date] = None
    ) -> AircraftOwnership:
        """Record an ownership interval for an aircraft."""
        aircraft = self.get_aircraft(aircraft_id)
        owner = self._get_party(Owner, owner_id, 'Owner', 'owner')
        self._validate_interval(start_date, end_date)

        ownership = AircraftOwnership.objects.create(
            aircraft=aircraft,
            owner=owner,
            start_date=start_date,
            end_date=end_date
        )

        logger.info(f"Aircraft {aircraft.tail_number} ownership added for {owner.name}")
        return ownership

    @transaction.atomic
    def update_ownership(self, ownership_id: UUID, **kwargs) -> AircraftOwnership:
        ownership = self._get_record(AircraftOwnership, ownership_id, 'Ownership')
        if 'owner_id' in kwargs:
            kwargs['owner'] = self._get_party(Owner, kwargs.pop('owner_id'), 'Owner', 'owner')
        return self._update_interval(ownership, **kwargs)

    @transaction.atomic
    def delete_ownership(self, ownership_id: UUID) -> None:
        ownership = self._get_record(AircraftOwnership, ownership_id, 'Ownership')
        ownership.delete()
        logger.info(f"Deleted ownership {ownership_id}")

    def get_ownership_history(self, aircraft_id: UUID) -> List[AircraftOwnership]:
        aircraft = self.get_aircraft(aircraft_id)
        return ValidityService.history(aircraft.ownerships.select_related('owner'))

    # ==========================================================================
    # Management History
    # ==========================================================================

    @transaction.atomic
    def add_management(
        self,
        aircraft_id: UUID,
        management_company_id: UUID,
        start_date: date,
        end_date: Optional[date] = None
    ) -> AircraftManagement:
        """Record a management interval for an aircraft."""
        aircraft = self.get_aircraft(aircraft_id)
        company = self._get_party(
            ManagementCompany, management_company_id, 'Management company', 'management_company'
        )
        self._validate_interval(start_date, end_date)

        management = AircraftManagement.objects.create(
            aircraft=aircraft,
            management_company=company,
            start_date=start_date,
            end_date=end_date
        )

        logger.info(f"Aircraft {aircraft.tail_number} management assigned to {company.name}")
        return management

    @transaction.atomic
    def update_management(self, management_id: UUID, **kwargs) -> AircraftManagement:
        management = self._get_record(AircraftManagement, management_id, 'Management')
        if 'management_company_id' in kwargs:
            kwargs['management_company'] = self._get_party(
                ManagementCompany, kwargs.pop('management_company_id'),
                'Management company', 'management_company'
            )
        return self._update_interval(management, **kwargs)

    @transaction.atomic
    def delete_management(self, management_id: UUID) -> None:
        management = self._get_record(AircraftManagement, management_id, 'Management')
        management.delete()
        logger.info(f"Deleted management {management_id}")

    def get_management_history(self, aircraft_id: UUID) -> List[AircraftManagement]:
        aircraft = self.get_aircraft(aircraft_id)
        return ValidityService.history(aircraft.managements.select_related('management_company'))

    # ==========================================================================
    # Resolution
    # ==========================================================================

    def get_relationships(self, aircraft_id: UUID, day: Optional[date] = None) -> Dict[str, Any]:
        """
        Owner and management company of an aircraft.

        Without a day the current (open) records are used; with a day the
        records in force on that day.
        """
        aircraft = self.get_aircraft(aircraft_id)

        if day is None:
            return {
                'aircraft_id': aircraft.id,
                'date': None,
                'owner': aircraft.current_owner,
                'management_company': aircraft.current_management_company,
            }

        return {
            'aircraft_id': aircraft.id,
            'date': day,
            'owner': aircraft.owner_on(day),
            'management_company': aircraft.management_company_on(day),
        }

    # ==========================================================================
    # Helpers
    # ==========================================================================

    def _get_record(self, model, record_id: UUID, label: str):
        try:
            return model.objects.get(id=record_id)
        except model.DoesNotExist:
            from . import RecordNotFoundError
            raise RecordNotFoundError(f"{label} {record_id} not found")

    def _get_party(self, model, party_id: UUID, label: str, field: str = None):
        try:
            return model.objects.get(id=party_id)
        except model.DoesNotExist:
            from . import RecordValidationError
            raise RecordValidationError(f"{label} {party_id} not found", field=field)

    def _validate_interval(self, start_date: date, end_date: Optional[date]) -> None:
        if end_date and start_date and end_date < start_date:
            from . import RecordValidationError
            raise RecordValidationError(
                "End date must be after start date", field='end_date'
            )

    def _update_interval(self, record, **kwargs):
        self._validate_interval(
            kwargs.get('start_date', record.start_date),
            kwargs.get('end_date', record.end_date)
        )

        for field, value in kwargs.items():
            if hasattr(record, field):
                setattr(record, field, value)

        record.save()
        logger.info(f"Updated {record._meta.verbose_name} {record.id}")
        return record
