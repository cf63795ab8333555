# src/tests/test_models.py
"""
Tests for MOT Refund Service Models.
"""

from datetime import timedelta
from decimal import Decimal

import pytest
from django.db.models import ProtectedError

from apps.core.models import (
    Aircraft, AircraftDocument, AircraftOwnership, AircraftManagement,
    ClientEngagement, Flight, FuelReceipt, AppUser,
)


# =============================================================================
# Aircraft Model Tests
# =============================================================================

@pytest.mark.django_db
class TestAircraftModel:
    """Tests for Aircraft model."""

    def test_tail_number_stored_upper_case(self):
        aircraft = Aircraft.objects.create(
            tail_number=' n999zz ', make='Piper', model='M600', year_of_manufacture=2022
        )
        assert aircraft.tail_number == 'N999ZZ'
        assert Aircraft.find_by_tail_number('n999zz') == aircraft

    def test_display_name(self, aircraft):
        assert aircraft.display_name == 'N123AB - Cessna Citation CJ3'
        assert str(aircraft) == 'N123AB'

    def test_current_owner_and_company(self, aircraft, ownership, management, owner, management_company):
        assert aircraft.current_owner == owner
        assert aircraft.current_management_company == management_company

    def test_current_owner_none_when_closed(self, aircraft, owner, today):
        AircraftOwnership.objects.create(
            aircraft=aircraft, owner=owner,
            start_date=today - timedelta(days=100), end_date=today - timedelta(days=1)
        )
        assert aircraft.current_owner is None
        assert aircraft.owner_on(today - timedelta(days=50)) == owner

    def test_owner_on_uses_history(self, aircraft, owner, second_owner, today):
        AircraftOwnership.objects.create(
            aircraft=aircraft, owner=owner,
            start_date=today - timedelta(days=400), end_date=today - timedelta(days=101)
        )
        AircraftOwnership.objects.create(
            aircraft=aircraft, owner=second_owner, start_date=today - timedelta(days=100)
        )

        assert aircraft.owner_on(today - timedelta(days=200)) == owner
        assert aircraft.owner_on(today - timedelta(days=100)) == second_owner
        assert aircraft.owner_on(today - timedelta(days=500)) is None

    def test_flights_protect_aircraft(self, aircraft, flight):
        assert aircraft.has_flights()
        with pytest.raises(ProtectedError):
            aircraft.delete()

    def test_delete_cascades_documents_and_history(self, aircraft, valid_documents, ownership, management):
        aircraft.delete()

        assert AircraftDocument.objects.count() == 0
        assert AircraftOwnership.objects.count() == 0
        assert AircraftManagement.objects.count() == 0


# =============================================================================
# Document Model Tests
# =============================================================================

@pytest.mark.django_db
class TestAircraftDocumentModel:
    """Tests for AircraftDocument model."""

    def test_validity_includes_both_ends(self, aircraft, today):
        document = AircraftDocument.objects.create(
            aircraft=aircraft,
            document_type=AircraftDocument.DocumentType.INSURANCE,
            valid_from=today,
            valid_to=today + timedelta(days=10),
        )

        assert document.is_valid_on(today)
        assert document.is_valid_on(today + timedelta(days=10))
        assert not document.is_valid_on(today + timedelta(days=11))
        assert not document.is_valid_on(today - timedelta(days=1))

    def test_expiry_properties(self, aircraft, today):
        document = AircraftDocument.objects.create(
            aircraft=aircraft,
            document_type=AircraftDocument.DocumentType.REGISTRATION,
            valid_from=today - timedelta(days=300),
            valid_to=today + timedelta(days=20),
        )

        assert document.is_valid
        assert not document.is_expired
        assert document.is_expiring_soon
        assert document.days_until_expiry == 20
        assert document.is_expiring_soon_on(today, warning_days=20)
        assert not document.is_expiring_soon_on(today, warning_days=19)

    def test_expired_document(self, aircraft, today):
        document = AircraftDocument.objects.create(
            aircraft=aircraft,
            document_type=AircraftDocument.DocumentType.AIRWORTHINESS,
            valid_from=today - timedelta(days=300),
            valid_to=today - timedelta(days=1),
        )

        assert document.is_expired
        assert not document.is_valid
        assert not document.is_expiring_soon


# =============================================================================
# Relationship Model Tests
# =============================================================================

@pytest.mark.django_db
class TestRelationshipModels:
    """Tests for the time-bounded relationship records."""

    def test_open_record_is_current(self, ownership, today):
        assert ownership.is_current
        assert ownership.is_active_on(today + timedelta(days=3650))
        assert not ownership.is_active_on(ownership.start_date - timedelta(days=1))

    def test_close(self, engagement, today):
        engagement.close()
        engagement.refresh_from_db()

        assert engagement.end_date == today
        assert not engagement.is_current
        assert engagement.is_active_on(today)

    def test_client_current_company(self, client_record, engagement, management_company):
        assert client_record.current_management_company == management_company

    def test_company_client_count(self, management_company, engagement, client_record, today):
        assert management_company.current_client_count == 1

        engagement.close(today - timedelta(days=1))
        assert management_company.current_client_count == 0

    def test_client_delete_keeps_flights(self, client_record, flight):
        client_record.delete()
        flight.refresh_from_db()

        assert flight.client is None
        assert ClientEngagement.objects.count() == 0


# =============================================================================
# Flight Model Tests
# =============================================================================

@pytest.mark.django_db
class TestFlightModel:
    """Tests for Flight and FuelReceipt models."""

    def test_airport_codes_upper_case(self, aircraft, today):
        flight = Flight.objects.create(
            aircraft=aircraft, flight_date=today, departure='kjfk ', arrival=' klax'
        )
        assert flight.route == 'KJFK-KLAX'

    def test_totals(self, flight, fuel_receipt):
        FuelReceipt.objects.create(
            flight=flight,
            receipt_number='FR-2024-002',
            receipt_date=flight.flight_date,
            fuel_liters=Decimal('100.50'),
            receipt_total=Decimal('90.00'),
            mot_amount_paid=Decimal('4.50'),
        )

        assert flight.total_fuel_liters == Decimal('2600.50')
        assert flight.total_mot_paid == Decimal('130.00')

    def test_totals_without_receipts(self, flight):
        assert flight.total_fuel_liters == Decimal('0')
        assert flight.total_mot_paid == Decimal('0')

    def test_delete_flight_removes_receipts(self, flight, fuel_receipt):
        flight.delete()
        assert FuelReceipt.objects.count() == 0


# =============================================================================
# User Model Tests
# =============================================================================

@pytest.mark.django_db
class TestAppUserModel:

    def test_password_hashing(self, data_entry_user):
        assert data_entry_user.password != 'secret123'
        assert data_entry_user.check_password('secret123')
        assert not data_entry_user.check_password('wrong')

    @pytest.mark.parametrize('role,can_edit,can_admin', [
        (AppUser.Role.ADMINISTRATOR, True, True),
        (AppUser.Role.DATA_ENTRY, True, False),
        (AppUser.Role.VIEWER, False, False),
    ])
    def test_role_capabilities(self, role, can_edit, can_admin):
        user = AppUser(username='someone', name='Someone', role=role)
        assert user.can_edit is can_edit
        assert user.can_admin is can_admin
