# src/tests/test_services.py
"""
Tests for MOT Refund Service Business Logic.
"""

import io
import uuid
from datetime import date, timedelta
from decimal import Decimal
from types import SimpleNamespace

import openpyxl
import pytest
from django.conf import settings

from apps.core.models import (
    Aircraft, AircraftDocument, AircraftOwnership, AircraftManagement,
    Client, ClientEngagement, Flight, FuelReceipt, Owner, ManagementCompany,
)
from apps.core.services import (
    ValidityService,
    DocumentService,
    AircraftService,
    OwnerService,
    ManagementService,
    ClientService,
    FlightService,
    ReportService,
    ExportService,
    DashboardService,
    AuthService,
    SeedService,
    RecordNotFoundError,
    RecordValidationError,
    RecordConflictError,
    ReportError,
    ExportError,
    InvalidCredentialsError,
)
from common.authentication import JWTTokenGenerator


def interval(start, end=None, **attrs):
    return SimpleNamespace(start_date=start, end_date=end, **attrs)


# =============================================================================
# ValidityService Tests
# =============================================================================

class TestValidityService:
    """Tests for temporal resolution of relationship records."""

    def test_is_active_on_closed_interval(self):
        record = interval(date(2024, 1, 1), date(2024, 6, 30))

        assert ValidityService.is_active_on(record, date(2024, 1, 1))
        assert ValidityService.is_active_on(record, date(2024, 6, 30))
        assert not ValidityService.is_active_on(record, date(2023, 12, 31))
        assert not ValidityService.is_active_on(record, date(2024, 7, 1))

    def test_is_active_on_open_interval(self):
        record = interval(date(2024, 1, 1))
        assert ValidityService.is_active_on(record, date(2099, 1, 1))

    def test_get_current_picks_open_record(self):
        closed = interval(date(2023, 1, 1), date(2023, 12, 31), aircraft_id='a')
        current = interval(date(2024, 1, 1), aircraft_id='a')

        assert ValidityService.get_current([closed, current], aircraft_id='a') is current
        assert ValidityService.get_current([closed], aircraft_id='a') is None

    def test_get_current_latest_start_wins(self):
        older = interval(date(2023, 1, 1), aircraft_id='a')
        newer = interval(date(2024, 1, 1), aircraft_id='a')

        assert ValidityService.get_current([newer, older]) is newer

    def test_get_current_filters_by_match(self):
        mine = interval(date(2023, 1, 1), aircraft_id=uuid.UUID(int=1))
        other = interval(date(2024, 1, 1), aircraft_id=uuid.UUID(int=2))

        # ids compare as text, so a string id matches a UUID attribute
        assert ValidityService.get_current(
            [mine, other], aircraft_id=str(uuid.UUID(int=1))
        ) is mine

    def test_resolve_as_of(self):
        first = interval(date(2022, 1, 1), date(2022, 12, 31))
        second = interval(date(2023, 1, 1))

        assert ValidityService.resolve_as_of([first, second], date(2022, 6, 1)) is first
        assert ValidityService.resolve_as_of([first, second], date(2023, 6, 1)) is second
        assert ValidityService.resolve_as_of([first, second], date(2021, 6, 1)) is None

    def test_resolve_as_of_overlap_latest_start_wins(self):
        first = interval(date(2022, 1, 1), date(2023, 3, 1))
        second = interval(date(2023, 3, 1))

        assert ValidityService.resolve_as_of([first, second], date(2023, 3, 1)) is second
        assert ValidityService.resolve_as_of([first, second], date(2023, 2, 28)) is first

    def test_history_most_recent_first(self):
        records = [
            interval(date(2021, 1, 1), date(2021, 12, 31)),
            interval(date(2023, 1, 1)),
            interval(date(2022, 1, 1), date(2022, 12, 31)),
        ]

        history = ValidityService.history(records)
        assert [r.start_date.year for r in history] == [2023, 2022, 2021]


# =============================================================================
# DocumentService Tests
# =============================================================================

@pytest.mark.django_db
class TestDocumentService:
    """Tests for DocumentService."""

    @pytest.fixture
    def service(self):
        return DocumentService()

    def _document(self, aircraft, doc_type, valid_from, valid_to):
        return AircraftDocument.objects.create(
            aircraft=aircraft, document_type=doc_type, valid_from=valid_from, valid_to=valid_to
        )

    def test_add_document(self, service, aircraft, today):
        document = service.add_document(
            aircraft_id=aircraft.id,
            document_type='insurance',
            valid_from=today,
            valid_to=today + timedelta(days=365),
            document_number='INS-1',
        )

        assert document.aircraft == aircraft
        assert document.document_number == 'INS-1'

    def test_add_document_rejects_reversed_dates(self, service, aircraft, today):
        with pytest.raises(RecordValidationError) as exc_info:
            service.add_document(
                aircraft_id=aircraft.id,
                document_type='insurance',
                valid_from=today,
                valid_to=today - timedelta(days=1),
            )

        assert exc_info.value.message == 'Valid to date must be after valid from date'
        assert exc_info.value.field == 'valid_to'

    def test_add_document_same_day_allowed(self, service, aircraft, today):
        document = service.add_document(aircraft.id, 'registration', today, today)
        assert service.is_document_valid(document, today)

    def test_add_document_unknown_aircraft(self, service, today):
        with pytest.raises(RecordNotFoundError):
            service.add_document(uuid.uuid4(), 'insurance', today, today)

    def test_add_document_invalid_type(self, service, aircraft, today):
        with pytest.raises(RecordValidationError):
            service.add_document(aircraft.id, 'medical', today, today)

    def test_update_document(self, service, valid_documents, today):
        document = valid_documents[0]
        updated = service.update_document(document.id, valid_to=today + timedelta(days=5))

        assert updated.valid_to == today + timedelta(days=5)

    def test_update_document_rejects_reversed_dates(self, service, valid_documents):
        document = valid_documents[0]
        with pytest.raises(RecordValidationError):
            service.update_document(document.id, valid_to=document.valid_from - timedelta(days=1))

    def test_has_valid_coverage(self, service, aircraft, valid_documents, today):
        valid, missing = service.has_valid_coverage(AircraftDocument.objects.all(), aircraft.id, today)

        assert valid is True
        assert missing == []

    def test_coverage_reports_missing_types_in_order(self, service, aircraft, today):
        self._document(aircraft, 'airworthiness', today - timedelta(days=10), today + timedelta(days=10))

        valid, missing = service.has_valid_coverage(AircraftDocument.objects.all(), aircraft.id, today)

        assert valid is False
        assert missing == ['registration', 'insurance']

    def test_coverage_ignores_other_aircraft(self, service, aircraft, second_aircraft, valid_documents, today):
        valid, missing = service.has_valid_coverage(
            AircraftDocument.objects.all(), second_aircraft.id, today
        )

        assert valid is False
        assert missing == ['registration', 'airworthiness', 'insurance']

    def test_flight_coverage_uses_flight_date(self, service, aircraft, today):
        for doc_type in ['registration', 'airworthiness', 'insurance']:
            self._document(aircraft, doc_type, today - timedelta(days=5), today + timedelta(days=5))
        old_flight = Flight.objects.create(
            aircraft=aircraft, flight_date=today - timedelta(days=6), departure='KJFK', arrival='KBOS'
        )

        valid, missing = service.flight_has_valid_coverage(aircraft.documents.all(), old_flight)

        assert valid is False
        assert len(missing) == 3

    def test_document_status(self, service, aircraft, today):
        self._document(aircraft, 'registration', today - timedelta(days=100), today + timedelta(days=200))
        self._document(aircraft, 'airworthiness', today - timedelta(days=100), today + timedelta(days=10))
        expired = self._document(
            aircraft, 'insurance', today - timedelta(days=400), today - timedelta(days=35)
        )

        statuses = {
            s['type']: s for s in service.get_aircraft_document_status(
                aircraft.documents.all(), aircraft.id, today
            )
        }

        assert statuses['registration']['status'] == 'valid'
        assert statuses['airworthiness']['status'] == 'expiring'
        assert statuses['insurance']['status'] == 'expired'
        assert statuses['insurance']['document'] == expired

    def test_document_status_reports_latest_expired(self, service, aircraft, today):
        latest = self._document(
            aircraft, 'insurance', today - timedelta(days=400), today - timedelta(days=5)
        )
        self._document(aircraft, 'insurance', today - timedelta(days=800), today - timedelta(days=35))

        statuses = {
            s['type']: s for s in service.get_aircraft_document_status(
                aircraft.documents.all(), aircraft.id, today
            )
        }

        assert statuses['insurance']['status'] == 'expired'
        assert statuses['insurance']['document'] == latest

    def test_expiring_soon_window_includes_boundary(self, service, aircraft, today):
        document = self._document(
            aircraft, 'insurance', today - timedelta(days=10), today + timedelta(days=30)
        )

        assert service.is_document_expiring_soon(document, today)
        assert not service.is_document_expiring_soon(document, today - timedelta(days=1))

    def test_generate_alerts_document_ending_on_last_warning_day(self, service, aircraft, today):
        for doc_type in ['registration', 'airworthiness']:
            self._document(aircraft, doc_type, today - timedelta(days=100), today + timedelta(days=200))
        insurance = self._document(
            aircraft, 'insurance', today - timedelta(days=100), today + timedelta(days=30)
        )

        alerts = service.generate_document_alerts(
            Aircraft.objects.all(), AircraftDocument.objects.all(), day=today
        )

        assert [alert['id'] for alert in alerts] == [f"{aircraft.id}-insurance-expiring"]
        assert alerts[0]['expiration_date'] == insurance.valid_to

    def test_generate_alerts(self, service, aircraft, today):
        self._document(aircraft, 'registration', today - timedelta(days=400), today - timedelta(days=1))
        self._document(aircraft, 'insurance', today - timedelta(days=100), today + timedelta(days=7))

        alerts = service.generate_document_alerts(
            Aircraft.objects.all(), AircraftDocument.objects.all(), day=today
        )
        by_type = {alert['document_type']: alert for alert in alerts}

        assert len(alerts) == 3
        assert by_type['registration']['severity'] == 'error'
        assert by_type['registration']['message'] == 'Registration document has expired'
        assert by_type['airworthiness']['message'] == 'Missing airworthiness document'
        assert by_type['airworthiness']['id'] == f'{aircraft.id}-airworthiness-missing'
        assert by_type['insurance']['severity'] == 'warning'
        assert by_type['insurance']['message'] == 'Insurance document expiring soon'
        assert by_type['insurance']['expiration_date'] == today + timedelta(days=7)
        assert by_type['insurance']['tail_number'] == 'N123AB'

    def test_generate_alerts_flight_coverage_gap(self, service, aircraft, valid_documents, today):
        gap_day = today - timedelta(days=400)
        flight = Flight.objects.create(
            aircraft=aircraft, flight_date=gap_day, departure='KJFK', arrival='KLAX'
        )

        alerts = service.generate_document_alerts(
            Aircraft.objects.all(), AircraftDocument.objects.all(), Flight.objects.all(), day=today
        )

        assert len(alerts) == 1
        assert alerts[0]['id'] == f'{flight.id}-coverage-gap'
        assert alerts[0]['severity'] == 'warning'
        assert alerts[0]['document_type'] == 'registration'
        assert alerts[0]['message'] == (
            f'Flight on {gap_day.isoformat()} has coverage gap for: '
            'registration, airworthiness, insurance'
        )

    def test_generate_alerts_skips_flights_outside_fleet(self, service, aircraft, second_aircraft, valid_documents, today):
        Flight.objects.create(
            aircraft=second_aircraft, flight_date=today, departure='KJFK', arrival='KLAX'
        )

        alerts = service.generate_document_alerts(
            [aircraft], AircraftDocument.objects.all(), Flight.objects.all(), day=today
        )

        assert alerts == []


# =============================================================================
# AircraftService Tests
# =============================================================================

@pytest.mark.django_db
class TestAircraftService:
    """Tests for AircraftService."""

    @pytest.fixture
    def service(self):
        return AircraftService()

    def test_create_aircraft(self, service):
        aircraft = service.create_aircraft(
            tail_number='n777xy', make='Pilatus', model='PC-24', year_of_manufacture=2021
        )

        assert aircraft.tail_number == 'N777XY'

    def test_create_aircraft_duplicate_tail_number(self, service, aircraft):
        with pytest.raises(RecordConflictError) as exc_info:
            service.create_aircraft(
                tail_number='n123ab', make='Cessna', model='Citation', year_of_manufacture=2019
            )

        assert exc_info.value.code == 'DUPLICATE_TAIL_NUMBER'

    def test_update_aircraft_keeps_own_tail_number(self, service, aircraft):
        updated = service.update_aircraft(aircraft.id, tail_number='N123AB', model='Citation CJ4')
        assert updated.model == 'Citation CJ4'

    def test_update_aircraft_duplicate_tail_number(self, service, aircraft, second_aircraft):
        with pytest.raises(RecordConflictError):
            service.update_aircraft(second_aircraft.id, tail_number='N123AB')

    def test_delete_aircraft_with_flights(self, service, aircraft, flight):
        with pytest.raises(RecordConflictError) as exc_info:
            service.delete_aircraft(aircraft.id)

        assert exc_info.value.code == 'AIRCRAFT_IN_USE'
        assert Aircraft.objects.filter(id=aircraft.id).exists()

    def test_delete_aircraft(self, service, aircraft, valid_documents, ownership):
        service.delete_aircraft(aircraft.id)

        assert not Aircraft.objects.exists()
        assert not AircraftDocument.objects.exists()

    def test_get_aircraft_not_found(self, service):
        with pytest.raises(RecordNotFoundError):
            service.get_aircraft(uuid.uuid4())

    def test_add_ownership_rejects_reversed_interval(self, service, aircraft, owner, today):
        with pytest.raises(RecordValidationError) as exc_info:
            service.add_ownership(aircraft.id, owner.id, today, today - timedelta(days=1))

        assert exc_info.value.message == 'End date must be after start date'

    def test_add_ownership_unknown_owner(self, service, aircraft, today):
        with pytest.raises(RecordValidationError) as exc_info:
            service.add_ownership(aircraft.id, uuid.uuid4(), today)

        assert exc_info.value.field == 'owner'

    def test_ownership_history(self, service, aircraft, owner, second_owner, today):
        service.add_ownership(aircraft.id, owner.id, today - timedelta(days=500), today - timedelta(days=101))
        service.add_ownership(aircraft.id, second_owner.id, today - timedelta(days=100))

        history = service.get_ownership_history(aircraft.id)

        assert [o.owner for o in history] == [second_owner, owner]

    def test_update_ownership_closes_interval(self, service, ownership, today):
        updated = service.update_ownership(ownership.id, end_date=today)

        assert updated.end_date == today
        assert not updated.is_current

    def test_get_relationships(self, service, aircraft, owner, second_owner, management_company, management, today):
        service.add_ownership(aircraft.id, owner.id, today - timedelta(days=500), today - timedelta(days=101))
        service.add_ownership(aircraft.id, second_owner.id, today - timedelta(days=100))

        current = service.get_relationships(aircraft.id)
        past = service.get_relationships(aircraft.id, today - timedelta(days=200))

        assert current['owner'] == second_owner
        assert current['management_company'] == management_company
        assert past['owner'] == owner
        assert past['date'] == today - timedelta(days=200)

    def test_management_lifecycle(self, service, aircraft, management_company, second_management_company, today):
        first = service.add_management(aircraft.id, management_company.id, today - timedelta(days=300))
        service.update_management(first.id, end_date=today - timedelta(days=1))
        service.add_management(aircraft.id, second_management_company.id, today)

        assert aircraft.current_management_company == second_management_company
        assert [m.management_company for m in service.get_management_history(aircraft.id)] == [
            second_management_company, management_company
        ]

        service.delete_management(first.id)
        assert AircraftManagement.objects.count() == 1


# =============================================================================
# Party Service Tests
# =============================================================================

@pytest.mark.django_db
class TestOwnerAndManagementService:

    def test_owner_current_aircraft(self, aircraft, second_aircraft, owner, ownership, today):
        AircraftOwnership.objects.create(
            aircraft=second_aircraft, owner=owner,
            start_date=today - timedelta(days=100), end_date=today - timedelta(days=1)
        )

        current = OwnerService().get_current_aircraft(owner.id)
        assert list(current) == [aircraft]

    def test_owner_crud(self):
        service = OwnerService()
        owner = service.create_owner('New Owner', 'new@owner.com', '+1-555-0000')
        service.update_owner(owner.id, phone='+1-555-9999')

        assert service.get_owner(owner.id).phone == '+1-555-9999'

        service.delete_owner(owner.id)
        with pytest.raises(RecordNotFoundError):
            service.get_owner(owner.id)

    def test_company_fleet_and_clients(self, management_company, management, aircraft, engagement, client_record):
        service = ManagementService()

        assert list(service.get_managed_aircraft(management_company.id)) == [aircraft]
        assert list(service.get_current_clients(management_company.id)) == [client_record]
        assert service.get_client_count(management_company.id) == 1


# =============================================================================
# ClientService Tests
# =============================================================================

@pytest.mark.django_db
class TestClientService:
    """Tests for client engagement switching."""

    @pytest.fixture
    def service(self):
        return ClientService()

    def test_create_client_with_company(self, service, management_company, today):
        client = service.create_client(
            name='Tech Ventures Inc',
            email='executive@techventures.com',
            phone='+1-555-0302',
            management_company_id=management_company.id,
        )

        engagement = client.engagements.get()
        assert engagement.management_company == management_company
        assert engagement.start_date == today
        assert engagement.end_date is None

    def test_create_client_without_company(self, service):
        client = service.create_client('Solo Client', 'solo@client.com', '+1-555-0000')

        assert client.current_management_company is None
        assert not client.engagements.exists()

    def test_switch_company_closes_current(
        self, service, client_record, engagement, second_management_company, today
    ):
        new_engagement = service.assign_management_company(
            client_record.id, second_management_company.id
        )
        engagement.refresh_from_db()

        assert engagement.end_date == today
        assert new_engagement.start_date == today
        assert new_engagement.end_date is None
        assert client_record.current_management_company == second_management_company
        assert client_record.engagements.count() == 2

    def test_switch_with_start_date(self, service, client_record, engagement, second_management_company, today):
        start = today + timedelta(days=14)
        new_engagement = service.assign_management_company(
            client_record.id, second_management_company.id, start
        )

        assert new_engagement.start_date == start

    def test_switch_removes_engagement_not_yet_started(
        self, service, client_record, management_company, second_management_company, today
    ):
        upcoming = ClientEngagement.objects.create(
            client=client_record,
            management_company=management_company,
            start_date=today + timedelta(days=10),
        )

        new_engagement = service.assign_management_company(
            client_record.id, second_management_company.id
        )

        assert not ClientEngagement.objects.filter(id=upcoming.id).exists()
        assert list(client_record.engagements.all()) == [new_engagement]
        assert client_record.current_management_company == second_management_company
        for record in ClientEngagement.objects.all():
            assert record.end_date is None or record.end_date >= record.start_date

    def test_same_company_is_noop(self, service, client_record, engagement, management_company):
        result = service.assign_management_company(client_record.id, management_company.id)

        assert result == engagement
        assert client_record.engagements.count() == 1
        engagement.refresh_from_db()
        assert engagement.end_date is None

    def test_update_client_switches_company(
        self, service, client_record, engagement, second_management_company
    ):
        service.update_client(
            client_record.id, management_company_id=second_management_company.id, phone='+1-555-1111'
        )
        client_record.refresh_from_db()

        assert client_record.phone == '+1-555-1111'
        assert client_record.current_management_company == second_management_company

    def test_unknown_company(self, service, client_record):
        with pytest.raises(RecordValidationError) as exc_info:
            service.assign_management_company(client_record.id, uuid.uuid4())

        assert exc_info.value.field == 'management_company'

    def test_engagement_history(self, service, client_record, engagement, second_management_company, today):
        service.add_engagement(
            client_record.id, second_management_company.id,
            today - timedelta(days=800), today - timedelta(days=401)
        )

        history = service.get_engagement_history(client_record.id)
        assert history[0] == engagement

    def test_delete_client(self, service, client_record, engagement, flight):
        service.delete_client(client_record.id)

        assert not Client.objects.exists()
        assert not ClientEngagement.objects.exists()
        assert Flight.objects.get(id=flight.id).client is None


# =============================================================================
# FlightService Tests
# =============================================================================

@pytest.mark.django_db
class TestFlightService:
    """Tests for FlightService."""

    @pytest.fixture
    def service(self):
        return FlightService()

    def test_create_flight(self, service, aircraft, client_record, today):
        flight = service.create_flight(
            aircraft_id=aircraft.id,
            flight_date=today,
            departure='kteb',
            arrival='kmia',
            client_id=client_record.id,
        )

        assert flight.route == 'KTEB-KMIA'
        assert flight.client == client_record

    def test_create_flight_unknown_aircraft(self, service, today):
        with pytest.raises(RecordValidationError) as exc_info:
            service.create_flight(uuid.uuid4(), today, 'KJFK', 'KLAX')

        assert exc_info.value.field == 'aircraft'

    def test_update_flight_clears_client(self, service, flight):
        updated = service.update_flight(flight.id, client_id=None)
        assert updated.client is None

    def test_add_receipt(self, service, flight):
        receipt = service.add_receipt(
            flight_id=flight.id,
            receipt_number='FR-9',
            receipt_date=flight.flight_date,
            fuel_liters=Decimal('1200.00'),
            receipt_total=Decimal('1080.00'),
            mot_amount_paid=Decimal('0'),
        )

        assert receipt.mot_amount_paid == Decimal('0')
        assert flight.total_fuel_liters == Decimal('1200.00')

    @pytest.mark.parametrize('field,value,message', [
        ('fuel_liters', Decimal('0'), 'Valid fuel amount is required'),
        ('receipt_total', Decimal('-1'), 'Valid receipt total is required'),
        ('mot_amount_paid', Decimal('-0.01'), 'Valid MOT amount is required'),
    ])
    def test_add_receipt_rejects_amounts(self, service, flight, field, value, message):
        amounts = {
            'fuel_liters': Decimal('100'),
            'receipt_total': Decimal('90'),
            'mot_amount_paid': Decimal('5'),
        }
        amounts[field] = value

        with pytest.raises(RecordValidationError) as exc_info:
            service.add_receipt(flight.id, 'FR-X', flight.flight_date, **amounts)

        assert exc_info.value.message == message
        assert exc_info.value.field == field

    def test_delete_flight(self, service, flight, fuel_receipt):
        service.delete_flight(flight.id)

        assert not Flight.objects.exists()
        assert not FuelReceipt.objects.exists()


# =============================================================================
# ReportService Tests
# =============================================================================

@pytest.mark.django_db
class TestReportService:
    """Tests for the MOT refund report."""

    def test_default_range(self, today):
        start, end = ReportService.default_date_range(today)

        assert end == today
        assert start == today - timedelta(days=settings.REPORT_DEFAULT_DAYS)

    def test_seeded_totals(self, seeded, today):
        report = ReportService.generate_mot_report()

        assert report['start_date'] == today - timedelta(days=90)
        assert report['end_date'] == today
        assert report['total_flights'] == 15
        assert report['total_fuel_liters'] == Decimal('38000')
        assert report['total_mot_paid'] == Decimal('1904.50')

    def test_rows_most_recent_first(self, seeded, today):
        rows = ReportService.generate_mot_report()['rows']

        assert rows[0]['flight_date'] == today - timedelta(days=1)
        assert rows[0]['tail_number'] == 'N654IJ'
        assert rows[0]['owner_name'] == 'Global Jets International'
        assert rows[0]['management_company_name'] == 'Premier Aviation Management'
        assert rows[0]['client_name'] == 'Global Finance Group'
        assert rows[0]['mot_amount_paid'] == Decimal('80.25')
        assert rows[-1]['flight_date'] == today - timedelta(days=60)

    def test_date_range_inclusive(self, seeded, today):
        report = ReportService.generate_mot_report(
            start_date=today - timedelta(days=10), end_date=today - timedelta(days=3)
        )

        # flights 10, 8, 5 and 3 days ago
        assert report['total_flights'] == 4

    def test_start_after_end(self, today):
        with pytest.raises(ReportError) as exc_info:
            ReportService.generate_mot_report(start_date=today, end_date=today - timedelta(days=1))

        assert exc_info.value.code == 'INVALID_DATE_RANGE'

    def test_missing_start_defaults_relative_to_end(self, today):
        end = today - timedelta(days=365)
        report = ReportService.generate_mot_report(end_date=end)

        assert report['start_date'] == end - timedelta(days=90)
        assert report['total_flights'] == 0
        assert report['total_mot_paid'] == Decimal('0')

    def test_owner_filter_uses_owner_on_flight_date(self, seeded):
        skyward = Owner.objects.get(name='Skyward Holdings LLC').id
        report = ReportService.generate_mot_report(owner_ids=[skyward])

        # N789EF changed hands before the report window, so only N123AB counts
        assert report['total_flights'] == 3
        assert {row['tail_number'] for row in report['rows']} == {'N123AB'}
        assert report['total_mot_paid'] == Decimal('355.75')

    def test_combined_filters(self, seeded):
        elite = ManagementCompany.objects.get(name='Elite Flight Services').id
        acme = Client.objects.get(name='Acme Corporation').id

        report = ReportService.generate_mot_report(
            management_company_ids=[elite], client_ids=[str(acme)]
        )

        assert report['total_flights'] == 1
        assert report['rows'][0]['tail_number'] == 'N789EF'

    def test_aircraft_filter(self, seeded):
        aircraft = Aircraft.objects.get(tail_number='N456CD')
        report = ReportService.generate_mot_report(aircraft_ids=[aircraft.id])

        assert report['total_flights'] == 3
        assert all(row['aircraft_id'] == aircraft.id for row in report['rows'])

    def test_ownership_change_inside_window(self, aircraft, owner, second_owner, today):
        AircraftOwnership.objects.create(
            aircraft=aircraft, owner=owner,
            start_date=today - timedelta(days=100), end_date=today - timedelta(days=20)
        )
        AircraftOwnership.objects.create(
            aircraft=aircraft, owner=second_owner, start_date=today - timedelta(days=20)
        )
        for days_ago in (30, 20, 10):
            Flight.objects.create(
                aircraft=aircraft, flight_date=today - timedelta(days=days_ago),
                departure='KJFK', arrival='KBOS'
            )

        rows = ReportService.generate_mot_report()['rows']

        # the handover day belongs to the newer ownership
        assert [row['owner_name'] for row in rows] == [
            second_owner.name, second_owner.name, owner.name
        ]
        assert all(row['client_name'] is None for row in rows)
        assert all(row['management_company_name'] is None for row in rows)


# =============================================================================
# ExportService Tests
# =============================================================================

def make_report(rows):
    return {
        'start_date': date(2024, 1, 1),
        'end_date': date(2024, 3, 31),
        'total_flights': len(rows),
        'total_fuel_liters': sum((r['fuel_liters'] for r in rows), Decimal('0')),
        'total_mot_paid': sum((r['mot_amount_paid'] for r in rows), Decimal('0')),
        'rows': rows,
    }


def make_row(**overrides):
    row = {
        'flight_id': uuid.uuid4(),
        'flight_date': date(2024, 3, 1),
        'aircraft_id': uuid.uuid4(),
        'tail_number': 'N123AB',
        'departure': 'KJFK',
        'arrival': 'KLAX',
        'client_name': 'Acme Corporation',
        'owner_name': 'Skyward Holdings LLC',
        'management_company_name': 'Premier Aviation Management',
        'fuel_liters': Decimal('2500.00'),
        'mot_amount_paid': Decimal('125.50'),
    }
    row.update(overrides)
    return row


class TestExportService:
    """Tests for CSV and Excel export."""

    def test_csv_layout(self):
        export = ExportService.export(make_report([make_row()]), 'csv')

        assert export['filename'] == 'mot-refund-report-2024-01-01-to-2024-03-31.csv'
        assert export['content_type'] == 'text/csv'
        assert export['content'].decode('utf-8') == (
            'Flight Date,Aircraft,Route,Client,Owner,Management Company,Fuel (Liters),MOT Paid\n'
            '2024-03-01,N123AB,KJFK-KLAX,Acme Corporation,Skyward Holdings LLC,'
            'Premier Aviation Management,2500,125.50\n'
            '\n'
            'Total Flights,1\n'
            'Total Fuel (Liters),2500\n'
            'Total MOT Refund,$125.50\n'
        )

    def test_csv_quotes_and_blanks(self):
        row = make_row(
            client_name='Smith, Jones & Co',
            owner_name=None,
            management_company_name=None,
            fuel_liters=Decimal('12.50'),
            mot_amount_paid=Decimal('3'),
        )
        lines = ExportService.export(make_report([row]), 'csv')['content'].decode().split('\n')

        assert lines[1] == '2024-03-01,N123AB,KJFK-KLAX,"Smith, Jones & Co",,,12.5,3.00'

    def test_csv_empty_report(self):
        content = ExportService.export(make_report([]), 'csv')['content'].decode()

        assert content.split('\n')[1:5] == [
            '', 'Total Flights,0', 'Total Fuel (Liters),0', 'Total MOT Refund,$0.00'
        ]

    def test_excel_workbook(self):
        rows = [make_row(), make_row(tail_number='N456CD', mot_amount_paid=Decimal('10.00'))]
        export = ExportService.export(make_report(rows), 'xlsx')

        assert export['filename'].endswith('.xlsx')
        workbook = openpyxl.load_workbook(io.BytesIO(export['content']))
        sheet = workbook.active

        assert sheet['A1'].value == 'Flight Date'
        assert sheet['H1'].value == 'MOT Paid'
        assert sheet['B3'].value == 'N456CD'
        assert sheet['A5'].value == 'Total Flights'
        assert sheet['B5'].value == 2
        assert sheet['A7'].value == 'Total MOT Refund'
        assert sheet['B7'].value == pytest.approx(135.5)

    def test_unsupported_format(self):
        with pytest.raises(ExportError) as exc_info:
            ExportService.export(make_report([]), 'pdf')

        assert exc_info.value.code == 'UNSUPPORTED_FORMAT'


# =============================================================================
# DashboardService Tests
# =============================================================================

@pytest.mark.django_db
class TestDashboardService:

    def test_summary(self, seeded):
        summary = DashboardService.get_summary()

        assert summary == {
            'aircraft_count': 5,
            'owner_count': 3,
            'management_company_count': 2,
            'client_count': 4,
            'flight_count': 15,
            'total_mot_paid': Decimal('1904.50'),
        }

    def test_summary_empty(self, db):
        assert DashboardService.get_summary()['total_mot_paid'] == Decimal('0')

    def test_recent_flights(self, seeded, today):
        flights = DashboardService.get_recent_flights()

        assert len(flights) == settings.RECENT_FLIGHTS_LIMIT
        assert flights[0]['flight_date'] == today - timedelta(days=1)
        assert flights[0]['tail_number'] == 'N654IJ'
        assert flights[0]['mot_paid'] == Decimal('80.25')

    def test_alerts_errors_first(self, seeded, today):
        alerts = DashboardService.get_document_alerts(today)

        assert [alert['severity'] for alert in alerts] == ['error'] + ['warning'] * 5
        assert alerts[0]['tail_number'] == 'N789EF'
        assert alerts[0]['message'] == 'Missing airworthiness document'

        expiring = {a['tail_number']: a for a in alerts if a['id'].endswith('-expiring')}
        assert expiring['N456CD']['document_type'] == 'insurance'
        assert expiring['N456CD']['expiration_date'] == today + timedelta(days=20)
        assert expiring['N654IJ']['document_type'] == 'registration'

        gaps = [a for a in alerts if a['id'].endswith('-coverage-gap')]
        assert len(gaps) == 3
        assert all(a['tail_number'] == 'N789EF' for a in gaps)


# =============================================================================
# AuthService Tests
# =============================================================================

@pytest.mark.django_db
class TestAuthService:

    def test_login(self, seeded):
        result = AuthService().login('admin', 'admin123')

        payload = JWTTokenGenerator.decode_token(result['access_token'])
        assert payload['username'] == 'admin'
        assert payload['roles'] == ['administrator']
        assert result['token_type'] == 'Bearer'
        assert result['user'].username == 'admin'

    @pytest.mark.parametrize('username,password', [
        ('admin', 'wrong'),
        ('nobody', 'admin123'),
    ])
    def test_invalid_credentials(self, seeded, username, password):
        with pytest.raises(InvalidCredentialsError) as exc_info:
            AuthService().login(username, password)

        assert exc_info.value.message == 'Invalid username or password'

    def test_inactive_user(self, viewer_user):
        viewer_user.is_active = False
        viewer_user.save()

        with pytest.raises(InvalidCredentialsError):
            AuthService().authenticate('test-viewer', 'secret123')


# =============================================================================
# SeedService Tests
# =============================================================================

@pytest.mark.django_db
class TestSeedService:

    def test_seed_counts(self, seeded):
        assert seeded == {
            'app_users': 3,
            'aircraft': 5,
            'aircraft_documents': 14,
            'owners': 3,
            'aircraft_ownerships': 6,
            'management_companies': 2,
            'aircraft_managements': 5,
            'clients': 4,
            'client_engagements': 4,
            'flights': 15,
            'fuel_receipts': 15,
        }

    def test_initialize_only_when_empty(self, db):
        assert SeedService.initialize() is True
        assert SeedService.initialize() is False
        assert Aircraft.objects.count() == 5

    def test_reset_restores_demo_data(self, seeded, today):
        Aircraft.objects.create(
            tail_number='N000XX', make='Piper', model='M600', year_of_manufacture=2022
        )
        Flight.objects.all().delete()

        counts = SeedService.reset(today)

        assert counts['aircraft'] == 5
        assert counts['flights'] == 15
        assert not Aircraft.objects.filter(tail_number='N000XX').exists()

    def test_ownership_handover_day(self, seeded, today):
        aircraft = Aircraft.objects.get(tail_number='N789EF')

        assert aircraft.owner_on(today - timedelta(days=400)).name == 'Global Jets International'
        assert aircraft.owner_on(today - timedelta(days=401)).name == 'Skyward Holdings LLC'
