# src/tests/conftest.py
"""
Pytest Configuration and Fixtures for MOT Refund Service Tests.
"""

from datetime import date, timedelta
from decimal import Decimal

import pytest
from rest_framework.test import APIClient

from apps.core.models import (
    Aircraft, AircraftDocument, AircraftOwnership, AircraftManagement,
    Owner, ManagementCompany, Client, ClientEngagement,
    Flight, FuelReceipt, AppUser,
)
from apps.core.services import SeedService
from common.authentication import JWTTokenGenerator


# =============================================================================
# Dates
# =============================================================================

@pytest.fixture
def today():
    return date.today()


def days_from(base: date, offset: int) -> date:
    return base + timedelta(days=offset)


# =============================================================================
# User Fixtures
# =============================================================================

def _create_user(username, role, password='secret123'):
    user = AppUser(username=username, name=username.replace('-', ' ').title(), role=role)
    user.set_password(password)
    user.save()
    return user


@pytest.fixture
def admin_user(db):
    return _create_user('test-admin', AppUser.Role.ADMINISTRATOR)


@pytest.fixture
def data_entry_user(db):
    return _create_user('test-editor', AppUser.Role.DATA_ENTRY)


@pytest.fixture
def viewer_user(db):
    return _create_user('test-viewer', AppUser.Role.VIEWER)


# =============================================================================
# API Client Fixtures
# =============================================================================

def _authenticate(client: APIClient, user: AppUser) -> APIClient:
    token = JWTTokenGenerator.generate_access_token(
        user_id=str(user.id),
        username=user.username,
        name=user.name,
        roles=[user.role]
    )
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {token}')
    return client


@pytest.fixture
def api_client():
    """Return an API client instance."""
    return APIClient()


@pytest.fixture
def admin_client(admin_user):
    return _authenticate(APIClient(), admin_user)


@pytest.fixture
def authenticated_client(data_entry_user):
    """Client signed in as a data-entry user (may edit records)."""
    return _authenticate(APIClient(), data_entry_user)


@pytest.fixture
def viewer_client(viewer_user):
    return _authenticate(APIClient(), viewer_user)


# =============================================================================
# Record Fixtures
# =============================================================================

@pytest.fixture
def aircraft(db):
    """Create a Citation CJ3."""
    return Aircraft.objects.create(
        tail_number='N123AB',
        make='Cessna',
        model='Citation CJ3',
        year_of_manufacture=2018,
    )


@pytest.fixture
def second_aircraft(db):
    return Aircraft.objects.create(
        tail_number='N456CD',
        make='Gulfstream',
        model='G650',
        year_of_manufacture=2020,
    )


@pytest.fixture
def valid_documents(aircraft, today):
    """All three required documents, valid for a year around today."""
    return [
        AircraftDocument.objects.create(
            aircraft=aircraft,
            document_type=doc_type,
            valid_from=days_from(today, -365),
            valid_to=days_from(today, 365),
            document_number=f'{doc_type[:3].upper()}-001',
        )
        for doc_type in ['registration', 'airworthiness', 'insurance']
    ]


@pytest.fixture
def owner(db):
    return Owner.objects.create(
        name='Skyward Holdings LLC',
        email='contact@skywardholdings.com',
        phone='+1-555-0101',
    )


@pytest.fixture
def second_owner(db):
    return Owner.objects.create(
        name='Global Jets International',
        email='operations@globaljets.com',
        phone='+1-555-0103',
    )


@pytest.fixture
def management_company(db):
    return ManagementCompany.objects.create(
        name='Premier Aviation Management',
        email='ops@premieraviation.com',
        phone='+1-555-0201',
    )


@pytest.fixture
def second_management_company(db):
    return ManagementCompany.objects.create(
        name='Elite Flight Services',
        email='dispatch@eliteflights.com',
        phone='+1-555-0202',
    )


@pytest.fixture
def client_record(db):
    return Client.objects.create(
        name='Acme Corporation',
        email='travel@acme.com',
        phone='+1-555-0301',
    )


@pytest.fixture
def ownership(aircraft, owner, today):
    return AircraftOwnership.objects.create(
        aircraft=aircraft, owner=owner, start_date=days_from(today, -730)
    )


@pytest.fixture
def management(aircraft, management_company, today):
    return AircraftManagement.objects.create(
        aircraft=aircraft, management_company=management_company, start_date=days_from(today, -500)
    )


@pytest.fixture
def engagement(client_record, management_company, today):
    return ClientEngagement.objects.create(
        client=client_record, management_company=management_company,
        start_date=days_from(today, -400)
    )


@pytest.fixture
def flight(aircraft, client_record, today):
    return Flight.objects.create(
        aircraft=aircraft,
        client=client_record,
        flight_date=days_from(today, -10),
        departure='KJFK',
        arrival='KLAX',
    )


@pytest.fixture
def fuel_receipt(flight):
    return FuelReceipt.objects.create(
        flight=flight,
        receipt_number='FR-2024-001',
        receipt_date=flight.flight_date,
        fuel_liters=Decimal('2500.00'),
        receipt_total=Decimal('2250.50'),
        mot_amount_paid=Decimal('125.50'),
        vendor='Atlantic Aviation',
    )


# =============================================================================
# Demo Data
# =============================================================================

@pytest.fixture
def seeded(db, today):
    """Load the full demo data set relative to today."""
    return SeedService.seed(today)
