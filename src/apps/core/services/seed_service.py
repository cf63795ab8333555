# src/apps/core/services/seed_service.py
"""
Seed Service

Demo data set with dates relative to today, plus first-run
initialization and full reset.
"""

import logging
from datetime import date, timedelta
from decimal import Decimal
from typing import Dict, Optional

from django.db import transaction

from apps.core.models import (
    Aircraft,
    AircraftDocument,
    AircraftManagement,
    AircraftOwnership,
    AppUser,
    Client,
    ClientEngagement,
    Flight,
    FuelReceipt,
    ManagementCompany,
    Owner,
)

logger = logging.getLogger(__name__)


# =============================================================================
# SEED DATA
# =============================================================================

DEMO_USERS = [
    # (username, password, name, role)
    ('admin', 'admin123', 'System Administrator', AppUser.Role.ADMINISTRATOR),
    ('dataentry', 'data123', 'Data Entry User', AppUser.Role.DATA_ENTRY),
    ('viewer', 'view123', 'Report Viewer', AppUser.Role.VIEWER),
]

AIRCRAFT = [
    # (key, tail number, make, model, year)
    ('ac1', 'N123AB', 'Cessna', 'Citation CJ3', 2018),
    ('ac2', 'N456CD', 'Gulfstream', 'G650', 2020),
    ('ac3', 'N789EF', 'Bombardier', 'Challenger 350', 2019),
    ('ac4', 'N321GH', 'Embraer', 'Phenom 300', 2021),
    ('ac5', 'N654IJ', 'Dassault', 'Falcon 900', 2017),
]

# (aircraft, type, valid from days, valid to days, number); days relative to today.
# N456CD insurance expires within the warning window, N789EF has no
# airworthiness certificate and N654IJ registration runs out in five days.
DOCUMENTS = [
    ('ac1', 'registration', -365, 365, 'REG-2024-001'),
    ('ac1', 'airworthiness', -180, 185, 'AWC-2024-001'),
    ('ac1', 'insurance', -90, 275, 'INS-2024-001'),
    ('ac2', 'registration', -400, 330, 'REG-2024-002'),
    ('ac2', 'airworthiness', -200, 165, 'AWC-2024-002'),
    ('ac2', 'insurance', -340, 20, 'INS-2024-002'),
    ('ac3', 'registration', -300, 430, 'REG-2024-003'),
    ('ac3', 'insurance', -60, 305, 'INS-2024-003'),
    ('ac4', 'registration', -150, 215, 'REG-2024-004'),
    ('ac4', 'airworthiness', -120, 245, 'AWC-2024-004'),
    ('ac4', 'insurance', -100, 265, 'INS-2024-004'),
    ('ac5', 'registration', -360, 5, 'REG-2024-005'),
    ('ac5', 'airworthiness', -180, 185, 'AWC-2024-005'),
    ('ac5', 'insurance', -270, 95, 'INS-2024-005'),
]

OWNERS = [
    ('o1', 'Skyward Holdings LLC', 'contact@skywardholdings.com', '+1-555-0101',
     '100 Aviation Blvd, New York, NY 10001'),
    ('o2', 'Executive Air Partners', 'info@executiveair.com', '+1-555-0102',
     '200 Flight Way, Los Angeles, CA 90001'),
    ('o3', 'Global Jets International', 'operations@globaljets.com', '+1-555-0103',
     '300 Runway Drive, Miami, FL 33101'),
]

# (aircraft, owner, start days, end days or None)
OWNERSHIPS = [
    ('ac1', 'o1', -730, None),
    ('ac2', 'o2', -500, None),
    ('ac3', 'o1', -1000, -400),
    ('ac3', 'o3', -400, None),
    ('ac4', 'o2', -300, None),
    ('ac5', 'o3', -600, None),
]

MANAGEMENT_COMPANIES = [
    ('mc1', 'Premier Aviation Management', 'ops@premieraviation.com', '+1-555-0201',
     '500 Hangar Lane, Chicago, IL 60601'),
    ('mc2', 'Elite Flight Services', 'dispatch@eliteflights.com', '+1-555-0202',
     '600 Terminal Road, Dallas, TX 75201'),
]

MANAGEMENTS = [
    ('ac1', 'mc1', -500),
    ('ac2', 'mc1', -400),
    ('ac3', 'mc2', -350),
    ('ac4', 'mc2', -200),
    ('ac5', 'mc1', -450),
]

CLIENTS = [
    ('c1', 'Acme Corporation', 'travel@acme.com', '+1-555-0301'),
    ('c2', 'Tech Ventures Inc', 'executive@techventures.com', '+1-555-0302'),
    ('c3', 'Global Finance Group', 'aviation@globalfinance.com', '+1-555-0303'),
    ('c4', 'Sports Entertainment LLC', 'travel@sportsent.com', '+1-555-0304'),
]

ENGAGEMENTS = [
    ('c1', 'mc1', -400),
    ('c2', 'mc1', -300),
    ('c3', 'mc2', -250),
    ('c4', 'mc2', -200),
]

# (aircraft, client, days ago, departure, arrival)
FLIGHTS = [
    ('ac1', 'c1', 60, 'KJFK', 'KLAX'),
    ('ac1', 'c1', 55, 'KLAX', 'KORD'),
    ('ac2', 'c2', 50, 'KTEB', 'KMIA'),
    ('ac2', 'c2', 45, 'KMIA', 'KDFW'),
    ('ac3', 'c3', 40, 'KSFO', 'KLAS'),
    ('ac3', 'c3', 35, 'KLAS', 'KDEN'),
    ('ac4', 'c4', 30, 'KATL', 'KBOS'),
    ('ac4', 'c4', 25, 'KBOS', 'KPHL'),
    ('ac5', 'c1', 20, 'KIAD', 'KMSP'),
    ('ac5', 'c2', 15, 'KMSP', 'KSEA'),
    ('ac1', 'c3', 10, 'KORD', 'KJFK'),
    ('ac2', 'c4', 8, 'KDFW', 'KPHX'),
    ('ac3', 'c1', 5, 'KDEN', 'KSAN'),
    ('ac4', 'c2', 3, 'KPHL', 'KDCA'),
    ('ac5', 'c3', 1, 'KSEA', 'KPDX'),
]

# One receipt per flight, in flight order: (liters, total, MOT, vendor)
RECEIPTS = [
    ('2500', '2250.50', '125.50', 'Atlantic Aviation'),
    ('2200', '1980.25', '110.25', 'Signature Flight Support'),
    ('4500', '4050.75', '225.75', 'Million Air'),
    ('3800', '3420.00', '190.00', 'Jet Aviation'),
    ('2800', '2520.50', '140.50', 'Landmark Aviation'),
    ('2100', '1890.25', '105.25', 'Atlantic Aviation'),
    ('1800', '1620.00', '90.00', 'Signature Flight Support'),
    ('1500', '1350.50', '75.50', 'Million Air'),
    ('3200', '2880.00', '160.00', 'Jet Aviation'),
    ('2900', '2610.75', '145.75', 'Landmark Aviation'),
    ('2400', '2160.00', '120.00', 'Atlantic Aviation'),
    ('3500', '3150.25', '175.25', 'Signature Flight Support'),
    ('2000', '1800.50', '100.50', 'Million Air'),
    ('1200', '1080.00', '60.00', 'Jet Aviation'),
    ('1600', '1440.25', '80.25', 'Landmark Aviation'),
]

# Deletion order respects the protected flight -> aircraft link
RESET_ORDER = [
    FuelReceipt,
    Flight,
    ClientEngagement,
    AircraftManagement,
    AircraftOwnership,
    AircraftDocument,
    Client,
    ManagementCompany,
    Owner,
    Aircraft,
    AppUser,
]


class SeedService:
    """
    Loads the demo data set.

    initialize() seeds an empty database only; reset() wipes every
    table first.
    """

    @staticmethod
    def is_empty() -> bool:
        return not (AppUser.objects.exists() or Aircraft.objects.exists())

    @classmethod
    def initialize(cls, today: Optional[date] = None) -> bool:
        """Seed on first run. Returns True when data was loaded."""
        if not cls.is_empty():
            logger.info("Data already present, skipping seed")
            return False

        cls.seed(today)
        return True

    @classmethod
    @transaction.atomic
    def reset(cls, today: Optional[date] = None) -> Dict[str, int]:
        """Delete all records and reseed."""
        for model in RESET_ORDER:
            deleted, _ = model.objects.all().delete()
            logger.debug(f"Reset removed {deleted} rows from {model._meta.db_table}")

        logger.warning("All records deleted, reseeding demo data")
        return cls.seed(today)

    @classmethod
    @transaction.atomic
    def seed(cls, today: Optional[date] = None) -> Dict[str, int]:
        """Create the demo data set. Returns created row counts per table."""
        today = today or date.today()

        def days(offset: int) -> date:
            return today + timedelta(days=offset)

        for username, password, name, role in DEMO_USERS:
            user = AppUser(username=username, name=name, role=role)
            user.set_password(password)
            user.save()

        aircraft = {
            key: Aircraft.objects.create(
                tail_number=tail_number, make=make, model=model, year_of_manufacture=year
            )
            for key, tail_number, make, model, year in AIRCRAFT
        }

        for ac_key, doc_type, valid_from, valid_to, number in DOCUMENTS:
            AircraftDocument.objects.create(
                aircraft=aircraft[ac_key],
                document_type=doc_type,
                valid_from=days(valid_from),
                valid_to=days(valid_to),
                document_number=number
            )

        owners = {
            key: Owner.objects.create(name=name, email=email, phone=phone, address=address)
            for key, name, email, phone, address in OWNERS
        }
        for ac_key, owner_key, start, end in OWNERSHIPS:
            AircraftOwnership.objects.create(
                aircraft=aircraft[ac_key],
                owner=owners[owner_key],
                start_date=days(start),
                end_date=days(end) if end is not None else None
            )

        companies = {
            key: ManagementCompany.objects.create(
                name=name, email=email, phone=phone, address=address
            )
            for key, name, email, phone, address in MANAGEMENT_COMPANIES
        }
        for ac_key, company_key, start in MANAGEMENTS:
            AircraftManagement.objects.create(
                aircraft=aircraft[ac_key],
                management_company=companies[company_key],
                start_date=days(start)
            )

        clients = {
            key: Client.objects.create(name=name, email=email, phone=phone)
            for key, name, email, phone in CLIENTS
        }
        for client_key, company_key, start in ENGAGEMENTS:
            ClientEngagement.objects.create(
                client=clients[client_key],
                management_company=companies[company_key],
                start_date=days(start)
            )

        for index, ((ac_key, client_key, days_ago, departure, arrival), receipt) in enumerate(
            zip(FLIGHTS, RECEIPTS), 1
        ):
            flight_date = days(-days_ago)
            flight = Flight.objects.create(
                aircraft=aircraft[ac_key],
                client=clients[client_key],
                flight_date=flight_date,
                departure=departure,
                arrival=arrival
            )

            liters, total, mot, vendor = receipt
            FuelReceipt.objects.create(
                flight=flight,
                receipt_number=f"FR-2024-{index:03d}",
                receipt_date=flight_date,
                fuel_liters=Decimal(liters),
                receipt_total=Decimal(total),
                mot_amount_paid=Decimal(mot),
                vendor=vendor
            )

        counts = {model._meta.db_table: model.objects.count() for model in reversed(RESET_ORDER)}
        logger.info(f"Seeded demo data: {counts}")
        return counts
