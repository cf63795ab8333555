# src/apps/core/models/__init__.py
"""
MOT Refund Service Models

This module exports all models for the records service.
"""

from .aircraft import Aircraft
from .document import AircraftDocument
from .owner import Owner, AircraftOwnership
from .management import ManagementCompany, AircraftManagement
from .client import Client, ClientEngagement
from .flight import Flight, FuelReceipt
from .user import AppUser

__all__ = [
    'Aircraft',
    'AircraftDocument',
    'Owner',
    'AircraftOwnership',
    'ManagementCompany',
    'AircraftManagement',
    'Client',
    'ClientEngagement',
    'Flight',
    'FuelReceipt',
    'AppUser',
]
