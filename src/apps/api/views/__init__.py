# src/apps/api/views/__init__.py
"""
MOT Refund Service API Views
"""

from .aircraft_views import (
    AircraftViewSet,
    AircraftOwnershipViewSet,
    AircraftManagementViewSet,
)
from .document_views import DocumentViewSet
from .party_views import (
    OwnerViewSet,
    ManagementCompanyViewSet,
    ClientViewSet,
    ClientEngagementViewSet,
)
from .flight_views import FlightViewSet, FuelReceiptViewSet
from .report_views import ReportViewSet
from .dashboard_views import DashboardViewSet
from .auth_views import AuthViewSet
from .system_views import SystemViewSet

__all__ = [
    'AircraftViewSet',
    'AircraftOwnershipViewSet',
    'AircraftManagementViewSet',
    'DocumentViewSet',
    'OwnerViewSet',
    'ManagementCompanyViewSet',
    'ClientViewSet',
    'ClientEngagementViewSet',
    'FlightViewSet',
    'FuelReceiptViewSet',
    'ReportViewSet',
    'DashboardViewSet',
    'AuthViewSet',
    'SystemViewSet',
]
