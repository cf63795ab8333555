# src/apps/api/serializers/__init__.py
"""
MOT Refund Service API Serializers

All serializers for the records API.
"""

from .aircraft_serializers import (
    AircraftListSerializer,
    AircraftDetailSerializer,
    AircraftCreateSerializer,
    AircraftUpdateSerializer,
)

from .document_serializers import (
    DocumentListSerializer,
    DocumentDetailSerializer,
    DocumentCreateSerializer,
    DocumentUpdateSerializer,
    DocumentStatusSerializer,
)

from .relationship_serializers import (
    OwnershipSerializer,
    OwnershipWriteSerializer,
    ManagementSerializer,
    ManagementWriteSerializer,
    EngagementSerializer,
    EngagementWriteSerializer,
    AssignManagementCompanySerializer,
)

from .party_serializers import (
    OwnerSerializer,
    OwnerWriteSerializer,
    ManagementCompanySerializer,
    ManagementCompanyWriteSerializer,
    ClientSerializer,
    ClientWriteSerializer,
)

from .flight_serializers import (
    FlightListSerializer,
    FlightDetailSerializer,
    FlightWriteSerializer,
    FuelReceiptSerializer,
    FuelReceiptWriteSerializer,
)

from .report_serializers import (
    ReportQuerySerializer,
    ReportExportQuerySerializer,
    ReportSerializer,
)

from .dashboard_serializers import (
    DashboardSummarySerializer,
    RecentFlightSerializer,
    DocumentAlertSerializer,
)

from .auth_serializers import (
    LoginSerializer,
    UserSerializer,
    TokenUserSerializer,
)

__all__ = [
    # Aircraft
    'AircraftListSerializer',
    'AircraftDetailSerializer',
    'AircraftCreateSerializer',
    'AircraftUpdateSerializer',

    # Documents
    'DocumentListSerializer',
    'DocumentDetailSerializer',
    'DocumentCreateSerializer',
    'DocumentUpdateSerializer',
    'DocumentStatusSerializer',

    # Relationships
    'OwnershipSerializer',
    'OwnershipWriteSerializer',
    'ManagementSerializer',
    'ManagementWriteSerializer',
    'EngagementSerializer',
    'EngagementWriteSerializer',
    'AssignManagementCompanySerializer',

    # Parties
    'OwnerSerializer',
    'OwnerWriteSerializer',
    'ManagementCompanySerializer',
    'ManagementCompanyWriteSerializer',
    'ClientSerializer',
    'ClientWriteSerializer',

    # Flights
    'FlightListSerializer',
    'FlightDetailSerializer',
    'FlightWriteSerializer',
    'FuelReceiptSerializer',
    'FuelReceiptWriteSerializer',

    # Reports
    'ReportQuerySerializer',
    'ReportExportQuerySerializer',
    'ReportSerializer',

    # Dashboard
    'DashboardSummarySerializer',
    'RecentFlightSerializer',
    'DocumentAlertSerializer',

    # Auth
    'LoginSerializer',
    'UserSerializer',
    'TokenUserSerializer',
]
