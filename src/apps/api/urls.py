# src/apps/api/urls.py
"""
MOT Refund Service API URL Configuration

All API endpoints for the records service.
"""

from django.urls import path, include
from rest_framework.routers import DefaultRouter
from rest_framework_nested import routers

from .views import (
    AircraftViewSet,
    AircraftOwnershipViewSet,
    AircraftManagementViewSet,
    DocumentViewSet,
    OwnerViewSet,
    ManagementCompanyViewSet,
    ClientViewSet,
    ClientEngagementViewSet,
    FlightViewSet,
    FuelReceiptViewSet,
    ReportViewSet,
    DashboardViewSet,
    AuthViewSet,
    SystemViewSet,
)

# =============================================================================
# Main Router
# =============================================================================

router = DefaultRouter()
router.register(r'aircraft', AircraftViewSet, basename='aircraft')
router.register(r'owners', OwnerViewSet, basename='owner')
router.register(r'management-companies', ManagementCompanyViewSet, basename='management-company')
router.register(r'clients', ClientViewSet, basename='client')
router.register(r'flights', FlightViewSet, basename='flight')
router.register(r'reports', ReportViewSet, basename='report')
router.register(r'dashboard', DashboardViewSet, basename='dashboard')
router.register(r'auth', AuthViewSet, basename='auth')
router.register(r'system', SystemViewSet, basename='system')

# =============================================================================
# Nested Routers
# =============================================================================

# /aircraft/{aircraft_pk}/documents|ownerships|managements/
aircraft_router = routers.NestedDefaultRouter(router, r'aircraft', lookup='aircraft')
aircraft_router.register(r'documents', DocumentViewSet, basename='aircraft-document')
aircraft_router.register(r'ownerships', AircraftOwnershipViewSet, basename='aircraft-ownership')
aircraft_router.register(r'managements', AircraftManagementViewSet, basename='aircraft-management')

# /clients/{client_pk}/engagements/
client_router = routers.NestedDefaultRouter(router, r'clients', lookup='client')
client_router.register(r'engagements', ClientEngagementViewSet, basename='client-engagement')

# /flights/{flight_pk}/receipts/
flight_router = routers.NestedDefaultRouter(router, r'flights', lookup='flight')
flight_router.register(r'receipts', FuelReceiptViewSet, basename='flight-receipt')

# =============================================================================
# Combined URL Patterns
# =============================================================================

app_name = 'api'

urlpatterns = [
    # Main routes
    path('', include(router.urls)),

    # Nested routes
    path('', include(aircraft_router.urls)),
    path('', include(client_router.urls)),
    path('', include(flight_router.urls)),
]
