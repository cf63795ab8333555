# src/apps/core/services/__init__.py
"""
MOT Refund Service Business Logic

This module exports all services and exceptions for the records service.
"""

from .validity_service import ValidityService
from .document_service import DocumentService
from .aircraft_service import AircraftService
from .owner_service import OwnerService
from .management_service import ManagementService
from .client_service import ClientService
from .flight_service import FlightService
from .report_service import ReportService
from .export_service import ExportService
from .dashboard_service import DashboardService
from .auth_service import AuthService
from .seed_service import SeedService


# Custom Exceptions
class RecordServiceError(Exception):
    """Base exception for record service errors."""

    default_code = 'RECORD_ERROR'

    def __init__(self, message: str, code: str = None, field: str = None):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.field = field


class RecordNotFoundError(RecordServiceError):
    """Record not found."""
    default_code = 'NOT_FOUND'


class RecordValidationError(RecordServiceError):
    """Validation error for record data."""
    default_code = 'VALIDATION_ERROR'


class RecordConflictError(RecordServiceError):
    """Conflict error (e.g., duplicate tail number, aircraft in use)."""
    default_code = 'CONFLICT'


class ReportError(RecordValidationError):
    """Invalid report parameters."""
    default_code = 'INVALID_REPORT_PARAMETERS'


class ExportError(RecordServiceError):
    """Report export failed."""
    default_code = 'EXPORT_FAILED'


class InvalidCredentialsError(RecordServiceError):
    """Username or password rejected."""
    default_code = 'INVALID_CREDENTIALS'


__all__ = [
    # Services
    'ValidityService',
    'DocumentService',
    'AircraftService',
    'OwnerService',
    'ManagementService',
    'ClientService',
    'FlightService',
    'ReportService',
    'ExportService',
    'DashboardService',
    'AuthService',
    'SeedService',

    # Exceptions
    'RecordServiceError',
    'RecordNotFoundError',
    'RecordValidationError',
    'RecordConflictError',
    'ReportError',
    'ExportError',
    'InvalidCredentialsError',
]
