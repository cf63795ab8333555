# src/apps/api/views/base.py
"""
View Helpers

Translation of service errors into API errors and the create/update
flow shared by the record viewsets.
"""

import logging

from rest_framework import status
from rest_framework.response import Response

from apps.core.services import (
    RecordServiceError,
    RecordNotFoundError,
    RecordValidationError,
    RecordConflictError,
    ExportError,
    InvalidCredentialsError,
)
from common.exceptions import (
    BaseAPIException,
    ValidationException,
    UnauthorizedException,
    NotFoundException,
    ConflictException,
    DuplicateTailNumberException,
    AircraftInUseException,
    InvalidDateRangeException,
    UnsupportedExportFormatException,
)

logger = logging.getLogger(__name__)


CONFLICT_EXCEPTIONS = {
    'DUPLICATE_TAIL_NUMBER': DuplicateTailNumberException,
    'AIRCRAFT_IN_USE': AircraftInUseException,
}


def to_api_exception(exc: RecordServiceError) -> BaseAPIException:
    """Map a service error onto the matching API exception."""
    if isinstance(exc, RecordNotFoundError):
        return NotFoundException(detail=exc.message)

    if isinstance(exc, RecordConflictError):
        exception_class = CONFLICT_EXCEPTIONS.get(exc.code)
        if exception_class:
            return exception_class(detail=exc.message)
        return ConflictException(detail=exc.message, error_code=exc.code)

    if isinstance(exc, RecordValidationError):
        if exc.code == 'INVALID_DATE_RANGE':
            return InvalidDateRangeException(detail=exc.message)
        field = exc.field or 'non_field_errors'
        return ValidationException({field: [exc.message]}, detail=exc.message)

    if isinstance(exc, InvalidCredentialsError):
        return UnauthorizedException(detail=exc.message, error_code=exc.code)

    if isinstance(exc, ExportError):
        if exc.code == 'UNSUPPORTED_FORMAT':
            return UnsupportedExportFormatException(detail=exc.message)
        return BaseAPIException(detail=exc.message, error_code=exc.code)

    logger.error(f"Unmapped service error: {exc}")
    return BaseAPIException(detail=exc.message, error_code=exc.code)


class ServiceErrorMixin:
    """Turns service errors raised inside a view into API errors."""

    def handle_exception(self, exc):
        if isinstance(exc, RecordServiceError):
            exc = to_api_exception(exc)
        return super().handle_exception(exc)


class RecordViewSetMixin(ServiceErrorMixin):
    """
    Create/update through the service layer.

    Input is validated with the write serializer; perform_create and
    perform_update hand validated data to a service and store the result
    on serializer.instance. The response uses detail_serializer_class.
    """

    detail_serializer_class = None

    def get_detail_serializer(self, instance):
        return self.detail_serializer_class(instance, context=self.get_serializer_context())

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        self.perform_create(serializer)
        return Response(
            self.get_detail_serializer(serializer.instance).data,
            status=status.HTTP_201_CREATED
        )

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        instance = self.get_object()
        serializer = self.get_serializer(instance, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        self.perform_update(serializer)
        return Response(self.get_detail_serializer(serializer.instance).data)
