# src/apps/core/services/client_service.py
"""
Client Service

Business logic for clients and their engagements with management companies.
"""

import logging
from datetime import date
from typing import List, Optional
from uuid import UUID

from django.db import transaction

from apps.core.models import Client, ClientEngagement, ManagementCompany
from apps.core.services.validity_service import ValidityService

logger = logging.getLogger(__name__)


class ClientService:
    """
    Service for client operations.

    Handles:
    - Client CRUD operations
    - Engagement history
    - Switching a client to another management company
    """

    # ==========================================================================
    # CRUD Operations
    # ==========================================================================

    @transaction.atomic
    def create_client(
        self,
        name: str,
        email: str,
        phone: str,
        management_company_id: Optional[UUID] = None,
        engagement_start_date: Optional[date] = None
    ) -> Client:
        """Create a client, optionally engaged with a management company."""
        client = Client.objects.create(name=name, email=email, phone=phone)
        logger.info(f"Created client {client.name} ({client.id})")

        if management_company_id:
            self.assign_management_company(
                client.id, management_company_id, engagement_start_date
            )

        return client

    def get_client(self, client_id: UUID) -> Client:
        try:
            return Client.objects.get(id=client_id)
        except Client.DoesNotExist:
            from . import RecordNotFoundError
            raise RecordNotFoundError(f"Client {client_id} not found")

    @transaction.atomic
    def update_client(
        self,
        client_id: UUID,
        management_company_id: Optional[UUID] = None,
        engagement_start_date: Optional[date] = None,
        **kwargs
    ) -> Client:
        """Update client fields and apply a management company change."""
        client = self.get_client(client_id)

        for field, value in kwargs.items():
            if hasattr(client, field):
                setattr(client, field, value)

        client.save()
        logger.info(f"Updated client {client.name}")

        if management_company_id:
            self.assign_management_company(
                client.id, management_company_id, engagement_start_date
            )

        return client

    @transaction.atomic
    def delete_client(self, client_id: UUID) -> None:
        """Delete a client; its flights are kept without a client."""
        client = self.get_client(client_id)
        name = client.name
        client.delete()
        logger.info(f"Deleted client {name}")

    # ==========================================================================
    # Engagements
    # ==========================================================================

    @transaction.atomic
    def assign_management_company(
        self,
        client_id: UUID,
        management_company_id: UUID,
        start_date: Optional[date] = None
    ) -> ClientEngagement:
        """
        Engage a client with a management company.

        The current engagement with a different company is closed today
        (or removed when it has not started yet) and a new one opened from
        start_date (today by default). Assigning
        the company the client is already engaged with changes nothing.

        Returns:
            The engagement in force after the call
        """
        client = self.get_client(client_id)
        company = self._get_company(management_company_id)
        start_date = start_date or date.today()

        current = ValidityService.get_current(client.engagements.all())
        if current is not None:
            if current.management_company_id == company.id:
                return current
            if current.start_date > date.today():
                # Not started yet, so there is no interval to close.
                current.delete()
                logger.info(
                    f"Cancelled upcoming engagement of client {client.name} with "
                    f"{current.management_company.name}"
                )
            else:
                current.close()
                logger.info(
                    f"Ended engagement of client {client.name} with "
                    f"{current.management_company.name}"
                )

        engagement = ClientEngagement.objects.create(
            client=client,
            management_company=company,
            start_date=start_date
        )

        logger.info(f"Client {client.name} engaged with {company.name} from {start_date}")
        return engagement

    @transaction.atomic
    def add_engagement(
        self,
        client_id: UUID,
        management_company_id: UUID,
        start_date: date,
        end_date: Optional[date] = None
    ) -> ClientEngagement:
        """Record an engagement interval as given (no switch logic)."""
        client = self.get_client(client_id)
        company = self._get_company(management_company_id)
        self._validate_interval(start_date, end_date)

        return ClientEngagement.objects.create(
            client=client,
            management_company=company,
            start_date=start_date,
            end_date=end_date
        )

    @transaction.atomic
    def update_engagement(self, engagement_id: UUID, **kwargs) -> ClientEngagement:
        engagement = self._get_engagement(engagement_id)

        if 'management_company_id' in kwargs:
            kwargs['management_company'] = self._get_company(kwargs.pop('management_company_id'))

        self._validate_interval(
            kwargs.get('start_date', engagement.start_date),
            kwargs.get('end_date', engagement.end_date)
        )

        for field, value in kwargs.items():
            if hasattr(engagement, field):
                setattr(engagement, field, value)

        engagement.save()
        return engagement

    @transaction.atomic
    def delete_engagement(self, engagement_id: UUID) -> None:
        self._get_engagement(engagement_id).delete()
        logger.info(f"Deleted engagement {engagement_id}")

    def get_engagement_history(self, client_id: UUID) -> List[ClientEngagement]:
        client = self.get_client(client_id)
        return ValidityService.history(client.engagements.select_related('management_company'))

    # ==========================================================================
    # Helpers
    # ==========================================================================

    def _get_company(self, company_id: UUID) -> ManagementCompany:
        try:
            return ManagementCompany.objects.get(id=company_id)
        except ManagementCompany.DoesNotExist:
            from . import RecordValidationError
            raise RecordValidationError(
                f"Management company {company_id} not found", field='management_company'
            )

    def _get_engagement(self, engagement_id: UUID) -> ClientEngagement:
        try:
            return ClientEngagement.objects.get(id=engagement_id)
        except ClientEngagement.DoesNotExist:
            from . import RecordNotFoundError
            raise RecordNotFoundError(f"Engagement {engagement_id} not found")

    def _validate_interval(self, start_date: date, end_date: Optional[date]) -> None:
        if start_date and end_date and end_date < start_date:
            from . import RecordValidationError
            raise RecordValidationError("End date must be after start date", field='end_date')
