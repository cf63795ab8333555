# src/apps/core/services/management_service.py
"""
Management Company Service

Business logic for management companies, their fleet and their clients.
"""

import logging
from typing import List
from uuid import UUID

from django.db import transaction

from apps.core.models import ManagementCompany, Aircraft, Client

logger = logging.getLogger(__name__)


class ManagementService:
    """
    Service for management company operations.

    Handles:
    - Company CRUD operations
    - Currently managed aircraft
    - Currently engaged clients
    """

    @transaction.atomic
    def create_company(
        self,
        name: str,
        email: str,
        phone: str,
        address: str = ''
    ) -> ManagementCompany:
        company = ManagementCompany.objects.create(
            name=name,
            email=email,
            phone=phone,
            address=address or ''
        )
        logger.info(f"Created management company {company.name} ({company.id})")
        return company

    def get_company(self, company_id: UUID) -> ManagementCompany:
        try:
            return ManagementCompany.objects.get(id=company_id)
        except ManagementCompany.DoesNotExist:
            from . import RecordNotFoundError
            raise RecordNotFoundError(f"Management company {company_id} not found")

    @transaction.atomic
    def update_company(self, company_id: UUID, **kwargs) -> ManagementCompany:
        company = self.get_company(company_id)

        for field, value in kwargs.items():
            if hasattr(company, field):
                setattr(company, field, value)

        company.save()
        logger.info(f"Updated management company {company.name}")
        return company

    @transaction.atomic
    def delete_company(self, company_id: UUID) -> None:
        """Delete a company with its management and engagement records."""
        company = self.get_company(company_id)
        name = company.name
        company.delete()
        logger.info(f"Deleted management company {name}")

    def get_managed_aircraft(self, company_id: UUID) -> List[Aircraft]:
        company = self.get_company(company_id)
        return list(company.current_aircraft)

    def get_current_clients(self, company_id: UUID) -> List[Client]:
        company = self.get_company(company_id)
        return list(
            Client.objects.filter(
                engagements__management_company=company,
                engagements__end_date__isnull=True
            ).distinct()
        )

    def get_client_count(self, company_id: UUID) -> int:
        return self.get_company(company_id).current_client_count
