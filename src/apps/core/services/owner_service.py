# src/apps/core/services/owner_service.py
"""
Owner Service

Business logic for aircraft owners.
"""

import logging
from typing import List
from uuid import UUID

from django.db import transaction

from apps.core.models import Owner, Aircraft

logger = logging.getLogger(__name__)


class OwnerService:
    """Owner CRUD and owned-aircraft lookup."""

    @transaction.atomic
    def create_owner(self, name: str, email: str, phone: str, address: str = '') -> Owner:
        owner = Owner.objects.create(
            name=name,
            email=email,
            phone=phone,
            address=address or ''
        )
        logger.info(f"Created owner {owner.name} ({owner.id})")
        return owner

    def get_owner(self, owner_id: UUID) -> Owner:
        try:
            return Owner.objects.get(id=owner_id)
        except Owner.DoesNotExist:
            from . import RecordNotFoundError
            raise RecordNotFoundError(f"Owner {owner_id} not found")

    @transaction.atomic
    def update_owner(self, owner_id: UUID, **kwargs) -> Owner:
        owner = self.get_owner(owner_id)

        for field, value in kwargs.items():
            if hasattr(owner, field):
                setattr(owner, field, value)

        owner.save()
        logger.info(f"Updated owner {owner.name}")
        return owner

    @transaction.atomic
    def delete_owner(self, owner_id: UUID) -> None:
        """Delete an owner together with its ownership records."""
        owner = self.get_owner(owner_id)
        name = owner.name
        owner.delete()
        logger.info(f"Deleted owner {name}")

    def get_current_aircraft(self, owner_id: UUID) -> List[Aircraft]:
        """Aircraft the owner holds today (open ownership records)."""
        owner = self.get_owner(owner_id)
        return list(owner.current_aircraft)
