# src/apps/api/views/system_views.py
"""
System Views

Administrative data reset.
"""

import logging

from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from apps.core.services import SeedService
from common.permissions import IsAdministrator

logger = logging.getLogger(__name__)


class SystemViewSet(viewsets.ViewSet):
    """
    System endpoints.

    - POST /system/reset/ - Delete all records and reload the demo data
    """

    permission_classes = [IsAdministrator]

    @action(detail=False, methods=['post'])
    def reset(self, request):
        logger.warning(f"Data reset requested by {request.user.username}")
        counts = SeedService.reset()
        return Response({'reset': True, 'counts': counts})
