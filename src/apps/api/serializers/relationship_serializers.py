# src/apps/api/serializers/relationship_serializers.py
"""
Relationship Serializers

Ownership, management and client engagement history records.
"""

from rest_framework import serializers

from apps.core.models import (
    AircraftOwnership,
    AircraftManagement,
    ClientEngagement,
    Owner,
    ManagementCompany,
)
from .base import required_error, IntervalValidationMixin


# =============================================================================
# Ownership
# =============================================================================

class OwnershipSerializer(serializers.ModelSerializer):
    """Ownership record with the owner's name."""

    owner_name = serializers.CharField(source='owner.name', read_only=True)
    is_current = serializers.BooleanField(read_only=True)

    class Meta:
        model = AircraftOwnership
        fields = [
            'id', 'aircraft', 'owner', 'owner_name',
            'start_date', 'end_date', 'is_current',
            'created_at', 'updated_at',
        ]


class OwnershipWriteSerializer(IntervalValidationMixin, serializers.ModelSerializer):
    """Serializer for adding or editing an ownership interval."""

    owner = serializers.PrimaryKeyRelatedField(
        queryset=Owner.objects.all(),
        error_messages={**required_error('Owner is required'), 'does_not_exist': 'Owner not found'}
    )
    start_date = serializers.DateField(error_messages=required_error('Start date is required'))
    end_date = serializers.DateField(required=False, allow_null=True)

    class Meta:
        model = AircraftOwnership
        fields = ['owner', 'start_date', 'end_date']


# =============================================================================
# Management
# =============================================================================

class ManagementSerializer(serializers.ModelSerializer):
    """Management record with the company's name."""

    management_company_name = serializers.CharField(
        source='management_company.name', read_only=True
    )
    is_current = serializers.BooleanField(read_only=True)

    class Meta:
        model = AircraftManagement
        fields = [
            'id', 'aircraft', 'management_company', 'management_company_name',
            'start_date', 'end_date', 'is_current',
            'created_at', 'updated_at',
        ]


class ManagementWriteSerializer(IntervalValidationMixin, serializers.ModelSerializer):
    """Serializer for assigning a management company to an aircraft."""

    management_company = serializers.PrimaryKeyRelatedField(
        queryset=ManagementCompany.objects.all(),
        error_messages={
            **required_error('Management company is required'),
            'does_not_exist': 'Management company not found',
        }
    )
    start_date = serializers.DateField(error_messages=required_error('Start date is required'))
    end_date = serializers.DateField(required=False, allow_null=True)

    class Meta:
        model = AircraftManagement
        fields = ['management_company', 'start_date', 'end_date']


# =============================================================================
# Client Engagement
# =============================================================================

class EngagementSerializer(serializers.ModelSerializer):
    """Client engagement record with the company's name."""

    management_company_name = serializers.CharField(
        source='management_company.name', read_only=True
    )
    is_current = serializers.BooleanField(read_only=True)

    class Meta:
        model = ClientEngagement
        fields = [
            'id', 'client', 'management_company', 'management_company_name',
            'start_date', 'end_date', 'is_current',
            'created_at', 'updated_at',
        ]


class EngagementWriteSerializer(ManagementWriteSerializer):
    """Serializer for adding or editing an engagement interval."""

    class Meta:
        model = ClientEngagement
        fields = ['management_company', 'start_date', 'end_date']


class AssignManagementCompanySerializer(serializers.Serializer):
    """Switch a client to a management company."""

    management_company = serializers.PrimaryKeyRelatedField(
        queryset=ManagementCompany.objects.all(),
        error_messages={
            **required_error('Management company is required'),
            'does_not_exist': 'Management company not found',
        }
    )
    start_date = serializers.DateField(required=False, allow_null=True)
