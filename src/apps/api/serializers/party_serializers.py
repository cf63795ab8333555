# src/apps/api/serializers/party_serializers.py
"""
Party Serializers

Owners, management companies and clients.
"""

from rest_framework import serializers

from apps.core.models import Owner, ManagementCompany, Client
from common.validators import validate_email
from .base import required_error, party_ref


def _aircraft_refs(queryset):
    return [{'id': str(aircraft.id), 'tail_number': aircraft.tail_number} for aircraft in queryset]


class ContactWriteSerializer(serializers.ModelSerializer):
    """Name, email and phone rules shared by every party form."""

    name = serializers.CharField(max_length=255, error_messages=required_error('Name is required'))
    email = serializers.CharField(max_length=255, error_messages=required_error('Email is required'))
    phone = serializers.CharField(max_length=50, error_messages=required_error('Phone is required'))

    def validate_email(self, value):
        return validate_email(value.strip())


# =============================================================================
# Owners
# =============================================================================

class OwnerSerializer(serializers.ModelSerializer):
    """Owner with the aircraft currently held."""

    current_aircraft = serializers.SerializerMethodField()

    class Meta:
        model = Owner
        fields = [
            'id', 'name', 'email', 'phone', 'address',
            'current_aircraft',
            'created_at', 'updated_at',
        ]

    def get_current_aircraft(self, obj):
        return _aircraft_refs(obj.current_aircraft)


class OwnerWriteSerializer(ContactWriteSerializer):
    address = serializers.CharField(required=False, allow_blank=True, default='')

    class Meta:
        model = Owner
        fields = ['name', 'email', 'phone', 'address']


# =============================================================================
# Management Companies
# =============================================================================

class ManagementCompanySerializer(serializers.ModelSerializer):
    """Management company with its fleet and client count."""

    managed_aircraft = serializers.SerializerMethodField()
    client_count = serializers.IntegerField(source='current_client_count', read_only=True)

    class Meta:
        model = ManagementCompany
        fields = [
            'id', 'name', 'email', 'phone', 'address',
            'managed_aircraft', 'client_count',
            'created_at', 'updated_at',
        ]

    def get_managed_aircraft(self, obj):
        return _aircraft_refs(obj.current_aircraft)


class ManagementCompanyWriteSerializer(ContactWriteSerializer):
    address = serializers.CharField(required=False, allow_blank=True, default='')

    class Meta:
        model = ManagementCompany
        fields = ['name', 'email', 'phone', 'address']


# =============================================================================
# Clients
# =============================================================================

class ClientSerializer(serializers.ModelSerializer):
    """Client with the management company currently engaged."""

    current_management_company = serializers.SerializerMethodField()

    class Meta:
        model = Client
        fields = [
            'id', 'name', 'email', 'phone',
            'current_management_company',
            'created_at', 'updated_at',
        ]

    def get_current_management_company(self, obj):
        return party_ref(obj.current_management_company)


class ClientWriteSerializer(ContactWriteSerializer):
    """
    Client form.

    An optional management company is applied as an engagement switch
    starting on engagement_start_date (today when omitted).
    """

    management_company = serializers.PrimaryKeyRelatedField(
        queryset=ManagementCompany.objects.all(),
        required=False,
        allow_null=True,
        error_messages={'does_not_exist': 'Management company not found'}
    )
    engagement_start_date = serializers.DateField(required=False, allow_null=True)

    class Meta:
        model = Client
        fields = ['name', 'email', 'phone', 'management_company', 'engagement_start_date']
