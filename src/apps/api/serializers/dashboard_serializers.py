# src/apps/api/serializers/dashboard_serializers.py
"""
Dashboard Serializers
"""

from rest_framework import serializers


class DashboardSummarySerializer(serializers.Serializer):
    aircraft_count = serializers.IntegerField()
    owner_count = serializers.IntegerField()
    management_company_count = serializers.IntegerField()
    client_count = serializers.IntegerField()
    flight_count = serializers.IntegerField()
    total_mot_paid = serializers.DecimalField(max_digits=16, decimal_places=2)


class RecentFlightSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    flight_date = serializers.DateField()
    aircraft_id = serializers.UUIDField()
    tail_number = serializers.CharField()
    departure = serializers.CharField()
    arrival = serializers.CharField()
    client_name = serializers.CharField(allow_null=True)
    mot_paid = serializers.DecimalField(max_digits=14, decimal_places=2)


class DocumentAlertSerializer(serializers.Serializer):
    """Document alert; expiration_date only on expiring-soon alerts."""

    id = serializers.CharField()
    aircraft_id = serializers.UUIDField()
    tail_number = serializers.CharField()
    document_type = serializers.CharField()
    severity = serializers.ChoiceField(choices=['error', 'warning', 'info'])
    message = serializers.CharField()
    expiration_date = serializers.DateField(required=False)
