# src/apps/api/serializers/report_serializers.py
"""
Report Serializers

Query parameters and output of the MOT refund report.
"""

from rest_framework import serializers

from common.constants import FORMAT_CSV


class ReportQuerySerializer(serializers.Serializer):
    """Report filters; empty id lists mean no restriction."""

    start_date = serializers.DateField(required=False, allow_null=True)
    end_date = serializers.DateField(required=False, allow_null=True)
    aircraft_ids = serializers.ListField(child=serializers.UUIDField(), required=False, default=list)
    owner_ids = serializers.ListField(child=serializers.UUIDField(), required=False, default=list)
    management_company_ids = serializers.ListField(
        child=serializers.UUIDField(), required=False, default=list
    )
    client_ids = serializers.ListField(child=serializers.UUIDField(), required=False, default=list)


class ReportExportQuerySerializer(ReportQuerySerializer):
    # Not "format": DRF reserves that query parameter for renderer selection
    export_format = serializers.CharField(required=False, default=FORMAT_CSV)


class ReportRowSerializer(serializers.Serializer):
    flight_id = serializers.UUIDField()
    flight_date = serializers.DateField()
    aircraft_id = serializers.UUIDField()
    tail_number = serializers.CharField()
    departure = serializers.CharField()
    arrival = serializers.CharField()
    client_name = serializers.CharField(allow_null=True)
    owner_name = serializers.CharField(allow_null=True)
    management_company_name = serializers.CharField(allow_null=True)
    fuel_liters = serializers.DecimalField(max_digits=14, decimal_places=2)
    mot_amount_paid = serializers.DecimalField(max_digits=14, decimal_places=2)


class ReportSerializer(serializers.Serializer):
    """MOT refund report response."""

    start_date = serializers.DateField()
    end_date = serializers.DateField()
    total_flights = serializers.IntegerField()
    total_fuel_liters = serializers.DecimalField(max_digits=16, decimal_places=2)
    total_mot_paid = serializers.DecimalField(max_digits=16, decimal_places=2)
    rows = ReportRowSerializer(many=True)
