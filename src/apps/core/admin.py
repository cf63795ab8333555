from django.contrib import admin
from .models import (
    Aircraft,
    AircraftDocument,
    Owner,
    AircraftOwnership,
    ManagementCompany,
    AircraftManagement,
    Client,
    ClientEngagement,
    Flight,
    FuelReceipt,
    AppUser,
)


@admin.register(Aircraft)
class AircraftAdmin(admin.ModelAdmin):
    list_display = ['tail_number', 'make', 'model', 'year_of_manufacture']
    search_fields = ['tail_number', 'make', 'model']


@admin.register(AircraftDocument)
class AircraftDocumentAdmin(admin.ModelAdmin):
    list_display = ['aircraft', 'document_type', 'document_number', 'valid_from', 'valid_to']
    list_filter = ['document_type']


@admin.register(Owner)
class OwnerAdmin(admin.ModelAdmin):
    list_display = ['name', 'email', 'phone']
    search_fields = ['name', 'email']


@admin.register(AircraftOwnership)
class AircraftOwnershipAdmin(admin.ModelAdmin):
    list_display = ['aircraft', 'owner', 'start_date', 'end_date']


@admin.register(ManagementCompany)
class ManagementCompanyAdmin(admin.ModelAdmin):
    list_display = ['name', 'email', 'phone']
    search_fields = ['name', 'email']


@admin.register(AircraftManagement)
class AircraftManagementAdmin(admin.ModelAdmin):
    list_display = ['aircraft', 'management_company', 'start_date', 'end_date']


@admin.register(Client)
class ClientAdmin(admin.ModelAdmin):
    list_display = ['name', 'email', 'phone']
    search_fields = ['name', 'email']


@admin.register(ClientEngagement)
class ClientEngagementAdmin(admin.ModelAdmin):
    list_display = ['client', 'management_company', 'start_date', 'end_date']


@admin.register(Flight)
class FlightAdmin(admin.ModelAdmin):
    list_display = ['flight_date', 'aircraft', 'departure', 'arrival', 'client']
    list_filter = ['aircraft']
    search_fields = ['departure', 'arrival', 'notes']


@admin.register(FuelReceipt)
class FuelReceiptAdmin(admin.ModelAdmin):
    list_display = ['receipt_number', 'flight', 'receipt_date', 'fuel_liters', 'mot_amount_paid']
    search_fields = ['receipt_number', 'vendor']


@admin.register(AppUser)
class AppUserAdmin(admin.ModelAdmin):
    list_display = ['username', 'name', 'role', 'is_active']
    list_filter = ['role', 'is_active']
    exclude = ['password']
