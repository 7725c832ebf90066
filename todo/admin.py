from django.contrib import admin
from .models import AddressRecord, AppointmentRecord, TaskRecord


@admin.register(TaskRecord)
class TaskRecordAdmin(admin.ModelAdmin):
    """Admin configuration for tasks (list/search filters)."""

    list_display = ("id", "name", "description", "target_end", "closed")
    search_fields = ("name", "description")
    list_filter = ("closed", "target_end")


@admin.register(AddressRecord)
class AddressRecordAdmin(admin.ModelAdmin):
    list_display = ("id", "address_name", "address_line1", "zip_code", "city", "country_code")
    search_fields = ("address_name", "address_line1", "city")
    list_filter = ("country_code",)


@admin.register(AppointmentRecord)
class AppointmentRecordAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "start", "end", "address")
    list_filter = ("start",)
    search_fields = ("name",)
    autocomplete_fields = ("address",)
    list_select_related = ("address",)
