# apps/reservations/admin.py
from django.contrib import admin
from .models import Reservation


@admin.register(Reservation)
class ReservationAdmin(admin.ModelAdmin):
    list_display = ("id", "reservation_date", "start_time", "patient", "category", "status", "note")
    list_filter = ("reservation_date", "category", "status")
    search_fields = ("note", "patient__name_last", "patient__name_first", "patient__phone")
    list_select_related = ("patient",)
    ordering = ("-reservation_date", "start_time")

    # Inspection only: reservations are created by the booking form and never edited.
    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
