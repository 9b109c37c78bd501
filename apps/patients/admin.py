from django.contrib import admin
from .models import Patient


@admin.register(Patient)
class PatientAdmin(admin.ModelAdmin):
    list_display = ("id", "name_last", "name_first", "name_last_kana", "name_first_kana", "birth_date", "gender", "phone")
    search_fields = (
        "name_last",
        "name_first",
        "name_last_kana",
        "name_first_kana",
        "phone",
    )
    list_filter = ("gender",)

    # Inspection only: patients are registered by the booking form and never edited.
    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
