# apps/reservations/ui_urls.py
from django.urls import path
from . import ui_views

app_name = "reservations_ui"

urlpatterns = [
    # / and /?date=YYYY-MM-DD (HTMX swaps the table on date change)
    path("", ui_views.reservation_list, name="list"),

    # /reservations/new/?date=YYYY-MM-DD
    path("reservations/new/", ui_views.reservation_new, name="new"),
]
