# apps/reservations/ui_views.py
from __future__ import annotations

import logging
from datetime import date, datetime

from django.db import DatabaseError
from django.shortcuts import redirect, render
from django.urls import reverse
from django.utils import timezone
from django.utils.cache import patch_vary_headers
from django.views.decorators.http import require_GET, require_http_methods

from .forms import ReservationForm
from .services import book_reservation, reservations_for_date, split_booking_fields

logger = logging.getLogger(__name__)

BOOKING_FAILED_MESSAGE = "予約の登録に失敗しました"


def _parse_day(value) -> date | None:
    try:
        return datetime.strptime(value, "%Y-%m-%d").date() if value else None
    except (TypeError, ValueError):
        return None


@require_GET
def reservation_list(request):
    """
    Reservations for one day (?date=YYYY-MM-DD, default today).
    HTMX requests from the date picker only get the table fragment.
    """
    day = _parse_day(request.GET.get("date")) or timezone.localdate()

    load_error = False
    try:
        reservations = list(reservations_for_date(day))
    except DatabaseError:
        logger.exception("Error fetching reservations for %s", day)
        reservations = []
        load_error = True

    ctx = {
        "selected_date": day.isoformat(),
        "reservations": reservations,
        "load_error": load_error,
    }
    if request.headers.get("Hx-Request"):
        response = render(request, "reservations/_table.html", ctx)
    else:
        response = render(request, "reservations/list.html", ctx)
    # Same URL serves the fragment and the full page.
    patch_vary_headers(response, ["HX-Request"])
    return response


@require_http_methods(["GET", "POST"])
def reservation_new(request):
    """
    Booking form: resolve the patient by phone, then create the reservation.
    Store errors are shown inline and the form stays populated for retry.
    """
    error = ""
    if request.method == "POST":
        form = ReservationForm(request.POST)
        if form.is_valid():
            patient_fields, reservation_fields = split_booking_fields(form.cleaned_data)
            try:
                result = book_reservation(patient_fields, reservation_fields)
            except DatabaseError as exc:
                logger.exception("Error booking reservation")
                error = str(exc) or BOOKING_FAILED_MESSAGE
            else:
                day = result.reservation.reservation_date.isoformat()
                return redirect(f"{reverse('reservations_ui:list')}?date={day}")
    else:
        initial = {}
        day = _parse_day(request.GET.get("date"))
        if day:
            initial["reservation_date"] = day
        form = ReservationForm(initial=initial)

    return render(request, "reservations/new.html", {"form": form, "error": error})
