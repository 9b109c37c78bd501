# apps/reservations/services.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, time
from typing import Any, Dict, Optional

from django.db import DatabaseError
from django.db.models import QuerySet

from apps.patients.models import Patient
from apps.patients.services import resolve_patient

from .models import Reservation

logger = logging.getLogger(__name__)

PATIENT_FIELDS = (
    "name_last",
    "name_first",
    "name_last_kana",
    "name_first_kana",
    "birth_date",
    "gender",
    "phone",
)
RESERVATION_FIELDS = ("reservation_date", "start_time", "category", "note")


def reservations_for_date(day: date) -> QuerySet[Reservation]:
    """
    All reservations on `day` with their patient joined in (single query),
    earliest start first. Equal start times keep the store's order.
    """
    return (
        Reservation.objects.select_related("patient")
        .filter(reservation_date=day)
        .order_by("start_time")
    )


def create_reservation(
    *,
    patient_id: int,
    reservation_date: date,
    start_time: time,
    category: str = "checkup",
    note: Optional[str] = "",
) -> Reservation:
    """
    Insert one reservation for an already-resolved patient.
    Status is left to the column default. No slot or clinic-hours checks.
    """
    return Reservation.objects.create(
        patient_id=patient_id,
        reservation_date=reservation_date,
        start_time=start_time,
        category=category or "checkup",
        note=note or "",
    )


# ---- Booking (patient + reservation) ----

@dataclass
class BookingResult:
    patient: Patient
    reservation: Reservation
    patient_created: bool


def split_booking_fields(data: Dict[str, Any]):
    """Split a flat form/serializer payload into (patient, reservation) kwargs."""
    patient_fields = {k: data.get(k) for k in PATIENT_FIELDS if k in data}
    reservation_fields = {k: data.get(k) for k in RESERVATION_FIELDS if k in data}
    return patient_fields, reservation_fields


def book_reservation(patient_fields: Dict[str, Any], reservation_fields: Dict[str, Any]) -> BookingResult:
    """
    Resolve the patient by phone, then create the reservation.

    The two writes are not wrapped in a transaction: if the
    reservation insert fails after a new patient was registered, that
    patient stays on file without a reservation. The orphan is logged and
    the store error is re-raised for the caller to display.
    """
    fields = dict(patient_fields)
    phone = fields.pop("phone")
    resolution = resolve_patient(phone, **fields)

    try:
        reservation = create_reservation(patient_id=resolution.patient_id, **reservation_fields)
    except DatabaseError:
        if resolution.created:
            logger.warning(
                "Reservation insert failed; patient %s was registered without a reservation",
                resolution.patient_id,
            )
        raise

    logger.info(
        "Booked reservation %s for patient %s on %s %s",
        reservation.pk,
        resolution.patient_id,
        reservation.reservation_date,
        reservation.start_label,
    )
    return BookingResult(
        patient=resolution.patient,
        reservation=reservation,
        patient_created=resolution.created,
    )
