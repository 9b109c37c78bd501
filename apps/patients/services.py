from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional

from .models import Patient

logger = logging.getLogger(__name__)


@dataclass
class PatientResolution:
    patient: Patient
    created: bool

    @property
    def patient_id(self) -> int:
        return self.patient.pk


def resolve_patient(
    phone: str,
    *,
    name_last: str,
    name_first: str,
    name_last_kana: str = "",
    name_first_kana: str = "",
    birth_date: Optional[date] = None,
    gender: str = "male",
) -> PatientResolution:
    """
    Find the patient on file for `phone`, or register a new one.

    Matching is exact string equality on the phone column. When a record
    exists the submitted names/birth date/gender are ignored: returning
    patients are never updated from the booking form.

    There is no lock between the lookup and the insert, so two concurrent
    bookings for the same new phone number can both register a patient.
    Store errors (DatabaseError) propagate to the caller.
    """
    existing = Patient.objects.with_phone(phone).first()
    if existing is not None:
        logger.debug("Matched patient %s by phone", existing.pk)
        return PatientResolution(patient=existing, created=False)

    patient = Patient.objects.create(
        name_last=name_last,
        name_first=name_first,
        name_last_kana=name_last_kana or "",
        name_first_kana=name_first_kana or "",
        birth_date=birth_date,
        gender=gender or "male",
        phone=phone,
    )
    logger.info("Registered new patient %s", patient.pk)
    return PatientResolution(patient=patient, created=True)
