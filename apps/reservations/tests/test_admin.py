from datetime import date, time

import pytest
from django.urls import reverse

from apps.patients.models import Patient
from apps.reservations.models import Reservation


@pytest.fixture
def reservation(db):
    p = Patient.objects.create(name_last="山田", name_first="太郎", phone="090-1234-5678")
    return Reservation.objects.create(patient=p, reservation_date=date(2025, 4, 1), start_time=time(10, 0))


@pytest.mark.django_db
def test_admin_lists_both_tables(admin_client, reservation):
    assert admin_client.get(reverse("admin:reservations_reservation_changelist")).status_code == 200
    assert admin_client.get(reverse("admin:patients_patient_changelist")).status_code == 200


@pytest.mark.django_db
def test_admin_refuses_delete(admin_client, reservation):
    r_url = reverse("admin:reservations_reservation_delete", args=[reservation.pk])
    p_url = reverse("admin:patients_patient_delete", args=[reservation.patient_id])

    assert admin_client.post(r_url, {"post": "yes"}).status_code == 403
    assert admin_client.post(p_url, {"post": "yes"}).status_code == 403
    assert Reservation.objects.count() == 1
    assert Patient.objects.count() == 1


@pytest.mark.django_db
def test_admin_refuses_edit_and_add(admin_client, reservation):
    url = reverse("admin:reservations_reservation_change", args=[reservation.pk])
    res = admin_client.post(url, {"patient": reservation.patient_id, "reservation_date": "2025-05-05",
                                  "start_time": "09:00", "category": "other", "status": "cancelled", "note": ""})

    assert res.status_code == 403
    reservation.refresh_from_db()
    assert reservation.status == "confirmed"
    assert admin_client.get(reverse("admin:patients_patient_add")).status_code == 403
