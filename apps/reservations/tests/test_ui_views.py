from datetime import date, time
from unittest.mock import patch

import pytest
from django.db import DatabaseError
from django.urls import reverse
from django.utils import timezone

from apps.patients.models import Patient
from apps.reservations.models import Reservation

BOOKING = {
    "name_last": "山田",
    "name_first": "太郎",
    "name_last_kana": "",
    "name_first_kana": "",
    "birth_date": "",
    "gender": "male",
    "phone": "090-1234-5678",
    "reservation_date": "2025-04-01",
    "start_time": "10:00",
    "category": "checkup",
    "note": "",
}


@pytest.fixture
def patient(db):
    return Patient.objects.create(name_last="山田", name_first="太郎", phone="090-1234-5678")


# ---------------- list ----------------

@pytest.mark.django_db
def test_list_empty_day_shows_no_reservations_state(client):
    res = client.get(reverse("reservations_ui:list"), {"date": "2025-04-01"})

    assert res.status_code == 200
    assert "この日の予約はありません" in res.content.decode()
    assert res.context["reservations"] == []
    assert res.context["selected_date"] == "2025-04-01"


@pytest.mark.django_db
def test_list_renders_rows_in_start_time_order(client, patient):
    other = Patient.objects.create(name_last="佐藤", name_first="花子", phone="03-1111-2222")
    Reservation.objects.create(patient=other, reservation_date=date(2025, 4, 1), start_time=time(14, 0), note="痛みあり")
    Reservation.objects.create(patient=patient, reservation_date=date(2025, 4, 1), start_time=time(10, 0))
    Reservation.objects.create(patient=patient, reservation_date=date(2025, 4, 2), start_time=time(9, 0))

    res = client.get(reverse("reservations_ui:list"), {"date": "2025-04-01"})
    html = res.content.decode()

    rows = res.context["reservations"]
    assert [r.start_time for r in rows] == [time(10, 0), time(14, 0)]
    assert html.index("山田 太郎") < html.index("佐藤 花子")
    for text in ("10:00", "090-1234-5678", "定期検診", "予約確定", "bg-blue-100 text-blue-800", "痛みあり"):
        assert text in html
    assert "この日の予約はありません" not in html


@pytest.mark.django_db
def test_list_renders_unknown_codes_raw(client, patient):
    Reservation.objects.create(
        patient=patient, reservation_date=date(2025, 4, 1), start_time=time(9, 0),
        category="whitening", status="rescheduled",
    )

    html = client.get(reverse("reservations_ui:list"), {"date": "2025-04-01"}).content.decode()

    assert "whitening" in html
    assert "rescheduled" in html


@pytest.mark.django_db
def test_list_bad_or_missing_date_defaults_to_today(client):
    today = timezone.localdate().isoformat()

    assert client.get(reverse("reservations_ui:list")).context["selected_date"] == today
    assert client.get(reverse("reservations_ui:list"), {"date": "04/01/2025"}).context["selected_date"] == today


@pytest.mark.django_db
def test_list_htmx_request_gets_table_fragment(client):
    res = client.get(reverse("reservations_ui:list"), {"date": "2025-04-01"}, HTTP_HX_REQUEST="true")
    html = res.content.decode()

    assert res.status_code == 200
    assert 'id="reservation-table"' in html
    assert "<html" not in html
    assert "HX-Request" in res["Vary"]
    # new-booking link is part of the swapped fragment, so it follows the picked date
    assert 'id="new-reservation-link"' in html
    assert reverse("reservations_ui:new") + "?date=2025-04-01" in html

    full = client.get(reverse("reservations_ui:list"), {"date": "2025-04-01"})
    assert "HX-Request" in full["Vary"]
    assert full.content.decode().count('id="new-reservation-link"') == 1


@pytest.mark.django_db
def test_list_store_failure_renders_error_banner(client):
    with patch("apps.reservations.ui_views.reservations_for_date", side_effect=DatabaseError("down")):
        res = client.get(reverse("reservations_ui:list"), {"date": "2025-04-01"})

    assert res.status_code == 200
    assert res.context["load_error"] is True
    assert "予約の読み込みに失敗しました" in res.content.decode()


# ---------------- new ----------------

@pytest.mark.django_db
def test_new_form_renders_with_defaults_and_prefilled_date(client):
    res = client.get(reverse("reservations_ui:new"), {"date": "2025-04-01"})
    form = res.context["form"]

    assert res.status_code == 200
    assert form["reservation_date"].value() == date(2025, 4, 1)
    assert form["gender"].value() == "male"
    assert form["category"].value() == "checkup"
    assert "※ 既存の患者様は電話番号で自動的に照合されます" in res.content.decode()


@pytest.mark.django_db
def test_new_post_books_and_redirects_to_day_list(client):
    res = client.post(reverse("reservations_ui:new"), BOOKING)

    assert res.status_code == 302
    assert res["Location"] == reverse("reservations_ui:list") + "?date=2025-04-01"

    p = Patient.objects.get()
    r = Reservation.objects.get()
    assert (p.full_name, p.phone, p.birth_date) == ("山田 太郎", "090-1234-5678", None)
    assert (r.patient_id, r.reservation_date, r.start_time, r.category) == (p.pk, date(2025, 4, 1), time(10, 0), "checkup")

    # example row as it appears on the day list
    html = client.get(res["Location"]).content.decode()
    for text in ("10:00", "山田 太郎", "090-1234-5678", "定期検診", "予約確定"):
        assert text in html


@pytest.mark.django_db
def test_new_post_returning_patient_adds_reservation_only(client, patient):
    client.post(reverse("reservations_ui:new"), {**BOOKING, "name_first": "次郎"})

    assert Patient.objects.count() == 1
    assert Reservation.objects.get().patient_id == patient.pk


@pytest.mark.django_db
def test_new_post_missing_required_fields_does_not_touch_store(client):
    data = {**BOOKING, "name_last": "", "phone": "", "start_time": ""}

    res = client.post(reverse("reservations_ui:new"), data)

    assert res.status_code == 200
    errors = res.context["form"].errors
    assert {"name_last", "phone", "start_time"} <= set(errors)
    assert Patient.objects.count() == 0
    assert Reservation.objects.count() == 0


@pytest.mark.django_db
def test_new_post_store_failure_shows_message_and_keeps_input(client):
    with patch("apps.reservations.ui_views.book_reservation", side_effect=DatabaseError("duplicate key value")):
        res = client.post(reverse("reservations_ui:new"), {**BOOKING, "name_last": "鈴木", "note": "初診"})

    html = res.content.decode()
    assert res.status_code == 200
    assert res.context["error"] == "duplicate key value"
    assert "duplicate key value" in html
    assert 'value="鈴木"' in html
    assert "初診" in html


@pytest.mark.django_db
def test_new_post_store_failure_without_text_uses_fallback_message(client):
    with patch("apps.reservations.ui_views.book_reservation", side_effect=DatabaseError()):
        res = client.post(reverse("reservations_ui:new"), BOOKING)

    assert res.context["error"] == "予約の登録に失敗しました"


@pytest.mark.django_db
def test_new_post_without_gender_stores_male(client):
    data = {k: v for k, v in BOOKING.items() if k != "gender"}

    res = client.post(reverse("reservations_ui:new"), data)

    assert res.status_code == 302
    assert Patient.objects.get().gender == "male"


@pytest.mark.django_db
def test_new_post_phone_is_matched_as_typed(client, patient):
    res = client.post(reverse("reservations_ui:new"), {**BOOKING, "phone": " 090-1234-5678"})

    assert res.status_code == 302
    assert Patient.objects.count() == 2
    assert Reservation.objects.get().patient.phone == " 090-1234-5678"
