# apps/reservations/serializers.py
from __future__ import annotations

from rest_framework import serializers

from apps.patients.models import Patient
from .labels import category_label, status_label
from .models import Reservation


class ReservationPatientSerializer(serializers.ModelSerializer):
    class Meta:
        model = Patient
        fields = ["id", "name_last", "name_first", "phone"]


class ReservationSerializer(serializers.ModelSerializer):
    # Nested patient so list consumers don't need a second lookup.
    patient = ReservationPatientSerializer(read_only=True)
    start_time = serializers.TimeField(format="%H:%M", read_only=True)
    category_label = serializers.SerializerMethodField()
    status_label = serializers.SerializerMethodField()

    class Meta:
        model = Reservation
        fields = [
            "id",
            "patient",
            "reservation_date",
            "start_time",
            "category",
            "category_label",
            "status",
            "status_label",
            "note",
            "created_at",
        ]

    def get_category_label(self, obj: Reservation) -> str:
        return category_label(obj.category)

    def get_status_label(self, obj: Reservation) -> str:
        return status_label(obj.status)


class BookingSerializer(serializers.Serializer):
    """Flat patient + reservation payload; status is not accepted."""

    name_last = serializers.CharField(max_length=100)
    name_first = serializers.CharField(max_length=100)
    name_last_kana = serializers.CharField(max_length=100, required=False, allow_blank=True, default="")
    name_first_kana = serializers.CharField(max_length=100, required=False, allow_blank=True, default="")
    birth_date = serializers.DateField(required=False, allow_null=True, default=None)
    gender = serializers.ChoiceField(choices=[c[0] for c in Patient.GENDER_CHOICES], required=False, default="male")
    phone = serializers.CharField(max_length=50, trim_whitespace=False)

    reservation_date = serializers.DateField()
    start_time = serializers.TimeField()
    category = serializers.ChoiceField(
        choices=[c[0] for c in Reservation.CATEGORY_CHOICES],
        required=False,
        default="checkup",
    )
    note = serializers.CharField(required=False, allow_blank=True, default="")


class BookingResponseSerializer(serializers.Serializer):
    patient_created = serializers.BooleanField()
    reservation = ReservationSerializer()
