# apps/reservations/schemas.py
from rest_framework import serializers
from drf_spectacular.utils import OpenApiExample


# Store failure while booking (the raw store message is passed through).
class BookingFailed400Serializer(serializers.Serializer):
    detail = serializers.CharField()


# ---- Swagger example payloads ----

BookReservationExample = OpenApiExample(
    "Book reservation (new or returning patient)",
    value={
        "name_last": "山田",
        "name_first": "太郎",
        "name_last_kana": "ヤマダ",
        "name_first_kana": "タロウ",
        "birth_date": "1985-06-15",
        "gender": "male",
        "phone": "090-1234-5678",
        "reservation_date": "2025-04-01",
        "start_time": "10:00",
        "category": "checkup",
        "note": "",
    },
    description="Patients already on file are matched by exact phone number; their stored details are kept.",
)
