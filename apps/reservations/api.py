# apps/reservations/api.py
import logging

from django.db import DatabaseError
from django.utils import timezone
from django.utils.dateparse import parse_date

from rest_framework import mixins, status, viewsets
from rest_framework.exceptions import ValidationError
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from drf_spectacular.utils import (
    extend_schema,
    extend_schema_view,
    OpenApiParameter,
)
from drf_spectacular.types import OpenApiTypes

from .models import Reservation
from .schemas import BookingFailed400Serializer, BookReservationExample
from .serializers import BookingResponseSerializer, BookingSerializer, ReservationSerializer
from .services import book_reservation, reservations_for_date, split_booking_fields

logger = logging.getLogger(__name__)


@extend_schema_view(
    list=extend_schema(
        summary="Reservations for one day",
        description="Ordered by start time, patient name/phone nested. `date` defaults to today (clinic time zone).",
        parameters=[
            OpenApiParameter(name="date", description="YYYY-MM-DD", required=False, type=OpenApiTypes.DATE),
        ],
        responses={200: ReservationSerializer(many=True)},
    ),
    create=extend_schema(
        summary="Book reservation",
        description=(
            "Matches an existing patient by phone or registers a new one, then creates the reservation. "
            "The two writes are not atomic; store errors return **400** with the store message."
        ),
        request=BookingSerializer,
        examples=[BookReservationExample],
        responses={201: BookingResponseSerializer, 400: BookingFailed400Serializer},
    ),
)
class ReservationViewSet(mixins.ListModelMixin, mixins.CreateModelMixin, viewsets.GenericViewSet):
    schema_tags = ["Reservations"]
    queryset = Reservation.objects.select_related("patient").all()
    serializer_class = ReservationSerializer
    permission_classes = [AllowAny]
    pagination_class = None

    def list(self, request, *args, **kwargs):
        raw = request.query_params.get("date")
        if raw:
            try:
                day = parse_date(raw)
            except ValueError:
                day = None
            if day is None:
                raise ValidationError({"date": "Use YYYY-MM-DD."})
        else:
            day = timezone.localdate()

        qs = reservations_for_date(day)
        return Response(ReservationSerializer(qs, many=True).data)

    def create(self, request, *args, **kwargs):
        ser = BookingSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        patient_fields, reservation_fields = split_booking_fields(ser.validated_data)

        try:
            result = book_reservation(patient_fields, reservation_fields)
        except DatabaseError as exc:
            logger.exception("Error booking reservation via API")
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        body = {
            "patient_created": result.patient_created,
            "reservation": ReservationSerializer(result.reservation).data,
        }
        return Response(body, status=status.HTTP_201_CREATED)
