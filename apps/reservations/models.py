# apps/reservations/models.py
from django.db import models

from .labels import CATEGORY_LABELS, STATUS_LABELS, category_label, status_label


class Reservation(models.Model):
    CATEGORY_CHOICES = list(CATEGORY_LABELS.items())
    STATUS_CHOICES = list(STATUS_LABELS.items())

    # Links
    patient = models.ForeignKey(
        "patients.Patient",
        on_delete=models.PROTECT,
        related_name="reservations",
    )

    # Slot (clinic-local date + wall-clock start)
    reservation_date = models.DateField()
    start_time = models.TimeField()

    # Details
    category = models.CharField(max_length=20, choices=CATEGORY_CHOICES, default="checkup")
    # Never written by the booking flow; the column default applies.
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default="confirmed")
    note = models.TextField(blank=True, default="")

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "reservations"
        indexes = [
            models.Index(fields=["reservation_date", "start_time"], name="reservation_reserva_3e7b90_idx"),
            models.Index(fields=["patient", "reservation_date"], name="reservation_patient_f41c2a_idx"),
        ]
        ordering = ["reservation_date", "start_time"]

    def __str__(self) -> str:
        return f"{self.patient} @ {self.reservation_date.isoformat()} {self.start_label} ({self.status})"

    @property
    def start_label(self) -> str:
        return self.start_time.strftime("%H:%M") if self.start_time else ""

    @property
    def category_label(self) -> str:
        return category_label(self.category)

    @property
    def status_label(self) -> str:
        return status_label(self.status)
