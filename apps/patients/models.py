from __future__ import annotations

from django.db import models


# ------------ QuerySet / Manager helpers ------------ #

class PatientQuerySet(models.QuerySet):
    def with_phone(self, phone: str) -> "PatientQuerySet":
        """
        Exact phone match, oldest record first.
        Usage: Patient.objects.with_phone("090-1234-5678").first()
        """
        return self.filter(phone=phone).order_by("id")


class PatientManager(models.Manager.from_queryset(PatientQuerySet)):  # type: ignore[misc]
    pass


# -------------------------- Model -------------------------- #

class Patient(models.Model):
    GENDER_CHOICES = [
        ("male", "男性"),
        ("female", "女性"),
        ("other", "その他"),
    ]

    # --- Names (kanji + kana readings) ---
    name_last = models.CharField(max_length=100)
    name_first = models.CharField(max_length=100)
    name_last_kana = models.CharField(max_length=100, blank=True, default="")
    name_first_kana = models.CharField(max_length=100, blank=True, default="")

    # --- Demographics ---
    birth_date = models.DateField(null=True, blank=True)
    gender = models.CharField(max_length=20, choices=GENDER_CHOICES, blank=True, default="male")

    # --- Contact: used to recognise returning patients (not unique) ---
    phone = models.CharField(max_length=50)

    created_at = models.DateTimeField(auto_now_add=True)

    objects: PatientManager = PatientManager()

    class Meta:
        db_table = "patients"
        ordering = ["name_last_kana", "name_first_kana", "id"]
        indexes = [
            models.Index(fields=["phone"], name="patients_phone_5c1f0e_idx"),
            models.Index(fields=["name_last", "name_first"], name="patients_name_la_8a2d41_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.full_name} ({self.phone})"

    @property
    def full_name(self) -> str:
        return f"{self.name_last} {self.name_first}".strip()

    @property
    def full_name_kana(self) -> str:
        return f"{self.name_last_kana} {self.name_first_kana}".strip()
