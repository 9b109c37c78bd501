import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("patients", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Reservation",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("reservation_date", models.DateField()),
                ("start_time", models.TimeField()),
                (
                    "category",
                    models.CharField(
                        choices=[
                            ("checkup", "定期検診"),
                            ("treatment", "治療"),
                            ("consultation", "相談"),
                            ("emergency", "急患"),
                            ("other", "その他"),
                        ],
                        default="checkup",
                        max_length=20,
                    ),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("confirmed", "予約確定"),
                            ("checked_in", "来院済"),
                            ("in_progress", "診察中"),
                            ("completed", "完了"),
                            ("cancelled", "キャンセル"),
                            ("no_show", "無断キャンセル"),
                        ],
                        default="confirmed",
                        max_length=20,
                    ),
                ),
                ("note", models.TextField(blank=True, default="")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "patient",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="reservations",
                        to="patients.patient",
                    ),
                ),
            ],
            options={
                "db_table": "reservations",
                "ordering": ["reservation_date", "start_time"],
                "indexes": [
                    models.Index(fields=["reservation_date", "start_time"], name="reservation_reserva_3e7b90_idx"),
                    models.Index(fields=["patient", "reservation_date"], name="reservation_patient_f41c2a_idx"),
                ],
            },
        ),
    ]
