from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Patient",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name_last", models.CharField(max_length=100)),
                ("name_first", models.CharField(max_length=100)),
                ("name_last_kana", models.CharField(blank=True, default="", max_length=100)),
                ("name_first_kana", models.CharField(blank=True, default="", max_length=100)),
                ("birth_date", models.DateField(blank=True, null=True)),
                (
                    "gender",
                    models.CharField(
                        blank=True,
                        choices=[("male", "男性"), ("female", "女性"), ("other", "その他")],
                        default="male",
                        max_length=20,
                    ),
                ),
                ("phone", models.CharField(max_length=50)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "patients",
                "ordering": ["name_last_kana", "name_first_kana", "id"],
                "indexes": [
                    models.Index(fields=["phone"], name="patients_phone_5c1f0e_idx"),
                    models.Index(fields=["name_last", "name_first"], name="patients_name_la_8a2d41_idx"),
                ],
            },
        ),
    ]
