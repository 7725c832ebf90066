from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="AddressRecord",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("address_name", models.CharField(blank=True, help_text="Lookup key used when creating appointments, e.g. 'home'.", max_length=255, null=True)),
                ("address_line1", models.CharField(max_length=255)),
                ("address_line2", models.CharField(blank=True, max_length=255, null=True)),
                ("address_line3", models.CharField(blank=True, max_length=255, null=True)),
                ("address_line4", models.CharField(blank=True, max_length=255, null=True)),
                ("zip_code", models.CharField(max_length=20)),
                ("city", models.CharField(max_length=255)),
                ("country_code", models.CharField(max_length=3)),
            ],
            options={
                "db_table": "address",
                "ordering": ["id"],
                "indexes": [models.Index(fields=["address_name"], name="address_name_idx")],
            },
        ),
        migrations.CreateModel(
            name="TaskRecord",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=255)),
                ("description", models.CharField(max_length=1000)),
                ("target_end", models.DateTimeField(blank=True, help_text="Optional deadline (UTC).", null=True)),
                ("extra_information", models.TextField(blank=True, null=True)),
                ("closed", models.BooleanField(default=False)),
            ],
            options={
                "db_table": "task",
                "ordering": ["id"],
                "indexes": [
                    models.Index(fields=["closed"], name="task_closed_idx"),
                    models.Index(fields=["target_end"], name="task_target_end_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="AppointmentRecord",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=255)),
                ("start", models.DateTimeField()),
                ("end", models.DateTimeField(db_column="end_date_time")),
                ("extra_information", models.TextField(blank=True, null=True)),
                ("address", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.PROTECT, related_name="appointments", to="todo.addressrecord")),
            ],
            options={
                "db_table": "appointment",
                "ordering": ["id"],
                "indexes": [
                    models.Index(fields=["start"], name="appointment_start_idx"),
                    models.Index(fields=["end"], name="appointment_end_idx"),
                ],
            },
        ),
    ]
