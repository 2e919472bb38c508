import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("users", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Asset",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=100)),
                ("asset_type", models.CharField(choices=[("Computer", "Computer"), ("Monitor", "Monitor"), ("Keyboard", "Keyboard"), ("Mouse", "Mouse"), ("Network Equipment", "Network Equipment"), ("Printer", "Printer"), ("Other", "Other")], max_length=50)),
                ("serial_number", models.CharField(max_length=100, unique=True)),
                ("description", models.TextField(blank=True, default="")),
                ("status", models.CharField(choices=[("AVAILABLE", "Available"), ("ASSIGNED", "Assigned"), ("UNDER_MAINTENANCE", "Under Maintenance"), ("RETIRED", "Retired")], default="AVAILABLE", max_length=20)),
                ("purchase_date", models.DateField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("assignee", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="assets", to="users.user")),
            ],
            options={
                "ordering": ["-created_at", "-id"],
            },
        ),
    ]
