from __future__ import annotations

import django.db.models.deletion
from django.db import migrations, models


def tracked_fields():
    return [
        ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
        ("created_at", models.DateTimeField(auto_now_add=True)),
        ("updated_at", models.DateTimeField(auto_now=True)),
        ("deleted_at", models.DateTimeField(blank=True, db_index=True, null=True)),
    ]


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Client",
            fields=tracked_fields() + [
                ("name", models.CharField(db_index=True, max_length=255)),
                ("email", models.CharField(blank=True, db_index=True, default="", max_length=255)),
                ("phone", models.CharField(blank=True, max_length=100, null=True)),
                ("address1", models.CharField(blank=True, max_length=255, null=True)),
                ("address2", models.CharField(blank=True, max_length=255, null=True)),
                ("address3", models.CharField(blank=True, max_length=255, null=True)),
                ("city", models.CharField(blank=True, max_length=100, null=True)),
                ("state", models.CharField(blank=True, max_length=100, null=True)),
                ("zip_code", models.CharField(blank=True, max_length=20, null=True)),
                ("hourly_rate", models.FloatField(default=0.0)),
                ("notes", models.TextField(blank=True, null=True)),
                ("additional_info", models.TextField(blank=True, null=True)),
                ("additional_info2", models.TextField(blank=True, null=True)),
                ("bill_to", models.TextField(blank=True, help_text="Overrides the client name in the invoice 'Bill To' block.", null=True)),
                ("include_address_on_invoice", models.BooleanField(default=True)),
                ("invoice_cc_email", models.CharField(blank=True, max_length=255, null=True)),
                ("invoice_cc_description", models.CharField(blank=True, max_length=255, null=True)),
                ("university_affiliation", models.CharField(blank=True, max_length=255, null=True)),
            ],
            options={
                "db_table": "client",
                "ordering": ["-updated_at"],
            },
        ),
        migrations.CreateModel(
            name="Project",
            fields=tracked_fields() + [
                ("name", models.CharField(db_index=True, max_length=255)),
                ("status", models.CharField(
                    choices=[
                        ("Estimating", "Estimating"),
                        ("Scheduled", "Scheduled"),
                        ("In Progress", "In Progress"),
                        ("On Hold", "On Hold"),
                        ("Complete", "Complete"),
                        ("Cancelled", "Cancelled"),
                    ],
                    db_index=True,
                    default="Estimating",
                    max_length=50,
                )),
                ("hourly_rate", models.FloatField(default=0.0)),
                ("deadline", models.DateField(blank=True, db_index=True, null=True)),
                ("scheduled_start", models.DateField(blank=True, db_index=True, null=True)),
                ("invoice_cc_email", models.CharField(blank=True, max_length=255, null=True)),
                ("invoice_cc_description", models.CharField(blank=True, max_length=255, null=True)),
                ("schedule_comments", models.TextField(blank=True, null=True)),
                ("additional_info", models.TextField(blank=True, null=True)),
                ("additional_info2", models.TextField(blank=True, null=True)),
                ("discount_percent", models.FloatField(blank=True, help_text="Percentage (0-100) taken off the invoice amount.", null=True)),
                ("discount_reason", models.CharField(blank=True, max_length=255, null=True)),
                ("adjustment_amount", models.FloatField(blank=True, help_text="Flat amount added (or subtracted, if negative) after the discount.", null=True)),
                ("adjustment_reason", models.CharField(blank=True, max_length=255, null=True)),
                ("currency_display", models.CharField(default="USD", max_length=10)),
                ("currency_conversion_rate", models.FloatField(default=1.0)),
                ("flat_fee_invoice", models.BooleanField(default=False)),
                ("notes", models.TextField(blank=True, null=True)),
                ("client", models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name="projects", to="tracker.client")),
            ],
            options={
                "db_table": "project",
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="Timesheet",
            fields=tracked_fields() + [
                ("work_date", models.DateField(db_index=True)),
                ("hours_worked", models.FloatField()),
                ("hourly_rate", models.FloatField(default=0.0)),
                ("description", models.CharField(blank=True, default="", max_length=255)),
                ("project", models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name="timesheets", to="tracker.project")),
            ],
            options={
                "db_table": "timesheet",
                "ordering": ["-work_date", "-created_at"],
            },
        ),
        migrations.CreateModel(
            name="Invoice",
            fields=tracked_fields() + [
                ("invoice_date", models.DateField(db_index=True)),
                ("date_paid", models.DateField(blank=True, db_index=True, null=True)),
                ("payment_terms", models.TextField()),
                ("amount_due", models.FloatField(help_text="Base amount before project discount and adjustment.")),
                ("display_details", models.BooleanField(default=False, help_text="Itemize timesheets on the printed invoice.")),
                ("project", models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name="invoices", to="tracker.project")),
            ],
            options={
                "db_table": "invoice",
                "ordering": ["-invoice_date", "-created_at"],
            },
        ),
        migrations.CreateModel(
            name="AppSetting",
            fields=[
                ("key", models.CharField(max_length=100, primary_key=True, serialize=False)),
                ("value", models.TextField()),
                ("data_type", models.CharField(
                    choices=[
                        ("string", "String"),
                        ("int", "Integer"),
                        ("float", "Float"),
                        ("decimal", "Decimal"),
                        ("bool", "Boolean"),
                    ],
                    default="string",
                    max_length=10,
                )),
                ("description", models.TextField(blank=True, default="")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "settings",
                "ordering": ["key"],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(("data_type__in", ["string", "int", "float", "decimal", "bool"])),
                        name="settings_data_type_valid",
                    ),
                ],
            },
        ),
    ]
