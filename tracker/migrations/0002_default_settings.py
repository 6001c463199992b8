from __future__ import annotations

from django.db import migrations


DEFAULT_SETTINGS = [
    ("default_hourly_rate", "85.00", "decimal", "Default hourly rate for new projects"),
    ("invoice_title", "Invoice for Academic Editing", "string", "Title displayed on generated invoices"),
    ("freelancer_name", "Your Name Here", "string", "Freelancer name for invoices"),
    ("freelancer_address", "Your Address", "string", "Freelancer address for invoices"),
    ("freelancer_city_state_zip", "Your City, State ZIP", "string", "Freelancer city, state, and ZIP code for invoices"),
    ("freelancer_phone", "Your Phone", "string", "Freelancer phone for invoices"),
    ("freelancer_email", "your.email@example.com", "string", "Freelancer email for invoices"),
    (
        "invoice_payment_terms_default",
        "Payment is due within 30 days of receipt of this invoice. Thank you for your business!",
        "string",
        "Default payment terms text for invoices",
    ),
    ("invoice_thank_you_message", "Thank you for your business!", "string", "Thank you message at bottom of invoices"),
    ("invoice_show_individual_timesheets", "true", "bool", "Whether to show individual timesheet line items on invoices"),
    ("invoice_currency_symbol", "$", "string", "Currency symbol to display on invoices"),
    (
        "company_logo_path",
        "./static/img/logo.png",
        "string",
        "Path to company logo file for invoices (PNG recommended, shown 22.5mm wide)",
    ),
    ("list_page_size", "10", "int", "Number of items to display per page on list pages"),
]


def seed_settings(apps, schema_editor):
    AppSetting = apps.get_model("tracker", "AppSetting")

    for key, value, data_type, description in DEFAULT_SETTINGS:
        AppSetting.objects.get_or_create(
            key=key,
            defaults={"value": value, "data_type": data_type, "description": description},
        )


def remove_settings(apps, schema_editor):
    AppSetting = apps.get_model("tracker", "AppSetting")
    AppSetting.objects.filter(key__in=[row[0] for row in DEFAULT_SETTINGS]).delete()


class Migration(migrations.Migration):

    dependencies = [
        ("tracker", "0001_initial"),
    ]

    operations = [
        migrations.RunPython(seed_settings, remove_settings),
    ]
