from __future__ import annotations

from django import forms

from ...models import Project
from ...validation import ValidationResult, max_chars, not_blank, permitted_value
from ..base import CheckedModelForm, optional_date, optional_float, optional_text

STATUS_VALUES = [value for value, _ in Project.STATUS_CHOICES]


class ProjectForm(CheckedModelForm):
    name                     = optional_text()
    status                   = optional_text(widget=forms.Select(choices=Project.STATUS_CHOICES))
    hourly_rate              = optional_float(label="Hourly rate")
    deadline                 = optional_date()
    scheduled_start          = optional_date(label="Scheduled start")
    discount_percent         = optional_float(label="Discount (%)")
    adjustment_amount        = optional_float(label="Adjustment amount")
    currency_display         = optional_text(label="Currency")
    currency_conversion_rate = optional_float(label="Conversion rate", widget=forms.NumberInput(attrs={"step": "0.0001"}))

    class Meta:
        model = Project
        fields = [
            "name", "status", "hourly_rate", "scheduled_start", "deadline",
            "discount_percent", "discount_reason", "adjustment_amount", "adjustment_reason",
            "currency_display", "currency_conversion_rate", "flat_fee_invoice",
            "invoice_cc_email", "invoice_cc_description",
            "schedule_comments", "notes", "additional_info", "additional_info2",
        ]
        widgets = {
            "schedule_comments": forms.Textarea(attrs={"rows": 2}),
            "notes": forms.Textarea(attrs={"rows": 3}),
            "additional_info": forms.Textarea(attrs={"rows": 2}),
            "additional_info2": forms.Textarea(attrs={"rows": 2}),
        }

    def checks(self, data, result: ValidationResult) -> ValidationResult:
        name = data.get("name") or ""
        status = data.get("status") or Project.STATUS_ESTIMATING
        rate = data.get("hourly_rate")
        discount = data.get("discount_percent")
        conversion = data.get("currency_conversion_rate")

        result = result.check_field(not_blank(name), "name", "Name is required")
        result = result.check_field(max_chars(name, 255), "name", "Name must be shorter than 255 characters")
        result = result.check_field(
            permitted_value(status, *STATUS_VALUES),
            "status",
            "Status must be one of: " + ", ".join(STATUS_VALUES),
        )
        if rate is not None:
            result = result.check_field(rate >= 0, "hourly_rate", "Hourly rate cannot be negative")
        if discount is not None:
            result = result.check_field(0 <= discount <= 100, "discount_percent", "Discount must be between 0 and 100")
        if conversion is not None:
            result = result.check_field(conversion > 0, "currency_conversion_rate", "Conversion rate must be greater than zero")
        result = result.check_field(
            max_chars(data.get("currency_display") or "", 10),
            "currency_display",
            "Currency must be shorter than 11 characters",
        )
        return result

    def clean(self):
        cleaned = super().clean()
        # blank inputs fall back to the column defaults
        if not cleaned.get("status") and "status" not in self.errors:
            cleaned["status"] = Project.STATUS_ESTIMATING
        if cleaned.get("hourly_rate") is None and "hourly_rate" not in self.errors:
            cleaned["hourly_rate"] = 0.0
        if not cleaned.get("currency_display") and "currency_display" not in self.errors:
            cleaned["currency_display"] = "USD"
        if cleaned.get("currency_conversion_rate") is None and "currency_conversion_rate" not in self.errors:
            cleaned["currency_conversion_rate"] = 1.0
        return cleaned
