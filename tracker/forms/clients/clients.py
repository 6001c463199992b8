from __future__ import annotations

from django import forms

from ...models import Client
from ...validation import EMAIL_RE, ValidationResult, matches, max_chars, not_blank
from ..base import CheckedModelForm, optional_float, optional_text


class ClientForm(CheckedModelForm):
    name        = optional_text()
    email       = optional_text()
    hourly_rate = optional_float(label="Hourly rate")

    class Meta:
        model = Client
        fields = [
            "name", "email", "phone",
            "address1", "address2", "address3", "city", "state", "zip_code",
            "hourly_rate", "bill_to", "include_address_on_invoice",
            "invoice_cc_email", "invoice_cc_description", "university_affiliation",
            "notes", "additional_info", "additional_info2",
        ]
        widgets = {
            "notes": forms.Textarea(attrs={"rows": 3}),
            "additional_info": forms.Textarea(attrs={"rows": 2}),
            "additional_info2": forms.Textarea(attrs={"rows": 2}),
            "bill_to": forms.Textarea(attrs={"rows": 2}),
        }

    def checks(self, data, result: ValidationResult) -> ValidationResult:
        name = data.get("name") or ""
        email = data.get("email") or ""
        rate = data.get("hourly_rate")

        result = result.check_field(not_blank(name), "name", "Name is required")
        result = result.check_field(max_chars(name, 255), "name", "Name must be shorter than 255 characters")
        if email:
            result = result.check_field(matches(email.lower(), EMAIL_RE), "email", "This field must be a valid email address")
        result = result.check_field(max_chars(email, 255), "email", "Email must be shorter than 255 characters")
        if rate is not None:
            result = result.check_field(rate >= 0, "hourly_rate", "Hourly rate cannot be negative")
        return result

    def clean(self):
        cleaned = super().clean()
        if cleaned.get("hourly_rate") is None and "hourly_rate" not in self.errors:
            cleaned["hourly_rate"] = 0.0
        if cleaned.get("email") is None:
            cleaned["email"] = ""
        return cleaned
