from __future__ import annotations

from django import forms

from ...models import Invoice
from ...validation import ValidationResult, not_blank
from ..base import CheckedModelForm, optional_date, optional_float, optional_text


class InvoiceForm(CheckedModelForm):
    invoice_date  = optional_date(label="Invoice date")
    date_paid     = optional_date(label="Date paid")
    payment_terms = optional_text(label="Payment terms", widget=forms.Textarea(attrs={"rows": 3}))
    amount_due    = optional_float(label="Amount due")

    class Meta:
        model = Invoice
        fields = ["invoice_date", "date_paid", "payment_terms", "amount_due", "display_details"]
        labels = {"display_details": "Itemize timesheets on the printed invoice"}

    def checks(self, data, result: ValidationResult) -> ValidationResult:
        amount = data.get("amount_due")

        result = result.check_field(data.get("invoice_date") is not None, "invoice_date", "Invoice date is required")
        result = result.check_field(not_blank(data.get("payment_terms")), "payment_terms", "Payment terms are required")
        result = result.check_field(amount is not None, "amount_due", "Amount due is required")
        if amount is not None:
            result = result.check_field(amount >= 0, "amount_due", "Amount due cannot be negative")
        return result
