from __future__ import annotations

from ...models import Timesheet
from ...validation import ValidationResult, max_chars
from ..base import CheckedModelForm, optional_date, optional_float, optional_text


class TimesheetForm(CheckedModelForm):
    work_date    = optional_date(label="Work date")
    hours_worked = optional_float(label="Hours worked")
    hourly_rate  = optional_float(label="Hourly rate")
    description  = optional_text()

    class Meta:
        model = Timesheet
        fields = ["work_date", "hours_worked", "hourly_rate", "description"]

    def checks(self, data, result: ValidationResult) -> ValidationResult:
        hours = data.get("hours_worked")
        rate = data.get("hourly_rate")

        result = result.check_field(data.get("work_date") is not None, "work_date", "Work date is required")
        result = result.check_field(hours is not None, "hours_worked", "Hours worked is required")
        if hours is not None:
            result = result.check_field(hours >= 0, "hours_worked", "Hours worked cannot be negative")
        if rate is not None:
            result = result.check_field(rate >= 0, "hourly_rate", "Hourly rate cannot be negative")
        result = result.check_field(
            max_chars(data.get("description") or "", 255),
            "description",
            "Description must be shorter than 255 characters",
        )
        return result

    def clean(self):
        cleaned = super().clean()
        if cleaned.get("description") is None:
            cleaned["description"] = ""
        return cleaned
