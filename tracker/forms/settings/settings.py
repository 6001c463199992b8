from __future__ import annotations

from typing import Iterable

from django import forms

from ...models import AppSetting
from ...services.app_settings import parse_bool, validate_setting_value
from ...validation import ValidationResult
from ..base import CheckedForm


class SettingsForm(CheckedForm):
    """
    One field per stored setting, keyed by the setting key. Booleans are
    checkboxes; everything else is text checked against its declared type.
    """

    submit_label = "Save settings"

    def __init__(self, *args, settings_rows: Iterable[AppSetting] = (), **kwargs):
        super().__init__(*args, **kwargs)
        self.rows = list(settings_rows)
        self.data_types = {}

        for row in self.rows:
            self.data_types[row.key] = row.data_type
            if row.data_type == AppSetting.TYPE_BOOL:
                try:
                    initial = parse_bool(row.value)
                except ValueError:
                    initial = False
                field = forms.BooleanField(required=False, initial=initial)
            else:
                widget = forms.Textarea(attrs={"rows": 2}) if len(row.value) > 80 else forms.TextInput()
                field = forms.CharField(required=False, strip=False, initial=row.value, widget=widget)
            field.label = row.key
            field.help_text = row.description
            self.fields[row.key] = field

    def checks(self, data, result: ValidationResult) -> ValidationResult:
        for key, data_type in self.data_types.items():
            if data_type == AppSetting.TYPE_BOOL:
                continue
            message = validate_setting_value(data_type, data.get(key) or "")
            result = result.check_field(message is None, key, message or "")
        return result

    def stored_values(self) -> dict[str, str]:
        """Cleaned data converted back to the text stored in the settings table."""
        values = {}
        for key, data_type in self.data_types.items():
            raw = self.cleaned_data.get(key)
            if data_type == AppSetting.TYPE_BOOL:
                values[key] = "true" if raw else "false"
            elif data_type == AppSetting.TYPE_STRING:
                values[key] = raw or ""
            else:
                values[key] = (raw or "").strip()
        return values
