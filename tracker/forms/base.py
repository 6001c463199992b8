# tracker/forms/base.py
from __future__ import annotations

from django import forms

from crispy_forms.helper import FormHelper
from crispy_forms.layout import Submit

from tracker.validation import ValidationResult


class CheckedFormMixin:
    """
    Runs `checks()` after Django's field cleaning and keeps the outcome on
    `self.validation`.

    Errors Django already raised (unparseable numbers, bad dates) are seeded
    into the result first, so each field reports a single message: whichever
    failed first.
    """

    submit_label = "Save"

    def checks(self, data: dict, result: ValidationResult) -> ValidationResult:
        return result

    def clean(self):
        cleaned = super().clean()

        result = ValidationResult()
        for field_name, errors in self.errors.items():
            if errors:
                result = result.check_field(False, field_name, errors[0])

        result = self.checks(cleaned, result)
        self.validation = result

        for field_name, message in result.errors.items():
            if field_name in self.errors:
                continue
            self.add_error(field_name if field_name in self.fields else None, message)

        return cleaned

    @property
    def field_errors(self) -> dict[str, str]:
        validation = getattr(self, "validation", None)
        return validation.field_errors if validation else {}

    def build_helper(self) -> FormHelper:
        helper = FormHelper()
        helper.form_method = "post"
        helper.form_tag = True
        helper.add_input(Submit("submit", self.submit_label, css_class="btn btn-primary"))
        return helper


class CheckedModelForm(CheckedFormMixin, forms.ModelForm):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.helper = self.build_helper()

    def model_attributes(self) -> dict:
        """Cleaned values for the model columns this form edits."""
        return {name: self.cleaned_data.get(name) for name in self._meta.fields}


class CheckedForm(CheckedFormMixin, forms.Form):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.helper = self.build_helper()


def optional_text(**kwargs):
    return forms.CharField(required=False, **kwargs)


def optional_float(**kwargs):
    kwargs.setdefault("widget", forms.NumberInput(attrs={"step": "0.01"}))
    return forms.FloatField(required=False, **kwargs)


def optional_date(**kwargs):
    return forms.DateField(required=False, widget=forms.DateInput(attrs={"type": "date"}), **kwargs)
