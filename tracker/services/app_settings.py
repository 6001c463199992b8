# tracker/services/app_settings.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from django.utils import timezone

from tracker.exceptions import RecordNotFound, SettingTypeError
from tracker.models import AppSetting


_TRUE_STRINGS = {"1", "t", "true", "y", "yes", "on"}
_FALSE_STRINGS = {"0", "f", "false", "n", "no", "off"}


def parse_bool(raw: str) -> bool:
    s = (raw or "").strip().lower()
    if s in _TRUE_STRINGS:
        return True
    if s in _FALSE_STRINGS:
        return False
    raise ValueError(f"invalid boolean {raw!r}")


@dataclass(frozen=True)
class SettingValue:
    """Raw setting text plus the type it was declared with."""

    value: str
    data_type: str = AppSetting.TYPE_STRING

    def as_string(self) -> str:
        return self.value

    def as_int(self) -> int:
        if self.data_type != AppSetting.TYPE_INT:
            raise SettingTypeError("setting is not an integer")
        try:
            return int(self.value.strip())
        except ValueError as exc:
            raise SettingTypeError(f"invalid integer {self.value!r}") from exc

    def as_float(self) -> float:
        if self.data_type not in (AppSetting.TYPE_FLOAT, AppSetting.TYPE_DECIMAL):
            raise SettingTypeError("setting is not a float or decimal")
        try:
            return float(self.value.strip())
        except ValueError as exc:
            raise SettingTypeError(f"invalid number {self.value!r}") from exc

    def as_decimal(self) -> float:
        return self.as_float()

    def as_bool(self) -> bool:
        if self.data_type != AppSetting.TYPE_BOOL:
            raise SettingTypeError("setting is not a boolean")
        try:
            return parse_bool(self.value)
        except ValueError as exc:
            raise SettingTypeError(str(exc)) from exc


def validate_setting_value(data_type: str, raw: str) -> Optional[str]:
    """
    Returns an error message when `raw` cannot be read back as `data_type`,
    otherwise None. Used by the settings edit form.
    """
    try:
        if data_type == AppSetting.TYPE_INT:
            int((raw or "").strip())
        elif data_type in (AppSetting.TYPE_FLOAT, AppSetting.TYPE_DECIMAL):
            float((raw or "").strip())
        elif data_type == AppSetting.TYPE_BOOL:
            parse_bool(raw)
    except ValueError:
        labels = dict(AppSetting.DATA_TYPE_CHOICES)
        return f"Value must be a valid {labels.get(data_type, data_type).lower()}"
    return None


class SettingsStore:
    def get(self, key: str) -> AppSetting:
        try:
            return AppSetting.objects.get(pk=key)
        except AppSetting.DoesNotExist:
            raise RecordNotFound(f"setting {key!r} not found") from None

    def get_value(self, key: str) -> SettingValue:
        setting = self.get(key)
        return SettingValue(value=setting.value, data_type=setting.data_type)

    def get_string(self, key: str) -> str:
        value = self.get_value(key)
        if value.data_type != AppSetting.TYPE_STRING:
            raise SettingTypeError("setting is not a string")
        return value.as_string()

    def get_int(self, key: str) -> int:
        return self.get_value(key).as_int()

    def get_float(self, key: str) -> float:
        return self.get_value(key).as_float()

    def get_decimal(self, key: str) -> float:
        return self.get_value(key).as_decimal()

    def get_bool(self, key: str) -> bool:
        return self.get_value(key).as_bool()

    def get_all(self, defaults: Optional[Mapping[str, SettingValue]] = None) -> dict[str, SettingValue]:
        settings_map = dict(defaults or {})
        for key, value, data_type in AppSetting.objects.values_list("key", "value", "data_type"):
            settings_map[key] = SettingValue(value=value, data_type=data_type)
        return settings_map

    def get_all_detailed(self) -> list[AppSetting]:
        return list(AppSetting.objects.order_by("key"))

    def update_value(self, key: str, value: str) -> None:
        AppSetting.objects.filter(pk=key).update(value=value, updated_at=timezone.now())
