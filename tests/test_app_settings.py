from __future__ import annotations

import pytest

from tracker.exceptions import RecordNotFound, SettingTypeError
from tracker.models import AppSetting
from tracker.services.app_settings import SettingsStore, SettingValue, parse_bool, validate_setting_value

pytestmark = pytest.mark.django_db


@pytest.fixture
def store():
    return SettingsStore()


def test_defaults_are_seeded(store):
    values = store.get_all()
    for key in (
        "default_hourly_rate",
        "invoice_title",
        "freelancer_name",
        "invoice_payment_terms_default",
        "invoice_show_individual_timesheets",
        "invoice_currency_symbol",
        "company_logo_path",
        "list_page_size",
    ):
        assert key in values


def test_typed_getters(store):
    assert store.get_decimal("default_hourly_rate") == 85.0
    assert store.get_bool("invoice_show_individual_timesheets") is True
    assert store.get_int("list_page_size") == 10
    assert store.get_string("invoice_currency_symbol") == "$"


def test_type_mismatch_raises(store):
    with pytest.raises(SettingTypeError):
        store.get_int("invoice_title")
    with pytest.raises(SettingTypeError):
        store.get_bool("default_hourly_rate")
    with pytest.raises(SettingTypeError):
        store.get_string("list_page_size")


def test_float_accepts_decimal_settings(store):
    assert store.get_float("default_hourly_rate") == 85.0


def test_unknown_key(store):
    with pytest.raises(RecordNotFound):
        store.get("no_such_setting")


def test_update_value(store):
    store.update_value("default_hourly_rate", "95.00")
    assert store.get_decimal("default_hourly_rate") == 95.0


def test_update_unknown_key_is_silent(store):
    store.update_value("no_such_setting", "x")
    assert not AppSetting.objects.filter(pk="no_such_setting").exists()


def test_get_all_uses_defaults_for_absent_keys(store):
    values = store.get_all(defaults={"made_up": SettingValue("fallback")})
    assert values["made_up"].as_string() == "fallback"
    assert values["invoice_currency_symbol"].as_string() == "$"


def test_get_all_detailed_is_ordered_by_key(store):
    keys = [row.key for row in store.get_all_detailed()]
    assert keys == sorted(keys)


def test_unparseable_value_of_matching_type():
    with pytest.raises(SettingTypeError):
        SettingValue("ten", AppSetting.TYPE_INT).as_int()


@pytest.mark.parametrize("raw, expected", [
    ("true", True), ("1", True), ("yes", True), ("On", True),
    ("false", False), ("0", False), ("no", False),
])
def test_parse_bool(raw, expected):
    assert parse_bool(raw) is expected


def test_parse_bool_rejects_other_text():
    with pytest.raises(ValueError):
        parse_bool("maybe")


@pytest.mark.parametrize("data_type, raw, message", [
    ("int", "12", None),
    ("int", "12.5", "Value must be a valid integer"),
    ("decimal", "85.00", None),
    ("decimal", "abc", "Value must be a valid decimal"),
    ("float", "1e3", None),
    ("bool", "true", None),
    ("bool", "sometimes", "Value must be a valid boolean"),
    ("string", "anything at all", None),
])
def test_validate_setting_value(data_type, raw, message):
    assert validate_setting_value(data_type, raw) == message
