from __future__ import annotations

import pytest

from tracker.services.app_settings import SettingsStore

pytestmark = pytest.mark.django_db


def edit_payload(**changes):
    payload = {}
    for row in SettingsStore().get_all_detailed():
        if row.data_type == "bool":
            if row.value == "true":
                payload[row.key] = "on"
        else:
            payload[row.key] = row.value
    payload.update(changes)
    return payload


def test_list(client):
    resp = client.get("/settings")
    assert resp.status_code == 200
    assert b"default_hourly_rate" in resp.content


def test_edit_form(client):
    resp = client.get("/settings/edit")
    assert resp.status_code == 200
    assert "invoice_title" in resp.context["form"].fields


def test_edit_saves_and_redirects(client):
    resp = client.post("/settings/edit", edit_payload(default_hourly_rate="95.00", invoice_title="Invoice"))
    assert resp.status_code == 303
    assert resp["Location"] == "/settings"

    store = SettingsStore()
    assert store.get_decimal("default_hourly_rate") == 95.0
    assert store.get_string("invoice_title") == "Invoice"


def test_unchecked_bool_stored_as_false(client):
    payload = edit_payload()
    payload.pop("invoice_show_individual_timesheets", None)
    client.post("/settings/edit", payload)
    assert SettingsStore().get_bool("invoice_show_individual_timesheets") is False


def test_bad_typed_value_is_422(client):
    resp = client.post("/settings/edit", edit_payload(list_page_size="ten"))
    assert resp.status_code == 422
    assert resp.context["form"].field_errors["list_page_size"] == "Value must be a valid integer"
    assert SettingsStore().get_int("list_page_size") == 10


def test_settings_edit_rejects_delete(client):
    assert client.delete("/settings/edit").status_code == 405
