from __future__ import annotations

import pytest

from tracker.models import Project

pytestmark = pytest.mark.django_db


def test_create_form_prefills_client_rate(client, acme):
    resp = client.get(f"/client/{acme.pk}/project/create")
    assert resp.status_code == 200
    assert resp.context["form"].initial["hourly_rate"] == 80.0


def test_create_form_falls_back_to_default_rate(client, acme):
    acme.hourly_rate = 0.0
    acme.save()
    resp = client.get(f"/client/{acme.pk}/project/create")
    assert resp.context["form"].initial["hourly_rate"] == 85.0


def test_create_redirects_to_client(client, acme):
    resp = client.post(f"/client/{acme.pk}/project/create", {"name": "Dissertation"})
    assert resp.status_code == 303
    assert resp["Location"] == f"/client/view/{acme.pk}"

    project = Project.objects.get(name="Dissertation")
    assert project.client_id == acme.pk
    assert project.status == Project.STATUS_ESTIMATING
    assert project.currency_conversion_rate == 1.0


def test_create_under_missing_client_is_404(client, db):
    assert client.get("/client/999/project/create").status_code == 404
    assert client.post("/client/999/project/create", {"name": "X"}).status_code == 404


def test_create_under_deleted_client_is_404(client, acme):
    client.post(f"/client/delete/{acme.pk}")
    assert client.post(f"/client/{acme.pk}/project/create", {"name": "X"}).status_code == 404


@pytest.mark.parametrize("data, field", [
    ({"name": ""}, "name"),
    ({"name": "P", "status": "Paused"}, "status"),
    ({"name": "P", "discount_percent": "150"}, "discount_percent"),
    ({"name": "P", "currency_conversion_rate": "0"}, "currency_conversion_rate"),
    ({"name": "P", "hourly_rate": "-1"}, "hourly_rate"),
    ({"name": "P", "hourly_rate": "lots"}, "hourly_rate"),
])
def test_create_invalid_is_422(client, acme, data, field):
    resp = client.post(f"/client/{acme.pk}/project/create", data)
    assert resp.status_code == 422
    assert field in resp.context["form"].field_errors
    assert not Project.objects.exists()


def test_view_shows_timesheets_and_invoices(client, thesis, logged_time, march_invoice):
    resp = client.get(f"/project/view/{thesis.pk}")
    assert resp.status_code == 200
    assert resp.context["total_hours"] == 20.0
    assert len(resp.context["invoices"]) == 1


def test_update_redirects_to_client(client, acme, thesis):
    resp = client.post(
        f"/project/update/{thesis.pk}",
        {"name": "Thesis edit v2", "status": "In Progress", "hourly_rate": "80", "discount_percent": "10"},
    )
    assert resp.status_code == 303
    assert resp["Location"] == f"/client/view/{acme.pk}"
    thesis.refresh_from_db()
    assert thesis.status == "In Progress"
    assert thesis.discount_percent == 10.0


def test_delete_redirects_to_client(client, acme, thesis):
    resp = client.post(f"/project/delete/{thesis.pk}")
    assert resp.status_code == 303
    assert resp["Location"] == f"/client/view/{acme.pk}"
    assert client.get(f"/project/view/{thesis.pk}").status_code == 404


def test_delete_requires_post(client, thesis):
    assert client.get(f"/project/delete/{thesis.pk}").status_code == 405
