from __future__ import annotations

import datetime as dt

import pytest

from tracker.models import Client, Invoice, Project, Timesheet


@pytest.fixture
def acme(db):
    return Client.objects.create(name="Acme Corp", email="billing@acme.example.com", hourly_rate=80.0)


@pytest.fixture
def thesis(acme):
    return Project.objects.create(client=acme, name="Thesis edit", hourly_rate=75.0)


@pytest.fixture
def logged_time(thesis):
    return [
        Timesheet.objects.create(project=thesis, work_date=dt.date(2024, 3, 1), hours_worked=8.0, hourly_rate=75.0),
        Timesheet.objects.create(project=thesis, work_date=dt.date(2024, 3, 2), hours_worked=12.0, hourly_rate=75.0),
    ]


@pytest.fixture
def march_invoice(thesis):
    return Invoice.objects.create(
        project=thesis,
        invoice_date=dt.date(2024, 3, 31),
        payment_terms="Net 30",
        amount_due=1500.0,
    )
