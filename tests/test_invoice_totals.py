from __future__ import annotations

import datetime as dt

import pytest

from tracker.exceptions import RecordNotFound
from tracker.models import Invoice, Project, Timesheet
from tracker.repositories import ClientRepository, ProjectRepository, TimesheetRepository
from tracker.services.invoice_totals import build_invoice_summary, compute_invoice_totals


def test_discount_then_adjustment():
    totals = compute_invoice_totals(
        amount_due=1500.0,
        hourly_rate=75.0,
        hours=[8.0, 12.0],
        discount_percent=12.5,
        adjustment_amount=75.0,
    )
    assert totals.total_hours == 20.0
    assert totals.subtotal == 1500.0
    assert totals.discount_amount == 187.5
    assert totals.subtotal_after_discount == 1312.5
    assert totals.adjustment_amount == 75.0
    assert totals.final_total == 1387.5
    assert totals.avg_rate == 75.0


def test_negative_adjustment():
    totals = compute_invoice_totals(amount_due=1000.0, hourly_rate=50.0, hours=[20.0], adjustment_amount=-100.0)
    assert totals.final_total == 900.0


def test_no_discount_or_adjustment():
    totals = compute_invoice_totals(amount_due=640.0, hourly_rate=80.0, hours=[8.0])
    assert totals.discount_amount == 0.0
    assert totals.adjustment_amount == 0.0
    assert totals.final_total == 640.0


def test_zero_discount_is_ignored():
    totals = compute_invoice_totals(amount_due=640.0, hourly_rate=80.0, hours=[8.0], discount_percent=0.0)
    assert totals.discount_amount == 0.0
    assert totals.final_total == 640.0


def test_flat_fee_uses_project_rate():
    totals = compute_invoice_totals(amount_due=2500.0, hourly_rate=100.0, hours=[10.0], flat_fee_invoice=True)
    assert totals.avg_rate == 100.0
    assert totals.final_total == 2500.0


def test_flat_fee_without_timesheets():
    totals = compute_invoice_totals(amount_due=2500.0, hourly_rate=95.0, flat_fee_invoice=True)
    assert totals.total_hours == 0.0
    assert totals.final_total == 2500.0
    assert totals.avg_rate == 95.0


def test_no_hours_falls_back_to_project_rate():
    totals = compute_invoice_totals(amount_due=2500.0, hourly_rate=90.0)
    assert totals.total_hours == 0.0
    assert totals.avg_rate == 90.0


def test_average_rate_from_amount_and_hours():
    totals = compute_invoice_totals(amount_due=1000.0, hourly_rate=75.0, hours=[10.0, 10.0])
    assert totals.avg_rate == 50.0


# -----------------------------------------------------------------------------
# Loading from storage
# -----------------------------------------------------------------------------
@pytest.mark.django_db
def test_summary_from_database(thesis, logged_time, march_invoice):
    thesis.discount_percent = 12.5
    thesis.adjustment_amount = 75.0
    thesis.save()

    summary = build_invoice_summary(march_invoice.pk)
    assert summary.client.pk == thesis.client_id
    assert summary.totals.total_hours == 20.0
    assert summary.totals.final_total == 1387.5
    assert len(summary.timesheets) == 2


@pytest.mark.django_db
def test_deleted_timesheets_do_not_count(thesis, logged_time, march_invoice):
    TimesheetRepository().soft_delete(logged_time[1].pk)
    summary = build_invoice_summary(march_invoice.pk)
    assert summary.totals.total_hours == 8.0


@pytest.mark.django_db
def test_project_without_timesheets(thesis, march_invoice):
    summary = build_invoice_summary(march_invoice.pk)
    assert summary.timesheets == []
    assert summary.totals.total_hours == 0.0
    assert summary.totals.avg_rate == thesis.hourly_rate


@pytest.mark.django_db
def test_every_invoice_counts_all_project_hours(thesis, logged_time, march_invoice):
    april = Invoice.objects.create(
        project=thesis,
        invoice_date=dt.date(2024, 4, 30),
        payment_terms="Net 30",
        amount_due=300.0,
    )
    Timesheet.objects.create(project=thesis, work_date=dt.date(2024, 4, 10), hours_worked=4.0, hourly_rate=75.0)

    march = build_invoice_summary(march_invoice.pk)
    later = build_invoice_summary(april.pk)
    assert march.totals.total_hours == later.totals.total_hours == 24.0


@pytest.mark.django_db
def test_missing_invoice():
    with pytest.raises(RecordNotFound):
        build_invoice_summary(31337)


@pytest.mark.django_db
def test_deleted_client_makes_invoice_unprintable(acme, thesis, march_invoice):
    ClientRepository().soft_delete(acme.pk)
    with pytest.raises(RecordNotFound):
        build_invoice_summary(march_invoice.pk)


@pytest.mark.django_db
def test_deleted_project_makes_invoice_unprintable(thesis, march_invoice):
    ProjectRepository().soft_delete(thesis.pk)
    with pytest.raises(RecordNotFound):
        build_invoice_summary(march_invoice.pk)


@pytest.mark.django_db
def test_flat_fee_project_without_timesheets_from_database(acme):
    project = Project.objects.create(client=acme, name="Grant proposal", hourly_rate=95.0, flat_fee_invoice=True)
    invoice = Invoice.objects.create(
        project=project,
        invoice_date=dt.date(2024, 6, 1),
        payment_terms="Net 30",
        amount_due=2500.0,
    )

    totals = build_invoice_summary(invoice.pk).totals
    assert totals.total_hours == 0.0
    assert totals.final_total == 2500.0
    assert totals.avg_rate == 95.0
