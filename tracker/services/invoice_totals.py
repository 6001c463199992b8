# tracker/services/invoice_totals.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable, Optional

from tracker.ports import Repository

if TYPE_CHECKING:
    from tracker.models import Client, Invoice, Project, Timesheet


@dataclass(frozen=True)
class InvoiceTotals:
    total_hours: float
    subtotal: float                 # amount due as entered, before discount
    discount_amount: float
    subtotal_after_discount: float
    adjustment_amount: float
    final_total: float
    avg_rate: float


def compute_invoice_totals(
    *,
    amount_due: float,
    hourly_rate: float,
    hours: Iterable[float] = (),
    discount_percent: Optional[float] = None,
    adjustment_amount: Optional[float] = None,
    flat_fee_invoice: bool = False,
) -> InvoiceTotals:
    """
    Discount is taken off the amount due first, then the adjustment is added.
    Plain float arithmetic, no rounding; formatting happens when rendering.
    """
    total_hours = 0.0
    for h in hours:
        total_hours += h

    subtotal = amount_due

    discount_amount = 0.0
    if discount_percent is not None and discount_percent > 0:
        discount_amount = subtotal * (discount_percent / 100.0)
        subtotal -= discount_amount
    subtotal_after_discount = subtotal

    adjustment = 0.0
    if adjustment_amount is not None:
        adjustment = adjustment_amount
        subtotal += adjustment

    if flat_fee_invoice or total_hours <= 0:
        avg_rate = hourly_rate
    else:
        avg_rate = amount_due / total_hours

    return InvoiceTotals(
        total_hours=total_hours,
        subtotal=amount_due,
        discount_amount=discount_amount,
        subtotal_after_discount=subtotal_after_discount,
        adjustment_amount=adjustment,
        final_total=subtotal,
        avg_rate=avg_rate,
    )


# -----------------------------------------------------------------------------
# Loading an invoice with everything it needs
# -----------------------------------------------------------------------------
@dataclass
class InvoiceDataSource:
    clients: Repository[Client]
    projects: Repository[Project]
    timesheets: Repository[Timesheet]
    invoices: Repository[Invoice]


def default_source() -> InvoiceDataSource:
    from tracker.repositories import (
        ClientRepository,
        InvoiceRepository,
        ProjectRepository,
        TimesheetRepository,
    )

    return InvoiceDataSource(
        clients=ClientRepository(),
        projects=ProjectRepository(),
        timesheets=TimesheetRepository(),
        invoices=InvoiceRepository(),
    )


@dataclass(frozen=True)
class InvoiceSummary:
    invoice: Invoice
    project: Project
    client: Client
    timesheets: list[Timesheet] = field(default_factory=list)
    totals: Optional[InvoiceTotals] = None


def build_invoice_summary(invoice_id: int, source: Optional[InvoiceDataSource] = None) -> InvoiceSummary:
    """
    Invoice, project and client must all be active or RecordNotFound propagates.

    Hours come from every active timesheet on the project, not just the ones
    inside this invoice's billing period, so two invoices on one project show
    the same hour total.
    """
    source = source or default_source()

    invoice = source.invoices.get(invoice_id)
    project = source.projects.get(invoice.project_id)
    client = source.clients.get(project.client_id)
    timesheets = source.timesheets.get_by_parent(project.pk)

    totals = compute_invoice_totals(
        amount_due=invoice.amount_due,
        hourly_rate=project.hourly_rate,
        hours=(ts.hours_worked for ts in timesheets),
        discount_percent=project.discount_percent,
        adjustment_amount=project.adjustment_amount,
        flat_fee_invoice=project.flat_fee_invoice,
    )
    return InvoiceSummary(
        invoice=invoice,
        project=project,
        client=client,
        timesheets=timesheets,
        totals=totals,
    )
