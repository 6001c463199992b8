import logging

logger = logging.getLogger(__name__)

from django.contrib import messages
from django.http import Http404, HttpRequest, HttpResponse
from django.utils import timezone
from django.views.decorators.http import require_GET, require_http_methods, require_POST

from ..exceptions import RecordNotFound, SettingTypeError
from ..forms import InvoiceForm
from ..repositories import InvoiceRepository, ProjectRepository, TimesheetRepository
from ..services.app_settings import SettingsStore
from ..services.invoice_pdf import DEFAULT_BRANDING, generate_invoice_pdf
from .common import get_or_404, parse_pk, render_form, see_other

FORM_TEMPLATE = "tracker/invoices/invoice_form.html"


def _default_payment_terms() -> str:
    try:
        return SettingsStore().get_string("invoice_payment_terms_default")
    except (RecordNotFound, SettingTypeError):
        return DEFAULT_BRANDING["invoice_payment_terms_default"]


def _unbilled_amount(project_id: int) -> float:
    return sum(ts.amount for ts in TimesheetRepository().get_by_parent(project_id))


@require_http_methods(["GET", "POST"])
def invoice_create(request: HttpRequest, project_pk: str) -> HttpResponse:
    project = get_or_404(ProjectRepository(), project_pk)

    if request.method == "POST":
        form = InvoiceForm(request.POST)
        if form.is_valid():
            InvoiceRepository().insert(project_id=project.pk, **form.model_attributes())
            messages.success(request, "Invoice created.")
            return see_other("tracker:project_view", pk=project.pk)
    else:
        form = InvoiceForm(
            initial={
                "invoice_date": timezone.localdate(),
                "payment_terms": _default_payment_terms(),
                "amount_due": round(_unbilled_amount(project.pk), 2),
            }
        )

    return render_form(
        request,
        FORM_TEMPLATE,
        {"form": form, "project": project, "invoice": None, "current_page": "clients"},
    )


@require_http_methods(["GET", "POST"])
def invoice_update(request: HttpRequest, pk: str) -> HttpResponse:
    invoices = InvoiceRepository()
    invoice = get_or_404(invoices, pk)

    if request.method == "POST":
        form = InvoiceForm(request.POST, instance=invoice)
        if form.is_valid():
            invoices.update(form.save(commit=False))
            messages.success(request, "Invoice updated.")
            return see_other("tracker:project_view", pk=invoice.project_id)
    else:
        form = InvoiceForm(instance=invoice)

    return render_form(
        request,
        FORM_TEMPLATE,
        {"form": form, "project": invoice.project, "invoice": invoice, "current_page": "clients"},
    )


@require_POST
def invoice_delete(request: HttpRequest, pk: str) -> HttpResponse:
    invoices = InvoiceRepository()
    invoice = get_or_404(invoices, pk)
    invoices.soft_delete(invoice.pk)
    messages.success(request, "Invoice deleted.")
    return see_other("tracker:project_view", pk=invoice.project_id)


# -----------------------------------------------------------------------------
# PDF
# -----------------------------------------------------------------------------
@require_GET
def invoice_print(request: HttpRequest, pk: str) -> HttpResponse:
    invoice_id = parse_pk(pk)

    try:
        pdf_bytes = generate_invoice_pdf(invoice_id)
    except RecordNotFound as exc:
        raise Http404(str(exc)) from exc
    except Exception:
        logger.exception("PDF generation failed for invoice %s", invoice_id)
        raise

    resp = HttpResponse(pdf_bytes, content_type="application/pdf")
    resp["Content-Disposition"] = f'inline; filename="invoice_{invoice_id}.pdf"'
    return resp
