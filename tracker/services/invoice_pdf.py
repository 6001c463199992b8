# tracker/services/invoice_pdf.py
from __future__ import annotations

import base64
import logging
import mimetypes
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from django.conf import settings
from django.template.loader import render_to_string

from weasyprint import HTML

from tracker.exceptions import SettingTypeError
from tracker.services.app_settings import SettingsStore, SettingValue
from tracker.services.invoice_totals import InvoiceDataSource, InvoiceSummary, build_invoice_summary

logger = logging.getLogger(__name__)

INVOICE_TEMPLATE = "tracker/invoices/invoice_pdf.html"

DEFAULT_BRANDING = {
    "invoice_title": "Invoice for Academic Editing",
    "company_logo_path": "./static/img/logo.png",
    "freelancer_name": "Your Name Here",
    "freelancer_address": "Your Address",
    "freelancer_city_state_zip": "Your City, State ZIP",
    "freelancer_phone": "Your Phone",
    "freelancer_email": "your.email@example.com",
    "invoice_currency_symbol": "$",
    "invoice_payment_terms_default": "Payment is due within 30 days of receipt of this invoice.",
    "invoice_thank_you_message": "Thank you for your business!",
}


@dataclass(frozen=True)
class InvoiceBranding:
    invoice_title: str
    company_logo_path: str
    company_logo_data_url: str
    freelancer_name: str
    freelancer_address: str
    freelancer_city_state_zip: str
    freelancer_phone: str
    freelancer_email: str
    currency_symbol: str
    show_individual_timesheets: bool
    default_payment_terms: str
    thank_you_message: str

    @classmethod
    def from_settings(cls, values: Mapping[str, SettingValue]) -> "InvoiceBranding":
        def text(key: str) -> str:
            if key in values:
                return values[key].as_string()
            return DEFAULT_BRANDING[key]

        def flag(key: str, fallback: bool) -> bool:
            if key in values:
                try:
                    return values[key].as_bool()
                except SettingTypeError:
                    return fallback
            return fallback

        logo_path = text("company_logo_path")
        return cls(
            invoice_title=text("invoice_title"),
            company_logo_path=logo_path,
            company_logo_data_url=logo_data_url(logo_path),
            freelancer_name=text("freelancer_name"),
            freelancer_address=text("freelancer_address"),
            freelancer_city_state_zip=text("freelancer_city_state_zip"),
            freelancer_phone=text("freelancer_phone"),
            freelancer_email=text("freelancer_email"),
            currency_symbol=text("invoice_currency_symbol"),
            show_individual_timesheets=flag("invoice_show_individual_timesheets", True),
            default_payment_terms=text("invoice_payment_terms_default"),
            thank_you_message=text("invoice_thank_you_message"),
        )


def logo_data_url(logo_path: str) -> str:
    """
    Inline the logo as a base64 data URL so the PDF needs no file access.
    Relative paths resolve against BASE_DIR. Missing or unreadable files give "".
    """
    if not logo_path:
        return ""

    path = Path(logo_path)
    if not path.is_absolute():
        path = Path(settings.BASE_DIR) / path

    try:
        data = path.read_bytes()
    except OSError:
        return ""

    mime_type, _ = mimetypes.guess_type(path.name)
    if not mime_type or not mime_type.startswith("image/"):
        mime_type = "image/png"

    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"


def render_invoice_html(summary: InvoiceSummary, branding: InvoiceBranding) -> str:
    itemize = summary.invoice.display_details and branding.show_individual_timesheets
    return render_to_string(
        INVOICE_TEMPLATE,
        {
            "invoice": summary.invoice,
            "project": summary.project,
            "client": summary.client,
            "timesheets": summary.timesheets,
            "totals": summary.totals,
            "branding": branding,
            "itemize": itemize,
        },
    )


def generate_invoice_pdf(
    invoice_id: int,
    *,
    store: Optional[SettingsStore] = None,
    source: Optional[InvoiceDataSource] = None,
) -> bytes:
    """
    Render an invoice to PDF bytes.

    RecordNotFound propagates when the invoice, its project or its client is gone.
    """
    summary = build_invoice_summary(invoice_id, source)
    branding = InvoiceBranding.from_settings((store or SettingsStore()).get_all())

    html = render_invoice_html(summary, branding)

    debug_path = getattr(settings, "INVOICE_DEBUG_HTML_PATH", "")
    if debug_path:
        Path(debug_path).write_text(html, encoding="utf-8")

    return HTML(string=html, base_url=str(settings.BASE_DIR)).write_pdf()
