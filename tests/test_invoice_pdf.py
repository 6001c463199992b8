from __future__ import annotations

from unittest import mock

import pytest

from tracker.exceptions import RecordNotFound
from tracker.services.app_settings import SettingsStore, SettingValue
from tracker.services.invoice_pdf import (
    InvoiceBranding,
    generate_invoice_pdf,
    logo_data_url,
    render_invoice_html,
)
from tracker.services.invoice_totals import build_invoice_summary

pytestmark = pytest.mark.django_db


@pytest.fixture
def discounted(thesis, logged_time, march_invoice):
    thesis.discount_percent = 12.5
    thesis.discount_reason = "Early payment"
    thesis.adjustment_amount = 75.0
    thesis.adjustment_reason = "Rush fee"
    thesis.save()
    return march_invoice


def branding(show_timesheets=True):
    values = SettingsStore().get_all()
    values["invoice_show_individual_timesheets"] = SettingValue("true" if show_timesheets else "false", "bool")
    return InvoiceBranding.from_settings(values)


def test_branding_from_seeded_settings():
    b = branding()
    assert b.invoice_title == "Invoice for Academic Editing"
    assert b.currency_symbol == "$"
    assert b.show_individual_timesheets is True


def test_branding_falls_back_when_settings_missing():
    b = InvoiceBranding.from_settings({})
    assert b.freelancer_name == "Your Name Here"
    assert b.thank_you_message == "Thank you for your business!"
    assert b.company_logo_data_url == ""


def test_html_shows_two_decimal_totals(discounted):
    html = render_invoice_html(build_invoice_summary(discounted.pk), branding())
    assert "$1,500.00" in html
    assert "-$187.50" in html
    assert "$1,312.50" in html
    assert "$1,387.50" in html
    assert "Early payment" in html
    assert "Rush fee" in html


def test_rolled_up_line_without_display_details(discounted):
    html = render_invoice_html(build_invoice_summary(discounted.pk), branding())
    assert "20.00" in html
    assert "$75.00" in html


def test_itemized_when_both_flags_on(discounted, logged_time):
    discounted.display_details = True
    discounted.save()
    html = render_invoice_html(build_invoice_summary(discounted.pk), branding())
    assert "2024-03-01" in html
    assert "2024-03-02" in html


def test_settings_flag_suppresses_itemizing(discounted):
    discounted.display_details = True
    discounted.save()
    html = render_invoice_html(
        build_invoice_summary(discounted.pk),
        branding(show_timesheets=False),
    )
    assert "2024-03-01" not in html


def test_logo_embedded_as_data_url(tmp_path):
    logo = tmp_path / "logo.png"
    logo.write_bytes(b"\x89PNG\r\n\x1a\nfake")
    url = logo_data_url(str(logo))
    assert url.startswith("data:image/png;base64,")


def test_missing_logo_gives_empty_string(tmp_path):
    assert logo_data_url(str(tmp_path / "nope.png")) == ""
    assert logo_data_url("") == ""


def test_generate_pdf_passes_rendered_html_to_weasyprint(discounted):
    with mock.patch("tracker.services.invoice_pdf.HTML") as html_cls:
        html_cls.return_value.write_pdf.return_value = b"%PDF-1.7 fake"
        pdf = generate_invoice_pdf(discounted.pk)

    assert pdf == b"%PDF-1.7 fake"
    rendered = html_cls.call_args.kwargs["string"]
    assert "$1,387.50" in rendered
    assert "@page" in rendered


def test_generate_pdf_for_missing_invoice():
    with pytest.raises(RecordNotFound):
        generate_invoice_pdf(123456)
