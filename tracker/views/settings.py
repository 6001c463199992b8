import logging

logger = logging.getLogger(__name__)

from django.contrib import messages
from django.db import transaction
from django.http import HttpRequest, HttpResponse
from django.shortcuts import render
from django.views.decorators.http import require_GET, require_http_methods

from ..forms import SettingsForm
from ..services.app_settings import SettingsStore
from .common import render_form, see_other


@require_GET
def settings_list(request: HttpRequest) -> HttpResponse:
    return render(
        request,
        "tracker/settings/settings_list.html",
        {"settings_rows": SettingsStore().get_all_detailed(), "current_page": "settings"},
    )


@require_http_methods(["GET", "POST"])
def settings_edit(request: HttpRequest) -> HttpResponse:
    store = SettingsStore()
    rows = store.get_all_detailed()

    if request.method == "POST":
        form = SettingsForm(request.POST, settings_rows=rows)
        if form.is_valid():
            with transaction.atomic():
                for key, value in form.stored_values().items():
                    store.update_value(key, value)
            logger.info("Settings updated: %s", ", ".join(sorted(form.changed_data)) or "no changes")
            messages.success(request, "Settings saved.")
            return see_other("tracker:settings_list")
    else:
        form = SettingsForm(settings_rows=rows)

    return render_form(
        request,
        "tracker/settings/settings_form.html",
        {"form": form, "current_page": "settings"},
    )
