import logging

logger = logging.getLogger(__name__)

from django.contrib import messages
from django.http import HttpRequest, HttpResponse
from django.shortcuts import render
from django.views.decorators.http import require_GET, require_http_methods, require_POST

from ..exceptions import RecordNotFound, SettingTypeError
from ..forms import ProjectForm
from ..repositories import ClientRepository, InvoiceRepository, ProjectRepository, TimesheetRepository
from ..services.app_settings import SettingsStore
from .common import get_or_404, render_form, see_other

FORM_TEMPLATE = "tracker/projects/project_form.html"


def default_project_rate(client) -> float:
    """Client rate when set, otherwise the default_hourly_rate setting."""
    if client.hourly_rate:
        return client.hourly_rate
    try:
        return SettingsStore().get_decimal("default_hourly_rate")
    except (RecordNotFound, SettingTypeError):
        return 0.0


@require_GET
def project_view(request: HttpRequest, pk: str) -> HttpResponse:
    project = get_or_404(ProjectRepository(), pk)
    client = get_or_404(ClientRepository(), str(project.client_id))
    timesheets = TimesheetRepository().get_by_parent(project.pk)
    invoices = InvoiceRepository().get_by_parent(project.pk)

    total_hours = sum(ts.hours_worked for ts in timesheets)
    total_amount = sum(ts.amount for ts in timesheets)

    return render(
        request,
        "tracker/projects/project_detail.html",
        {
            "project": project,
            "client": client,
            "timesheets": timesheets,
            "invoices": invoices,
            "total_hours": total_hours,
            "total_amount": total_amount,
            "current_page": "clients",
        },
    )


@require_http_methods(["GET", "POST"])
def project_create(request: HttpRequest, client_pk: str) -> HttpResponse:
    client = get_or_404(ClientRepository(), client_pk)

    if request.method == "POST":
        form = ProjectForm(request.POST)
        if form.is_valid():
            ProjectRepository().insert(client_id=client.pk, **form.model_attributes())
            messages.success(request, "Project added.")
            return see_other("tracker:client_view", pk=client.pk)
    else:
        form = ProjectForm(initial={"hourly_rate": default_project_rate(client), "status": "Estimating"})

    return render_form(
        request,
        FORM_TEMPLATE,
        {"form": form, "client": client, "project": None, "current_page": "clients"},
    )


@require_http_methods(["GET", "POST"])
def project_update(request: HttpRequest, pk: str) -> HttpResponse:
    projects = ProjectRepository()
    project = get_or_404(projects, pk)

    if request.method == "POST":
        form = ProjectForm(request.POST, instance=project)
        if form.is_valid():
            projects.update(form.save(commit=False))
            messages.success(request, "Project updated.")
            return see_other("tracker:client_view", pk=project.client_id)
    else:
        form = ProjectForm(instance=project)

    return render_form(
        request,
        FORM_TEMPLATE,
        {"form": form, "client": project.client, "project": project, "current_page": "clients"},
    )


@require_POST
def project_delete(request: HttpRequest, pk: str) -> HttpResponse:
    projects = ProjectRepository()
    project = get_or_404(projects, pk)
    projects.soft_delete(project.pk)
    messages.success(request, "Project deleted.")
    return see_other("tracker:client_view", pk=project.client_id)
