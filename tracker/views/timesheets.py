import logging

logger = logging.getLogger(__name__)

from django.contrib import messages
from django.http import HttpRequest, HttpResponse
from django.utils import timezone
from django.views.decorators.http import require_http_methods, require_POST

from ..forms import TimesheetForm
from ..repositories import ProjectRepository, TimesheetRepository
from .common import get_or_404, render_form, see_other

FORM_TEMPLATE = "tracker/timesheets/timesheet_form.html"


@require_http_methods(["GET", "POST"])
def timesheet_create(request: HttpRequest, project_pk: str) -> HttpResponse:
    project = get_or_404(ProjectRepository(), project_pk)

    if request.method == "POST":
        form = TimesheetForm(request.POST)
        if form.is_valid():
            TimesheetRepository().insert(project_id=project.pk, **form.model_attributes())
            messages.success(request, "Timesheet added.")
            return see_other("tracker:project_view", pk=project.pk)
    else:
        form = TimesheetForm(initial={"work_date": timezone.localdate(), "hourly_rate": project.hourly_rate})

    return render_form(
        request,
        FORM_TEMPLATE,
        {"form": form, "project": project, "timesheet": None, "current_page": "clients"},
    )


@require_http_methods(["GET", "POST"])
def timesheet_update(request: HttpRequest, pk: str) -> HttpResponse:
    timesheets = TimesheetRepository()
    timesheet = get_or_404(timesheets, pk)
    rate_before = timesheet.hourly_rate

    if request.method == "POST":
        form = TimesheetForm(request.POST, instance=timesheet)
        if form.is_valid():
            entity = form.save(commit=False)
            # a blank rate keeps the one captured when the entry was made
            if entity.hourly_rate is None:
                entity.hourly_rate = rate_before
            timesheets.update(entity)
            messages.success(request, "Timesheet updated.")
            return see_other("tracker:project_view", pk=timesheet.project_id)
    else:
        form = TimesheetForm(instance=timesheet)

    return render_form(
        request,
        FORM_TEMPLATE,
        {"form": form, "project": timesheet.project, "timesheet": timesheet, "current_page": "clients"},
    )


@require_POST
def timesheet_delete(request: HttpRequest, pk: str) -> HttpResponse:
    timesheets = TimesheetRepository()
    timesheet = get_or_404(timesheets, pk)
    timesheets.soft_delete(timesheet.pk)
    messages.success(request, "Timesheet deleted.")
    return see_other("tracker:project_view", pk=timesheet.project_id)
