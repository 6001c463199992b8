import logging

logger = logging.getLogger(__name__)

from django.contrib import messages
from django.http import HttpRequest, HttpResponse
from django.shortcuts import render
from django.views.decorators.http import require_GET, require_http_methods, require_POST

from ..forms import ClientForm
from ..repositories import ClientRepository, ProjectRepository
from .common import get_or_404, render_form, require_exists, see_other

FORM_TEMPLATE = "tracker/clients/client_form.html"


@require_GET
def client_view(request: HttpRequest, pk: str) -> HttpResponse:
    client = get_or_404(ClientRepository(), pk)
    projects = ProjectRepository().get_by_parent(client.pk)
    return render(
        request,
        "tracker/clients/client_detail.html",
        {"client": client, "projects": projects, "current_page": "clients"},
    )


@require_http_methods(["GET", "POST"])
def client_create(request: HttpRequest) -> HttpResponse:
    if request.method == "POST":
        form = ClientForm(request.POST)
        if form.is_valid():
            client_id = ClientRepository().insert(**form.model_attributes())
            messages.success(request, "Client added.")
            return see_other("tracker:client_view", pk=client_id)
    else:
        form = ClientForm()

    return render_form(request, FORM_TEMPLATE, {"form": form, "client": None, "current_page": "clients"})


@require_http_methods(["GET", "POST"])
def client_update(request: HttpRequest, pk: str) -> HttpResponse:
    clients = ClientRepository()
    client = get_or_404(clients, pk)

    if request.method == "POST":
        form = ClientForm(request.POST, instance=client)
        if form.is_valid():
            clients.update(form.save(commit=False))
            messages.success(request, "Client updated.")
            return see_other("tracker:client_view", pk=client.pk)
    else:
        form = ClientForm(instance=client)

    return render_form(request, FORM_TEMPLATE, {"form": form, "client": client, "current_page": "clients"})


@require_POST
def client_delete(request: HttpRequest, pk: str) -> HttpResponse:
    clients = ClientRepository()
    client_id = require_exists(clients, pk)
    clients.soft_delete(client_id)
    messages.success(request, "Client deleted.")
    return see_other("tracker:home")
