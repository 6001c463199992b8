from django.urls import path

from .views.dashboard import home

from .views.clients import (
    client_create,
    client_delete,
    client_update,
    client_view,
)

from .views.projects import (
    project_create,
    project_delete,
    project_update,
    project_view,
)

from .views.timesheets import (
    timesheet_create,
    timesheet_delete,
    timesheet_update,
)

from .views.invoices import (
    invoice_create,
    invoice_delete,
    invoice_print,
    invoice_update,
)

from .views.settings import settings_edit, settings_list


app_name = "tracker"

urlpatterns = [

    path("", home, name="home"),

    # Clients
    path("client/view/<str:pk>", client_view, name="client_view"),
    path("client/create", client_create, name="client_create"),
    path("client/update/<str:pk>", client_update, name="client_update"),
    path("client/delete/<str:pk>", client_delete, name="client_delete"),

    # Projects
    path("client/<str:client_pk>/project/create", project_create, name="project_create"),
    path("project/view/<str:pk>", project_view, name="project_view"),
    path("project/update/<str:pk>", project_update, name="project_update"),
    path("project/delete/<str:pk>", project_delete, name="project_delete"),

    # Timesheets
    path("project/<str:project_pk>/timesheet/create", timesheet_create, name="timesheet_create"),
    path("timesheet/update/<str:pk>", timesheet_update, name="timesheet_update"),
    path("timesheet/delete/<str:pk>", timesheet_delete, name="timesheet_delete"),

    # Invoices
    path("project/<str:project_pk>/invoice/create", invoice_create, name="invoice_create"),
    path("invoice/update/<str:pk>", invoice_update, name="invoice_update"),
    path("invoice/delete/<str:pk>", invoice_delete, name="invoice_delete"),
    path("invoice/print/<str:pk>", invoice_print, name="invoice_print"),

    # Settings
    path("settings", settings_list, name="settings_list"),
    path("settings/edit", settings_edit, name="settings_edit"),
]
