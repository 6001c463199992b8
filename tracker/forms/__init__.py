from .clients.clients import ClientForm
from .invoices.invoices import InvoiceForm
from .projects.projects import ProjectForm
from .settings.settings import SettingsForm
from .timesheets.timesheets import TimesheetForm

__all__ = ["ClientForm", "InvoiceForm", "ProjectForm", "SettingsForm", "TimesheetForm"]
