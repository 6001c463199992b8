import random
from datetime import timedelta

from django.core.management.base import BaseCommand
from django.utils import timezone

from tracker.models import Client, Invoice, Project, Timesheet
from tracker.repositories import (
    ClientRepository,
    InvoiceRepository,
    ProjectRepository,
    TimesheetRepository,
)

DEMO_CLIENTS = [
    ("Dr. Amelia Hart", "amelia.hart@example.edu", 85.0, "State University"),
    ("Northwind Press", "editor@northwind.example.com", 95.0, None),
    ("Jonas Berg", "jberg@example.org", 75.0, "Institute of Technology"),
]


class Command(BaseCommand):
    help = "Seed local dev database with demo clients, projects, timesheets and invoices."

    def add_arguments(self, parser):
        parser.add_argument("--flush", action="store_true", help="Remove existing tracker rows first.")
        parser.add_argument("--seed", type=int, default=None, help="Random seed for repeatable data.")

    def handle(self, *args, **options):
        if options["seed"] is not None:
            random.seed(options["seed"])

        if options["flush"]:
            Invoice.all_objects.all().delete()
            Timesheet.all_objects.all().delete()
            Project.all_objects.all().delete()
            Client.all_objects.all().delete()
            self.stdout.write(self.style.WARNING("Existing tracker data removed."))

        clients = ClientRepository()
        projects = ProjectRepository()
        timesheets = TimesheetRepository()
        invoices = InvoiceRepository()

        today = timezone.localdate()
        counts = {"clients": 0, "projects": 0, "timesheets": 0, "invoices": 0}

        for name, email, rate, affiliation in DEMO_CLIENTS:
            client_id = clients.insert(
                name=name,
                email=email,
                hourly_rate=rate,
                university_affiliation=affiliation,
                city="Springfield",
                state="IL",
                zip_code="62701",
            )
            counts["clients"] += 1

            for n in range(1, 3):
                project_id = projects.insert(
                    client_id=client_id,
                    name=f"{name.split()[-1]} manuscript {n}",
                    status=random.choice([s for s, _ in Project.STATUS_CHOICES]),
                    hourly_rate=rate,
                    scheduled_start=today - timedelta(days=30 * n),
                    deadline=today + timedelta(days=14 * n),
                    discount_percent=10.0 if n == 2 else None,
                    discount_reason="Returning client" if n == 2 else None,
                )
                counts["projects"] += 1

                amount = 0.0
                for d in range(random.randint(2, 5)):
                    hours_worked = round(random.uniform(0.5, 6.0), 2)
                    timesheets.insert(
                        project_id=project_id,
                        work_date=today - timedelta(days=d * 3),
                        hours_worked=hours_worked,
                        hourly_rate=rate,
                        description=f"Editing pass {d + 1}",
                    )
                    amount += hours_worked * rate
                    counts["timesheets"] += 1

                invoices.insert(
                    project_id=project_id,
                    invoice_date=today,
                    payment_terms="Payment is due within 30 days of receipt of this invoice.",
                    amount_due=round(amount, 2),
                    display_details=n == 1,
                )
                counts["invoices"] += 1

        self.stdout.write(self.style.SUCCESS(
            "Seeded {clients} clients, {projects} projects, {timesheets} timesheets, {invoices} invoices.".format(**counts)
        ))
