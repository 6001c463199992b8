from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Union

from django.db import models
from django.utils import timezone


# -----------------------------------------------------------------------------
# Soft delete
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class Active:
    pass


@dataclass(frozen=True)
class Deleted:
    at: datetime


Lifecycle = Union[Active, Deleted]


class SoftDeleteQuerySet(models.QuerySet):
    def active(self):
        return self.filter(deleted_at__isnull=True)

    def deleted(self):
        return self.filter(deleted_at__isnull=False)

    def soft_delete(self) -> int:
        """
        Stamp deleted_at on every still-active row in the queryset.
        Rows already deleted keep their original timestamp.
        """
        return self.active().update(deleted_at=timezone.now())


class ActiveManager(models.Manager.from_queryset(SoftDeleteQuerySet)):
    def get_queryset(self):
        return super().get_queryset().active()


class TrackedModel(models.Model):
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)
    deleted_at = models.DateTimeField(null=True, blank=True, db_index=True)

    # first manager is the default one: every read path skips deleted rows
    objects = ActiveManager()
    all_objects = models.Manager.from_queryset(SoftDeleteQuerySet)()

    class Meta:
        abstract = True

    @property
    def lifecycle(self) -> Lifecycle:
        if self.deleted_at is None:
            return Active()
        return Deleted(at=self.deleted_at)

    @property
    def is_deleted(self) -> bool:
        return isinstance(self.lifecycle, Deleted)


# -----------------------------------------------------------------------------
# Entities
# -----------------------------------------------------------------------------
class Client(TrackedModel):
    name                       = models.CharField(max_length=255, db_index=True)
    email                      = models.CharField(max_length=255, blank=True, default="", db_index=True)
    phone                      = models.CharField(max_length=100, blank=True, null=True)
    address1                   = models.CharField(max_length=255, blank=True, null=True)
    address2                   = models.CharField(max_length=255, blank=True, null=True)
    address3                   = models.CharField(max_length=255, blank=True, null=True)
    city                       = models.CharField(max_length=100, blank=True, null=True)
    state                      = models.CharField(max_length=100, blank=True, null=True)
    zip_code                   = models.CharField(max_length=20, blank=True, null=True)
    hourly_rate                = models.FloatField(default=0.0)
    notes                      = models.TextField(blank=True, null=True)
    additional_info            = models.TextField(blank=True, null=True)
    additional_info2           = models.TextField(blank=True, null=True)
    bill_to                    = models.TextField(blank=True, null=True, help_text="Overrides the client name in the invoice 'Bill To' block.")
    include_address_on_invoice = models.BooleanField(default=True)
    invoice_cc_email           = models.CharField(max_length=255, blank=True, null=True)
    invoice_cc_description     = models.CharField(max_length=255, blank=True, null=True)
    university_affiliation     = models.CharField(max_length=255, blank=True, null=True)

    class Meta:
        db_table = "client"
        ordering = ["-updated_at"]

    def __str__(self):
        return self.name

    def address_lines(self) -> list[str]:
        lines = [ln for ln in (self.address1, self.address2, self.address3) if ln]
        city_line = ", ".join(filter(None, [self.city, self.state]))
        if self.zip_code:
            city_line = f"{city_line} {self.zip_code}" if city_line else self.zip_code
        if city_line:
            lines.append(city_line)
        return lines


class Project(TrackedModel):
    STATUS_ESTIMATING = "Estimating"
    STATUS_SCHEDULED = "Scheduled"
    STATUS_IN_PROGRESS = "In Progress"
    STATUS_ON_HOLD = "On Hold"
    STATUS_COMPLETE = "Complete"
    STATUS_CANCELLED = "Cancelled"

    STATUS_CHOICES = [
        (STATUS_ESTIMATING, "Estimating"),
        (STATUS_SCHEDULED, "Scheduled"),
        (STATUS_IN_PROGRESS, "In Progress"),
        (STATUS_ON_HOLD, "On Hold"),
        (STATUS_COMPLETE, "Complete"),
        (STATUS_CANCELLED, "Cancelled"),
    ]

    name                     = models.CharField(max_length=255, db_index=True)
    client                   = models.ForeignKey(Client, on_delete=models.PROTECT, related_name="projects")
    status                   = models.CharField(max_length=50, choices=STATUS_CHOICES, default=STATUS_ESTIMATING, db_index=True)
    hourly_rate              = models.FloatField(default=0.0)
    deadline                 = models.DateField(null=True, blank=True, db_index=True)
    scheduled_start          = models.DateField(null=True, blank=True, db_index=True)
    invoice_cc_email         = models.CharField(max_length=255, blank=True, null=True)
    invoice_cc_description   = models.CharField(max_length=255, blank=True, null=True)
    schedule_comments        = models.TextField(blank=True, null=True)
    additional_info          = models.TextField(blank=True, null=True)
    additional_info2         = models.TextField(blank=True, null=True)
    discount_percent         = models.FloatField(null=True, blank=True, help_text="Percentage (0-100) taken off the invoice amount.")
    discount_reason          = models.CharField(max_length=255, blank=True, null=True)
    adjustment_amount        = models.FloatField(null=True, blank=True, help_text="Flat amount added (or subtracted, if negative) after the discount.")
    adjustment_reason        = models.CharField(max_length=255, blank=True, null=True)
    currency_display         = models.CharField(max_length=10, default="USD")
    currency_conversion_rate = models.FloatField(default=1.0)
    flat_fee_invoice         = models.BooleanField(default=False)
    notes                    = models.TextField(blank=True, null=True)

    class Meta:
        db_table = "project"
        ordering = ["-created_at"]

    def __str__(self):
        return self.name


class Timesheet(TrackedModel):
    project      = models.ForeignKey(Project, on_delete=models.PROTECT, related_name="timesheets")
    work_date    = models.DateField(db_index=True)
    hours_worked = models.FloatField()
    # snapshot of the rate at entry time; never recomputed from the project
    hourly_rate  = models.FloatField(default=0.0)
    description  = models.CharField(max_length=255, blank=True, default="")

    class Meta:
        db_table = "timesheet"
        ordering = ["-work_date", "-created_at"]

    def __str__(self):
        return f"{self.work_date} - {self.hours_worked}h"

    @property
    def amount(self) -> float:
        return self.hours_worked * self.hourly_rate


class Invoice(TrackedModel):
    project         = models.ForeignKey(Project, on_delete=models.PROTECT, related_name="invoices")
    invoice_date    = models.DateField(db_index=True)
    date_paid       = models.DateField(null=True, blank=True, db_index=True)
    payment_terms   = models.TextField()
    amount_due      = models.FloatField(help_text="Base amount before project discount and adjustment.")
    display_details = models.BooleanField(default=False, help_text="Itemize timesheets on the printed invoice.")

    class Meta:
        db_table = "invoice"
        ordering = ["-invoice_date", "-created_at"]

    def __str__(self):
        return f"Invoice {self.pk} ({self.invoice_date})"

    @property
    def is_paid(self) -> bool:
        return self.date_paid is not None


# -----------------------------------------------------------------------------
# Settings
# -----------------------------------------------------------------------------
class AppSetting(models.Model):
    TYPE_STRING = "string"
    TYPE_INT = "int"
    TYPE_FLOAT = "float"
    TYPE_DECIMAL = "decimal"
    TYPE_BOOL = "bool"

    DATA_TYPE_CHOICES = [
        (TYPE_STRING, "String"),
        (TYPE_INT, "Integer"),
        (TYPE_FLOAT, "Float"),
        (TYPE_DECIMAL, "Decimal"),
        (TYPE_BOOL, "Boolean"),
    ]

    key         = models.CharField(max_length=100, primary_key=True)
    value       = models.TextField()
    data_type   = models.CharField(max_length=10, choices=DATA_TYPE_CHOICES, default=TYPE_STRING)
    description = models.TextField(blank=True, default="")
    created_at  = models.DateTimeField(auto_now_add=True)
    updated_at  = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "settings"
        ordering = ["key"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(data_type__in=["string", "int", "float", "decimal", "bool"]),
                name="settings_data_type_valid",
            ),
        ]

    def __str__(self):
        return f"{self.key} = {self.value}"
