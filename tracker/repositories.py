# tracker/repositories.py
"""
ORM adapter for the storage port in tracker.ports. Every read goes through
the model's default manager, which already hides soft-deleted rows.
"""
from __future__ import annotations

import logging
from typing import Any, Optional, TypeVar

from django.utils import timezone

from .exceptions import RecordNotFound
from .models import Client, Invoice, Project, Timesheet, TrackedModel
from .ports import Repository

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=TrackedModel)

# columns the storage layer owns; update() never copies them from the caller
_MANAGED_FIELDS = {"id", "created_at", "updated_at", "deleted_at"}


class DjangoRepository(Repository[M]):
    model: type[M]
    parent_field: Optional[str] = None

    def insert(self, **attributes: Any) -> int:
        obj = self.model.objects.create(**attributes)
        return obj.pk

    def get(self, pk: int) -> M:
        try:
            return self.model.objects.get(pk=pk)
        except self.model.DoesNotExist:
            raise RecordNotFound(f"{self.model.__name__} {pk} not found") from None

    def get_by_parent(self, parent_id: int) -> list[M]:
        if self.parent_field is None:
            raise TypeError(f"{self.model.__name__} has no parent")
        return list(self.model.objects.filter(**{f"{self.parent_field}_id": parent_id}))

    def update(self, entity: M) -> None:
        values = {
            f.attname: getattr(entity, f.attname)
            for f in self.model._meta.concrete_fields
            if f.attname not in _MANAGED_FIELDS
        }
        values["updated_at"] = timezone.now()
        self.model.objects.filter(pk=entity.pk).update(**values)

    def soft_delete(self, pk: int) -> None:
        changed = self.model.objects.filter(pk=pk).soft_delete()
        if changed:
            logger.info("Soft-deleted %s %s", self.model.__name__, pk)

    def exists(self, pk: int) -> bool:
        return self.model.objects.filter(pk=pk).exists()


class ClientRepository(DjangoRepository[Client]):
    model = Client

    def get_all(self) -> list[Client]:
        return list(Client.objects.order_by("-updated_at", "-pk"))

    def count(self) -> int:
        return Client.objects.count()

    def get_page(self, page: int, page_size: int) -> list[Client]:
        page = max(page, 1)
        offset = (page - 1) * page_size
        return list(Client.objects.order_by("-updated_at", "-pk")[offset:offset + page_size])


class ProjectRepository(DjangoRepository[Project]):
    model = Project
    parent_field = "client"

    def get_by_parent(self, parent_id: int) -> list[Project]:
        return list(Project.objects.filter(client_id=parent_id).order_by("-created_at", "-pk"))


class TimesheetRepository(DjangoRepository[Timesheet]):
    model = Timesheet
    parent_field = "project"

    def insert(self, **attributes: Any) -> int:
        if attributes.get("hourly_rate") is None:
            project_id = attributes.get("project_id") or attributes["project"].pk
            attributes["hourly_rate"] = (
                Project.all_objects.filter(pk=project_id).values_list("hourly_rate", flat=True).first() or 0.0
            )
        return super().insert(**attributes)

    def get_by_parent(self, parent_id: int) -> list[Timesheet]:
        return list(
            Timesheet.objects.filter(project_id=parent_id).order_by("-work_date", "-created_at", "-pk")
        )


class InvoiceRepository(DjangoRepository[Invoice]):
    model = Invoice
    parent_field = "project"

    def get_by_parent(self, parent_id: int) -> list[Invoice]:
        return list(
            Invoice.objects.filter(project_id=parent_id).order_by("-invoice_date", "-created_at", "-pk")
        )
