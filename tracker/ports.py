# tracker/ports.py
"""
Storage port for the tracked entities.

Views and the invoice services are written against `Repository`; the ORM
adapter lives in tracker.repositories.
"""
from __future__ import annotations

import abc
from typing import Any, Generic, TypeVar

M = TypeVar("M")


class Repository(abc.ABC, Generic[M]):
    @abc.abstractmethod
    def insert(self, **attributes: Any) -> int:
        ...

    @abc.abstractmethod
    def get(self, pk: int) -> M:
        """Raises RecordNotFound when the row is missing or soft-deleted."""

    @abc.abstractmethod
    def get_by_parent(self, parent_id: int) -> list[M]:
        ...

    @abc.abstractmethod
    def update(self, entity: M) -> None:
        """No-op when the row does not exist; callers check existence first."""

    @abc.abstractmethod
    def soft_delete(self, pk: int) -> None:
        """Idempotent: deleting twice, or deleting an unknown id, is not an error."""

    @abc.abstractmethod
    def exists(self, pk: int) -> bool:
        ...
