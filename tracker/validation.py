# tracker/validation.py
from __future__ import annotations

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


EMAIL_RE = re.compile(r"^[a-z0-9._%+\-]+@[a-z0-9.\-]+\.[a-z]{2,}$")


def not_blank(value) -> bool:
    return bool((value or "").strip())


def max_chars(value, n: int) -> bool:
    return len(value or "") <= n


def permitted_value(value, *allowed) -> bool:
    return value in allowed


def matches(value, pattern: re.Pattern) -> bool:
    return bool(pattern.match(value or ""))


@dataclass(frozen=True)
class ValidationResult:
    """
    Immutable field -> message mapping.

    check_field() never mutates; it hands back a new result. Only the first
    failing check for a field is kept, later failures for that field are ignored.
    """

    errors: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def check_field(self, ok: bool, field_name: str, message: str) -> "ValidationResult":
        if ok or field_name in self.errors:
            return self
        merged = dict(self.errors)
        merged[field_name] = message
        return ValidationResult(MappingProxyType(merged))

    @property
    def valid(self) -> bool:
        return not self.errors

    @property
    def field_errors(self) -> dict[str, str]:
        return dict(self.errors)
