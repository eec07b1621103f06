from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional

log = logging.getLogger("syntaxia.validation")


@dataclass
class ValidationIssue:
    """Validation problem information."""
    field: str
    message: str
    severity: str  # "error", "warning"

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


class ValidationResult:
    """Collects every problem found in a document instead of stopping at the first."""

    def __init__(self) -> None:
        self.errors: List[ValidationIssue] = []
        self.warnings: List[ValidationIssue] = []

    def add_error(self, field: str, message: str) -> None:
        self.errors.append(ValidationIssue(field, message, "error"))

    def add_warning(self, field: str, message: str) -> None:
        self.warnings.append(ValidationIssue(field, message, "warning"))

    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def get_summary(self) -> str:
        if not self.errors and not self.warnings:
            return "Validation passed with no issues"
        parts = []
        if self.errors:
            parts.append(f"{len(self.errors)} errors")
        if self.warnings:
            parts.append(f"{len(self.warnings)} warnings")
        return f"Validation complete: {', '.join(parts)}"

    # Typed accessors. Each returns None and records an error when the value
    # has the wrong type, so callers can keep walking the document.

    def required_str(self, data: Mapping[str, Any], key: str, path: str) -> Optional[str]:
        if key not in data or data[key] is None:
            self.add_error(f"{path}.{key}", "is required")
            return None
        return self.optional_str(data, key, path)

    def optional_str(self, data: Mapping[str, Any], key: str, path: str) -> Optional[str]:
        value = data.get(key)
        if value is None:
            return None
        if not isinstance(value, str):
            self.add_error(f"{path}.{key}", f"must be a string, got {type(value).__name__}")
            return None
        return value

    def optional_bool(self, data: Mapping[str, Any], key: str, path: str) -> Optional[bool]:
        value = data.get(key)
        if value is None:
            return None
        if not isinstance(value, bool):
            self.add_error(f"{path}.{key}", f"must be true or false, got {value!r}")
            return None
        return value

    def optional_position(self, data: Mapping[str, Any], key: str, path: str) -> Optional[int]:
        value = data.get(key)
        if value is None:
            return None
        # bool is an int subclass; "position: yes" is not a position.
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            self.add_error(f"{path}.{key}", f"must be a non-negative integer, got {value!r}")
            return None
        return value

    def required_mapping(self, data: Mapping[str, Any], key: str, path: str) -> Optional[Mapping[str, Any]]:
        value = data.get(key)
        if value is None:
            self.add_error(f"{path}.{key}", "is required")
            return None
        if not isinstance(value, Mapping):
            self.add_error(f"{path}.{key}", f"must be a mapping, got {type(value).__name__}")
            return None
        return value
