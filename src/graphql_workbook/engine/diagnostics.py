"""Diagnostics collected while generating a workbook.

Field-level problems never interrupt generation. They are recorded here and
handed back to the caller alongside the generated workbook, so skipped fields
and dropped sheets can be inspected without capturing log output.
"""

from typing import Any, Iterator
from enum import Enum
from dataclasses import dataclass, field


class DiagnosticSeverity(str, Enum):
    """Severity levels for diagnostics."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class DiagnosticCode(str, Enum):
    """Machine-readable diagnostic categories."""

    UNSUPPORTED_FIELD_KIND = "unsupported_field_kind"
    DANGLING_REFERENCE = "dangling_reference"
    ID_FIELD_ADDED = "id_field_added"


@dataclass
class Diagnostic:
    """A single diagnostic message."""

    severity: DiagnosticSeverity
    code: DiagnosticCode
    message: str
    path: str = ""
    context: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "severity": self.severity.value,
            "code": self.code.value,
            "message": self.message,
            "path": self.path,
            "context": self.context,
        }


@dataclass
class Diagnostics:
    """Accumulator passed through the generation pipeline."""

    items: list[Diagnostic] = field(default_factory=list)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    @property
    def warning_count(self) -> int:
        return sum(1 for d in self.items if d.severity == DiagnosticSeverity.WARNING)

    @property
    def info_count(self) -> int:
        return sum(1 for d in self.items if d.severity == DiagnosticSeverity.INFO)

    def add(
        self,
        severity: DiagnosticSeverity,
        code: DiagnosticCode,
        message: str,
        path: str = "",
        **context: Any,
    ) -> Diagnostic:
        diagnostic = Diagnostic(
            severity=severity,
            code=code,
            message=message,
            path=path,
            context=context,
        )
        self.items.append(diagnostic)
        return diagnostic

    def by_code(self, code: DiagnosticCode) -> list[Diagnostic]:
        """Get all diagnostics with the given code."""
        return [d for d in self.items if d.code == code]

    def merge(self, other: "Diagnostics") -> "Diagnostics":
        """Merge another collector into a new one."""
        return Diagnostics(items=self.items + other.items)

    def to_dict(self) -> dict[str, Any]:
        return {
            "warning_count": self.warning_count,
            "info_count": self.info_count,
            "items": [d.to_dict() for d in self.items],
        }
