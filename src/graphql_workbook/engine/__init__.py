"""Engine module - diagnostics shared by the generation pipeline."""

from graphql_workbook.engine.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    Diagnostics,
    DiagnosticSeverity,
)

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "Diagnostics",
    "DiagnosticSeverity",
]
