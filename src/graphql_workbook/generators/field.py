"""Field generation - maps one GraphQL field onto one sheet field."""

import logging

from graphql_workbook.engine.diagnostics import DiagnosticCode, Diagnostics, DiagnosticSeverity
from graphql_workbook.introspection.types import (
    ListRef,
    NonNullRef,
    ObjectRef,
    OtherRef,
    ScalarRef,
    SourceField,
    TypeRef,
)
from graphql_workbook.utils.helpers import capital_case
from graphql_workbook.workbook.base import FieldConfig, FieldType, ReferenceConfig

logger = logging.getLogger(__name__)

SCALAR_TYPES = {
    "Int": FieldType.NUMBER,
    "Float": FieldType.NUMBER,
    "Boolean": FieldType.BOOLEAN,
}


def scalar_field_type(scalar_name: str) -> FieldType:
    """Map a scalar name to a field type.

    ``Int`` and ``Float`` are numbers, ``Boolean`` is boolean, and every other
    scalar (``String``, ``ID`` and custom scalars) is a string.
    """
    return SCALAR_TYPES.get(scalar_name, FieldType.STRING)


def generate_field(
    field: SourceField,
    sheet_name: str,
    diagnostics: Diagnostics | None = None,
) -> FieldConfig | None:
    """Generate a sheet field from a GraphQL field.

    Args:
        field: Source field
        sheet_name: Name of the owning object, used in diagnostics
        diagnostics: Optional collector for skipped fields

    Returns:
        Generated field, or None if the field's type kind is unsupported
    """
    return _map_type(field, field.type, sheet_name, diagnostics)


def _map_type(
    field: SourceField,
    type_ref: TypeRef,
    sheet_name: str,
    diagnostics: Diagnostics | None,
) -> FieldConfig | None:
    if isinstance(type_ref, NonNullRef):
        inner = _map_type(field, type_ref.of_type, sheet_name, diagnostics)
        return inner.require() if inner is not None else None

    base = {
        "key": field.name,
        "label": capital_case(field.name),
        "description": field.description or "",
    }

    if isinstance(type_ref, ScalarRef):
        return FieldConfig(**base, type=scalar_field_type(type_ref.name))

    if isinstance(type_ref, ObjectRef):
        return FieldConfig(
            **base,
            type=FieldType.REFERENCE,
            config=ReferenceConfig(ref=type_ref.name),
        )

    if isinstance(type_ref, ListRef):
        # Element types are collapsed to a multi-value string column.
        return FieldConfig(**base, type=FieldType.STRING, multi=True)

    kind = type_ref.kind if isinstance(type_ref, OtherRef) else type(type_ref).__name__
    message = f"Field '{field.name}' on '{sheet_name}' skipped because '{kind}' is unsupported."
    logger.warning(message)
    if diagnostics is not None:
        diagnostics.add(
            DiagnosticSeverity.WARNING,
            DiagnosticCode.UNSUPPORTED_FIELD_KIND,
            message,
            path=f"{sheet_name}.{field.name}",
            kind=kind,
        )
    return None
