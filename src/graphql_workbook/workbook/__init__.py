"""Tabular workbook descriptors produced from GraphQL schemas."""

from graphql_workbook.workbook.base import (
    DEFAULT_WORKBOOK_NAME,
    Constraint,
    ConstraintType,
    FieldConfig,
    FieldType,
    PartialSheetConfig,
    PartialWorkbookConfig,
    ReferenceConfig,
    Relationship,
    SetupConfig,
    SheetConfig,
    SpaceConfig,
    WorkbookConfig,
)

__all__ = [
    "DEFAULT_WORKBOOK_NAME",
    "Constraint",
    "ConstraintType",
    "FieldConfig",
    "FieldType",
    "PartialSheetConfig",
    "PartialWorkbookConfig",
    "ReferenceConfig",
    "Relationship",
    "SetupConfig",
    "SheetConfig",
    "SpaceConfig",
    "WorkbookConfig",
]
