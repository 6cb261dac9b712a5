"""Generators - map GraphQL types onto fields, sheets, workbooks and spaces."""

from graphql_workbook.generators.field import generate_field, scalar_field_type
from graphql_workbook.generators.sheet import (
    IntegrityMode,
    SheetBuilder,
    check_integrity,
    generate_sheet,
    generate_sheets,
)
from graphql_workbook.generators.workbook import (
    WorkbookResult,
    generate_workbook,
    generate_workbook_sync,
)
from graphql_workbook.generators.space import (
    SpaceResult,
    configure_space,
    configure_space_sync,
)

__all__ = [
    "generate_field",
    "scalar_field_type",
    "IntegrityMode",
    "SheetBuilder",
    "check_integrity",
    "generate_sheet",
    "generate_sheets",
    "WorkbookResult",
    "generate_workbook",
    "generate_workbook_sync",
    "SpaceResult",
    "configure_space",
    "configure_space_sync",
]
