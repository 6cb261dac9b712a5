"""
graphql-workbook - Generate tabular import workbooks from GraphQL schemas.

A GraphQL schema, reachable as a live endpoint, an SDL document or an
in-memory schema object, is compiled into a workbook: one sheet per object
type, one typed field per supported GraphQL field.
"""

__version__ = "0.1.0"

from graphql_workbook.engine.diagnostics import Diagnostics, DiagnosticSeverity
from graphql_workbook.errors import (
    ConfigError,
    GraphQLWorkbookError,
    InvalidSourceError,
    MalformedIntrospectionError,
    SchemaFetchError,
)
from graphql_workbook.generators import (
    IntegrityMode,
    SpaceResult,
    WorkbookResult,
    configure_space,
    configure_space_sync,
    generate_workbook,
    generate_workbook_sync,
)
from graphql_workbook.workbook.base import (
    FieldConfig,
    FieldType,
    PartialSheetConfig,
    PartialWorkbookConfig,
    SetupConfig,
    SheetConfig,
    SpaceConfig,
    WorkbookConfig,
)

__all__ = [
    "Diagnostics",
    "DiagnosticSeverity",
    "ConfigError",
    "GraphQLWorkbookError",
    "InvalidSourceError",
    "MalformedIntrospectionError",
    "SchemaFetchError",
    "IntegrityMode",
    "SpaceResult",
    "WorkbookResult",
    "configure_space",
    "configure_space_sync",
    "generate_workbook",
    "generate_workbook_sync",
    "FieldConfig",
    "FieldType",
    "PartialSheetConfig",
    "PartialWorkbookConfig",
    "SetupConfig",
    "SheetConfig",
    "SpaceConfig",
    "WorkbookConfig",
]
