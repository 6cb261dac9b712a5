"""Workbook generation - the full GraphQL-to-workbook pipeline.

The pipeline runs as a single forward pass:

1. Introspect the source (the only await point, for URL sources)
2. Extract the domain object types
3. Generate one candidate sheet per object type
4. Drop sheets with references to unknown objects
5. Merge the surviving sheets into the caller's workbook configuration
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Iterable

import httpx

from graphql_workbook.engine.diagnostics import Diagnostics
from graphql_workbook.generators.sheet import IntegrityMode, OverrideLike, generate_sheets
from graphql_workbook.introspection.extractor import extract_objects
from graphql_workbook.introspection.introspector import introspect
from graphql_workbook.workbook.base import (
    DEFAULT_WORKBOOK_NAME,
    PartialWorkbookConfig,
    WorkbookConfig,
)

logger = logging.getLogger(__name__)


@dataclass
class WorkbookResult:
    """Result of a workbook generation run."""

    workbook: WorkbookConfig
    diagnostics: Diagnostics = field(default_factory=Diagnostics)
    object_names: list[str] = field(default_factory=list)

    @property
    def dropped_sheets(self) -> list[str]:
        """Object types that did not make it into the workbook."""
        kept = {sheet.slug for sheet in self.workbook.sheets}
        return [name for name in self.object_names if name not in kept]

    def summary(self) -> dict[str, Any]:
        return {
            "workbook": self.workbook.name,
            "object_count": len(self.object_names),
            "sheet_count": len(self.workbook.sheets),
            "field_count": sum(len(s.fields) for s in self.workbook.sheets),
            "dropped_sheets": self.dropped_sheets,
            "warning_count": self.diagnostics.warning_count,
        }


def _as_config(config: PartialWorkbookConfig | dict[str, Any]) -> PartialWorkbookConfig:
    if isinstance(config, PartialWorkbookConfig):
        return config
    return PartialWorkbookConfig.model_validate(config)


async def generate_workbook(
    config: PartialWorkbookConfig | dict[str, Any],
    overrides: Iterable[OverrideLike] | None = None,
    *,
    integrity: IntegrityMode = IntegrityMode.UNIVERSE,
    client: httpx.AsyncClient | None = None,
) -> WorkbookResult:
    """Generate a workbook from a GraphQL source.

    Args:
        config: Workbook configuration carrying the ``source``
        overrides: Sheet overrides; defaults to ``config.sheets``
        integrity: What reference targets are checked against
        client: Optional HTTP client used for URL sources

    Returns:
        The generated workbook and the diagnostics collected on the way
    """
    config = _as_config(config)
    if overrides is None:
        overrides = config.sheets

    document = await introspect(config.source, client)
    objects = extract_objects(document)
    logger.info("Extracted %d object type(s)", len(objects))

    diagnostics = Diagnostics()
    sheets = generate_sheets(objects, overrides, diagnostics, integrity=integrity)

    workbook = WorkbookConfig(
        **config.extras(),
        name=config.name or DEFAULT_WORKBOOK_NAME,
        sheets=sheets,
    )
    logger.info("Generated workbook '%s' with %d sheet(s)", workbook.name, len(sheets))

    return WorkbookResult(
        workbook=workbook,
        diagnostics=diagnostics,
        object_names=[obj.name for obj in objects],
    )


def generate_workbook_sync(
    config: PartialWorkbookConfig | dict[str, Any],
    overrides: Iterable[OverrideLike] | None = None,
    *,
    integrity: IntegrityMode = IntegrityMode.UNIVERSE,
) -> WorkbookResult:
    """Blocking variant of generate_workbook for use outside an event loop."""
    return asyncio.run(generate_workbook(config, overrides, integrity=integrity))
