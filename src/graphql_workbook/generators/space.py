"""Space configuration - generates every workbook of a setup."""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

from graphql_workbook.engine.diagnostics import Diagnostics
from graphql_workbook.generators.sheet import IntegrityMode
from graphql_workbook.generators.workbook import WorkbookResult, generate_workbook
from graphql_workbook.workbook.base import SetupConfig, SpaceConfig

logger = logging.getLogger(__name__)


@dataclass
class SpaceResult:
    """Result of configuring a space."""

    space: SpaceConfig
    results: list[WorkbookResult] = field(default_factory=list)

    @property
    def diagnostics(self) -> Diagnostics:
        merged = Diagnostics()
        for result in self.results:
            merged = merged.merge(result.diagnostics)
        return merged


async def configure_space(
    setup: SetupConfig | dict[str, Any],
    *,
    integrity: IntegrityMode = IntegrityMode.UNIVERSE,
    client: httpx.AsyncClient | None = None,
) -> SpaceResult:
    """Generate all workbooks of a setup and assemble the space.

    Workbooks are generated concurrently; the space is assembled once all of
    them have completed. The first failure cancels the workbooks still
    running and propagates.

    Args:
        setup: Workbooks to generate plus space-level properties
        integrity: Integrity mode applied to every workbook
        client: Optional HTTP client shared by URL sources

    Returns:
        The space config and the per-workbook results, in setup order
    """
    if not isinstance(setup, SetupConfig):
        setup = SetupConfig.model_validate(setup)

    tasks = [
        asyncio.ensure_future(generate_workbook(config, integrity=integrity, client=client))
        for config in setup.workbooks
    ]
    try:
        results = await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise
    logger.info("Configured space with %d workbook(s)", len(results))

    space = SpaceConfig(**{**setup.space, "workbooks": [r.workbook for r in results]})
    return SpaceResult(space=space, results=list(results))


def configure_space_sync(
    setup: SetupConfig | dict[str, Any],
    *,
    integrity: IntegrityMode = IntegrityMode.UNIVERSE,
) -> SpaceResult:
    """Blocking variant of configure_space."""
    return asyncio.run(configure_space(setup, integrity=integrity))
