"""Sheet generation - maps GraphQL object types onto sheets.

Each object type becomes one sheet. Every sheet is guaranteed an ``id``
field so that reference fields pointing at it (which always look up ``id``)
resolve. After all sheets are generated an integrity pass drops sheets with
references to unknown objects.
"""

import logging
from enum import Enum
from typing import Any, Iterable, Sequence

from graphql_workbook.engine.diagnostics import DiagnosticCode, Diagnostics, DiagnosticSeverity
from graphql_workbook.generators.field import generate_field
from graphql_workbook.introspection.types import SourceObject
from graphql_workbook.utils.helpers import capital_case
from graphql_workbook.workbook.base import (
    FieldConfig,
    FieldType,
    PartialSheetConfig,
    SheetConfig,
)

logger = logging.getLogger(__name__)

ID_FIELD_KEY = "id"


class IntegrityMode(str, Enum):
    """What reference targets are checked against.

    UNIVERSE checks against every extracted object type, in one pass.
    SURVIVORS repeats the check against the sheets still in the workbook
    until nothing more is dropped.
    """

    UNIVERSE = "universe"
    SURVIVORS = "survivors"


OverrideLike = PartialSheetConfig | dict[str, Any]


class SheetBuilder:
    """Fluent builder for sheets.

    Override properties are applied first; name, slug, description and
    fields are then always set from the schema.
    """

    def __init__(self, slug: str):
        self._slug = slug
        self._name = capital_case(slug)
        self._description = ""
        self._fields: list[FieldConfig] = []
        self._extras: dict[str, Any] = {}

    def overrides(self, override: PartialSheetConfig | None) -> "SheetBuilder":
        if override is not None:
            self._extras.update(override.extras())
        return self

    def description(self, description: str) -> "SheetBuilder":
        self._description = description or ""
        return self

    def field(self, field: FieldConfig) -> "SheetBuilder":
        self._fields.append(field)
        return self

    def ensure_id_field(self) -> bool:
        """Prepend a numeric ``id`` field if none exists.

        Returns:
            True if a field was added
        """
        if any(f.key == ID_FIELD_KEY for f in self._fields):
            return False
        self._fields.insert(0, id_field())
        return True

    def build(self) -> SheetConfig:
        data = {
            **self._extras,
            "name": self._name,
            "fields": self._fields,
            "slug": self._slug,
            "description": self._description,
        }
        return SheetConfig(**data)


def id_field() -> FieldConfig:
    """The synthesized identity field."""
    return FieldConfig(key=ID_FIELD_KEY, label="Id", type=FieldType.NUMBER)


def _normalize_overrides(overrides: Iterable[OverrideLike] | None) -> list[PartialSheetConfig]:
    return [
        o if isinstance(o, PartialSheetConfig) else PartialSheetConfig.model_validate(o)
        for o in overrides or []
    ]


def find_override(
    slug: str,
    overrides: Iterable[OverrideLike] | None,
) -> PartialSheetConfig | None:
    """Find the first override whose slug matches."""
    for override in _normalize_overrides(overrides):
        if override.slug == slug:
            return override
    return None


def generate_sheet(
    obj: SourceObject,
    overrides: Iterable[OverrideLike] | None = None,
    diagnostics: Diagnostics | None = None,
) -> SheetConfig:
    """Generate a candidate sheet from an object type.

    Args:
        obj: Source object type
        overrides: Sheet overrides, matched to the object by slug
        diagnostics: Optional collector for skipped fields

    Returns:
        Generated sheet
    """
    builder = (
        SheetBuilder(obj.name)
        .overrides(find_override(obj.name, overrides))
        .description(obj.description)
    )

    for source_field in obj.fields:
        field = generate_field(source_field, obj.name, diagnostics)
        if field is not None:
            builder.field(field)

    if builder.ensure_id_field() and diagnostics is not None:
        diagnostics.add(
            DiagnosticSeverity.INFO,
            DiagnosticCode.ID_FIELD_ADDED,
            f"Sheet '{obj.name}' has no 'id' field; a numeric one was added.",
            path=obj.name,
        )

    return builder.build()


def _drop(sheet: SheetConfig, missing: list[str], diagnostics: Diagnostics | None) -> None:
    message = (
        f"Sheet '{sheet.slug}' dropped because it references unknown "
        f"sheet(s): {', '.join(missing)}."
    )
    logger.warning(message)
    if diagnostics is not None:
        diagnostics.add(
            DiagnosticSeverity.WARNING,
            DiagnosticCode.DANGLING_REFERENCE,
            message,
            path=sheet.slug,
            missing=missing,
        )


def check_integrity(
    sheets: Sequence[SheetConfig],
    object_names: Iterable[str],
    mode: IntegrityMode = IntegrityMode.UNIVERSE,
    diagnostics: Diagnostics | None = None,
) -> list[SheetConfig]:
    """Drop sheets whose reference fields point at unknown objects.

    Args:
        sheets: Candidate sheets, in order
        object_names: Names of every extracted object type
        mode: What reference targets are checked against
        diagnostics: Optional collector for dropped sheets

    Returns:
        Surviving sheets, in their original order
    """
    known = set(object_names)
    survivors = list(sheets)

    while True:
        kept = []
        for sheet in survivors:
            missing = [ref for ref in sheet.reference_targets() if ref not in known]
            if missing:
                _drop(sheet, missing, diagnostics)
            else:
                kept.append(sheet)

        dropped = len(kept) != len(survivors)
        survivors = kept
        if mode == IntegrityMode.UNIVERSE or not dropped:
            return survivors
        known = {sheet.slug for sheet in survivors}


def generate_sheets(
    objects: Sequence[SourceObject],
    overrides: Iterable[OverrideLike] | None = None,
    diagnostics: Diagnostics | None = None,
    integrity: IntegrityMode = IntegrityMode.UNIVERSE,
) -> list[SheetConfig]:
    """Generate sheets for all object types and run the integrity pass.

    Args:
        objects: Every extracted object type
        overrides: Sheet overrides
        diagnostics: Optional collector
        integrity: Integrity mode

    Returns:
        Surviving sheets
    """
    overrides = _normalize_overrides(overrides)
    candidates = [generate_sheet(obj, overrides, diagnostics) for obj in objects]
    return check_integrity(
        candidates,
        [obj.name for obj in objects],
        mode=integrity,
        diagnostics=diagnostics,
    )
