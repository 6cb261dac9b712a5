"""Tabular descriptor models - the output side of the pipeline.

A workbook is an ordered collection of sheets; a sheet is a typed table whose
columns are described by fields. These models serialize to the shape the
hosting platform's workbook-creation call accepts.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_WORKBOOK_NAME = "GraphQL Plugin Generated Workbook"


class FieldType(str, Enum):
    """Tabular field types."""

    NUMBER = "number"
    BOOLEAN = "boolean"
    STRING = "string"
    REFERENCE = "reference"


class ConstraintType(str, Enum):
    """Field constraint types."""

    REQUIRED = "required"


class Relationship(str, Enum):
    """Cardinality of a reference field."""

    HAS_ONE = "has-one"


class Constraint(BaseModel):
    """A constraint attached to a field."""

    type: ConstraintType = Field(..., description="Constraint type")


class ReferenceConfig(BaseModel):
    """Target of a reference field."""

    ref: str = Field(..., description="Slug of the referenced sheet")
    key: str = Field(default="id", description="Lookup key on the referenced sheet")
    relationship: Relationship = Field(default=Relationship.HAS_ONE, description="Cardinality")


class FieldConfig(BaseModel):
    """Schema definition for a single sheet column."""

    key: str = Field(..., description="Field key, unique within a sheet")
    label: str = Field(..., description="Human-readable label")
    description: str = Field(default="", description="Field description")
    type: FieldType = Field(..., description="Tabular field type")
    constraints: list[Constraint] = Field(default_factory=list, description="Field constraints")
    multi: bool = Field(default=False, description="Whether the field holds multiple values")
    config: ReferenceConfig | None = Field(default=None, description="Reference target")

    @property
    def is_required(self) -> bool:
        return any(c.type == ConstraintType.REQUIRED for c in self.constraints)

    @property
    def is_reference(self) -> bool:
        return self.type == FieldType.REFERENCE

    def require(self) -> "FieldConfig":
        """Return a copy carrying the required constraint."""
        if self.is_required:
            return self
        return self.model_copy(
            update={"constraints": [*self.constraints, Constraint(type=ConstraintType.REQUIRED)]}
        )

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


class SheetConfig(BaseModel):
    """A generated sheet.

    Caller overrides such as sheet-level ``actions`` are kept as extra
    properties.
    """

    model_config = ConfigDict(extra="allow")

    name: str = Field(..., description="Sheet display name")
    slug: str = Field(..., description="Sheet slug, equal to the GraphQL object name")
    description: str = Field(default="", description="Sheet description")
    fields: list[FieldConfig] = Field(default_factory=list, description="Sheet fields")

    def get_field(self, key: str) -> FieldConfig | None:
        """Get a field by key."""
        for field in self.fields:
            if field.key == key:
                return field
        return None

    def reference_targets(self) -> list[str]:
        """Slugs referenced by this sheet's reference fields, in field order."""
        return [f.config.ref for f in self.fields if f.is_reference and f.config]

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


class WorkbookConfig(BaseModel):
    """A generated workbook, ready for the workbook-creation call."""

    model_config = ConfigDict(extra="allow")

    name: str = Field(default=DEFAULT_WORKBOOK_NAME, description="Workbook name")
    sheets: list[SheetConfig] = Field(default_factory=list, description="Ordered sheets")

    def get_sheet(self, slug: str) -> SheetConfig | None:
        """Get a sheet by slug."""
        for sheet in self.sheets:
            if sheet.slug == slug:
                return sheet
        return None

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


class PartialSheetConfig(BaseModel):
    """Caller-supplied sheet override, matched to an object by ``slug``.

    ``name``, ``slug``, ``description`` and ``fields`` are always recomputed
    from the schema; every other property is carried into the generated sheet.
    """

    model_config = ConfigDict(extra="allow")

    slug: str = Field(..., description="Must match the GraphQL object name")
    name: str | None = Field(default=None, description="Ignored, computed from the schema")

    def extras(self) -> dict[str, Any]:
        """Override properties that are carried into the generated sheet."""
        return dict(self.model_extra or {})


class PartialWorkbookConfig(BaseModel):
    """Caller-supplied workbook configuration with a GraphQL source."""

    model_config = ConfigDict(extra="allow")

    # URL string, SDL string or GraphQLSchema; validated by the introspector
    source: Any = Field(..., description="URL, SDL document or schema instance")
    name: str | None = Field(default=None, description="Workbook name")
    sheets: list[PartialSheetConfig] | None = Field(default=None, description="Sheet overrides")

    def extras(self) -> dict[str, Any]:
        """Workbook properties other than source, name and sheets."""
        return dict(self.model_extra or {})


class SpaceConfig(BaseModel):
    """A space holding several generated workbooks."""

    model_config = ConfigDict(extra="allow")

    workbooks: list[WorkbookConfig] = Field(default_factory=list, description="Generated workbooks")

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


class SetupConfig(BaseModel):
    """Workbooks to generate plus space-level properties."""

    workbooks: list[PartialWorkbookConfig] = Field(default_factory=list, description="Workbook configs")
    space: dict[str, Any] = Field(default_factory=dict, description="Space-level properties")
