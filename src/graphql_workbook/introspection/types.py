"""Source-side model: GraphQL object types and their field type references.

Introspection describes a field's type as nested ``{kind, name, ofType}``
dicts. These are parsed once into a closed set of ``TypeRef`` variants so the
mappers can dispatch on the variant instead of comparing kind strings.
"""

from dataclasses import dataclass, field
from typing import Any, Union

from graphql_workbook.errors import MalformedIntrospectionError

# Valid schemas nest a handful of LIST/NON_NULL wrappers at most.
MAX_TYPE_DEPTH = 32


@dataclass(frozen=True)
class ScalarRef:
    name: str


@dataclass(frozen=True)
class ObjectRef:
    name: str


@dataclass(frozen=True)
class ListRef:
    of_type: "TypeRef"


@dataclass(frozen=True)
class NonNullRef:
    of_type: "TypeRef"


@dataclass(frozen=True)
class OtherRef:
    """Any kind without a tabular mapping (UNION, INTERFACE, ENUM, INPUT_OBJECT)."""

    kind: str
    name: str | None = None


TypeRef = Union[ScalarRef, ObjectRef, ListRef, NonNullRef, OtherRef]


@dataclass(frozen=True)
class SourceField:
    """A field of a GraphQL object type."""

    name: str
    type: TypeRef
    description: str = ""


@dataclass(frozen=True)
class SourceObject:
    """A user-defined GraphQL object type."""

    name: str
    description: str = ""
    fields: tuple[SourceField, ...] = field(default_factory=tuple)

    @property
    def field_names(self) -> list[str]:
        return [f.name for f in self.fields]


def parse_type_ref(data: dict[str, Any], depth: int = 0) -> TypeRef:
    """Parse an introspection ``__Type`` reference into a TypeRef.

    Args:
        data: Dict with ``kind``, ``name`` and ``ofType`` keys
        depth: Current wrapper depth

    Returns:
        Parsed TypeRef

    Raises:
        MalformedIntrospectionError: If the reference is missing data or nests
            deeper than MAX_TYPE_DEPTH
    """
    if depth > MAX_TYPE_DEPTH:
        raise MalformedIntrospectionError(
            f"Type reference nests deeper than {MAX_TYPE_DEPTH} wrappers"
        )
    if not isinstance(data, dict) or "kind" not in data:
        raise MalformedIntrospectionError(f"Invalid type reference: {data!r}")

    kind = data["kind"]
    name = data.get("name")

    if kind in ("NON_NULL", "LIST"):
        inner = data.get("ofType")
        if inner is None:
            raise MalformedIntrospectionError(f"{kind} type reference is missing 'ofType'")
        of_type = parse_type_ref(inner, depth + 1)
        return NonNullRef(of_type) if kind == "NON_NULL" else ListRef(of_type)

    if kind in ("SCALAR", "OBJECT"):
        if not name:
            raise MalformedIntrospectionError(f"{kind} type reference is missing 'name'")
        return ScalarRef(name) if kind == "SCALAR" else ObjectRef(name)

    return OtherRef(kind=str(kind), name=name)


def parse_field(data: dict[str, Any]) -> SourceField:
    """Parse an introspection ``__Field`` entry."""
    if not isinstance(data, dict) or "name" not in data or "type" not in data:
        raise MalformedIntrospectionError(f"Invalid field entry: {data!r}")

    return SourceField(
        name=data["name"],
        type=parse_type_ref(data["type"]),
        description=data.get("description") or "",
    )


def parse_object(data: dict[str, Any]) -> SourceObject:
    """Parse an introspection ``__Type`` entry of kind OBJECT."""
    return SourceObject(
        name=data["name"],
        description=data.get("description") or "",
        fields=tuple(parse_field(f) for f in data.get("fields") or []),
    )


def describe_type_ref(type_ref: TypeRef) -> str:
    """Render a TypeRef in SDL notation, e.g. ``[Person!]!``."""
    if isinstance(type_ref, NonNullRef):
        return f"{describe_type_ref(type_ref.of_type)}!"
    if isinstance(type_ref, ListRef):
        return f"[{describe_type_ref(type_ref.of_type)}]"
    if isinstance(type_ref, OtherRef):
        return type_ref.name or type_ref.kind
    return type_ref.name
