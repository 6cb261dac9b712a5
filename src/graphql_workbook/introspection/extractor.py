"""Extraction of user-defined object types from an introspection document."""

from typing import Any

from graphql_workbook.errors import MalformedIntrospectionError
from graphql_workbook.introspection.types import SourceObject, parse_object

ROOT_OPERATION_TYPES = frozenset({"Query", "Mutation", "Subscription"})


def is_domain_object(type_data: dict[str, Any]) -> bool:
    """Check whether an introspected type is a user-defined object type.

    Root operation types and introspection metadata types (``__Type``,
    ``_Service`` and the like) are excluded.
    """
    name = type_data.get("name") or ""
    return (
        type_data.get("kind") == "OBJECT"
        and name not in ROOT_OPERATION_TYPES
        and not name.startswith("_")
    )


def _types(document: dict[str, Any]) -> list[dict[str, Any]]:
    schema = document.get("__schema") if isinstance(document, dict) else None
    if not isinstance(schema, dict) or not isinstance(schema.get("types"), list):
        raise MalformedIntrospectionError("Introspection document has no '__schema.types' list")
    return schema["types"]


def extract_objects(document: dict[str, Any]) -> list[SourceObject]:
    """Get the domain object types of a schema, in document order.

    Args:
        document: Introspection document

    Returns:
        Parsed object descriptors
    """
    return [parse_object(t) for t in _types(document) if is_domain_object(t)]


def list_object_names(document: dict[str, Any]) -> list[str]:
    """List domain object type names without parsing their fields."""
    return [t["name"] for t in _types(document) if is_domain_object(t)]
