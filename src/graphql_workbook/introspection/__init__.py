"""Introspection of GraphQL sources into source object descriptors.

Example usage:
    from graphql_workbook.introspection import introspect_sdl, extract_objects

    document = introspect_sdl("type Person { id: ID! name: String }")
    objects = extract_objects(document)
"""

from graphql_workbook.introspection.extractor import (
    extract_objects,
    is_domain_object,
    list_object_names,
)
from graphql_workbook.introspection.introspector import (
    introspect,
    introspect_schema,
    introspect_sdl,
    introspect_url,
)
from graphql_workbook.introspection.types import (
    MAX_TYPE_DEPTH,
    ListRef,
    NonNullRef,
    ObjectRef,
    OtherRef,
    ScalarRef,
    SourceField,
    SourceObject,
    TypeRef,
    describe_type_ref,
    parse_type_ref,
)

__all__ = [
    "extract_objects",
    "is_domain_object",
    "list_object_names",
    "introspect",
    "introspect_schema",
    "introspect_sdl",
    "introspect_url",
    "MAX_TYPE_DEPTH",
    "ListRef",
    "NonNullRef",
    "ObjectRef",
    "OtherRef",
    "ScalarRef",
    "SourceField",
    "SourceObject",
    "TypeRef",
    "describe_type_ref",
    "parse_type_ref",
]
