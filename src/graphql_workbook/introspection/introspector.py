"""Introspection of GraphQL sources.

Obtains the standard introspection document (``{"__schema": {...}}``) from a
live endpoint, an SDL document or an in-memory ``GraphQLSchema``.
"""

import logging
from typing import Any

import httpx
from graphql import GraphQLSchema, build_schema, get_introspection_query, graphql_sync

from graphql_workbook.errors import (
    InvalidSourceError,
    MalformedIntrospectionError,
    SchemaFetchError,
)
from graphql_workbook.utils.helpers import is_valid_url

logger = logging.getLogger(__name__)


def _check_document(document: Any, origin: str) -> dict[str, Any]:
    if not isinstance(document, dict) or not isinstance(document.get("__schema"), dict):
        raise MalformedIntrospectionError(
            f"Introspection result from {origin} has no '__schema' object"
        )
    return document


def introspect_schema(schema: GraphQLSchema) -> dict[str, Any]:
    """Run the introspection query against a schema instance.

    Args:
        schema: GraphQL schema

    Returns:
        Introspection document
    """
    result = graphql_sync(schema, get_introspection_query(descriptions=True))
    if result.errors:
        messages = "; ".join(e.message for e in result.errors)
        raise MalformedIntrospectionError(f"Introspection failed: {messages}")
    return _check_document(result.data, "schema")


def introspect_sdl(sdl: str) -> dict[str, Any]:
    """Build a schema from an SDL document and introspect it.

    Raises:
        graphql.GraphQLError: If the document cannot be parsed or built
    """
    schema = build_schema(sdl)
    return introspect_schema(schema)


async def introspect_url(
    url: str,
    client: httpx.AsyncClient | None = None,
) -> dict[str, Any]:
    """POST the introspection query to a GraphQL endpoint.

    Args:
        url: Endpoint URL
        client: Optional client to send the request with; a short-lived one is
            created otherwise

    Returns:
        The ``data`` member of the response body

    Raises:
        SchemaFetchError: On a non-2xx status or a transport failure
        MalformedIntrospectionError: If the body carries GraphQL errors and
            no data, or has no introspection result

    Redirects are followed.
    """
    payload = {"query": get_introspection_query(descriptions=True)}
    headers = {"Content-Type": "application/json"}

    logger.debug("Fetching GraphQL schema from %s", url)
    try:
        if client is None:
            async with httpx.AsyncClient(follow_redirects=True) as owned_client:
                response = await owned_client.post(url, json=payload, headers=headers)
        else:
            response = await client.post(
                url, json=payload, headers=headers, follow_redirects=True
            )
    except httpx.HTTPError as e:
        raise SchemaFetchError(url, str(e) or type(e).__name__) from e

    if not response.is_success:
        raise SchemaFetchError(url, response.reason_phrase, response.status_code)

    try:
        body = response.json()
    except ValueError as e:
        raise MalformedIntrospectionError(f"Response from {url} is not valid JSON") from e

    if not isinstance(body, dict):
        raise MalformedIntrospectionError(f"Response from {url} is not a JSON object")

    errors = body.get("errors")
    if body.get("data") is None and isinstance(errors, list) and errors:
        messages = "; ".join(
            str(e.get("message", e)) if isinstance(e, dict) else str(e) for e in errors
        )
        raise MalformedIntrospectionError(f"Introspection failed at {url}: {messages}")
    return _check_document(body.get("data"), url)


async def introspect(
    source: Any,
    client: httpx.AsyncClient | None = None,
) -> dict[str, Any]:
    """Introspect any supported source.

    Args:
        source: Absolute URL, SDL document or GraphQLSchema
        client: Optional HTTP client used for URL sources

    Returns:
        Introspection document

    Raises:
        InvalidSourceError: If the source is of an unsupported type
    """
    if isinstance(source, str):
        if is_valid_url(source):
            return await introspect_url(source.strip(), client)
        return introspect_sdl(source)
    if isinstance(source, GraphQLSchema):
        return introspect_schema(source)
    raise InvalidSourceError(source)
