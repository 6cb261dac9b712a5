"""Exception types raised while generating workbooks from GraphQL schemas."""


class GraphQLWorkbookError(Exception):
    """Base class for all graphql-workbook errors."""


class InvalidSourceError(GraphQLWorkbookError, TypeError):
    """The source is neither a URL, an SDL document, nor a GraphQLSchema."""

    def __init__(self, source: object):
        self.source = source
        super().__init__(
            f"Not a valid GraphQL Schema source: {type(source).__name__}"
        )


class SchemaFetchError(GraphQLWorkbookError):
    """Fetching the introspection result from a GraphQL endpoint failed."""

    def __init__(
        self,
        url: str,
        status_text: str,
        status_code: int | None = None,
    ):
        self.url = url
        self.status_text = status_text
        self.status_code = status_code
        super().__init__(f"Could not get GraphQL Schema: {status_text}")


class MalformedIntrospectionError(GraphQLWorkbookError, ValueError):
    """The introspection document cannot be interpreted."""


class ConfigError(GraphQLWorkbookError, ValueError):
    """A workbook or setup configuration file is invalid."""
