"""Utility helper functions."""

import re
from typing import Any
from urllib.parse import urlparse

URL_SCHEMES = ("http", "https")

_SPLIT_LOWER_UPPER = re.compile(r"([a-z0-9])([A-Z])")
_SPLIT_UPPER_UPPER = re.compile(r"([A-Z])([A-Z][a-z])")
_STRIP = re.compile(r"[^A-Za-z0-9]+")


def split_words(value: str) -> list[str]:
    """Split an identifier into words.

    Splits on camelCase boundaries and on any run of non-alphanumeric
    characters, so ``releaseDate``, ``release_date`` and ``release-date``
    all give ``["release", "Date"]`` / ``["release", "date"]``.

    Args:
        value: Identifier to split

    Returns:
        List of words, original casing preserved
    """
    result = _SPLIT_LOWER_UPPER.sub(r"\1 \2", value)
    result = _SPLIT_UPPER_UPPER.sub(r"\1 \2", result)
    result = _STRIP.sub(" ", result)
    return result.split()


def capital_case(value: str) -> str:
    """Convert an identifier to space separated capitalized words.

    Example: ``userID`` -> ``User Id``, ``release_date`` -> ``Release Date``.
    """
    return " ".join(word[:1].upper() + word[1:].lower() for word in split_words(value))


def is_valid_url(value: str) -> bool:
    """Check whether a string is an absolute http(s) URL with a host."""
    if not isinstance(value, str) or any(c.isspace() for c in value.strip()):
        return False
    try:
        parsed = urlparse(value.strip())
    except ValueError:
        return False
    return parsed.scheme.lower() in URL_SCHEMES and bool(parsed.netloc)


def merge_dicts(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries.

    Values in override take precedence over base.

    Args:
        base: Base dictionary
        override: Override dictionary

    Returns:
        Merged dictionary
    """
    result = base.copy()

    for key, value in override.items():
        if (
            key in result
            and isinstance(result[key], dict)
            and isinstance(value, dict)
        ):
            result[key] = merge_dicts(result[key], value)
        else:
            result[key] = value

    return result
