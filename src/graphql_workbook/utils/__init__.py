"""Utility functions for graphql-workbook."""

from graphql_workbook.utils.helpers import (
    capital_case,
    is_valid_url,
    merge_dicts,
    split_words,
)

__all__ = [
    "capital_case",
    "is_valid_url",
    "merge_dicts",
    "split_words",
]
