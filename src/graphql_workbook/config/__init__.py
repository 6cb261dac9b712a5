"""Configuration loading for workbook setups."""

from graphql_workbook.config.loader import ConfigLoader, dump_config, load_setup

__all__ = [
    "ConfigLoader",
    "dump_config",
    "load_setup",
]
