"""Config Loader for loading workbook setups from YAML or JSON files.

A config file holds either a single workbook::

    name: Movies
    source: https://example.com/graphql
    sheets:
      - slug: Movie
        actions: [...]

or a setup with several workbooks and space-level properties::

    defaults:
      labels: [pinned]
    workbooks:
      - name: From URL
        source: https://example.com/graphql
      - name: From file
        source_file: schema.graphql
    space:
      metadata: {...}

``defaults`` are deep-merged under every workbook entry. ``source_file`` is
resolved relative to the config file and read as an SDL document.
"""

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from graphql_workbook.errors import ConfigError
from graphql_workbook.utils.helpers import merge_dicts
from graphql_workbook.workbook.base import (
    PartialWorkbookConfig,
    SetupConfig,
    SpaceConfig,
    WorkbookConfig,
)

YAML_SUFFIXES = (".yaml", ".yml")


class ConfigLoader:
    """Loads setups from YAML or JSON files."""

    def load_file(self, path: Path | str) -> SetupConfig:
        """Load a setup from a YAML or JSON file.

        Args:
            path: Path to the config file

        Returns:
            Loaded SetupConfig
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        fmt = "json" if path.suffix.lower() == ".json" else "yaml"
        return self.load_from_string(path.read_text(), fmt, base_dir=path.parent)

    def load_from_string(
        self,
        content: str,
        fmt: str = "yaml",
        base_dir: Path | str | None = None,
    ) -> SetupConfig:
        """Load a setup from a YAML or JSON string.

        Args:
            content: Config content
            fmt: "yaml" or "json"
            base_dir: Directory that ``source_file`` entries are relative to

        Returns:
            Loaded SetupConfig
        """
        try:
            if fmt.lower() == "json":
                data = json.loads(content)
            else:
                data = yaml.safe_load(content)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigError(f"Invalid {fmt.upper()}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError("Config must be a mapping")

        return self._parse_setup(data, Path(base_dir) if base_dir else Path.cwd())

    def _parse_setup(self, data: dict[str, Any], base_dir: Path) -> SetupConfig:
        """Parse setup data from the loaded structure."""
        if "workbooks" in data:
            entries = data["workbooks"]
            if not isinstance(entries, list):
                raise ConfigError("'workbooks' must be a list")
        elif "source" in data or "source_file" in data:
            entries = [{k: v for k, v in data.items() if k not in ("defaults", "space")}]
        else:
            raise ConfigError("Config must have a 'source', 'source_file' or 'workbooks' entry")

        defaults = data.get("defaults") or {}
        space = data.get("space") or {}
        if not isinstance(defaults, dict) or not isinstance(space, dict):
            raise ConfigError("'defaults' and 'space' must be mappings")

        workbooks = [
            self._parse_workbook(merge_dicts(defaults, entry), base_dir, i)
            for i, entry in enumerate(entries)
        ]
        return SetupConfig(workbooks=workbooks, space=space)

    def _parse_workbook(self, data: Any, base_dir: Path, index: int) -> PartialWorkbookConfig:
        """Parse a single workbook entry."""
        path = f"workbooks[{index}]"
        if not isinstance(data, dict):
            raise ConfigError(f"{path}: workbook must be a mapping")

        data = dict(data)
        source_file = data.pop("source_file", None)
        if source_file is not None:
            if "source" in data:
                raise ConfigError(f"{path}: use either 'source' or 'source_file', not both")
            sdl_path = Path(source_file)
            if not sdl_path.is_absolute():
                sdl_path = base_dir / sdl_path
            if not sdl_path.exists():
                raise ConfigError(f"{path}: source file not found: {sdl_path}")
            data["source"] = sdl_path.read_text()

        if "source" not in data:
            raise ConfigError(f"{path}: workbook must have a 'source'")

        try:
            return PartialWorkbookConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"{path}: {e}") from e

    def save_workbook(self, workbook: WorkbookConfig | SpaceConfig, path: Path | str) -> None:
        """Save a generated workbook or space to a YAML or JSON file.

        Args:
            workbook: The workbook or space to save
            path: Output path; the suffix selects the format
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        fmt = "yaml" if path.suffix.lower() in YAML_SUFFIXES else "json"
        path.write_text(dump_config(workbook.to_dict(), fmt))


def dump_config(data: dict[str, Any], fmt: str = "json", pretty: bool = True) -> str:
    """Serialize a generated config dict as JSON or YAML."""
    if fmt == "yaml":
        return yaml.dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)
    return json.dumps(data, indent=2 if pretty else None) + "\n"


def load_setup(path: Path | str) -> SetupConfig:
    """Convenience function to load a setup from a file.

    Args:
        path: Path to the YAML or JSON file

    Returns:
        Loaded SetupConfig
    """
    loader = ConfigLoader()
    return loader.load_file(path)
