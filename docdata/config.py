"""Publish configuration — output locations and normalization settings.

Settings come from an optional YAML file, either as a top-level mapping or
nested under a ``docdata:`` key:

    docdata:
      data_path: ../data/data.js
      names_path: ../data/names.json
      package_marker: packages/
"""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from docdata.errors import ConfigError
from docdata.records.normalizer import DEFAULT_PACKAGE_MARKER

DEFAULT_REGENERATE_COMMAND = "scripts/admin/jsdoc/jsdoc.sh"


class PublishConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    data_path: str = "../data/data.js"
    names_path: str = "../data/names.json"
    package_marker: str = DEFAULT_PACKAGE_MARKER
    regenerate_command: str = DEFAULT_REGENERATE_COMMAND
    include_private: bool = False


def load_config(path: str | Path | None = None, **overrides) -> PublishConfig:
    """Build a PublishConfig from an optional YAML file plus overrides.

    Overrides whose value is None are ignored, so unset CLI options leave the
    file (or default) value in place.
    """
    values: dict = {}

    if path is not None:
        path = Path(path)
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except OSError as e:
            raise ConfigError(f"Cannot read config {path}: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigError(f"Config {path} is not valid YAML: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Config {path} must be a mapping")
        if isinstance(data.get("docdata"), dict):
            data = data["docdata"]
        values.update(data)

    values.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return PublishConfig(**values)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
