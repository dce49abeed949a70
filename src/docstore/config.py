"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"
CONFIG_ENV = "DOCSTORE_CONFIG"


class Settings(BaseModel):
    app_name:  str = "docstore"
    log_level: str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
                           description="Root logging level for the CLI")
    data_file: str = Field(default="documents.yaml", description="YAML/JSON list of documents to load")


def _read_config_file(path: Path) -> dict[str, Any]:
    """Parse a config file; a relative data_file in it is taken relative to the file itself."""
    try:
        data = yaml.safe_load(path.read_text()) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid {path.name}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Invalid {path.name}: expected a mapping of settings")

    data_file = data.get("data_file")
    if data_file and not Path(data_file).is_absolute():
        data["data_file"] = str(path.parent / data_file)
    return data


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Build Settings from the config file, then DOCSTORE_<FIELD> env vars, then non-None CLI overrides.

    The config file is $DOCSTORE_CONFIG when set (and must then exist), else ./config.yaml if present.
    """
    explicit = os.getenv(CONFIG_ENV)
    path = Path(explicit or CONFIG_FILE)
    data: dict[str, Any] = {}
    if explicit and not path.exists():
        raise ValueError(f"Config file not found: {path}")
    if path.exists():
        data = _read_config_file(path)

    for name in Settings.model_fields:
        if val := os.getenv(f"DOCSTORE_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
