"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "MDXVIEW_"


class Settings(BaseModel):
    app_name:      str = "mdxview"
    log_level:     str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
                               description="Root log level for CLI runs")
    trace_logging: bool = Field(default=False, description="Prefix log lines with timestamps and logger names")
    log_file:      Optional[str] = Field(default=None, description="Also append log lines to this file")
    output_dir:    Optional[str] = Field(default=None, description="Directory for rendered HTML; stdout when unset")
    output_suffix: str = Field(default=".html", pattern=r"^\.\w+$", description="File suffix for rendered output")
    components:    Optional[str] = Field(default=None, description="Import path 'module:attr' of the component registry")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then MDXVIEW_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"{ENV_PREFIX}{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    if isinstance(data.get("log_level"), str):
        data["log_level"] = data["log_level"].upper()

    try:
        return Settings(**data)
    except ValidationError as e:
        raise ValueError(f"Invalid settings: {e}") from e
