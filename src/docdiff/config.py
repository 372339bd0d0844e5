"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    app_name:      str  = "docdiff"
    db_url:        str  = "sqlite:///docdiff.db"
    context_lines: int  = Field(default=3,  ge=0,  description="Unchanged lines kept around each change")
    view:          str  = Field(default="unified", pattern="^(unified|split|html)$", description="unified, split, or html")
    width:         int  = Field(default=60, ge=20, description="Column width of the side-by-side view")
    color:         bool = Field(default=False, description="ANSI colors in terminal views")
    max_versions:  int  = Field(default=10, ge=0,  description="Max stored versions per doc; 0 disables pruning")
    log_level:     str  = Field(default="WARNING", description="Root logging level name")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then DOCDIFF_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"DOCDIFF_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
