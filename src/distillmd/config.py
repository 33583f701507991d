"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "DISTILLMD_"


class Settings(BaseModel):
    app_name:      str = "distillmd"
    db_url:        str = "sqlite:///distillmd.db"
    autosave_debounce_ms: int = Field(default=1000, ge=0, description="Quiet period before an auto-save fires")
    log_level:     str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    output_dir:    str = Field(default="dist", description="Directory for exported documents")
    export_format: str = Field(default="md", pattern="^(md|txt|html|json)$", description="md, txt, html or json")
    parser_config: str = Field(default="commonmark", description="MarkdownIt preset used for HTML rendering")

    @property
    def autosave_debounce(self) -> float:
        """Debounce window in seconds."""
        return self.autosave_debounce_ms / 1000


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then DISTILLMD_<FIELD> env vars, then non-None CLI overrides."""
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
    return Settings(**data)
