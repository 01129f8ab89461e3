"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "WIKIDOC_"
MAPPING_FIELDS = {"emojis", "channels"}


class Settings(BaseModel):
    app_name:     str  = "wikidoc"
    articles_dir: str  = Field(default="wiki/articles", description="Root directory scanned for .md articles")
    output_dir:   str  = Field(default="dist",          description="Directory for exported article JSON")
    freestanding: bool = Field(default=False, description="Skip platform emoji and channel substitution")
    emojis:       dict[str, str] = Field(default_factory=dict, description="Shortcode name -> emoji token")
    channels:     dict[str, str] = Field(default_factory=dict, description="Channel shortcut name -> channel id")
    embed_color:  int  = Field(default=0x337FD5, ge=0, le=0xFFFFFF, description="Embed colour as 0xRRGGBB")


def _env_value(name: str, raw: str) -> Any:
    """Mapping fields are given as YAML flow mappings, e.g. '{tux: "<:tux:1>"}'."""
    if name not in MAPPING_FIELDS:
        return raw
    try:
        return yaml.safe_load(raw) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid {ENV_PREFIX}{name.upper()}: {e}") from e


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then WIKIDOC_<FIELD> env vars, then non-None CLI overrides."""
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
            data[name] = _env_value(name, val)

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
