"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"


class FieldDefaults(BaseModel):
    """Fallback front-matter values, fixed for the duration of one export batch."""
    model_config = {"frozen": True}

    layout:     str = "post"
    categories: str = ""
    tags:       str = ""
    published:  str = "true"


class Settings(BaseModel):
    app_name:           str = "octopub"
    parser_config:      str = Field(default="gfm-like", description="MarkdownIt parser preset name")
    output_dir:         str = Field(default="_posts",   description="Directory for published files")
    output_ext:         str = Field(default="html", pattern="^(html|md|markdown)$", description="Extension of published files")
    headline_levels:    int = Field(default=3, ge=1, description="TOC depth used when a document sets with-toc: true")
    toc_depth:          int = Field(default=0, ge=0, description="TOC depth for documents without with-toc; 0 = no TOC")
    default_layout:     str = Field(default="post", description="Front-matter layout when a document sets none")
    default_categories: str = Field(default="",     description="Space-separated categories when a document sets none")
    default_tags:       str = Field(default="",     description="Space-separated tags when a document sets none")
    default_published:  str = Field(default="true", description="Published state when a document sets none")

    def field_defaults(self) -> FieldDefaults:
        return FieldDefaults(
            layout=self.default_layout,
            categories=self.default_categories,
            tags=self.default_tags,
            published=self.default_published,
        )


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then OCTOPUB_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"OCTOPUB_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
