"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "BLOGINDEX_"


class Settings(BaseModel):
    posts_dir:      str = Field(default="site/src/jsMain/resources/markdown/blog", description="Markdown posts root")
    route_prefix:   str = Field(default="/blog", description="Route prepended to every derived post route")
    default_author: str = Field(default="Preetam", description="Author used when front matter omits one")
    output_dir:     str = Field(default="build/generated", description="Root directory for generated files")
    package:        str = Field(default="aryapreetam.pages.blog", pattern=r"^[A-Za-z_]\w*(\.[A-Za-z_]\w*)*$",
                                description="Dotted package the generated module lives in")
    module_name:    str = Field(default="generated_blog_data", pattern=r"^[A-Za-z_]\w*$",
                                description="Generated module name (without .py)")
    log_level:      str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR)$")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then BLOGINDEX_<FIELD> env vars, then non-None CLI overrides."""
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
    try:
        return Settings(**data)
    except ValidationError as e:
        raise ValueError(f"Invalid settings: {e}") from e
