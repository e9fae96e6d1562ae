"""Application configuration: settings schema and config.yaml loader"""

import os
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from texsplit.core.split import marker_pattern, wrap_pattern


CONFIG_FILE = "config.yaml"
LIST_FIELDS = {"removed_commands", "marker_prefixes"}


class Settings(BaseModel):
    app_name:     str = "texsplit"
    template_dir: str = Field(default="template",      description="Project template copied by 'create'")
    main_file:    str = Field(default="main.tex",      description="Master document receiving \\input lines")
    sentinel:     str = Field(default="% Main content", description="Line after which article inputs are inserted")
    media_prefix: str = Field(default="word/media/",   description="Archive prefix of embedded media in .docx files")
    removed_commands: list[str] = Field(
        default=["ul", "hl", "pandocbounded"],
        description="Commands deleted together with their braced argument",
    )
    marker_prefixes: list[str] = Field(
        default=["IRSTI", "ҒТАМР", "МРНТИ", "ГРНТИ"],
        description="Classification code prefixes that start a new article",
    )
    keep_preamble: bool = Field(default=False, description="Emit text before the first marker as an article")
    pandoc_cmd:    str = Field(default="pandoc",   description="pandoc executable")
    compiler_cmd:  str = Field(default="tectonic", description="LaTeX compiler executable")
    build_dir:     str = Field(default="build",    description="Compiler output directory, relative to the project")
    debounce_ms:   int = Field(default=500, ge=0,  description="Quiet period before a watch-triggered rebuild")
    poll_ms:       int = Field(default=100, ge=1,  description="Watch polling interval")
    log_level:     str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR)$")

    @field_validator("removed_commands")
    @classmethod
    def _check_commands(cls, v: list[str]) -> list[str]:
        for name in v:
            if not re.fullmatch(r"[A-Za-z@]+", name):
                raise ValueError(f"Invalid command name {name!r}: expected letters only")
        return v

    @field_validator("marker_prefixes")
    @classmethod
    def _check_prefixes(cls, v: list[str]) -> list[str]:
        if not v:
            raise ValueError("marker_prefixes must not be empty")
        try:
            wrap_pattern(v)
            marker_pattern(v)
        except re.error as e:
            raise ValueError(f"Invalid marker_prefixes pattern: {e}") from e
        return v


def _env_value(name: str, raw: str) -> Any:
    """Comma-separated env vars feed list fields; everything else is coerced by pydantic."""
    if name in LIST_FIELDS:
        return [part.strip() for part in raw.split(",") if part.strip()]
    return raw


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then TEXSPLIT_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e

    for name in Settings.model_fields:
        if val := os.getenv(f"TEXSPLIT_{name.upper()}"):
            data[name] = _env_value(name, val)

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
