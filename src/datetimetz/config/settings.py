from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from datetimetz.utils.load import load_yaml

CONFIG_FILENAME = "datetimetz.yaml"


class ResolverConfig(BaseModel):
    name: str = Field(default="zoneinfo", description="ENTRY POINT IN datetimetz.resolvers")
    options: dict[str, Any] = Field(default_factory=dict)

    @field_validator("name", mode="before")
    @classmethod
    def _normalize_name(cls, value):
        if value is None:
            return "zoneinfo"
        text = str(value).strip().lower()
        if not text:
            raise ValueError("resolver.name must not be empty")
        return text

    @field_validator("options", mode="before")
    @classmethod
    def _normalize_options(cls, value):
        return {} if value is None else value


class CodecConfig(BaseModel):
    resolver: ResolverConfig = Field(default_factory=ResolverConfig)
    log_level: Optional[str] = Field(default=None, description="DATETIMETZ LOGGER LEVEL")
    observe_truncation: bool = False

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value):
        if value is None:
            return None
        if isinstance(value, int) and not isinstance(value, bool):
            value = logging.getLevelName(value)
        text = str(value).strip().upper()
        if not text:
            return None
        if text not in logging._nameToLevel:
            raise ValueError(f"log_level must be a logging level name, got {value!r}")
        return text


def load_codec_config_file(path: Path) -> CodecConfig:
    data = load_yaml(path)
    # Allow keys set to null to fall back to defaults
    for key in [k for k, v in data.items() if v is None]:
        data.pop(key)
    return CodecConfig.model_validate(data)


def load_codec_config(start_dir: Optional[Path] = None) -> CodecConfig:
    """Search from start_dir upward for datetimetz.yaml; defaults when none is found."""
    directory = (start_dir or Path.cwd()).resolve()
    for path in [directory, *directory.parents]:
        candidate = path / CONFIG_FILENAME
        if candidate.is_file():
            return load_codec_config_file(candidate)
    return CodecConfig()
