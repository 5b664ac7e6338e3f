"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, loadtok.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from loadtok.domain.stream import DELIMITER


class DecodeConfig(BaseModel):
    """[decode] section."""

    model_config = {"frozen": True}

    delimiter: str = DELIMITER

    @field_validator("delimiter")
    @classmethod
    def _non_empty(cls, value: str) -> str:
        if not value:
            msg = "delimiter must not be empty"
            raise ValueError(msg)
        return value


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True
    local_dir: str = ".loadtok/plugins"


class LoadtokConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    decode: DecodeConfig = Field(default_factory=DecodeConfig)
    plugins: PluginsConfig = Field(default_factory=PluginsConfig)
