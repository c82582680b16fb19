"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, clientbook.toml only contains
overrides. An empty file is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    color: bool = True
    width: int = Field(default=120, ge=40)

