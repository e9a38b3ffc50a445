"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, the config file only contains
overrides. A store laid out the way ``pass`` creates it needs no config.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class StoreConfig(BaseModel):
    """[store] section."""

    model_config = {"frozen": True}

    extension: str = ".gpg"
    min_match: int = Field(default=2, ge=1)
    queue_size: int = Field(default=0, ge=0)
