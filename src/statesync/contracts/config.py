"""Configuration contracts."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class ReconcileConfig(BaseModel):
    verbose: bool = False
    dry_run: bool = False
    equality: Literal["structural", "serialized"] = "structural"
    checksum_prefix: int = Field(default=5, ge=1, le=32)
    strict: bool = False

    model_config = {"frozen": True, "extra": "forbid"}
