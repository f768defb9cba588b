"""Workspace scan schema."""
from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class ScanConfig(BaseModel):
    folders: List[str] = Field(default_factory=lambda: [".", "app"])
    manifest_name: str = "Cargo.toml"
    # Naive heuristic: left-hand side of any line containing this.
    delimiter: str = "="
    exclude: List[str] = Field(default_factory=lambda: ["superconsole"])
    exclude_suffixes: List[str] = Field(default_factory=lambda: ["_tests"])
    include_prefixes: List[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")
