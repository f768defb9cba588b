"""Analysis + output schemas."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class AnalysisConfig(BaseModel):
    target: str = "buck2"
    check_acyclic: bool = True

    model_config = ConfigDict(extra="forbid")


class OutputConfig(BaseModel):
    format: str = Field("text", pattern="^(text|dot)$")
    arrow: str = " -> "

    model_config = ConfigDict(extra="forbid")
