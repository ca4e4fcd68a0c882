from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class StackSettings(BaseModel):
    capture: bool = True
    limit: int | None = Field(default=None, ge=1)

    model_config = ConfigDict(extra="forbid")


class ReportSettings(BaseModel):
    max_repr: int = Field(default=160, ge=8)

    model_config = ConfigDict(extra="forbid")


class AssertSettings(BaseModel):
    stack: StackSettings = Field(default_factory=StackSettings)
    report: ReportSettings = Field(default_factory=ReportSettings)

    model_config = ConfigDict(extra="forbid")
