"""Route declarations consumed by the manifest builder."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Route(BaseModel):
    route: str = Field(..., description="Path requested by clients.")
    file_path: str = Field(
        ...,
        alias="filePath",
        description="Source module whose compiled chunk must be pushed.",
    )

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")
