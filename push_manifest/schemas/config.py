"""Pydantic model for push manifest configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .bundle import PushMode
from .routes import Route

DEFAULT_MANIFEST_NAME = "_headers"
DEFAULT_EXTENSIONS = (".ts", ".tsx", ".js", ".jsx", ".mjs", ".cjs")


class PushConfig(BaseModel):
    resolve_from: Path = Field(..., description="Importer path routes are resolved from.")
    output_dir: Optional[Path] = Field(default=None, description="Build output directory.")
    manifest_name: str = DEFAULT_MANIFEST_NAME
    public_path: str = Field(default="/", description="Prefix joined to chunk file names.")
    push_mode: PushMode = PushMode.ALL_ENTRIES
    every_route_headers: List[str] = Field(default_factory=list)
    every_route_modules: List[str] = Field(default_factory=list)
    routes: Optional[List[Route]] = None
    routes_file: Optional[Path] = None
    extensions: List[str] = Field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
    aliases: Dict[str, List[str]] = Field(default_factory=dict)
    base_url: Optional[Path] = Field(default=None, description="Directory alias targets are relative to.")

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def _check_consistency(self) -> "PushConfig":
        if self.routes is not None and self.routes_file is not None:
            raise ValueError("routes and routes_file are mutually exclusive")
        if self.push_mode is PushMode.DYNAMIC_ENTRIES_ONLY and self.every_route_modules:
            raise ValueError("every_route_modules is not supported in dynamic-entries-only mode")
        return self
