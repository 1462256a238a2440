"""Manifest assembly and output."""

from .builder import ManifestOptions, build_manifest, build_route_block, render_manifest
from .generator import GenerationResult, PushManifestGenerator
from .writer import DEFAULT_MANIFEST_NAME, write_manifest

__all__ = [
    "DEFAULT_MANIFEST_NAME",
    "GenerationResult",
    "ManifestOptions",
    "PushManifestGenerator",
    "build_manifest",
    "build_route_block",
    "render_manifest",
    "write_manifest",
]
