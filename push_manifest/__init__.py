"""Per-route preload header manifests for bundled web applications."""

__version__ = "0.1.0"
from .config import build_config, load_config
from .errors import (
    ConfigurationError,
    DuplicateChunkError,
    ExternalRouteError,
    InvalidRouteListError,
    MissingChunkError,
    ParseError,
    PushManifestError,
    UnresolvableRouteError,
)
from .graph import chunk_closure, load_bundle_graph, parse_bundle_graph, union_closures
from .headers import print_chunk_push, print_header, print_link, print_push
from .manifest import GenerationResult, ManifestOptions, PushManifestGenerator, build_manifest, write_manifest
from .resolve import FileSystemResolver, ModuleResolver, ResolvedModule, resolve_entry_chunk
from .routes import collect_routes, discover_routes, extract_routes
from .schemas import Asset, BundleGraph, Chunk, PushConfig, PushMode, Route

__all__ = [
    "__version__",
    "Asset",
    "BundleGraph",
    "Chunk",
    "PushConfig",
    "PushMode",
    "Route",
    "build_config",
    "load_config",
    "ConfigurationError",
    "DuplicateChunkError",
    "ExternalRouteError",
    "InvalidRouteListError",
    "MissingChunkError",
    "ParseError",
    "PushManifestError",
    "UnresolvableRouteError",
    "chunk_closure",
    "union_closures",
    "load_bundle_graph",
    "parse_bundle_graph",
    "print_header",
    "print_link",
    "print_push",
    "print_chunk_push",
    "GenerationResult",
    "ManifestOptions",
    "PushManifestGenerator",
    "build_manifest",
    "write_manifest",
    "FileSystemResolver",
    "ModuleResolver",
    "ResolvedModule",
    "resolve_entry_chunk",
    "collect_routes",
    "discover_routes",
    "extract_routes",
]
