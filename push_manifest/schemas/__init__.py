"""Schema definitions for bundle graphs, routes and configuration."""

from .bundle import Asset, BundleGraph, Chunk, OutputNode, PushMode
from .config import DEFAULT_EXTENSIONS, PushConfig
from .routes import Route

__all__ = [
    "Asset",
    "BundleGraph",
    "Chunk",
    "DEFAULT_EXTENSIONS",
    "OutputNode",
    "PushConfig",
    "PushMode",
    "Route",
]
