"""Route list collection and static discovery."""

from .discovery import discover_routes, extract_routes
from .source import RouteSource, collect_routes

__all__ = [
    "RouteSource",
    "collect_routes",
    "discover_routes",
    "extract_routes",
]
