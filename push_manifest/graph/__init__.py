"""Bundle graph loading and traversal."""

from .closure import chunk_closure, union_closures
from .loader import check_edges, load_bundle_graph, parse_bundle_graph

__all__ = [
    "chunk_closure",
    "union_closures",
    "check_edges",
    "load_bundle_graph",
    "parse_bundle_graph",
]
