"""Transitive chunk dependency closures over a bundle graph."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Tuple

from ..errors import MissingChunkError
from ..schemas.bundle import Asset, BundleGraph, Chunk

logger = logging.getLogger(__name__)


def chunk_closure(
    graph: BundleGraph,
    start_id: str,
    *,
    follow_dynamic: bool = False,
) -> Tuple[str, ...]:
    """Return ``start_id`` and every chunk reachable from it.

    Identifiers come back in depth-first pre-order, each exactly once. Import
    edges pointing at assets are skipped. An edge to an identifier that is not
    in the graph raises :class:`MissingChunkError`.
    """

    start = graph.get(start_id)
    if not isinstance(start, Chunk):
        raise MissingChunkError(start_id)

    visited: Dict[str, None] = {}
    stack: List[Tuple[str, Optional[str]]] = [(start_id, None)]
    while stack:
        output_id, importer = stack.pop()
        if output_id in visited:
            continue
        node = graph.get(output_id)
        if node is None:
            raise MissingChunkError(output_id, referenced_by=importer)
        if isinstance(node, Asset):
            continue
        visited[output_id] = None
        edges = node.edges(follow_dynamic=follow_dynamic)
        # Reversed so the first edge is expanded first.
        for dep_id in reversed(edges):
            if dep_id not in visited:
                stack.append((dep_id, output_id))

    logger.debug("Closure of %s: %d chunk(s)", start_id, len(visited))
    return tuple(visited)


def union_closures(
    graph: BundleGraph,
    start_ids: Iterable[str],
    *,
    follow_dynamic: bool = False,
) -> Tuple[str, ...]:
    """Merge the closures of several chunks, keeping first-seen order."""

    merged: Dict[str, None] = {}
    for start_id in start_ids:
        for chunk_id in chunk_closure(graph, start_id, follow_dynamic=follow_dynamic):
            merged.setdefault(chunk_id, None)
    return tuple(merged)
