"""Per-route header block assembly."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Sequence, Tuple

from ..graph.closure import chunk_closure, union_closures
from ..headers import print_chunk_push
from ..resolve.entries import resolve_entry_chunk
from ..resolve.resolver import ModuleResolver
from ..schemas.bundle import BundleGraph, PushMode
from ..schemas.routes import Route

logger = logging.getLogger(__name__)

INDENT = "  "


@dataclass(slots=True)
class ManifestOptions:
    """Inputs shared by every route of one build."""

    resolve_from: str
    mode: PushMode = PushMode.ALL_ENTRIES
    every_route_headers: Sequence[str] = field(default_factory=tuple)
    every_route_modules: Sequence[str] = field(default_factory=tuple)
    public_path: str = "/"


async def build_manifest(
    routes: Sequence[Route],
    graph: BundleGraph,
    resolver: ModuleResolver,
    options: ManifestOptions,
) -> str:
    """Resolve every route and return the manifest text.

    Any route failing to resolve aborts the whole build.
    """

    global_chunks = await _every_route_chunks(graph, resolver, options)
    blocks = await asyncio.gather(
        *(build_route_block(route, graph, resolver, options, global_chunks) for route in routes)
    )
    return render_manifest(blocks)


async def build_route_block(
    route: Route,
    graph: BundleGraph,
    resolver: ModuleResolver,
    options: ManifestOptions,
    global_chunks: Sequence[str] = (),
) -> Tuple[str, List[str]]:
    """Return ``(route, headers)`` with headers deduplicated in insertion order.

    Order is ``every_route_headers``, then the route's own closure, then the
    ``global_chunks`` it does not already contain. Global chunks go last, so a
    route's own chunks always lead its block.
    """

    headers: Dict[str, None] = dict.fromkeys(options.every_route_headers)
    entry_id = await resolve_entry_chunk(
        route.file_path,
        resolver,
        graph,
        resolve_from=options.resolve_from,
        mode=options.mode,
    )
    closure = chunk_closure(graph, entry_id, follow_dynamic=options.mode.follow_dynamic)
    for chunk_id in _ordered_union(closure, global_chunks):
        file_name = graph.outputs[chunk_id].file_name
        headers.setdefault(print_chunk_push(file_name, public_path=options.public_path), None)

    logger.debug("Route %s: %d header(s)", route.route, len(headers))
    return route.route, list(headers)


def render_block(route: str, headers: Iterable[str]) -> str:
    return "\n".join([route, *(f"{INDENT}{header}" for header in headers)])


def render_manifest(blocks: Iterable[Tuple[str, Sequence[str]]]) -> str:
    return "\n\n".join(render_block(route, headers) for route, headers in blocks)


async def _every_route_chunks(
    graph: BundleGraph,
    resolver: ModuleResolver,
    options: ManifestOptions,
) -> Tuple[str, ...]:
    if not options.every_route_modules:
        return ()
    entry_ids = await asyncio.gather(
        *(
            resolve_entry_chunk(
                module,
                resolver,
                graph,
                resolve_from=options.resolve_from,
                mode=options.mode,
            )
            for module in options.every_route_modules
        )
    )
    return union_closures(graph, entry_ids, follow_dynamic=options.mode.follow_dynamic)


def _ordered_union(*groups: Sequence[str]) -> List[str]:
    merged: Dict[str, None] = {}
    for group in groups:
        for item in group:
            merged.setdefault(item, None)
    return list(merged)
