"""Map route source paths to bundle entry chunks."""

from __future__ import annotations

import logging

from ..errors import DuplicateChunkError, ExternalRouteError, MissingChunkError, UnresolvableRouteError
from ..schemas.bundle import BundleGraph, PushMode
from .resolver import ModuleResolver

logger = logging.getLogger(__name__)


async def resolve_entry_chunk(
    file_path: str,
    resolver: ModuleResolver,
    graph: BundleGraph,
    *,
    resolve_from: str,
    mode: PushMode = PushMode.ALL_ENTRIES,
) -> str:
    """Return the output id of the entry chunk compiled from ``file_path``."""

    resolved = await resolver.resolve(file_path, resolve_from)
    if resolved is None:
        raise UnresolvableRouteError(file_path, resolve_from)
    if resolved.external:
        raise ExternalRouteError(file_path, resolved.id)

    matches = [
        output_id
        for output_id, chunk in graph.entry_chunks(mode)
        if chunk.facade_module_id == resolved.id
    ]
    if not matches:
        raise MissingChunkError(resolved.id)
    if len(matches) > 1:
        raise DuplicateChunkError(resolved.id, matches)

    logger.debug("Resolved %s to chunk %s", file_path, matches[0])
    return matches[0]
