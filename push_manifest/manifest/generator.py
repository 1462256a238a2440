"""Build hook tying route collection, manifest assembly and output together."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from ..errors import ConfigurationError
from ..resolve.resolver import FileSystemResolver, ModuleResolver
from ..routes.discovery import discover_routes
from ..routes.source import RouteSource, collect_routes
from ..schemas.bundle import BundleGraph
from ..schemas.config import PushConfig
from ..schemas.routes import Route
from .builder import ManifestOptions, build_manifest
from .writer import require_output_dir, write_manifest

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class GenerationResult:
    manifest_path: Path
    text: str
    routes: List[Route] = field(default_factory=list)


class PushManifestGenerator:
    """Generates the header manifest once the bundle graph is known."""

    def __init__(
        self,
        config: PushConfig,
        *,
        resolver: Optional[ModuleResolver] = None,
        routes: Optional[RouteSource] = None,
    ) -> None:
        self.config = config
        self.resolver = resolver or _default_resolver(config)
        self._routes = routes

    async def generate(self, graph: BundleGraph, output_dir: Optional[Path] = None) -> GenerationResult:
        """Build the manifest for ``graph`` and write it to the output directory.

        Nothing is written unless every route resolves.
        """

        target_dir = require_output_dir(output_dir or self.config.output_dir)
        routes = await collect_routes(self._route_source())
        logger.debug("Generating push manifest for %d route(s)", len(routes))

        options = ManifestOptions(
            resolve_from=str(self.config.resolve_from),
            mode=self.config.push_mode,
            every_route_headers=tuple(self.config.every_route_headers),
            every_route_modules=tuple(self.config.every_route_modules),
            public_path=self.config.public_path,
        )
        text = await build_manifest(routes, graph, self.resolver, options)
        path = write_manifest(text, target_dir, file_name=self.config.manifest_name)
        return GenerationResult(manifest_path=path, text=text, routes=routes)

    def _route_source(self) -> RouteSource:
        if self._routes is not None:
            return self._routes
        if self.config.routes is not None:
            return list(self.config.routes)
        if self.config.routes_file is not None:
            routes_file = self.config.routes_file
            return lambda: discover_routes(routes_file)
        raise ConfigurationError("No route source configured (set routes or routes_file)")


def _default_resolver(config: PushConfig) -> FileSystemResolver:
    root = config.base_url
    if root is None:
        resolve_from = Path(config.resolve_from)
        root = resolve_from if resolve_from.is_dir() else resolve_from.parent
    return FileSystemResolver(root, extensions=config.extensions, aliases=config.aliases)
