from __future__ import annotations

import asyncio

import pytest

from push_manifest.errors import (
    ConfigurationError,
    DuplicateChunkError,
    ExternalRouteError,
    MissingChunkError,
    UnresolvableRouteError,
)
from push_manifest.graph.loader import parse_bundle_graph
from push_manifest.resolve.entries import resolve_entry_chunk
from push_manifest.resolve.resolver import ResolvedModule
from push_manifest.schemas.bundle import BundleGraph, PushMode

from .conftest import SRC, FakeResolver, chunk


def _resolve(file_path: str, resolver: FakeResolver, graph: BundleGraph, mode: PushMode = PushMode.ALL_ENTRIES) -> str:
    return asyncio.run(resolve_entry_chunk(file_path, resolver, graph, resolve_from="src/routes.ts", mode=mode))


def test_resolves_entry_chunk_by_facade(app_graph: BundleGraph, app_resolver: FakeResolver) -> None:
    assert _resolve("src/about.tsx", app_resolver, app_graph) == "about.js"
    assert app_resolver.calls == [("src/about.tsx", "src/routes.ts")]


def test_mode_controls_eligible_chunks(app_graph: BundleGraph, app_resolver: FakeResolver) -> None:
    assert _resolve("src/main.ts", app_resolver, app_graph) == "main.js"
    with pytest.raises(MissingChunkError):
        _resolve("src/main.ts", app_resolver, app_graph, PushMode.DYNAMIC_ENTRIES_ONLY)


def test_unresolvable_route_names_path(app_graph: BundleGraph, app_resolver: FakeResolver) -> None:
    with pytest.raises(UnresolvableRouteError) as excinfo:
        _resolve("src/typo.tsx", app_resolver, app_graph)
    assert excinfo.value.path == "src/typo.tsx"
    assert "src/typo.tsx" in str(excinfo.value)


def test_external_route_rejected(app_graph: BundleGraph, app_resolver: FakeResolver) -> None:
    with pytest.raises(ExternalRouteError) as excinfo:
        _resolve("react", app_resolver, app_graph)
    assert excinfo.value.module_id == "react"


def test_module_without_chunk(app_graph: BundleGraph, app_resolver: FakeResolver) -> None:
    with pytest.raises(MissingChunkError) as excinfo:
        _resolve("src/orphan.tsx", app_resolver, app_graph)
    assert excinfo.value.chunk_id == f"{SRC}/orphan.tsx"


def test_shared_facade_is_configuration_error() -> None:
    graph = parse_bundle_graph(
        {
            "a.js": chunk(facade=f"{SRC}/page.tsx", entry=True),
            "b.js": chunk(facade=f"{SRC}/page.tsx", dynamic_entry=True),
        }
    )
    resolver = FakeResolver({"src/page.tsx": ResolvedModule(id=f"{SRC}/page.tsx")})
    with pytest.raises(DuplicateChunkError) as excinfo:
        _resolve("src/page.tsx", resolver, graph)
    assert isinstance(excinfo.value, ConfigurationError)
    assert excinfo.value.chunk_ids == ["a.js", "b.js"]
