from __future__ import annotations

import pytest

from push_manifest.errors import MissingChunkError
from push_manifest.graph.closure import chunk_closure, union_closures
from push_manifest.graph.loader import parse_bundle_graph
from push_manifest.schemas.bundle import BundleGraph

from .conftest import asset, chunk


def _reachable(graph: BundleGraph, start: str) -> set[str]:
    seen = {start}
    frontier = [start]
    while frontier:
        node = graph.outputs[frontier.pop()]
        for dep in getattr(node, "imports", []):
            if dep not in seen and graph.outputs[dep].type == "chunk":
                seen.add(dep)
                frontier.append(dep)
    return seen


def test_closure_follows_static_imports_and_skips_assets(app_graph: BundleGraph) -> None:
    assert chunk_closure(app_graph, "about.js") == ("about.js", "vendor.js", "shared.js")


def test_closure_with_dynamic_edges(app_graph: BundleGraph) -> None:
    assert chunk_closure(app_graph, "about.js", follow_dynamic=True) == (
        "about.js",
        "vendor.js",
        "shared.js",
        "widget.js",
    )


def test_closure_is_depth_first_preorder() -> None:
    graph = parse_bundle_graph(
        {
            "a.js": chunk(imports=["b.js", "c.js"], entry=True),
            "b.js": chunk(imports=["d.js"]),
            "c.js": chunk(imports=["d.js"]),
            "d.js": chunk(),
        }
    )
    assert chunk_closure(graph, "a.js") == ("a.js", "b.js", "d.js", "c.js")


def test_closure_terminates_on_cycles() -> None:
    graph = parse_bundle_graph(
        {
            "a.js": chunk(imports=["b.js"], entry=True),
            "b.js": chunk(imports=["c.js"]),
            "c.js": chunk(imports=["a.js", "d.js"]),
            "d.js": chunk(imports=["d.js"]),
        }
    )
    result = chunk_closure(graph, "a.js")
    assert result == ("a.js", "b.js", "c.js", "d.js")
    assert set(result) == _reachable(graph, "a.js")


def test_closure_matches_reachability_and_is_repeatable(app_graph: BundleGraph) -> None:
    for start, _ in app_graph.chunks():
        first = chunk_closure(app_graph, start)
        assert set(first) == _reachable(app_graph, start)
        assert chunk_closure(app_graph, start) == first
        assert first[0] == start


def test_closure_rejects_dangling_edge() -> None:
    graph = BundleGraph.model_validate({"outputs": {"a.js": {**chunk(imports=["gone.js"]), "fileName": "a.js"}}})
    with pytest.raises(MissingChunkError) as excinfo:
        chunk_closure(graph, "a.js")
    assert excinfo.value.chunk_id == "gone.js"
    assert excinfo.value.referenced_by == "a.js"


def test_closure_requires_chunk_start() -> None:
    graph = parse_bundle_graph({"logo.svg": asset()})
    with pytest.raises(MissingChunkError):
        chunk_closure(graph, "logo.svg")
    with pytest.raises(MissingChunkError):
        chunk_closure(graph, "nope.js")


def test_union_closures_keeps_first_seen_order(app_graph: BundleGraph) -> None:
    assert union_closures(app_graph, ["home.js", "about.js"]) == (
        "home.js",
        "vendor.js",
        "about.js",
        "shared.js",
    )
