"""Load bundler output graphs from JSON stats files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Mapping, Sequence, Union

from pydantic import ValidationError

from ..errors import ConfigurationError, MissingChunkError
from ..schemas.bundle import BundleGraph


def load_bundle_graph(path: Path) -> BundleGraph:
    """Load and validate a bundle graph written by the bundler."""

    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise ConfigurationError(f"Bundle stats file not found: {path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Bundle stats file is not valid JSON: {path}: {exc}") from exc
    return parse_bundle_graph(payload)


def parse_bundle_graph(payload: Union[Mapping[str, Any], Sequence[Mapping[str, Any]]]) -> BundleGraph:
    """Build a graph from ``{id: node}`` or a list of nodes keyed by ``fileName``."""

    outputs: Dict[str, Dict[str, Any]] = {}
    if isinstance(payload, Mapping):
        items = list(payload.items())
    elif isinstance(payload, Sequence) and not isinstance(payload, (str, bytes)):
        items = []
        for node in payload:
            if not isinstance(node, Mapping) or "fileName" not in node:
                raise ConfigurationError("Bundle output list entries must be objects with a fileName")
            items.append((str(node["fileName"]), node))
    else:
        raise ConfigurationError(f"Unsupported bundle stats payload: {type(payload).__name__}")

    for output_id, node in items:
        if not isinstance(node, Mapping):
            raise ConfigurationError(f"Bundle output {output_id} must be an object")
        outputs[output_id] = _normalize_node(output_id, node)

    try:
        graph = BundleGraph.model_validate({"outputs": outputs})
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid bundle graph: {exc}") from exc
    check_edges(graph)
    return graph


def check_edges(graph: BundleGraph) -> None:
    """Fail fast on import edges that point outside the graph."""

    for output_id, chunk in graph.chunks():
        for dep_id in chunk.edges(follow_dynamic=True):
            if dep_id not in graph:
                raise MissingChunkError(dep_id, referenced_by=output_id)


def _normalize_node(output_id: str, node: Mapping[str, Any]) -> Dict[str, Any]:
    normalized = dict(node)
    normalized.setdefault("fileName", output_id)
    if "type" not in normalized:
        normalized["type"] = "asset" if normalized.pop("isAsset", False) else "chunk"
    else:
        normalized.pop("isAsset", None)
    return normalized
