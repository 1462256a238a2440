"""Command-line entry point for push manifest generation."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
from pathlib import Path
from typing import Mapping, Optional, Sequence

from push_manifest.config import load_config
from push_manifest.errors import PushManifestError
from push_manifest.graph.closure import chunk_closure
from push_manifest.graph.loader import load_bundle_graph
from push_manifest.manifest.generator import PushManifestGenerator
from push_manifest.routes.discovery import discover_routes
from push_manifest.schemas.bundle import PushMode

logger = logging.getLogger(__name__)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING))

    handlers = {
        "build": _handle_build,
        "routes": _handle_routes,
        "closure": _handle_closure,
    }
    handler = handlers.get(args.command)
    if handler is None:
        parser.error(f"Unknown command '{args.command}'")
        return 1

    try:
        return handler(args)
    except PushManifestError as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        _print_json({"error": str(exc), "type": type(exc).__name__})
        return 1


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="push-manifest",
        description="Generate per-route preload header manifests from bundle output.",
    )
    parser.add_argument("--log-level", default="WARNING")
    subparsers = parser.add_subparsers(dest="command", required=True)

    build = subparsers.add_parser("build", help="Write the header manifest for a bundle.")
    build.add_argument("--config", required=True, help="YAML configuration file.")
    build.add_argument("--bundle", required=True, help="Bundle stats JSON written by the bundler.")
    build.add_argument("--output-dir")
    build.add_argument("--push-mode", choices=[mode.value for mode in PushMode])
    build.add_argument("--workspace-root")

    routes = subparsers.add_parser("routes", help="List routes declared in a routing source file.")
    routes.add_argument("--source", required=True)
    routes.add_argument("--workspace-root")

    closure = subparsers.add_parser("closure", help="Print the dependency closure of a chunk.")
    closure.add_argument("--bundle", required=True)
    closure.add_argument("--chunk", required=True, help="Output identifier of the start chunk.")
    closure.add_argument("--follow-dynamic", action="store_true")
    closure.add_argument("--workspace-root")

    return parser


def _handle_build(args: argparse.Namespace) -> int:
    workspace = _resolve_workspace(args.workspace_root)
    config_path = _resolve_path(args.config, workspace)
    overrides = {
        "output_dir": _resolve_path(args.output_dir, workspace) if args.output_dir else None,
        "push_mode": args.push_mode,
    }
    config = load_config(config_path, overrides)
    graph = load_bundle_graph(_resolve_path(args.bundle, workspace))

    generator = PushManifestGenerator(config)
    result = asyncio.run(generator.generate(graph))

    payload = {
        "manifest_path": str(result.manifest_path),
        "push_mode": config.push_mode.value,
        "routes": [route.model_dump(by_alias=True) for route in result.routes],
        "logs": [f"Manifest written to {result.manifest_path}"],
    }
    _print_json(payload)
    return 0


def _handle_routes(args: argparse.Namespace) -> int:
    workspace = _resolve_workspace(args.workspace_root)
    source = _resolve_path(args.source, workspace)
    routes = asyncio.run(discover_routes(source))
    payload = {
        "source": str(source),
        "routes": [route.model_dump(by_alias=True) for route in routes],
    }
    _print_json(payload)
    return 0


def _handle_closure(args: argparse.Namespace) -> int:
    workspace = _resolve_workspace(args.workspace_root)
    graph = load_bundle_graph(_resolve_path(args.bundle, workspace))
    chunk_ids = chunk_closure(graph, args.chunk, follow_dynamic=args.follow_dynamic)
    payload = {
        "chunk": args.chunk,
        "follow_dynamic": args.follow_dynamic,
        "closure": list(chunk_ids),
    }
    _print_json(payload)
    return 0


def _resolve_workspace(value: Optional[str]) -> Path:
    return Path(value).resolve() if value else Path.cwd()


def _resolve_path(value: str, workspace: Path) -> Path:
    path = Path(value)
    if not path.is_absolute():
        path = workspace / path
    return path.resolve()


def _print_json(payload: Mapping[str, object]) -> None:
    print(json.dumps(payload, indent=2, default=str))


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
