"""Formatting helpers for header manifest lines."""

from __future__ import annotations

from typing import Optional


def print_header(key: str, value: str) -> str:
    return f"{key}: {value}"


def print_link(
    path: str,
    rel: str,
    *,
    as_: Optional[str] = None,
    cross_origin: bool = False,
) -> str:
    """Format a ``Link`` header, omitting ``as`` and ``crossorigin`` when unset."""

    parts = [f"<{path}>", f"rel={rel}"]
    if as_:
        parts.append(f"as={as_}")
    if cross_origin:
        parts.append("crossorigin")
    return print_header("Link", "; ".join(parts))


def print_push(path: str, as_: str, *, cross_origin: bool = False) -> str:
    return print_link(path, "preload", as_=as_, cross_origin=cross_origin)


def print_chunk_push(file_name: str, *, public_path: str = "/") -> str:
    """Preload header for a script chunk served cross-origin."""

    prefix = public_path if public_path.endswith("/") else f"{public_path}/"
    return print_push(f"{prefix}{file_name.lstrip('/')}", "script", cross_origin=True)
