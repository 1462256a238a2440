"""Static route discovery over routing declaration sources.

A route is any dynamic ``import()`` call with a string literal argument whose
nearest enclosing object literal carries a string literal ``path`` property::

    const routes = [
      { path: '/about', component: () => import('./about') },
    ]

yields ``Route(route="/about", file_path="./about")``. Occurrences that do not
match the shape are skipped silently. Routes come back in source order and are
not deduplicated.
"""

from __future__ import annotations

import asyncio
import logging
from functools import lru_cache
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

import tree_sitter_javascript
import tree_sitter_typescript
from tree_sitter import Language, Node, Parser

from ..errors import ParseError
from ..schemas.routes import Route

logger = logging.getLogger(__name__)

_ESCAPES = {"n": "\n", "r": "\r", "t": "\t", "b": "\b", "f": "\f", "v": "\v", "0": "\0"}


@lru_cache(maxsize=None)
def _language(name: str) -> Language:
    if name == "typescript":
        return Language(tree_sitter_typescript.language_typescript())
    if name == "tsx":
        return Language(tree_sitter_typescript.language_tsx())
    if name == "javascript":
        return Language(tree_sitter_javascript.language())
    raise ValueError(f"Unsupported route source language: {name}")


def language_for_path(path: Path) -> str:
    suffix = path.suffix.lower()
    if suffix in {".ts", ".mts", ".cts"}:
        return "typescript"
    if suffix == ".tsx":
        return "tsx"
    return "javascript"


async def discover_routes(source_path: Path) -> List[Route]:
    """Parse ``source_path`` and return the routes it declares."""

    path = Path(source_path)
    return await asyncio.to_thread(_discover_sync, path)


def _discover_sync(path: Path) -> List[Route]:
    try:
        source = path.read_bytes()
    except OSError as exc:
        raise ParseError(str(path), str(exc)) from exc
    routes = extract_routes(source, language_for_path(path), source_name=str(path))
    logger.debug("Discovered %d route(s) in %s", len(routes), path)
    return routes


def extract_routes(source: bytes, language: str = "javascript", *, source_name: str = "<string>") -> List[Route]:
    parser = Parser(_language(language))
    tree = parser.parse(source)
    if tree.root_node.has_error:
        raise ParseError(source_name, _describe_error(tree.root_node))

    routes: List[Route] = []
    for node, ancestors in _walk(tree.root_node):
        if not _is_dynamic_import(node):
            continue
        file_path = _import_argument(node)
        if file_path is None:
            continue
        owner = _nearest_object(ancestors)
        if owner is None:
            continue
        route = _path_property(owner)
        if route is None:
            continue
        routes.append(Route(route=route, file_path=file_path))
    return routes


def _walk(root: Node) -> Iterator[Tuple[Node, List[Node]]]:
    """Pre-order traversal yielding each node with its ancestor path."""

    ancestors: List[Node] = []
    stack: List[Tuple[Node, int]] = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        del ancestors[depth:]
        yield node, ancestors
        ancestors.append(node)
        for child in reversed(node.children):
            stack.append((child, depth + 1))


def _is_dynamic_import(node: Node) -> bool:
    if node.type != "call_expression":
        return False
    callee = node.child_by_field_name("function")
    return callee is not None and callee.type == "import"


def _import_argument(call: Node) -> Optional[str]:
    arguments = call.child_by_field_name("arguments")
    if arguments is None:
        return None
    values = [child for child in arguments.named_children if child.type != "comment"]
    if not values:
        return None
    return _string_value(values[0])


def _nearest_object(ancestors: List[Node]) -> Optional[Node]:
    for ancestor in reversed(ancestors):
        if ancestor.type == "object":
            return ancestor
    return None


def _path_property(obj: Node) -> Optional[str]:
    for prop in obj.named_children:
        if prop.type != "pair":
            continue
        key = prop.child_by_field_name("key")
        if key is None or _key_name(key) != "path":
            continue
        value = prop.child_by_field_name("value")
        return _string_value(value) if value is not None else None
    return None


def _key_name(key: Node) -> Optional[str]:
    if key.type == "property_identifier":
        return _text(key)
    if key.type == "string":
        return _string_value(key)
    return None


def _string_value(node: Node) -> Optional[str]:
    """Value of a plain string literal, ``None`` for anything else."""

    if node.type != "string":
        return None
    parts: List[str] = []
    for child in node.named_children:
        if child.type == "string_fragment":
            parts.append(_text(child))
        elif child.type == "escape_sequence":
            parts.append(_unescape(_text(child)))
    # \uD83D\uDE00 style escapes arrive as two surrogates; pair them up.
    value = "".join(parts).encode("utf-16-le", "surrogatepass")
    return value.decode("utf-16-le", "surrogatepass")


def _unescape(sequence: str) -> str:
    body = sequence[1:]
    if body.startswith("u{") and body.endswith("}"):
        return chr(int(body[2:-1], 16))
    if body[:1] in {"u", "x"} and len(body) > 1:
        return chr(int(body[1:], 16))
    if body in _ESCAPES:
        return _ESCAPES[body]
    if body and all(char in "01234567" for char in body):
        return chr(int(body, 8))
    if body.startswith(("\n", "\r")):
        return ""
    return body


def _text(node: Node) -> str:
    return (node.text or b"").decode("utf-8")


def _describe_error(root: Node) -> str:
    for node, _ in _walk(root):
        if node.type == "ERROR" or node.is_missing:
            row, column = node.start_point
            return f"syntax error at line {row + 1}, column {column + 1}"
    return "syntax error"
