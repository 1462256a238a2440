"""Module resolution mirroring the bundler's rules for local sources."""

from __future__ import annotations

import asyncio
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Protocol, Sequence

from ..schemas.config import DEFAULT_EXTENSIONS

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ResolvedModule:
    """Canonical identifier of a resolved specifier."""

    id: str
    external: bool = False


class ModuleResolver(Protocol):
    async def resolve(self, specifier: str, importer: str) -> Optional[ResolvedModule]:  # pragma: no cover - interface
        ...


class FileSystemResolver:
    """Resolve relative, absolute and aliased specifiers against the file system.

    Extensionless specifiers try each extension in order, then ``index.<ext>``
    inside a directory. Aliases follow the tsconfig ``paths`` shape
    (``{"@/*": ["src/*"]}``) with targets relative to ``root``. Bare specifiers
    that match no alias are reported as external, the way the bundler treats
    packages it does not inline.
    """

    def __init__(
        self,
        root: Path,
        *,
        extensions: Sequence[str] = DEFAULT_EXTENSIONS,
        aliases: Optional[Mapping[str, Sequence[str]]] = None,
    ) -> None:
        self.root = Path(root).resolve()
        self.extensions = tuple(extensions)
        self.aliases: Dict[str, List[str]] = {key: list(value) for key, value in (aliases or {}).items()}

    async def resolve(self, specifier: str, importer: str) -> Optional[ResolvedModule]:
        return await asyncio.to_thread(self.resolve_sync, specifier, importer)

    def resolve_sync(self, specifier: str, importer: str) -> Optional[ResolvedModule]:
        if specifier.startswith(("./", "../")) or specifier in {".", ".."} or os.path.isabs(specifier):
            base = self._importer_dir(importer)
            resolved = self._resolve_candidates([str(base / specifier)])
        else:
            candidates = self._alias_candidates(specifier)
            if not candidates:
                logger.debug("Treating bare specifier %s as external", specifier)
                return ResolvedModule(id=specifier, external=True)
            resolved = self._resolve_candidates(candidates)

        if resolved is None:
            logger.debug("Could not resolve %s from %s", specifier, importer)
            return None
        return ResolvedModule(id=resolved.as_posix())

    def _importer_dir(self, importer: str) -> Path:
        path = Path(importer)
        if not path.is_absolute():
            path = self.root / path
        return path if path.is_dir() else path.parent

    def _alias_candidates(self, specifier: str) -> List[str]:
        candidates: List[str] = []
        for pattern, targets in self.aliases.items():
            if "*" in pattern:
                prefix, suffix = pattern.split("*", 1)
                if not (specifier.startswith(prefix) and specifier.endswith(suffix)):
                    continue
                token = specifier[len(prefix) : len(specifier) - len(suffix)]
                candidates.extend(str(self.root / target.replace("*", token)) for target in targets)
            elif specifier == pattern:
                candidates.extend(str(self.root / target) for target in targets)
        return candidates

    def _resolve_candidates(self, candidates: Sequence[str]) -> Optional[Path]:
        for raw in candidates:
            target = Path(os.path.normpath(raw))
            if target.is_file():
                return target.resolve()
            for ext in self.extensions:
                path = target.with_name(target.name + ext)
                if path.is_file():
                    return path.resolve()
            if target.is_dir():
                for ext in self.extensions:
                    path = target / f"index{ext}"
                    if path.is_file():
                        return path.resolve()
        return None
