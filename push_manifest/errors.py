"""Error taxonomy for push manifest generation."""

from __future__ import annotations

from typing import Optional


class PushManifestError(RuntimeError):
    """Base class for build-breaking push manifest failures."""


class ConfigurationError(PushManifestError):
    """Raised when the generator is configured inconsistently."""


class InvalidRouteListError(PushManifestError):
    """Raised when a route source does not produce a list of routes."""

    def __init__(self, value: object, message: Optional[str] = None) -> None:
        self.value = value
        super().__init__(message or f"Route source must produce a list (got {type(value).__name__})")


class UnresolvableRouteError(PushManifestError):
    """Raised when a route's module path cannot be resolved."""

    def __init__(self, path: str, importer: Optional[str] = None) -> None:
        self.path = path
        self.importer = importer
        suffix = f" from {importer}" if importer else ""
        super().__init__(f"Could not resolve {path}{suffix}")


class ExternalRouteError(PushManifestError):
    """Raised when a route resolves to an external module."""

    def __init__(self, path: str, module_id: str) -> None:
        self.path = path
        self.module_id = module_id
        super().__init__(f"Routes must not be external imports for {path} (resolved to {module_id})")


class MissingChunkError(PushManifestError):
    """Raised when a module or dependency edge has no matching output chunk."""

    def __init__(self, chunk_id: str, *, referenced_by: Optional[str] = None) -> None:
        self.chunk_id = chunk_id
        self.referenced_by = referenced_by
        if referenced_by:
            message = f"Could not find chunk {chunk_id} imported by {referenced_by}"
        else:
            message = f"Could not find chunk for {chunk_id}"
        super().__init__(message)


class DuplicateChunkError(ConfigurationError):
    """Raised when several entry chunks share one facade module."""

    def __init__(self, module_id: str, chunk_ids: list[str]) -> None:
        self.module_id = module_id
        self.chunk_ids = chunk_ids
        super().__init__(
            f"Multiple chunks share facade module {module_id}: {', '.join(chunk_ids)}"
        )


class ParseError(PushManifestError):
    """Raised when a route declaration file cannot be parsed."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Failed to parse routes from {source}: {reason}")
