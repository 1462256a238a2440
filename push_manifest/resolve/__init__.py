"""Module and entry chunk resolution."""

from .entries import resolve_entry_chunk
from .resolver import FileSystemResolver, ModuleResolver, ResolvedModule

__all__ = [
    "FileSystemResolver",
    "ModuleResolver",
    "ResolvedModule",
    "resolve_entry_chunk",
]
