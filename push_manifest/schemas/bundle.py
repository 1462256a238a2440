"""Pydantic models describing bundler output."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Dict, Iterator, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class PushMode(str, Enum):
    """Which chunks count as route targets and which edges closures follow."""

    ALL_ENTRIES = "all-entries"
    DYNAMIC_ENTRIES_ONLY = "dynamic-entries-only"

    @property
    def follow_dynamic(self) -> bool:
        return self is PushMode.DYNAMIC_ENTRIES_ONLY


class _OutputModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


class Asset(_OutputModel):
    type: Literal["asset"] = "asset"
    file_name: str


class Chunk(_OutputModel):
    type: Literal["chunk"] = "chunk"
    file_name: str
    imports: List[str] = Field(default_factory=list)
    dynamic_imports: List[str] = Field(default_factory=list)
    facade_module_id: Optional[str] = None
    is_entry: bool = False
    is_dynamic_entry: bool = False

    def edges(self, *, follow_dynamic: bool = False) -> List[str]:
        """Return import edges, static first."""

        if follow_dynamic:
            return [*self.imports, *self.dynamic_imports]
        return list(self.imports)

    def is_route_target(self, mode: PushMode) -> bool:
        if mode is PushMode.DYNAMIC_ENTRIES_ONLY:
            return self.is_dynamic_entry
        return self.is_entry or self.is_dynamic_entry


OutputNode = Annotated[Union[Chunk, Asset], Field(discriminator="type")]


class BundleGraph(BaseModel):
    """Output identifier to node mapping for one build."""

    outputs: Dict[str, OutputNode] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)

    def __contains__(self, output_id: object) -> bool:
        return output_id in self.outputs

    def get(self, output_id: str) -> Optional[Union[Chunk, Asset]]:
        return self.outputs.get(output_id)

    def chunks(self) -> Iterator[tuple[str, Chunk]]:
        for output_id, node in self.outputs.items():
            if isinstance(node, Chunk):
                yield output_id, node

    def entry_chunks(self, mode: PushMode = PushMode.ALL_ENTRIES) -> List[tuple[str, Chunk]]:
        """Chunks eligible as route targets under ``mode``."""

        return [(output_id, chunk) for output_id, chunk in self.chunks() if chunk.is_route_target(mode)]
