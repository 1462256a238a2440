from __future__ import annotations

from typing import Dict, List, Optional, Tuple

import pytest

from push_manifest.graph.loader import parse_bundle_graph
from push_manifest.resolve.resolver import ResolvedModule
from push_manifest.schemas.bundle import BundleGraph

SRC = "/app/src"


class FakeResolver:
    """Resolver backed by a specifier to module mapping."""

    def __init__(self, mapping: Dict[str, Optional[ResolvedModule]]) -> None:
        self.mapping = mapping
        self.calls: List[Tuple[str, str]] = []

    async def resolve(self, specifier: str, importer: str) -> Optional[ResolvedModule]:
        self.calls.append((specifier, importer))
        return self.mapping.get(specifier)


def chunk(
    *,
    imports: Optional[List[str]] = None,
    dynamic_imports: Optional[List[str]] = None,
    facade: Optional[str] = None,
    entry: bool = False,
    dynamic_entry: bool = False,
) -> dict:
    return {
        "type": "chunk",
        "imports": imports or [],
        "dynamicImports": dynamic_imports or [],
        "facadeModuleId": facade,
        "isEntry": entry,
        "isDynamicEntry": dynamic_entry,
    }


def asset() -> dict:
    return {"type": "asset"}


@pytest.fixture
def app_graph() -> BundleGraph:
    """Two routes sharing vendor code, a global module and a lazy widget."""

    return parse_bundle_graph(
        {
            "main.js": chunk(imports=["vendor.js"], facade=f"{SRC}/main.ts", entry=True),
            "home.js": chunk(imports=["vendor.js"], facade=f"{SRC}/home.tsx", dynamic_entry=True),
            "about.js": chunk(
                imports=["vendor.js", "shared.js"],
                dynamic_imports=["widget.js"],
                facade=f"{SRC}/about.tsx",
                dynamic_entry=True,
            ),
            "widget.js": chunk(imports=["shared.js"], facade=f"{SRC}/widget.tsx", dynamic_entry=True),
            "vendor.js": chunk(),
            "shared.js": chunk(imports=["logo.svg"]),
            "logo.svg": asset(),
        }
    )


@pytest.fixture
def app_resolver() -> FakeResolver:
    return FakeResolver(
        {
            "src/main.ts": ResolvedModule(id=f"{SRC}/main.ts"),
            "src/home.tsx": ResolvedModule(id=f"{SRC}/home.tsx"),
            "src/about.tsx": ResolvedModule(id=f"{SRC}/about.tsx"),
            "src/widget.tsx": ResolvedModule(id=f"{SRC}/widget.tsx"),
            "src/orphan.tsx": ResolvedModule(id=f"{SRC}/orphan.tsx"),
            "react": ResolvedModule(id="react", external=True),
        }
    )
