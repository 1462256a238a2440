from __future__ import annotations

import asyncio
from pathlib import Path

from push_manifest.resolve.resolver import FileSystemResolver, ResolvedModule


def _write(path: Path, content: str = "export default 1\n") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def _project(tmp_path: Path) -> Path:
    _write(tmp_path / "src" / "routes.ts")
    _write(tmp_path / "src" / "pages" / "home.tsx")
    _write(tmp_path / "src" / "pages" / "about" / "index.ts")
    _write(tmp_path / "src" / "lib" / "analytics.js")
    return tmp_path


def test_relative_specifier_tries_extensions(tmp_path: Path) -> None:
    root = _project(tmp_path)
    resolver = FileSystemResolver(root)
    importer = str(root / "src" / "routes.ts")

    resolved = asyncio.run(resolver.resolve("./pages/home", importer))

    assert resolved == ResolvedModule(id=(root / "src" / "pages" / "home.tsx").resolve().as_posix())


def test_directory_index_and_directory_importer(tmp_path: Path) -> None:
    root = _project(tmp_path)
    resolver = FileSystemResolver(root)

    resolved = resolver.resolve_sync("./src/pages/about", str(root))

    assert resolved is not None
    assert resolved.id.endswith("src/pages/about/index.ts")
    assert not resolved.external


def test_aliases_expand_against_root(tmp_path: Path) -> None:
    root = _project(tmp_path)
    resolver = FileSystemResolver(root, aliases={"@/*": ["src/*"], "analytics": ["src/lib/analytics"]})

    page = resolver.resolve_sync("@/pages/home", "src/routes.ts")
    analytics = resolver.resolve_sync("analytics", "src/routes.ts")

    assert page is not None and page.id.endswith("src/pages/home.tsx")
    assert analytics is not None and analytics.id.endswith("src/lib/analytics.js")


def test_bare_specifier_is_external(tmp_path: Path) -> None:
    resolver = FileSystemResolver(_project(tmp_path))
    assert resolver.resolve_sync("react", "src/routes.ts") == ResolvedModule(id="react", external=True)


def test_missing_relative_module_is_unresolved(tmp_path: Path) -> None:
    root = _project(tmp_path)
    resolver = FileSystemResolver(root, extensions=(".js",))

    assert resolver.resolve_sync("./pages/missing", "src/routes.ts") is None
    # .tsx is not among the configured extensions
    assert resolver.resolve_sync("./pages/home", "src/routes.ts") is None
