"""Persist manifest text into the build output directory."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from ..errors import ConfigurationError
from ..schemas.config import DEFAULT_MANIFEST_NAME

logger = logging.getLogger(__name__)

__all__ = ["DEFAULT_MANIFEST_NAME", "require_output_dir", "write_manifest"]


def require_output_dir(output_dir: Optional[Path]) -> Path:
    if output_dir is None or not str(output_dir):
        raise ConfigurationError("Push manifest generation requires an output directory")
    return Path(output_dir)


def write_manifest(
    text: str,
    output_dir: Optional[Path],
    *,
    file_name: str = DEFAULT_MANIFEST_NAME,
) -> Path:
    """Write ``text`` to ``output_dir/file_name`` and return the path.

    The text is encoded before the file is opened, so text that is not valid
    UTF-8 (a lone surrogate, for instance) raises without leaving a partial or
    empty manifest behind.
    """

    path = require_output_dir(output_dir) / file_name
    data = text.encode("utf-8")
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    logger.info("Wrote push manifest to %s", path)
    return path
