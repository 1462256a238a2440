"""Configuration file loading."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml
from pydantic import ValidationError

from .errors import ConfigurationError
from .schemas.config import PushConfig

logger = logging.getLogger(__name__)

_PATH_KEYS = ("resolve_from", "output_dir", "routes_file", "base_url")


def load_config(path: Path, overrides: Optional[Mapping[str, Any]] = None) -> PushConfig:
    """Load a YAML config file; relative paths resolve against its directory."""

    try:
        loaded = yaml.safe_load(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise ConfigurationError(f"Config file not found: {path}") from exc
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse config {path}: {exc}") from exc

    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        raise ConfigurationError(f"Config {path} must be a mapping (got {type(loaded).__name__})")

    payload = dict(loaded)
    payload.update({key: value for key, value in (overrides or {}).items() if value is not None})
    return build_config(payload, base_dir=path.parent)


def build_config(payload: Mapping[str, Any], *, base_dir: Optional[Path] = None) -> PushConfig:
    data = dict(payload)
    if base_dir is not None:
        for key in _PATH_KEYS:
            value = data.get(key)
            if value is None:
                continue
            candidate = Path(value)
            if not candidate.is_absolute():
                data[key] = (base_dir / candidate).resolve()
    try:
        config = PushConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid push manifest configuration: {exc}") from exc
    logger.debug("Loaded push manifest config (mode=%s)", config.push_mode.value)
    return config
