"""Loader configuration and JSON settings handling."""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

LOGGER = logging.getLogger(__name__)

DEFAULT_RESOURCE_PACKAGE = "stloader.assets"
DEFAULT_ERROR_ICON_PATH = "/icon/error-icon.png"


@dataclass(frozen=True)
class LoaderConfig:
    """Fixed configuration shared by every operation of an accessor.

    ``developer_mode`` turns fatal resource failures into logged ``None``
    results. The base directories default to the current working directory
    and the user's home directory at the time the config is built.
    """

    developer_mode: bool = False
    program_dir: Path = field(default_factory=Path.cwd)
    home_dir: Path = field(default_factory=Path.home)
    resource_package: Any = DEFAULT_RESOURCE_PACKAGE
    fallback_icon: str = DEFAULT_ERROR_ICON_PATH
    encoding: str = "utf-8"
    volume: float = 1.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "developer_mode", bool(self.developer_mode))
        object.__setattr__(self, "program_dir", Path(self.program_dir).expanduser())
        object.__setattr__(self, "home_dir", Path(self.home_dir).expanduser())
        object.__setattr__(self, "volume", max(0.0, min(1.0, float(self.volume))))


def load_config(path: Optional[Union[str, Path]] = None, **overrides: Any) -> LoaderConfig:
    """Build a :class:`LoaderConfig` from an optional JSON settings file.

    A missing file or a non-object document yields the defaults. Keys
    missing from the file keep their defaults, unknown keys are ignored
    and keyword ``overrides`` win over both.
    """
    settings: Dict[str, Any] = {}
    if path is not None and Path(path).exists():
        with Path(path).open("r", encoding="utf-8") as handle:
            loaded = json.load(handle)
        if isinstance(loaded, dict):
            settings = dict(loaded)
            LOGGER.debug("Loaded loader settings from %s", path)
        else:
            LOGGER.warning("Ignoring loader settings in %s: expected a JSON object", path)
    known = {f.name for f in fields(LoaderConfig)}
    for key in sorted(set(settings) - known):
        LOGGER.warning("Ignoring unknown loader setting %r", key)
        settings.pop(key)
    settings.update({key: value for key, value in overrides.items() if value is not None})
    return LoaderConfig(**settings)
