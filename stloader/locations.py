"""Resource origins and resolution of logical paths to concrete targets."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from importlib import resources
from pathlib import Path
from typing import Any, List

from .config import LoaderConfig


class Origin(Enum):
    EMBEDDED = "embedded"
    PROGRAM_DIR = "program"
    HOME_DIR = "home"


def split_logical(path: str) -> List[str]:
    """Split a slash-rooted logical path into its non-empty segments."""
    if path is None:
        raise TypeError("resource location is None")
    return [part for part in str(path).replace("\\", "/").split("/") if part and part != "."]


def resource_root(anchor: Any) -> Any:
    """Return a Traversable for a package name, or the anchor itself."""
    if isinstance(anchor, str):
        return resources.files(anchor)
    return anchor


@dataclass(frozen=True)
class ResourceLocation:
    path: str
    origin: Origin = Origin.EMBEDDED

    def base_dir(self, config: LoaderConfig) -> Path:
        if self.origin is Origin.PROGRAM_DIR:
            return config.program_dir
        if self.origin is Origin.HOME_DIR:
            return config.home_dir
        raise ValueError("embedded resources have no base directory")

    def resolve(self, config: LoaderConfig) -> Any:
        """Return a Traversable (embedded) or absolute Path (filesystem)."""
        if self.origin is Origin.EMBEDDED:
            parts = split_logical(self.path)
            if not parts:
                raise FileNotFoundError(f"empty resource path {self.path!r}")
            target = resource_root(config.resource_package)
            for part in parts:
                target = target.joinpath(part)
            return target
        return self.base_dir(config).joinpath(*split_logical(self.path)).absolute()

    def describe(self, config: LoaderConfig) -> str:
        if self.origin is Origin.EMBEDDED:
            return str(self.path)
        return str(self.resolve(config))
