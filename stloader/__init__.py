"""Load images, text and WAV clips from packaged resources, the program directory or the home directory."""
from __future__ import annotations

import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

from .accessor import ResourceAccessor
from .config import LoaderConfig, load_config
from .errors import ResourceError, ResourceNotFound
from .locations import Origin, ResourceLocation
from .result import LoadResult, Status

__all__ = [
    "LoadResult",
    "LoaderConfig",
    "Origin",
    "ResourceAccessor",
    "ResourceError",
    "ResourceLocation",
    "ResourceNotFound",
    "Status",
    "load_config",
]

__version__ = "1.0.0"
