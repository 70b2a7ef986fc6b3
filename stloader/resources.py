"""Embedded resource readers for images and text."""
from __future__ import annotations

import io
import logging
from typing import Any, TextIO

import pygame

LOGGER = logging.getLogger(__name__)

# Failures that mean "the resource could not be produced" rather than a bug.
LOAD_ERRORS = (OSError, ImportError, TypeError, ValueError, pygame.error)


def read_bytes(target: Any) -> bytes:
    if not target.is_file():
        raise FileNotFoundError(f"no resource at {target}")
    return target.read_bytes()


def load_image(target: Any) -> pygame.Surface:
    """Decode the image at ``target`` into a surface.

    The surface is not converted to the display format so loading works
    before (or without) a window being opened.
    """
    data = read_bytes(target)
    name = getattr(target, "name", "")
    return pygame.image.load(io.BytesIO(data), name)


def open_text(target: Any, encoding: str) -> TextIO:
    if not target.is_file():
        raise FileNotFoundError(f"no resource at {target}")
    return io.TextIOWrapper(target.open("rb"), encoding=encoding)
