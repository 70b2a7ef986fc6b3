"""Exceptions raised when a resource cannot be located, read or written."""
from __future__ import annotations

from typing import Optional


def error_message(resource_type: str, location: object) -> str:
    return f"Failed to load or save {resource_type}: {location}"


class ResourceError(Exception):
    """Base class for stloader failures."""


class ResourceNotFound(ResourceError):
    """A resource could not be located, decoded, read or written.

    ``resource_type`` is one of ``"Image"``, ``"File"`` or ``"Music"`` and
    ``location`` is the logical path or absolute filesystem path that was
    attempted. The underlying exception, if any, is chained as ``__cause__``.
    """

    def __init__(self, resource_type: str, location: object, message: Optional[str] = None):
        self.resource_type = resource_type
        self.location = str(location)
        super().__init__(message or error_message(resource_type, location))
