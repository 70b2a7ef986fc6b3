"""Tri-state outcome of a loader call, for callers that prefer values to exceptions."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

from .errors import ResourceNotFound


class Status(Enum):
    OK = "ok"
    ABSENT = "absent"
    FAILED = "failed"


@dataclass(frozen=True)
class LoadResult:
    status: Status
    value: Any = None
    error: Optional[ResourceNotFound] = None

    @property
    def ok(self) -> bool:
        return self.status is Status.OK

    def unwrap(self) -> Any:
        """Return the value, re-raising the stored error for failed results."""
        if self.error is not None:
            raise self.error
        return self.value

    @classmethod
    def capture(cls, operation: Callable[..., Any], *args: Any, **kwargs: Any) -> "LoadResult":
        try:
            value = operation(*args, **kwargs)
        except ResourceNotFound as exc:
            return cls(Status.FAILED, error=exc)
        if value is None:
            return cls(Status.ABSENT)
        return cls(Status.OK, value)
