"""Plain-text save files under a base directory."""
from __future__ import annotations

import logging
from pathlib import Path

LOGGER = logging.getLogger(__name__)


def ensure_directory(directory: Path, notify: bool = False) -> bool:
    """Create ``directory`` and its parents if missing.

    Returns whether the directory exists afterwards. Creation problems are
    only reported (when ``notify`` is set); the following write surfaces them.
    """
    if directory.exists():
        return True
    try:
        directory.mkdir(parents=True, exist_ok=True)
        created = True
    except OSError as exc:
        LOGGER.debug("mkdir %s failed: %s", directory, exc)
        created = False
    if notify:
        if created:
            LOGGER.info("Directory was successfully created at '%s'", directory.absolute())
        else:
            LOGGER.warning(
                "Failed to create directory at '%s', check file permissions or path issues.",
                directory.absolute(),
            )
    return created


def write_text(path: Path, content: str, encoding: str) -> None:
    data = content.encode(encoding)
    path.write_bytes(data)


def read_lines(path: Path, encoding: str) -> str:
    """Return the file's lines, each terminated by a single newline."""
    with path.open("r", encoding=encoding) as handle:
        return "".join(line.rstrip("\r\n") + "\n" for line in handle)
