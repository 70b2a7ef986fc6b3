"""Resource accessor: images, text, save files and WAV playback with graceful fallbacks."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Optional, TextIO

import pygame

from . import resources, save
from .audio import ClipPlayer, PlaybackError
from .config import LoaderConfig
from .errors import ResourceNotFound
from .locations import Origin, ResourceLocation, split_logical
from .result import LoadResult

LOGGER = logging.getLogger(__name__)


class ResourceAccessor:
    """Load and save resources relative to the package, program or home directory.

    Failures raise :class:`ResourceNotFound` unless the config enables
    developer mode, in which case they are logged and ``None`` is returned.
    Images get one extra chance through the configured fallback icon.
    """

    def __init__(self, config: Optional[LoaderConfig] = None, **options: Any):
        if config is None:
            config = LoaderConfig(**options)
        elif options:
            raise TypeError("pass either a LoaderConfig or keyword options, not both")
        self.config = config
        self.player = ClipPlayer(config.volume)

    @property
    def developer_mode(self) -> bool:
        return self.config.developer_mode

    @property
    def active_clip(self) -> Optional[pygame.mixer.Sound]:
        return self.player.sound

    # ------------------------------------------------------------------
    # images and embedded text
    # ------------------------------------------------------------------
    def load_image(self, location: str) -> Optional[pygame.Surface]:
        try:
            return resources.load_image(ResourceLocation(location).resolve(self.config))
        except resources.LOAD_ERRORS as exc:
            LOGGER.info("Failed to load image at '%s'. Attempting to load default error icon.", location)
            cause = exc
        try:
            return resources.load_image(ResourceLocation(self.config.fallback_icon).resolve(self.config))
        except resources.LOAD_ERRORS as exc:
            LOGGER.debug("Fallback icon %s unavailable: %s", self.config.fallback_icon, exc)
        if self.developer_mode:
            LOGGER.info("Developer mode is on, returning None as the image at '%s' failed to load.", location)
            return None
        raise ResourceNotFound("Image", location) from cause

    def load_embedded_text(self, location: str) -> Optional[TextIO]:
        try:
            target = ResourceLocation(location).resolve(self.config)
            return resources.open_text(target, self.config.encoding)
        except resources.LOAD_ERRORS as exc:
            return self._suppress("File", location, exc)

    # ------------------------------------------------------------------
    # save files
    # ------------------------------------------------------------------
    def save_under_program_dir(
        self, relative_dir: str, content: str, file_name: str, notify_on_create: bool = False
    ) -> Optional[Path]:
        return self._save(Origin.PROGRAM_DIR, relative_dir, content, file_name, notify_on_create)

    def save_under_home_dir(
        self, relative_dir: str, content: str, file_name: str, notify_on_create: bool = False
    ) -> Optional[Path]:
        return self._save(Origin.HOME_DIR, relative_dir, content, file_name, notify_on_create)

    def load_under_program_dir(self, file_name: str, relative_dir: str) -> Optional[str]:
        return self._load(Origin.PROGRAM_DIR, file_name, relative_dir)

    def load_under_home_dir(self, file_name: str, relative_dir: str) -> Optional[str]:
        return self._load(Origin.HOME_DIR, file_name, relative_dir)

    def _save(
        self, origin: Origin, relative_dir: str, content: str, file_name: str, notify: bool
    ) -> Optional[Path]:
        directory = ResourceLocation(relative_dir, origin).resolve(self.config)
        save.ensure_directory(directory, notify)
        path = directory.joinpath(*split_logical(file_name))
        try:
            save.write_text(path, content, self.config.encoding)
        except (OSError, UnicodeError) as exc:
            return self._suppress("File", path, exc)
        return path

    def _load(self, origin: Origin, file_name: str, relative_dir: str) -> Optional[str]:
        path = ResourceLocation(f"{relative_dir}/{file_name}", origin).resolve(self.config)
        if not path.exists():
            raise ResourceNotFound("File", path, f"File Not Found at '{path}'")
        try:
            return save.read_lines(path, self.config.encoding)
        except (OSError, UnicodeDecodeError) as exc:
            return self._suppress("File", path, exc)

    # ------------------------------------------------------------------
    # audio
    # ------------------------------------------------------------------
    def play_embedded_wav(self, location: str) -> Optional[pygame.mixer.Sound]:
        return self._play(ResourceLocation(location, Origin.EMBEDDED))

    def play_program_dir_wav(self, location: str) -> Optional[pygame.mixer.Sound]:
        return self._play(ResourceLocation(location, Origin.PROGRAM_DIR))

    def play_home_dir_wav(self, location: str) -> Optional[pygame.mixer.Sound]:
        return self._play(ResourceLocation(location, Origin.HOME_DIR))

    def stop_wav(self) -> bool:
        if self.player.release():
            LOGGER.info("Music stopped")
            return True
        LOGGER.info("No music is currently playing.")
        return False

    def _play(self, location: ResourceLocation) -> Optional[pygame.mixer.Sound]:
        if self.player.halt():
            LOGGER.debug("Stopped previous clip before loading %s", location.path)
        described = location.path
        try:
            described = location.describe(self.config)
            data = resources.read_bytes(location.resolve(self.config))
        except (OSError, TypeError, ImportError) as exc:
            return self._suppress("Music", described, exc, level=logging.WARNING)
        try:
            sound = self.player.decode(data)
        except PlaybackError:
            LOGGER.exception("Failed to play music at %s", described)
            return None
        except pygame.error as exc:
            return self._suppress("Music", described, exc, level=logging.WARNING)
        try:
            return self.player.play(sound)
        except PlaybackError:
            LOGGER.exception("Failed to play music at %s", described)
            return None

    # ------------------------------------------------------------------
    # shared policy
    # ------------------------------------------------------------------
    def _suppress(self, resource_type: str, location: Any, exc: BaseException, level: int = logging.INFO) -> None:
        if self.developer_mode:
            LOGGER.log(level, "Developer mode is on, %s failed to load at %s, returning None", resource_type, location)
            return None
        raise ResourceNotFound(resource_type, location) from exc

    def attempt(self, operation: Callable[..., Any], *args: Any, **kwargs: Any) -> LoadResult:
        """Run one of the accessor operations and return a :class:`LoadResult`."""
        return LoadResult.capture(operation, *args, **kwargs)
