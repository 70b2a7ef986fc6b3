"""Single-handle WAV playback on top of pygame.mixer."""
from __future__ import annotations

import io
import logging
from typing import Optional

import pygame

LOGGER = logging.getLogger(__name__)


class PlaybackError(Exception):
    """The mixer could not open a device or channel for playback."""


class ClipPlayer:
    """Owns the one active clip of an accessor.

    Each :meth:`play` replaces the previous clip; there is no mixing of
    several loader-started clips. Access is not synchronised.
    """

    def __init__(self, volume: float = 1.0):
        self.volume = volume
        self.sound: Optional[pygame.mixer.Sound] = None
        self.channel: Optional[pygame.mixer.Channel] = None

    def ensure_mixer(self) -> None:
        if pygame.mixer.get_init():
            return
        try:
            pygame.mixer.init()
        except pygame.error as exc:
            raise PlaybackError(f"audio device unavailable: {exc}") from exc

    def is_playing(self) -> bool:
        """Whether our clip is still the one sounding on our channel.

        Once it has finished the channel may be handed to another sound, so a
        stale handle is dropped rather than reported as playing.
        """
        if self.channel is None:
            return False
        if self.channel.get_busy() and self.channel.get_sound() is self.sound:
            return True
        self.sound = None
        self.channel = None
        return False

    def decode(self, data: bytes) -> pygame.mixer.Sound:
        """Decode WAV bytes; raises ``pygame.error`` on malformed input."""
        self.ensure_mixer()
        return pygame.mixer.Sound(file=io.BytesIO(data))

    def play(self, sound: pygame.mixer.Sound) -> pygame.mixer.Sound:
        self.ensure_mixer()
        sound.set_volume(self.volume)
        channel = sound.play()
        if channel is None:
            raise PlaybackError("no free mixer channel")
        self.sound = sound
        self.channel = channel
        return sound

    def halt(self) -> bool:
        """Stop the current clip if it is playing, keeping the handle."""
        if not self.is_playing():
            return False
        self.channel.stop()
        return True

    def release(self) -> bool:
        stopped = self.halt()
        if stopped:
            self.sound = None
            self.channel = None
        return stopped
