import math
import os
import struct
import wave

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame
import pytest

from stloader import LoaderConfig, ResourceAccessor


def write_wav(path, seconds=2.0, rate=22050, freq=440.0, silent=False):
    frames = int(seconds * rate)
    if silent:
        samples = b"\x00\x00" * frames
    else:
        samples = b"".join(
            struct.pack("<h", int(8000 * math.sin(2 * math.pi * freq * i / rate)))
            for i in range(frames)
        )
    with wave.open(str(path), "wb") as handle:
        handle.setnchannels(1)
        handle.setsampwidth(2)
        handle.setframerate(rate)
        handle.writeframes(samples)


def write_bmp(path, size, color):
    surface = pygame.Surface(size)
    surface.fill(pygame.Color(*color))
    pygame.image.save(surface, str(path))


@pytest.fixture
def resource_dir(tmp_path):
    """A stand-in for the packaged resource tree."""
    root = tmp_path / "embedded"
    (root / "images").mkdir(parents=True)
    (root / "icon").mkdir()
    (root / "docs").mkdir()
    (root / "sounds").mkdir()
    write_bmp(root / "images" / "red.bmp", (4, 3), (255, 0, 0))
    write_bmp(root / "icon" / "error-icon.bmp", (2, 2), (255, 0, 255))
    (root / "images" / "broken.bmp").write_bytes(b"definitely not an image")
    (root / "docs" / "readme.txt").write_text("first line\nsecond line\n", encoding="utf-8")
    write_wav(root / "sounds" / "beep.wav")
    write_wav(root / "sounds" / "boop.wav", freq=660.0)
    write_wav(root / "sounds" / "long.wav", seconds=10.0, silent=True)
    write_wav(root / "sounds" / "short.wav", seconds=0.05)
    (root / "sounds" / "broken.wav").write_bytes(b"RIFF\x00\x00\x00\x00garbage")
    return root


@pytest.fixture
def make_accessor(tmp_path, resource_dir):
    def factory(**options):
        settings = {
            "program_dir": tmp_path / "program",
            "home_dir": tmp_path / "home",
            "resource_package": resource_dir,
            "fallback_icon": "/icon/error-icon.bmp",
        }
        settings.update(options)
        return ResourceAccessor(LoaderConfig(**settings))

    return factory


@pytest.fixture
def mixer():
    try:
        pygame.mixer.init()
    except pygame.error as exc:
        pytest.skip(f"no audio mixer available: {exc}")
    yield pygame.mixer
    pygame.mixer.stop()
    pygame.mixer.quit()
