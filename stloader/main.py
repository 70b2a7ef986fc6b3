"""Command line entry point for stloader."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import pygame

from .accessor import ResourceAccessor
from .config import load_config
from .errors import ResourceNotFound

LOGGER = logging.getLogger("stloader")
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


# ---------------------------------------------------------------------------
# bootstrap logging
# ---------------------------------------------------------------------------
def configure_logging(level: str = "INFO", log_file: Optional[Path] = None) -> None:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, handlers=handlers, force=True)


# ---------------------------------------------------------------------------
# commands
# ---------------------------------------------------------------------------
def cmd_image(accessor: ResourceAccessor, args: argparse.Namespace) -> None:
    surface = accessor.load_image(args.location)
    if surface is not None:
        width, height = surface.get_size()
        print(f"{width}x{height}")


def cmd_text(accessor: ResourceAccessor, args: argparse.Namespace) -> None:
    reader = accessor.load_embedded_text(args.location)
    if reader is not None:
        with reader:
            sys.stdout.write(reader.read())


def cmd_save(accessor: ResourceAccessor, args: argparse.Namespace) -> None:
    save = accessor.save_under_home_dir if args.home else accessor.save_under_program_dir
    path = save(args.directory, args.content, args.name, args.notify)
    if path is not None:
        print(path)


def cmd_load(accessor: ResourceAccessor, args: argparse.Namespace) -> None:
    load = accessor.load_under_home_dir if args.home else accessor.load_under_program_dir
    content = load(args.name, args.directory)
    if content is not None:
        sys.stdout.write(content)


def cmd_play(accessor: ResourceAccessor, args: argparse.Namespace) -> None:
    play = {
        "embedded": accessor.play_embedded_wav,
        "program": accessor.play_program_dir_wav,
        "home": accessor.play_home_dir_wav,
    }[args.origin]
    if play(args.location) is None or not args.wait:
        return
    while accessor.player.is_playing():
        pygame.time.wait(50)
    accessor.stop_wav()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="stloader", description="Load images, text and WAV clips")
    parser.add_argument("--developer", action="store_true", default=None, help="Return nothing instead of failing")
    parser.add_argument("--config", type=Path, help="JSON settings file")
    parser.add_argument("--log-level", default="INFO")
    parser.add_argument("--log-file", type=Path)
    sub = parser.add_subparsers(dest="command", required=True)

    image = sub.add_parser("image", help="Decode an embedded image and print its size")
    image.add_argument("location")
    image.set_defaults(func=cmd_image)

    text = sub.add_parser("text", help="Print an embedded text resource")
    text.add_argument("location")
    text.set_defaults(func=cmd_text)

    save = sub.add_parser("save", help="Write a text file under the program or home directory")
    save.add_argument("directory")
    save.add_argument("name")
    save.add_argument("content")
    save.add_argument("--home", action="store_true")
    save.add_argument("--notify", action="store_true", help="Log directory creation")
    save.set_defaults(func=cmd_save)

    load = sub.add_parser("load", help="Print a text file under the program or home directory")
    load.add_argument("directory")
    load.add_argument("name")
    load.add_argument("--home", action="store_true")
    load.set_defaults(func=cmd_load)

    play = sub.add_parser("play", help="Play a WAV clip")
    play.add_argument("location")
    play.add_argument("--origin", choices=("embedded", "program", "home"), default="embedded")
    play.add_argument("--wait", action="store_true", help="Block until the clip finishes")
    play.set_defaults(func=cmd_play)
    return parser


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------
def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level, args.log_file)
    config = load_config(args.config, developer_mode=args.developer)
    accessor = ResourceAccessor(config)
    try:
        args.func(accessor, args)
    except ResourceNotFound as exc:
        LOGGER.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
