"""Command-line argument handling for the engine."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path


class CommandLineError(RuntimeError):
    """Raised when the command line cannot be used."""


@dataclass
class EnginePaths:
    """Folders chosen for the engine's resources and user files."""

    resources: Path | None = None
    userfiles: Path | None = None


class ArgsReader:
    """Sequential reader over a list of command-line arguments."""

    def __init__(self, argv: list[str]) -> None:
        self._argv = list(argv)
        self._pos = 0
        self._last = ""

    def skip(self) -> None:
        """Skip one argument."""
        self._pos += 1

    def has_next(self) -> bool:
        """Return True if arguments remain."""
        return self._pos < len(self._argv)

    def is_keyword_arg(self) -> bool:
        """Return True if the last argument read starts with '-'."""
        return self._last.startswith("-")

    def next(self) -> str:
        """Return the next argument."""
        if self._pos >= len(self._argv):
            raise CommandLineError("unexpected end")
        self._last = self._argv[self._pos]
        self._pos += 1
        return self._last


def parse_cmdline(argv: list[str], paths: EnginePaths) -> bool:
    """Apply argv (program name first) to paths; return False if the engine should not start."""
    reader = ArgsReader(argv)
    reader.skip()
    while reader.has_next():
        token = reader.next()
        if not reader.is_keyword_arg():
            print("unexpected token", file=sys.stderr)
            continue
        if token == "--res":
            token = reader.next()
            folder = Path(token)
            if not folder.is_dir():
                raise CommandLineError(f"{token} is not a directory")
            paths.resources = folder
            print(f"resources folder: {token}")
        elif token == "--dir":
            token = reader.next()
            folder = Path(token)
            if not folder.is_dir():
                folder.mkdir(parents=True, exist_ok=True)
            paths.userfiles = folder
            print(f"userfiles folder: {token}")
        elif token in ("--help", "-h"):
            print("VoxelEngine command-line arguments:")
            print(" --res [path] - set resources directory")
            print(" --dir [path] - set userfiles directory")
            return False
        else:
            print(f"unknown argument {token}", file=sys.stderr)
    return True