"""Line scanning over streams, folders and sets of files."""

from __future__ import annotations

import fnmatch
import io
import os
from collections.abc import Iterable, Iterator
from typing import IO, Union

from sheets.scanners import LINES, scan
from sheets.sequences import Seq

PathLike = Union[str, "os.PathLike[str]"]

_MAGIC = frozenset("*?[\\")


def line_scanner(stream: IO[str]) -> Iterator[str]:
    """Lines of a text stream, without ``//`` comments."""
    return scan(stream, LINES)


def read_line_scanner(streams: Iterable[IO[str]]) -> Seq[Iterator[str]]:
    """The lines of each stream in turn, one line iterator per stream."""
    return Seq(lambda: (line_scanner(stream) for stream in streams))


def _open(path: PathLike) -> IO[str]:
    return open(path, encoding="utf-8", errors="replace", newline="")


def _lines(handle: IO[str]) -> Iterator[str]:
    with handle:
        yield from line_scanner(handle)


def _open_lines(path: PathLike) -> Iterator[str]:
    """Lines of the file at ``path``; a directory has none. Raises OSError."""
    if os.path.isdir(path):
        return iter(())
    return _lines(_open(path))


def _require_dir(path: PathLike) -> str:
    root = os.fspath(path)
    if not os.path.isdir(root):
        raise FileNotFoundError(f"no such directory: {root!r}")
    return root


def folder_scanner(path: PathLike) -> Seq[tuple[str, Iterator[str]]]:
    """(name, lines) for each entry of the folder at ``path``."""
    return dir_scanner(path)


def dir_scanner(path: PathLike) -> Seq[tuple[str, Iterator[str]]]:
    """(name, lines) for each entry of a directory, in no particular order.

    Files are opened as they are reached; scanning stops at one that cannot be.
    """
    root = _require_dir(path)

    def generate() -> Iterator[tuple[str, Iterator[str]]]:
        with os.scandir(root) as entries:
            for entry in entries:
                try:
                    lines = _open_lines(entry.path)
                except OSError:
                    return
                yield entry.name, lines

    return Seq(generate)


def dir_readers(path: PathLike) -> Seq[IO[str]]:
    """An open text stream for each entry of a directory; directories read as empty."""
    root = _require_dir(path)

    def generate() -> Iterator[IO[str]]:
        with os.scandir(root) as entries:
            for entry in entries:
                if entry.is_dir():
                    yield io.StringIO("")
                    continue
                try:
                    handle = _open(entry.path)
                except OSError:
                    return
                yield handle

    return Seq(generate)


def _glob(root: str, pattern: str) -> list[str]:
    matches = [""]
    for part in pattern.split("/"):
        found: list[str] = []
        for prefix in matches:
            if not _MAGIC.intersection(part):
                candidate = f"{prefix}/{part}" if prefix else part
                if os.path.lexists(os.path.join(root, candidate)):
                    found.append(candidate)
                continue
            base = os.path.join(root, prefix) if prefix else root
            try:
                names = sorted(os.listdir(base))
            except OSError:
                continue
            found.extend(
                f"{prefix}/{name}" if prefix else name
                for name in names
                if fnmatch.fnmatchcase(name, part)
            )
        matches = found
    return sorted(matches)


def glob_scanner(path: PathLike, pattern: str) -> Seq[tuple[str, Iterator[str]]]:
    """(name, lines) for each file under ``path`` matching ``pattern``, sorted.

    Names are matched once, when this is called.
    """
    root = os.fspath(path)
    return files_scanner(root, _glob(root, pattern))


def files_scanner(path: PathLike, names: Iterable[str]) -> Seq[tuple[str, Iterator[str]]]:
    """(name, lines) for each named file under ``path``; stops at one that cannot be opened."""
    root = os.fspath(path)
    wanted = list(names)

    def generate() -> Iterator[tuple[str, Iterator[str]]]:
        for name in wanted:
            try:
                lines = _open_lines(os.path.join(root, name))
            except OSError:
                return
            yield name, lines

    return Seq(generate)


def files_line_scanner(path: PathLike, names: Iterable[str]) -> Seq[tuple[str, Iterator[str]]]:
    """Same as :func:`files_scanner`."""
    return files_scanner(path, names)