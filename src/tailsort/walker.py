"""File discovery for starting paths given on the command line."""

from __future__ import annotations

import fnmatch
import logging
import os
from pathlib import Path
from typing import Iterable, Iterator

logger = logging.getLogger(__name__)

IGNORE_FILE = ".gitignore"


def _read_ignore_patterns(directory: Path) -> list[str]:
    ignore_file = directory / IGNORE_FILE
    if not ignore_file.is_file():
        return []
    try:
        lines = ignore_file.read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Could not read %s: %s", ignore_file, exc)
        return []
    patterns = []
    for line in lines:
        line = line.strip()
        if not line or line.startswith(("#", "!")):
            continue
        patterns.append(line.strip("/"))
    return patterns


def _is_ignored(path: Path, root: Path, patterns: list[str]) -> bool:
    relative = path.relative_to(root).as_posix()
    return any(
        fnmatch.fnmatch(path.name, pattern) or fnmatch.fnmatch(relative, pattern)
        for pattern in patterns
    )


def _walk(start: Path) -> Iterator[Path]:
    """Yield files under *start*, skipping hidden and gitignored entries."""
    # Each stack item carries the ignore patterns in effect and the directory they are relative to.
    stack: list[tuple[Path, list[tuple[Path, list[str]]]]] = [(start, [])]
    while stack:
        directory, inherited = stack.pop()
        scopes = inherited
        patterns = _read_ignore_patterns(directory)
        if patterns:
            scopes = inherited + [(directory, patterns)]
        try:
            entries = sorted(os.scandir(directory), key=lambda e: e.name)
        except OSError as exc:
            logger.warning("Could not list %s: %s", directory, exc)
            continue
        subdirs = []
        for entry in entries:
            if entry.name.startswith("."):
                continue
            path = Path(entry.path)
            if any(_is_ignored(path, root, pats) for root, pats in scopes):
                continue
            if entry.is_dir(follow_symlinks=False):
                subdirs.append((path, scopes))
            elif entry.is_file():
                yield path
        # Reversed so directories are visited in name order.
        stack.extend(reversed(subdirs))


def find_search_paths(starting_paths: Iterable[Path]) -> tuple[Path, ...]:
    """Return the unique files found under *starting_paths*, in walk order.

    A starting path that is itself a file is returned as given.
    """
    found: dict[Path, None] = {}
    for start in starting_paths:
        if start.is_file():
            found.setdefault(start, None)
        elif start.is_dir():
            for path in _walk(start):
                found.setdefault(path, None)
        else:
            logger.warning("Path does not exist: %s", start)
    return tuple(found)


def canonical_ignored(paths: Iterable[str | Path]) -> frozenset[Path]:
    """Resolve *paths* to canonical absolute paths, dropping ones that do not exist."""
    resolved = set()
    for raw in paths:
        try:
            resolved.add(Path(raw).resolve(strict=True))
        except (OSError, RuntimeError):
            continue
    return frozenset(resolved)
