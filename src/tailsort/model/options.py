"""Resolved run options consumed by the engine and the runner."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from tailsort.model.patterns import DefaultPattern, PatternSet
from tailsort.model.precedence import BUILTIN_TABLE, PrecedenceTable


class WriteMode(Enum):
    """What to do with rewritten text."""

    TO_FILE = "to_file"
    DRY_RUN = "dry_run"
    TO_STDOUT = "to_stdout"
    CHECK_FORMATTED = "check_formatted"


@dataclass(frozen=True)
class Options:
    """Everything a run needs, resolved before any file is processed.

    Attributes:
        stdin: Captured standard input body, when reading from stdin.
        write_mode: Output dispatch for rewritten text.
        pattern_set: Active pattern set.
        table: Active precedence table (built-in unless a sort order is configured).
        starting_paths: Paths given on the command line.
        search_paths: Files discovered under the starting paths.
        allow_duplicates: Keep repeated class tokens.
        ignored_files: Canonical paths never processed.
    """

    stdin: str | None = None
    write_mode: WriteMode = WriteMode.DRY_RUN
    pattern_set: PatternSet = field(default_factory=DefaultPattern)
    table: PrecedenceTable = field(default_factory=lambda: BUILTIN_TABLE)
    starting_paths: tuple[Path, ...] = ()
    search_paths: tuple[Path, ...] = ()
    allow_duplicates: bool = False
    ignored_files: frozenset[Path] = frozenset()
