"""Resolve command-line values and the config file into :class:`Options`."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from tailsort.config.loader import ConfigFile, load_config
from tailsort.model.options import Options, WriteMode
from tailsort.model.patterns import (
    custom_pattern_from_cli,
    pattern_entries_from_config,
    resolve_pattern_set,
)
from tailsort.model.precedence import BUILTIN_TABLE, PrecedenceTable
from tailsort.walker import canonical_ignored, find_search_paths

logger = logging.getLogger(__name__)


def resolve_write_mode(
    *,
    dry_run: bool = False,
    write: bool = False,
    check_formatted: bool = False,
    stdin: bool = False,
) -> WriteMode:
    """Pick the write mode; earlier flags win over later ones."""
    if dry_run:
        return WriteMode.DRY_RUN
    if write:
        return WriteMode.TO_FILE
    if check_formatted:
        return WriteMode.CHECK_FORMATTED
    if stdin:
        return WriteMode.TO_STDOUT
    return WriteMode.DRY_RUN


def resolve_options(
    *,
    paths: Iterable[str] = (),
    stdin_text: str | None = None,
    write: bool = False,
    dry_run: bool = False,
    check_formatted: bool = False,
    allow_duplicates: bool = False,
    custom_regex: str | None = None,
    config_file: str | None = None,
    ignored_files: Iterable[str] = (),
) -> Options:
    """Build run options.

    Every pattern is compiled and the config file loaded here, so any
    :class:`~tailsort.errors.TailsortError` surfaces before a file is touched.
    """
    cli_pattern = custom_pattern_from_cli(custom_regex)

    config = load_config(config_file) if config_file else ConfigFile()
    source = f"config file {config_file}"
    table: PrecedenceTable = BUILTIN_TABLE
    if config.sort_order is not None:
        table = PrecedenceTable.from_order(config.sort_order)
        logger.debug("using custom sort order with %d classes", len(table))
    entries = None
    if config.custom_regex is not None:
        entries = pattern_entries_from_config(config.custom_regex, source)

    starting_paths = tuple(Path(p) for p in paths)
    search_paths = find_search_paths(starting_paths)
    logger.debug("found %d files under %d starting paths", len(search_paths), len(starting_paths))

    return Options(
        stdin=stdin_text,
        write_mode=resolve_write_mode(
            dry_run=dry_run,
            write=write,
            check_formatted=check_formatted,
            stdin=stdin_text is not None,
        ),
        pattern_set=resolve_pattern_set(cli_pattern, entries),
        table=table,
        starting_paths=starting_paths,
        search_paths=search_paths,
        allow_duplicates=allow_duplicates,
        ignored_files=canonical_ignored(ignored_files),
    )
