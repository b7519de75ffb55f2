"""Runner: applies the engine to stdin or discovered files per write mode."""

from __future__ import annotations

import difflib
import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

import click

from tailsort.engine.rewriter import rewrite_text, text_has_matches
from tailsort.model.options import Options, WriteMode

logger = logging.getLogger(__name__)

STDIN_NAME = "stdin"

# Called like click.echo; nl=False writes text exactly as given.
Echo = Callable[..., None]


@dataclass
class RunReport:
    """Outcome of a run, one list per file disposition."""

    mode: WriteMode
    changed: list[Path] = field(default_factory=list)
    unchanged: list[Path] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """False when checking and at least one input has unsorted classes."""
        if self.mode is WriteMode.CHECK_FORMATTED:
            return not self.changed
        return True


@dataclass(frozen=True)
class _FileResult:
    path: Path
    original: str | None = None
    rewritten: str | None = None

    @property
    def skipped(self) -> bool:
        return self.original is None

    @property
    def changed(self) -> bool:
        return self.rewritten is not None and self.rewritten != self.original


def unified_diff(original: str, rewritten: str, name: str) -> str:
    """Return a unified diff between *original* and *rewritten*."""
    return "".join(
        difflib.unified_diff(
            original.splitlines(keepends=True),
            rewritten.splitlines(keepends=True),
            fromfile=f"a/{name}",
            tofile=f"b/{name}",
        )
    )


class Runner:
    """Process the inputs described by an :class:`Options` value.

    Rewrites are computed on a thread pool; output and file writes happen
    afterwards in search-path order.
    """

    def __init__(
        self,
        options: Options,
        *,
        echo: Echo = click.echo,
        max_workers: int | None = None,
    ) -> None:
        self.options = options
        self._echo = echo
        self._max_workers = max_workers

    def run(self) -> RunReport:
        if self.options.stdin is not None:
            return self.run_stdin(self.options.stdin)
        return self.run_files()

    # --- stdin -------------------------------------------------------------

    def run_stdin(self, text: str) -> RunReport:
        report = RunReport(mode=self.options.write_mode)
        rewritten = rewrite_text(text, self.options)
        path = Path(STDIN_NAME)
        (report.changed if rewritten != text else report.unchanged).append(path)

        mode = self.options.write_mode
        if mode is WriteMode.CHECK_FORMATTED:
            if rewritten != text:
                self._echo(f"{STDIN_NAME}: classes are not sorted")
        elif mode is WriteMode.DRY_RUN:
            diff = unified_diff(text, rewritten, STDIN_NAME)
            if diff:
                self._echo(diff.rstrip("\n"))
        else:
            # Stdin has no file to write back to.
            self._echo(rewritten, nl=False)
        return report

    # --- files -------------------------------------------------------------

    def _candidates(self) -> tuple[list[Path], list[Path]]:
        ignored = self.options.ignored_files
        candidates: list[Path] = []
        skipped: list[Path] = []
        for path in self.options.search_paths:
            if ignored and path.resolve() in ignored:
                logger.debug("ignoring %s", path)
                skipped.append(path)
            else:
                candidates.append(path)
        return candidates, skipped

    def _process(self, path: Path) -> _FileResult:
        try:
            original = path.read_bytes().decode("utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Skipping %s: %s", path, exc)
            return _FileResult(path)
        if not text_has_matches(original, self.options):
            return _FileResult(path, original)
        return _FileResult(path, original, rewrite_text(original, self.options))

    def run_files(self) -> RunReport:
        report = RunReport(mode=self.options.write_mode)
        candidates, report.skipped = self._candidates()

        with ThreadPoolExecutor(max_workers=self._max_workers) as pool:
            results = list(pool.map(self._process, candidates))

        for result in results:
            if result.skipped:
                report.skipped.append(result.path)
            elif result.changed:
                report.changed.append(result.path)
                self._emit(result)
            else:
                report.unchanged.append(result.path)
        return report

    def _emit(self, result: _FileResult) -> None:
        assert result.original is not None and result.rewritten is not None
        mode = self.options.write_mode
        if mode is WriteMode.TO_FILE:
            result.path.write_bytes(result.rewritten.encode("utf-8"))
            logger.info("rewrote %s", result.path)
        elif mode is WriteMode.DRY_RUN:
            self._echo(unified_diff(result.original, result.rewritten, str(result.path)).rstrip("\n"))
        elif mode is WriteMode.TO_STDOUT:
            self._echo(result.rewritten, nl=False)
        elif mode is WriteMode.CHECK_FORMATTED:
            self._echo(f"{result.path}: classes are not sorted")
