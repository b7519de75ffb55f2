"""Pattern sets: where class strings are found in a text body.

A pattern set has exactly one of three shapes:

- :class:`DefaultPattern` -- the built-in class attribute pattern.
- :class:`CustomPattern` -- one pattern supplied on the command line.
- :class:`PatternEntries` -- container/class pattern pairs from a config
  file, always led by the default pattern.

The command line and the config file go through separate factories, so a
command-line value can never produce :class:`PatternEntries`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Sequence, Union

from tailsort.errors import PatternCompileError, PatternShapeError

__all__ = [
    "DEFAULT_PATTERN",
    "DefaultPattern",
    "CustomPattern",
    "PatternEntry",
    "PatternEntries",
    "PatternSet",
    "EntrySpec",
    "compile_pattern",
    "custom_pattern_from_cli",
    "pattern_entries_from_config",
    "resolve_pattern_set",
]

# Group 1 is the class string of a class/className attribute.
DEFAULT_PATTERN = re.compile(
    r"""\b(?:class(?:Name)?\s*=\s*["'])([_a-zA-Z0-9.,\s\-:\[\]()/#%!@&]+)["']"""
)

# Capture groups a pattern needs, counting the implicit whole-match group.
REQUIRED_GROUPS = 2

CLI_SOURCE = "--custom-regex"


@dataclass(frozen=True)
class DefaultPattern:
    """Use :data:`DEFAULT_PATTERN`."""

    @property
    def pattern(self) -> re.Pattern[str]:
        return DEFAULT_PATTERN


@dataclass(frozen=True)
class CustomPattern:
    """A single user pattern whose group 1 is the class string."""

    pattern: re.Pattern[str]


@dataclass(frozen=True)
class PatternEntry:
    """A container pattern and an optional class pattern searched inside it.

    Group 1 of *container* delimits the container text. When *classes* is
    None the whole container text is the class string; otherwise group 1 of
    each *classes* match inside the container text is.
    """

    container: re.Pattern[str]
    classes: re.Pattern[str] | None = None


@dataclass(frozen=True)
class PatternEntries:
    """Pattern entries applied in order, each on the result of the previous."""

    entries: tuple[PatternEntry, ...]


PatternSet = Union[DefaultPattern, CustomPattern, PatternEntries]

# A config entry: a container pattern string, or a [container, classes] pair.
EntrySpec = Union[str, Sequence[str]]


def compile_pattern(source_text: str, source: str) -> re.Pattern[str]:
    """Compile *source_text* and check it exposes a class-string group.

    *source* names where the pattern came from and is carried on errors.
    """
    try:
        pattern = re.compile(source_text)
    except re.error as exc:
        raise PatternCompileError(source_text, source, str(exc)) from exc
    groups = pattern.groups + 1
    if groups < REQUIRED_GROUPS:
        raise PatternShapeError(source_text, source, groups, REQUIRED_GROUPS)
    return pattern


def custom_pattern_from_cli(source_text: str | None) -> DefaultPattern | CustomPattern:
    """Build the pattern set for a ``--custom-regex`` value (or its absence)."""
    if source_text is None:
        return DefaultPattern()
    return CustomPattern(compile_pattern(source_text, CLI_SOURCE))


def pattern_entries_from_config(
    specs: Sequence[EntrySpec], source: str = "config file"
) -> PatternEntries:
    """Build the entries shape from config specs, default entry first."""
    entries = [PatternEntry(DEFAULT_PATTERN)]
    for spec in specs:
        if isinstance(spec, str):
            entries.append(PatternEntry(compile_pattern(spec, source)))
        else:
            container, classes = spec
            entries.append(
                PatternEntry(
                    compile_pattern(container, source),
                    compile_pattern(classes, source),
                )
            )
    return PatternEntries(tuple(entries))


def resolve_pattern_set(
    cli_pattern: DefaultPattern | CustomPattern,
    config_entries: PatternEntries | None,
) -> PatternSet:
    """Pick the active pattern set.

    A command-line pattern takes priority; otherwise config entries are used
    when present; otherwise the default pattern.
    """
    if isinstance(cli_pattern, CustomPattern):
        return cli_pattern
    if config_entries is not None:
        return config_entries
    return DefaultPattern()
