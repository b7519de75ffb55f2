"""Apply a pattern set to a text body, sorting every class span in place."""

from __future__ import annotations

import logging
import re
from typing import Callable, Mapping

from tailsort.catalog.variants import DEFAULT_VARIANTS, VariantCatalog
from tailsort.engine.sorter import sort_classes
from tailsort.model.options import Options
from tailsort.model.patterns import (
    CustomPattern,
    DefaultPattern,
    PatternEntries,
    PatternEntry,
    PatternSet,
)

__all__ = ["has_matches", "rewrite", "text_has_matches", "rewrite_text"]

logger = logging.getLogger(__name__)

SortFunc = Callable[[str], str]


def has_matches(text: str, pattern_set: PatternSet) -> bool:
    """Return True if *text* holds at least one class span.

    For pattern entries only the container patterns are checked.
    """
    if isinstance(pattern_set, PatternEntries):
        return any(entry.container.search(text) for entry in pattern_set.entries)
    return pattern_set.pattern.search(text) is not None


def _splice_group(match: re.Match[str], replace: SortFunc) -> str:
    """Return the full match text with group 1 replaced by ``replace(group 1)``."""
    whole = match.group(0)
    offset = match.start(0)
    start, end = match.start(1) - offset, match.end(1) - offset
    # Group did not participate, or sits in a lookaround outside the match.
    if match.start(1) < 0 or start < 0 or end > len(whole):
        return whole
    return whole[:start] + replace(match.group(1)) + whole[end:]


def _apply_entry(text: str, entry: PatternEntry, sort: SortFunc) -> str:
    classes = entry.classes

    if classes is None:
        replace_container = sort
    else:
        def replace_container(container_text: str) -> str:
            return classes.sub(lambda m: _splice_group(m, sort), container_text)

    return entry.container.sub(lambda m: _splice_group(m, replace_container), text)


def rewrite(
    text: str,
    pattern_set: PatternSet,
    table: Mapping[str, int],
    variants: VariantCatalog = DEFAULT_VARIANTS,
    allow_duplicates: bool = False,
) -> str:
    """Return *text* with every class span sorted.

    A single pattern is matched once against the original text. Pattern
    entries run in order, each over the output of the previous one.
    """

    def sort(class_string: str) -> str:
        return sort_classes(class_string, table, variants, allow_duplicates)

    if isinstance(pattern_set, (DefaultPattern, CustomPattern)):
        return pattern_set.pattern.sub(lambda m: _splice_group(m, sort), text)

    result = text
    for index, entry in enumerate(pattern_set.entries):
        result = _apply_entry(result, entry, sort)
        logger.debug("applied pattern entry %d: %s", index, entry.container.pattern)
    return result


def text_has_matches(text: str, options: Options) -> bool:
    """:func:`has_matches` using the pattern set of *options*."""
    return has_matches(text, options.pattern_set)


def rewrite_text(text: str, options: Options, variants: VariantCatalog = DEFAULT_VARIANTS) -> str:
    """:func:`rewrite` using the pattern set, table and duplicate policy of *options*."""
    return rewrite(
        text,
        options.pattern_set,
        options.table,
        variants,
        options.allow_duplicates,
    )
