"""Class string tokenizer and sorter.

Tokens fall into three tiers, emitted in this order:

1. canonical classes found in the precedence table, by rank;
2. variant classes (``hover:bg-white``), grouped by prefix in catalog order
   and ranked by the class left after stripping the prefix;
3. everything else, in the order it was discovered. Variant classes whose
   stripped class is unknown join this tier.
"""

from __future__ import annotations

import re
from typing import Iterable, Mapping

from tailsort.catalog.variants import DEFAULT_VARIANTS, VariantCatalog

__all__ = ["sort_classes", "sort_class_list", "tokenize"]

# ASCII whitespace only; non-breaking spaces stay inside tokens.
_WHITESPACE = re.compile(r"[\t\n\f\r ]+")


def tokenize(class_string: str, allow_duplicates: bool = True) -> list[str]:
    """Split *class_string* on whitespace, optionally keeping first occurrences only."""
    tokens = [token for token in _WHITESPACE.split(class_string) if token]
    if allow_duplicates:
        return tokens
    return list(dict.fromkeys(tokens))


def _by_rank(ranked: list[tuple[str, int]]) -> list[str]:
    # sorted() is stable, so equal ranks keep their input order.
    return [token for token, _ in sorted(ranked, key=lambda item: item[1])]


def sort_class_list(
    tokens: Iterable[str],
    table: Mapping[str, int],
    variants: VariantCatalog = DEFAULT_VARIANTS,
) -> list[str]:
    """Return *tokens* in canonical order."""
    canonical: list[tuple[str, int]] = []
    grouped: dict[str, list[str]] = {}
    custom: list[str] = []

    for token in tokens:
        rank = table.get(token)
        if rank is not None:
            canonical.append((token, rank))
            continue
        prefix = variants.match(token)
        if prefix is not None:
            grouped.setdefault(prefix, []).append(token)
        else:
            custom.append(token)

    ordered = _by_rank(canonical)

    for prefix in variants:
        members = grouped.get(prefix)
        if not members:
            continue
        ranked: list[tuple[str, int]] = []
        for token in members:
            rank = table.get(variants.strip(token, prefix))
            if rank is None:
                custom.append(token)
            else:
                ranked.append((token, rank))
        ordered.extend(_by_rank(ranked))

    ordered.extend(custom)
    return ordered


def sort_classes(
    class_string: str,
    table: Mapping[str, int],
    variants: VariantCatalog = DEFAULT_VARIANTS,
    allow_duplicates: bool = False,
) -> str:
    """Sort a whitespace-separated class string and join it with single spaces."""
    tokens = tokenize(class_string, allow_duplicates)
    return " ".join(sort_class_list(tokens, table, variants))
