"""Variant prefix catalog: responsive, theme and state modifiers."""

from __future__ import annotations

import re
from typing import Iterable

__all__ = ["SEPARATOR", "VARIANTS", "VariantCatalog", "DEFAULT_VARIANTS"]

# Separator between a variant prefix and the utility it modifies.
SEPARATOR = ":"

# Catalog order is output grouping order for variant classes.
VARIANTS: tuple[str, ...] = (
    "sm",
    "md",
    "lg",
    "xl",
    "2xl",
    "dark",
    "motion-safe",
    "motion-reduce",
    "first",
    "last",
    "odd",
    "even",
    "visited",
    "checked",
    "group-hover",
    "group-focus",
    "focus-within",
    "hover",
    "focus",
    "focus-visible",
    "active",
    "disabled",
)


class VariantCatalog:
    """Ordered variant prefixes with a compiled prefix matcher.

    A token belongs to a variant when it starts with ``<prefix>:``. The matcher
    is anchored at the start of the token and its alternatives are tried
    longest first, so when several prefixes could apply the longest one wins.
    """

    def __init__(self, prefixes: Iterable[str], separator: str = SEPARATOR) -> None:
        self.prefixes: tuple[str, ...] = tuple(prefixes)
        self.separator = separator
        alternatives = sorted(self.prefixes, key=len, reverse=True)
        self._matcher = re.compile(
            "(?P<prefix>"
            + "|".join(re.escape(p) for p in alternatives)
            + ")"
            + re.escape(separator)
        )

    def match(self, token: str) -> str | None:
        """Return the catalog prefix *token* starts with, or None."""
        if not self.prefixes:
            return None
        m = self._matcher.match(token)
        if m is None:
            return None
        return m.group("prefix")

    def strip(self, token: str, prefix: str) -> str:
        """Return *token* with ``prefix`` and the separator removed."""
        return token[len(prefix) + len(self.separator):]

    def __iter__(self):
        return iter(self.prefixes)

    def __len__(self) -> int:
        return len(self.prefixes)

    def __repr__(self) -> str:
        return f"VariantCatalog({len(self.prefixes)} prefixes)"


DEFAULT_VARIANTS = VariantCatalog(VARIANTS)
