"""Error types raised while resolving options, before any text is processed."""

from __future__ import annotations


class TailsortError(Exception):
    """Base class for tailsort configuration errors."""


class PatternCompileError(TailsortError):
    """Raised when a supplied pattern string does not compile."""

    def __init__(self, pattern: str, source: str, reason: str) -> None:
        self.pattern = pattern
        self.source = source
        self.reason = reason
        super().__init__(f"Unable to parse pattern {pattern!r} from {source}: {reason}")


class PatternShapeError(TailsortError):
    """Raised when a supplied pattern has too few capture groups."""

    def __init__(self, pattern: str, source: str, groups: int, required: int) -> None:
        self.pattern = pattern
        self.source = source
        self.groups = groups
        self.required = required
        super().__init__(
            f"Pattern {pattern!r} from {source} has {groups} capture group(s), "
            f"requires at least {required}"
        )


class ConfigError(TailsortError):
    """Raised when the config file cannot be read or has the wrong shape."""

    def __init__(self, path: str, message: str, suggestion: str | None = None) -> None:
        self.path = path
        self.message = message
        self.suggestion = suggestion
        text = f"{message} ({path})"
        if suggestion:
            text += f"\nSuggestion: {suggestion}"
        super().__init__(text)
