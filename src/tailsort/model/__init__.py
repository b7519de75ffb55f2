from tailsort.model.options import Options, WriteMode
from tailsort.model.patterns import (
    DEFAULT_PATTERN,
    CustomPattern,
    DefaultPattern,
    PatternEntries,
    PatternEntry,
    PatternSet,
)
from tailsort.model.precedence import BUILTIN_TABLE, PrecedenceTable

__all__ = [
    "Options",
    "WriteMode",
    "DEFAULT_PATTERN",
    "CustomPattern",
    "DefaultPattern",
    "PatternEntries",
    "PatternEntry",
    "PatternSet",
    "BUILTIN_TABLE",
    "PrecedenceTable",
]
