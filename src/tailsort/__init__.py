"""tailsort: deterministic ordering of utility classes in class attributes."""

__version__ = "0.1.0"
