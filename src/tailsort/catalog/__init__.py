from tailsort.catalog.classes import SORTED_CLASSES
from tailsort.catalog.variants import DEFAULT_VARIANTS, SEPARATOR, VARIANTS, VariantCatalog

__all__ = [
    "SORTED_CLASSES",
    "DEFAULT_VARIANTS",
    "SEPARATOR",
    "VARIANTS",
    "VariantCatalog",
]
