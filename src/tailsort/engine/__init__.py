from tailsort.engine.rewriter import has_matches, rewrite, rewrite_text, text_has_matches
from tailsort.engine.sorter import sort_class_list, sort_classes, tokenize

__all__ = [
    "has_matches",
    "rewrite",
    "rewrite_text",
    "text_has_matches",
    "sort_class_list",
    "sort_classes",
    "tokenize",
]
