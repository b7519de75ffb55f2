"""Tests for the class string tokenizer and sorter."""

from collections import Counter

import pytest

from tailsort.catalog import DEFAULT_VARIANTS, VariantCatalog
from tailsort.engine.sorter import sort_class_list, sort_classes, tokenize
from tailsort.model.precedence import BUILTIN_TABLE, PrecedenceTable


def _sort(class_string: str, allow_duplicates: bool = False, table=BUILTIN_TABLE) -> str:
    return sort_classes(class_string, table, DEFAULT_VARIANTS, allow_duplicates)


# ---------------------------------------------------------------------------
# Tokenizer
# ---------------------------------------------------------------------------


class TestTokenize:
    def test_split_on_mixed_whitespace(self):
        assert tokenize("  flex\tp-4\n\nm-2  ") == ["flex", "p-4", "m-2"]

    def test_empty_string(self):
        assert tokenize("") == []
        assert tokenize("   ") == []

    def test_keeps_duplicates_by_default(self):
        assert tokenize("a b a") == ["a", "b", "a"]

    def test_unique_keeps_first_occurrence(self):
        assert tokenize("b a b c a", allow_duplicates=False) == ["b", "a", "c"]

    def test_non_breaking_space_is_not_a_separator(self):
        assert tokenize("a\u00a0b c") == ["a\u00a0b", "c"]


# ---------------------------------------------------------------------------
# Canonical ordering
# ---------------------------------------------------------------------------


class TestCanonical:
    def test_reference_example(self):
        tokens = ["inline", "inline-block", "random-class", "py-2", "justify-end", "px-2", "flex"]
        assert sort_class_list(tokens, BUILTIN_TABLE) == [
            "inline-block",
            "inline",
            "flex",
            "justify-end",
            "py-2",
            "px-2",
            "random-class",
        ]

    def test_reference_example_as_string(self):
        assert (
            _sort("inline inline-block random-class py-2 justify-end px-2 flex")
            == "inline-block inline flex justify-end py-2 px-2 random-class"
        )

    def test_order_independent_of_input_order(self):
        assert _sort("p-4 flex") == _sort("flex p-4") == "flex p-4"

    def test_equal_ranks_keep_input_order(self):
        table = PrecedenceTable({"a": 1, "b": 1, "c": 0})
        assert sort_class_list(["b", "a", "c"], table, DEFAULT_VARIANTS) == ["c", "b", "a"]

    def test_repeated_sort_order_name_ranks_by_last_position(self):
        table = PrecedenceTable.from_order(["a", "b", "a"])
        assert _sort("a b", table=table) == "b a"

    def test_empty_input(self):
        assert _sort("") == ""

    def test_output_is_single_spaced(self):
        assert _sort("  flex \n\t  p-4   ") == "flex p-4"


# ---------------------------------------------------------------------------
# Variants
# ---------------------------------------------------------------------------


class TestVariants:
    def test_variants_follow_canonical(self):
        assert _sort("hover:bg-white p-4") == "p-4 hover:bg-white"

    def test_variant_groups_follow_catalog_order(self):
        assert _sort("hover:p-4 md:flex sm:block") == "sm:block md:flex hover:p-4"

    def test_variant_group_sorted_by_suffix_rank(self):
        assert _sort("md:p-4 md:flex md:block") == "md:block md:flex md:p-4"

    def test_unknown_suffix_goes_to_custom_tail(self):
        assert _sort("hover:my-thing custom flex md:p-4") == "flex md:p-4 custom hover:my-thing"

    def test_unknown_suffix_appended_after_existing_custom(self):
        assert _sort("zeta md:zeta alpha") == "zeta alpha md:zeta"

    def test_unknown_suffixes_deferred_in_catalog_order(self):
        # md pass runs before hover pass, so md:x is deferred first.
        assert _sort("hover:x md:x") == "md:x hover:x"

    def test_stacked_variants_are_custom(self):
        assert _sort("md:hover:bg-white flex") == "flex md:hover:bg-white"

    def test_prefix_with_nothing_after_it_is_custom(self):
        assert _sort("hover: flex") == "flex hover:"

    def test_prefix_inside_token_is_not_a_variant(self):
        assert _sort("peer-hover:flex hover:p-4 custom") == "hover:p-4 peer-hover:flex custom"

    def test_bare_prefix_word_is_custom(self):
        assert _sort("hover flex") == "flex hover"

    def test_variant_lookup_uses_active_table(self):
        table = PrecedenceTable.from_order(["b", "a"])
        assert _sort("hover:a hover:b a b", table=table) == "b a hover:b hover:a"

    def test_custom_catalog(self):
        catalog = VariantCatalog(["print", "screen"])
        result = sort_classes("screen:flex print:block flex", BUILTIN_TABLE, catalog)
        assert result == "flex print:block screen:flex"


# ---------------------------------------------------------------------------
# Custom classes and duplicates
# ---------------------------------------------------------------------------


class TestCustomAndDuplicates:
    def test_all_custom_preserves_order(self):
        assert _sort("zeta alpha mid beta") == "zeta alpha mid beta"

    def test_custom_keeps_relative_order_around_canonical(self):
        assert _sort("zeta flex alpha p-4 beta") == "flex p-4 zeta alpha beta"

    def test_duplicates_removed_by_default(self):
        assert _sort("flex p-4 flex custom custom") == "flex p-4 custom"

    def test_duplicates_kept_when_allowed(self):
        assert _sort("flex p-4 flex custom custom", allow_duplicates=True) == "flex flex p-4 custom custom"

    def test_duplicate_variant_removed(self):
        assert _sort("hover:flex hover:flex") == "hover:flex"


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------


SAMPLES = [
    "inline inline-block random-class py-2 justify-end px-2 flex",
    "hover:bg-white md:p-4 text-center custom md:unknown focus:outline-none",
    "a b c a hover: hover md:hover:flex",
    "",
    "container mx-auto sm:px-6 lg:px-8 flex flex",
]


class TestProperties:
    @pytest.mark.parametrize("sample", SAMPLES)
    def test_idempotent(self, sample):
        once = _sort(sample)
        assert _sort(once) == once

    @pytest.mark.parametrize("sample", SAMPLES)
    def test_multiset_preserved_with_duplicates(self, sample):
        result = _sort(sample, allow_duplicates=True)
        assert Counter(result.split()) == Counter(sample.split())

    @pytest.mark.parametrize("sample", SAMPLES)
    def test_distinct_tokens_without_duplicates(self, sample):
        result = _sort(sample).split()
        assert len(result) == len(set(result))
        assert set(result) == set(sample.split())

    def test_canonical_pairs_ordered_by_rank(self):
        tokens = ["text-center", "p-4", "flex", "container", "block", "mt-2"]
        result = _sort(" ".join(reversed(tokens))).split()
        ranks = [BUILTIN_TABLE[t] for t in result]
        assert ranks == sorted(ranks)
