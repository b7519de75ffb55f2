"""Tests for applying pattern sets to text bodies."""

import re

import pytest

from tailsort.catalog import DEFAULT_VARIANTS
from tailsort.engine.rewriter import has_matches, rewrite, rewrite_text, text_has_matches
from tailsort.model.options import Options
from tailsort.model.patterns import (
    CustomPattern,
    DefaultPattern,
    PatternEntries,
    PatternEntry,
    custom_pattern_from_cli,
    pattern_entries_from_config,
)
from tailsort.model.precedence import BUILTIN_TABLE, PrecedenceTable


def _rewrite(text: str, pattern_set=None, allow_duplicates: bool = False, table=BUILTIN_TABLE) -> str:
    return rewrite(
        text,
        pattern_set if pattern_set is not None else DefaultPattern(),
        table,
        DEFAULT_VARIANTS,
        allow_duplicates,
    )


# ---------------------------------------------------------------------------
# Match predicate
# ---------------------------------------------------------------------------


class TestHasMatches:
    def test_default_pattern_matches_class_attribute(self):
        assert has_matches('<div class="flex p-4"></div>', DefaultPattern())

    def test_default_pattern_matches_class_name(self):
        assert has_matches("<div className='flex p-4' />", DefaultPattern())

    def test_default_pattern_no_match(self):
        assert not has_matches("<div id='main'></div>", DefaultPattern())

    def test_custom_pattern(self):
        pattern_set = custom_pattern_from_cli(r"@apply ([^;]+);")
        assert has_matches(".btn { @apply p-4 flex; }", pattern_set)
        assert not has_matches('<div class="flex"></div>', pattern_set)

    def test_entries_check_containers_only(self):
        entry = PatternEntry(re.compile(r"tw\(([^)]*)\)"), re.compile(r"never(matches)"))
        pattern_set = PatternEntries((entry,))
        assert has_matches("tw(p-4 flex)", pattern_set)

    def test_entries_any_container(self):
        pattern_set = pattern_entries_from_config([r"tw\(([^)]*)\)"])
        assert has_matches("tw(flex)", pattern_set)
        assert has_matches('<a class="flex">', pattern_set)
        assert not has_matches("nothing here", pattern_set)


# ---------------------------------------------------------------------------
# Single pattern rewriting
# ---------------------------------------------------------------------------


class TestSinglePattern:
    def test_sorts_class_attribute(self):
        assert _rewrite('<div class="p-4 flex"></div>') == '<div class="flex p-4"></div>'

    def test_sorts_every_match(self):
        text = '<div class="p-4 flex">\n  <span className="text-center block"></span>\n</div>'
        expected = '<div class="flex p-4">\n  <span className="block text-center"></span>\n</div>'
        assert _rewrite(text) == expected

    def test_text_outside_matches_untouched(self):
        text = "before p-4 flex\n<div   class = 'p-4 flex' data-x=\"p-4 flex\">after"
        expected = "before p-4 flex\n<div   class = 'flex p-4' data-x=\"p-4 flex\">after"
        assert _rewrite(text) == expected

    def test_no_match_returns_input(self):
        text = "plain text with flex p-4 but no attribute"
        assert _rewrite(text) == text

    def test_multiline_class_string_collapsed(self):
        text = '<div class="\n  p-4\n  flex\n">'
        assert _rewrite(text) == '<div class="flex p-4">'

    def test_only_group_span_replaced(self):
        pattern_set = custom_pattern_from_cli(r'x="([^"]*)" y="p-4 flex"')
        text = 'x="p-4 flex" y="p-4 flex"'
        assert _rewrite(text, pattern_set) == 'x="flex p-4" y="p-4 flex"'

    def test_unmatched_optional_group_left_alone(self):
        pattern_set = custom_pattern_from_cli(r'cls="(?:(\S+ \S+)|\S+)"')
        assert _rewrite('cls="solo"', pattern_set) == 'cls="solo"'
        assert _rewrite('cls="p-4 flex"', pattern_set) == 'cls="flex p-4"'

    def test_custom_pattern_group_one_is_class_string(self):
        pattern_set = CustomPattern(re.compile(r"@apply ([^;]+);"))
        assert _rewrite(".a { @apply p-4 flex; }", pattern_set) == ".a { @apply flex p-4; }"

    def test_duplicates_policy(self):
        text = '<div class="flex p-4 flex">'
        assert _rewrite(text) == '<div class="flex p-4">'
        assert _rewrite(text, allow_duplicates=True) == '<div class="flex flex p-4">'

    def test_custom_table(self):
        table = PrecedenceTable.from_order(["p-4", "flex"])
        assert _rewrite('<div class="flex p-4">', table=table) == '<div class="p-4 flex">'


# ---------------------------------------------------------------------------
# Pattern entries
# ---------------------------------------------------------------------------


class TestPatternEntries:
    def test_container_only_entry_sorts_container_text(self):
        pattern_set = pattern_entries_from_config([r"tw\(([^)]*)\)"])
        assert _rewrite("x = tw(p-4 flex custom)", pattern_set) == "x = tw(flex p-4 custom)"

    def test_default_entry_still_applies(self):
        pattern_set = pattern_entries_from_config([r"tw\(([^)]*)\)"])
        text = '<div class="p-4 flex">{tw(mt-2 block)}</div>'
        assert _rewrite(text, pattern_set) == '<div class="flex p-4">{tw(block mt-2)}</div>'

    def test_nested_class_pattern_multiple_matches(self):
        pattern_set = pattern_entries_from_config([[r"classList=\{([^}]*)\}", r'"([^"]*)"']])
        text = 'classList={["p-4 flex", "mt-2 block"]} rest "p-4 flex"'
        expected = 'classList={["flex p-4", "block mt-2"]} rest "p-4 flex"'
        assert _rewrite(text, pattern_set) == expected

    def test_nested_class_pattern_without_inner_match(self):
        pattern_set = pattern_entries_from_config([[r"classList=\{([^}]*)\}", r'"([^"]*)"']])
        text = "classList={[p-4 flex]}"
        assert _rewrite(text, pattern_set) == text

    def test_container_prefix_and_suffix_preserved(self):
        pattern_set = pattern_entries_from_config([[r"cx\(([^)]*)\)", r"'([^']*)'"]])
        text = "const c = cx('p-4 flex', cond && 'mt-2 block');"
        expected = "const c = cx('flex p-4', cond && 'block mt-2');"
        assert _rewrite(text, pattern_set) == expected

    def test_entries_run_sequentially(self):
        # The second entry only matches once the first has sorted the brackets.
        pattern_set = PatternEntries(
            (
                PatternEntry(re.compile(r"\[([^\]]*)\]")),
                PatternEntry(re.compile(r"\[flex [^\]]*\] (\S+ \S+) \[")),
            )
        )
        text = "[p-4 flex] mt-2 block [x]"
        assert _rewrite(text, pattern_set) == "[flex p-4] block mt-2 [x]"

    def test_second_entry_alone_does_not_match_unsorted_text(self):
        pattern_set = PatternEntries((PatternEntry(re.compile(r"\[flex [^\]]*\] (\S+ \S+) \[")),))
        text = "[p-4 flex] mt-2 block [x]"
        assert _rewrite(text, pattern_set) == text

    def test_no_match_returns_input(self):
        pattern_set = pattern_entries_from_config([r"tw\(([^)]*)\)"])
        text = "nothing to sort"
        assert _rewrite(text, pattern_set) == text


# ---------------------------------------------------------------------------
# Options helpers and properties
# ---------------------------------------------------------------------------


class TestOptionsHelpers:
    def test_rewrite_text_uses_options(self):
        options = Options(allow_duplicates=True)
        assert rewrite_text('<a class="p-4 flex p-4">', options) == '<a class="flex p-4 p-4">'

    def test_text_has_matches_uses_options(self):
        options = Options(pattern_set=custom_pattern_from_cli(r"tw\(([^)]*)\)"))
        assert text_has_matches("tw(flex)", options)
        assert not text_has_matches('<a class="flex">', options)


DOCUMENTS = [
    '<div class="p-4 flex hover:bg-white custom md:block">\n<p class=\'mt-2 block mt-2\'></p></div>',
    "<Comp className=\"z-10 absolute custom-a md:x\" />",
    "no classes at all",
]


class TestRewriteProperties:
    @pytest.mark.parametrize("text", DOCUMENTS)
    def test_idempotent(self, text):
        once = _rewrite(text)
        assert _rewrite(once) == once

    @pytest.mark.parametrize("text", DOCUMENTS)
    def test_idempotent_with_entries(self, text):
        pattern_set = pattern_entries_from_config([r"<p class='([^']*)'"])
        once = _rewrite(text, pattern_set)
        assert _rewrite(once, pattern_set) == once
