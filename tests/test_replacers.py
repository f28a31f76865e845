"""Unit tests for the individual candidate generators (replacers.py)."""

from fuzzy_edit.matching import (
    REPLACERS,
    block_anchor_replacer,
    context_aware_replacer,
    escape_normalized_replacer,
    indentation_flexible_replacer,
    line_trimmed_replacer,
    multi_occurrence_replacer,
    simple_replacer,
    trimmed_boundary_replacer,
    whitespace_normalized_replacer,
)


# ---------------------------------------------------------------------------
# Ordering
# ---------------------------------------------------------------------------


class TestReplacerOrder:
    def test_fixed_priority_order(self):
        assert [name for name, _ in REPLACERS] == [
            "exact",
            "line_trimmed",
            "block_anchor",
            "whitespace_normalized",
            "indentation_flexible",
            "escape_normalized",
            "trimmed_boundary",
            "context_aware",
            "multi_occurrence",
        ]

    def test_each_call_starts_a_fresh_scan(self):
        content = "foo bar foo"
        first = list(multi_occurrence_replacer(content, "foo"))
        second = list(multi_occurrence_replacer(content, "foo"))
        assert first == second == ["foo", "foo"]

    def test_indentation_flexible_candidates_are_found_earlier(self):
        # Dedented equality implies whitespace-normalized equality
        content = "  line1\n    line2\n  line3"
        find = "line1\n  line2\nline3"
        flexible = list(indentation_flexible_replacer(content, find))
        assert flexible == [content]
        assert set(flexible) <= set(whitespace_normalized_replacer(content, find))

    def test_multi_occurrence_candidates_are_found_earlier(self):
        content = "foo bar foo"
        assert set(multi_occurrence_replacer(content, "foo")) == set(simple_replacer(content, "foo"))


# ---------------------------------------------------------------------------
# Strategy 1 - Exact
# ---------------------------------------------------------------------------


class TestSimpleReplacer:
    def test_yields_find_unchanged(self):
        assert list(simple_replacer("any content", "search")) == ["search"]


# ---------------------------------------------------------------------------
# Strategy 2 - LineTrimmed
# ---------------------------------------------------------------------------


class TestLineTrimmedReplacer:
    def test_different_surrounding_whitespace(self):
        content = "  hello world  \n  foo bar  "
        assert list(line_trimmed_replacer(content, "hello world")) == ["  hello world  "]

    def test_multi_line_block(self):
        content = "  line1  \n  line2  \n  line3  "
        assert list(line_trimmed_replacer(content, "line1\nline2")) == ["  line1  \n  line2  "]

    def test_trailing_empty_search_line_dropped(self):
        assert list(line_trimmed_replacer("hello\nworld", "hello\n")) == ["hello"]

    def test_every_matching_window_is_yielded(self):
        content = "x = 1\n  x = 1\ny = 2"
        assert list(line_trimmed_replacer(content, "x = 1")) == ["x = 1", "  x = 1"]

    def test_no_match(self):
        assert list(line_trimmed_replacer("alpha\nbeta", "gamma")) == []


# ---------------------------------------------------------------------------
# Strategy 3 - BlockAnchor
# ---------------------------------------------------------------------------


class TestBlockAnchorReplacer:
    def test_requires_three_lines(self):
        assert list(block_anchor_replacer("line1\nline2\nline3", "line1\nline2")) == []

    def test_single_candidate_accepted_with_different_body(self):
        content = "start\nmiddle content\nend"
        results = list(block_anchor_replacer(content, "start\ndifferent middle\nend"))
        assert results == ["start\nmiddle content\nend"]

    def test_single_candidate_accepted_with_unrelated_body(self):
        content = "start\nAAAA\nend"
        assert list(block_anchor_replacer(content, "start\nZZZZ\nend")) == [content]

    def test_best_of_multiple_candidates(self):
        content = "start\nAAA\nend\nstart\nBBB\nend"
        results = list(block_anchor_replacer(content, "start\nBBB\nend"))
        assert results == ["start\nBBB\nend"]

    def test_multiple_candidates_below_threshold(self):
        content = "start\nAAA\nend\nstart\nCCC\nend"
        assert list(block_anchor_replacer(content, "start\nXYZ\nend")) == []

    def test_multiple_candidates_partial_similarity(self):
        content = "begin\n  value = 10\nfinish\nbegin\n  other = 99\nfinish"
        results = list(block_anchor_replacer(content, "begin\n  value = 11\nfinish"))
        assert results == ["begin\n  value = 10\nfinish"]

    def test_block_spans_extra_lines(self):
        content = "if ok:\n    a()\n    b()\n    c()\nend"
        results = list(block_anchor_replacer(content, "if ok:\n    a()\nend"))
        assert results == [content]


# ---------------------------------------------------------------------------
# Strategy 4 - WhitespaceNormalized
# ---------------------------------------------------------------------------


class TestWhitespaceNormalizedReplacer:
    def test_collapsed_spaces(self):
        assert list(whitespace_normalized_replacer("hello    world", "hello world")) == [
            "hello    world"
        ]

    def test_tabs(self):
        assert list(whitespace_normalized_replacer("hello\t\tworld", "hello world")) == [
            "hello\t\tworld"
        ]

    def test_substring_of_line(self):
        content = "x = foo(  a,   b  ) + 1"
        results = list(whitespace_normalized_replacer(content, "foo( a, b )"))
        assert results == ["foo(  a,   b  )"]

    def test_multi_line_block(self):
        content = "line1   \n   line2"
        results = list(whitespace_normalized_replacer(content, "line1\nline2"))
        assert results == ["line1   \n   line2"]

    def test_regex_metacharacters_are_literal(self):
        content = "total = (a + b) * c"
        results = list(whitespace_normalized_replacer(content, "(a  +  b) * c"))
        assert results == ["(a + b) * c"]


# ---------------------------------------------------------------------------
# Strategy 5 - IndentationFlexible
# ---------------------------------------------------------------------------


class TestIndentationFlexibleReplacer:
    def test_different_indentation(self):
        assert list(indentation_flexible_replacer("    indented line", "indented line")) == [
            "    indented line"
        ]

    def test_consistent_multi_line_shift(self):
        results = list(indentation_flexible_replacer("    line1\n    line2", "line1\nline2"))
        assert results == ["    line1\n    line2"]

    def test_relative_indentation_preserved(self):
        content = "  line1\n    line2\n  line3"
        results = list(indentation_flexible_replacer(content, "line1\n  line2\nline3"))
        assert results == [content]

    def test_relative_indentation_mismatch(self):
        content = "  line1\n  line2"
        assert list(indentation_flexible_replacer(content, "line1\n    line2")) == []


# ---------------------------------------------------------------------------
# Strategy 6 - EscapeNormalized
# ---------------------------------------------------------------------------


class TestEscapeNormalizedReplacer:
    def test_escaped_newline(self):
        results = list(escape_normalized_replacer("hello\nworld", "hello\\nworld"))
        assert results[0] == "hello\nworld"

    def test_escaped_tab(self):
        results = list(escape_normalized_replacer("hello\tworld", "hello\\tworld"))
        assert results[0] == "hello\tworld"

    def test_escaped_quotes(self):
        results = list(escape_normalized_replacer('say "hello"', 'say \\"hello\\"'))
        assert results[0] == 'say "hello"'

    def test_escaped_dollar_and_backtick(self):
        content = "echo `date` $HOME"
        results = list(escape_normalized_replacer(content, "echo \\`date\\` \\$HOME"))
        assert results[0] == content

    def test_content_block_with_escapes(self):
        content = 'msg = "a\\tb"'
        results = list(escape_normalized_replacer(content, 'msg = "a\tb"'))
        assert results == [content]

    def test_no_match(self):
        assert list(escape_normalized_replacer("plain", "other\\n")) == []


# ---------------------------------------------------------------------------
# Strategy 7 - TrimmedBoundary
# ---------------------------------------------------------------------------


class TestTrimmedBoundaryReplacer:
    def test_no_boundary_whitespace_yields_nothing(self):
        assert list(trimmed_boundary_replacer("hello world", "hello")) == []

    def test_trimmed_search(self):
        assert list(trimmed_boundary_replacer("hello world", "  hello  ")) == ["hello"]

    def test_block_with_trimmed_boundaries(self):
        content = "a\n  x\ny  \nb"
        results = list(trimmed_boundary_replacer(content, "  x\ny  "))
        assert results == ["x\ny", "  x\ny  "]


# ---------------------------------------------------------------------------
# Strategy 8 - ContextAware
# ---------------------------------------------------------------------------


class TestContextAwareReplacer:
    def test_requires_three_lines(self):
        assert list(context_aware_replacer("line1\nline2", "line1\nline2")) == []

    def test_identical_block(self):
        content = "function foo() {\n  const x = 1;\n}"
        assert list(context_aware_replacer(content, content)) == [content]

    def test_completely_different_body(self):
        content = "start\nAAAA\nBBBB\nend"
        assert list(context_aware_replacer(content, "start\nXXXX\nYYYY\nend")) == []

    def test_half_matching_body(self):
        content = "start\nAAAA\nBBBB\nend"
        assert list(context_aware_replacer(content, "start\nAAAA\nZZZZ\nend")) == [content]

    def test_block_length_must_match(self):
        content = "start\nA\nB\nC\nend"
        assert list(context_aware_replacer(content, "start\nA\nend")) == []

    def test_only_first_closing_anchor_considered(self):
        # The first "end" gives a block of the wrong size; later ones are ignored
        content = "start\nA\nB\nend\nend"
        assert list(context_aware_replacer(content, "start\nA\nB\nX\nend")) == []


# ---------------------------------------------------------------------------
# Strategy 9 - MultiOccurrence
# ---------------------------------------------------------------------------


class TestMultiOccurrenceReplacer:
    def test_all_occurrences(self):
        assert list(multi_occurrence_replacer("foo bar foo baz foo", "foo")) == ["foo"] * 3

    def test_no_occurrences(self):
        assert list(multi_occurrence_replacer("hello world", "notfound")) == []

    def test_overlap_counted_once(self):
        assert list(multi_occurrence_replacer("aaa", "aa")) == ["aa"]

    def test_empty_find(self):
        assert list(multi_occurrence_replacer("abc", "")) == []
