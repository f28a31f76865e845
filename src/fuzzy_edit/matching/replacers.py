"""Candidate generators for locating a search string in content.

Each replacer is a generator function ``(content, find) -> Iterator[str]``.
Every yielded string is a *candidate*: literal text that the replacer claims
occurs in *content* and stands for what *find* meant.  Replacers never decide
whether a candidate is usable; the resolver checks presence and uniqueness.

Replacers are listed in ``REPLACERS`` strictest-first.  Calling a replacer
always starts a fresh scan, nothing is carried between calls.

The anchor-based replacers pair every opening anchor line with a closing one,
so their cost grows with the square of the line count, and BlockAnchor adds a
quadratic edit distance per compared line.  That is fine for interactively
sized edits but worth keeping in mind for very large documents.
"""

import logging
import re
from typing import Callable, Iterator

from .distance import line_similarity

logger = logging.getLogger(__name__)

Replacer = Callable[[str, str], Iterator[str]]

# BlockAnchor: a lone anchor pair is always accepted; among several pairs the
# best one must reach this average interior similarity.
SINGLE_CANDIDATE_SIMILARITY_THRESHOLD = 0.0
MULTIPLE_CANDIDATES_SIMILARITY_THRESHOLD = 0.3

# ContextAware: fraction of interior lines that must match exactly.
CONTEXT_MATCH_THRESHOLD = 0.5

_WHITESPACE_RUN = re.compile(r"\s+")
_ESCAPE_SEQUENCE = re.compile(r"\\(n|t|r|'|\"|`|\\|\n|\$)")
_UNESCAPED = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "'": "'",
    '"': '"',
    "`": "`",
    "\\": "\\",
    "\n": "\n",
    "$": "$",
}


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------


def _search_lines(find: str) -> list[str]:
    """Split *find* into lines, dropping one trailing empty line."""
    lines = find.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def _windows(lines: list[str], size: int) -> Iterator[str]:
    """Yield every run of *size* consecutive lines, joined back with newlines."""
    for i in range(len(lines) - size + 1):
        yield "\n".join(lines[i : i + size])


def _anchor_pairs(lines: list[str], first: str, last: str) -> Iterator[tuple[int, int]]:
    """Yield ``(start, end)`` line pairs bounded by the stripped anchor lines.

    Only the first closing anchor at least two lines after each opening anchor
    is paired with it.
    """
    for i, line in enumerate(lines):
        if line.strip() != first:
            continue
        for j in range(i + 2, len(lines)):
            if lines[j].strip() == last:
                yield i, j
                break


def _interior_similarity(
    content_lines: list[str],
    search_lines: list[str],
    start: int,
    end: int,
) -> float:
    """Average edit-distance similarity of the lines between the anchors.

    Lines that are blank on both sides add nothing but still count towards
    the average.  Blocks without interior lines score 1.0.
    """
    block_size = end - start + 1
    lines_to_check = min(len(search_lines) - 2, block_size - 2)
    if lines_to_check <= 0:
        return 1.0

    similarity = 0.0
    for j in range(1, lines_to_check + 1):
        original = content_lines[start + j].strip()
        searched = search_lines[j].strip()
        if not original and not searched:
            continue
        similarity += line_similarity(original, searched)

    return similarity / lines_to_check


def _normalize_whitespace(text: str) -> str:
    return _WHITESPACE_RUN.sub(" ", text).strip()


def _remove_indentation(text: str) -> str:
    """Strip the indentation shared by all non-blank lines."""
    lines = text.split("\n")
    non_empty = [line for line in lines if line.strip()]
    if not non_empty:
        return text

    min_indent = min(len(line) - len(line.lstrip()) for line in non_empty)
    return "\n".join(line if not line.strip() else line[min_indent:] for line in lines)


def _unescape(text: str) -> str:
    return _ESCAPE_SEQUENCE.sub(lambda m: _UNESCAPED[m.group(1)], text)


# ---------------------------------------------------------------------------
# Strategy 1 - Exact
# ---------------------------------------------------------------------------


def simple_replacer(content: str, find: str) -> Iterator[str]:
    """Yield *find* unchanged."""
    yield find


# ---------------------------------------------------------------------------
# Strategy 2 - LineTrimmed
# ---------------------------------------------------------------------------


def line_trimmed_replacer(content: str, find: str) -> Iterator[str]:
    """Match windows whose lines equal the search lines once both are stripped.

    The yielded candidate is the original, unstripped window text.
    """
    original_lines = content.split("\n")
    search_lines = _search_lines(find)
    size = len(search_lines)

    for i in range(len(original_lines) - size + 1):
        if all(
            original_lines[i + j].strip() == search_lines[j].strip()
            for j in range(size)
        ):
            yield "\n".join(original_lines[i : i + size])


# ---------------------------------------------------------------------------
# Strategy 3 - BlockAnchor
# ---------------------------------------------------------------------------


def block_anchor_replacer(content: str, find: str) -> Iterator[str]:
    """Match a block by its first and last lines, scoring the lines in between.

    Needs at least three search lines.  A single anchor pair is accepted
    as-is; with several pairs the most similar body wins if it scores at
    least ``MULTIPLE_CANDIDATES_SIMILARITY_THRESHOLD``.
    """
    if len(find.split("\n")) < 3:
        return

    original_lines = content.split("\n")
    search_lines = _search_lines(find)
    first = search_lines[0].strip()
    last = search_lines[-1].strip()

    candidates = list(_anchor_pairs(original_lines, first, last))
    if not candidates:
        return

    if len(candidates) == 1:
        start, end = candidates[0]
        similarity = _interior_similarity(original_lines, search_lines, start, end)
        if similarity >= SINGLE_CANDIDATE_SIMILARITY_THRESHOLD:
            yield "\n".join(original_lines[start : end + 1])
        return

    best: tuple[int, int] | None = None
    max_similarity = -1.0
    for start, end in candidates:
        similarity = _interior_similarity(original_lines, search_lines, start, end)
        if similarity > max_similarity:
            max_similarity = similarity
            best = (start, end)

    logger.debug(
        f"block_anchor: {len(candidates)} anchor pairs, best similarity {max_similarity:.2f}"
    )
    if best is not None and max_similarity >= MULTIPLE_CANDIDATES_SIMILARITY_THRESHOLD:
        start, end = best
        yield "\n".join(original_lines[start : end + 1])


# ---------------------------------------------------------------------------
# Strategy 4 - WhitespaceNormalized
# ---------------------------------------------------------------------------


def whitespace_normalized_replacer(content: str, find: str) -> Iterator[str]:
    """Match text after collapsing whitespace runs to single spaces.

    Single lines match whole or, failing that, through a regex that allows
    any whitespace between the search words.  Multi-line searches are also
    compared against whole blocks of the same line count.
    """
    normalized_find = _normalize_whitespace(find)
    lines = content.split("\n")

    for line in lines:
        normalized_line = _normalize_whitespace(line)
        if normalized_line == normalized_find:
            yield line
        elif normalized_find in normalized_line:
            words = find.split()
            if not words:
                continue
            pattern = r"\s+".join(re.escape(word) for word in words)
            try:
                match = re.search(pattern, line)
            except re.error:
                # Unusable pattern, this line simply yields nothing
                continue
            if match:
                yield match.group(0)

    find_lines = find.split("\n")
    if len(find_lines) > 1:
        for block in _windows(lines, len(find_lines)):
            if _normalize_whitespace(block) == normalized_find:
                yield block


# ---------------------------------------------------------------------------
# Strategy 5 - IndentationFlexible
# ---------------------------------------------------------------------------


def indentation_flexible_replacer(content: str, find: str) -> Iterator[str]:
    """Match blocks that are equal once their common indentation is removed."""
    normalized_find = _remove_indentation(find)
    content_lines = content.split("\n")

    for block in _windows(content_lines, len(find.split("\n"))):
        if _remove_indentation(block) == normalized_find:
            yield block


# ---------------------------------------------------------------------------
# Strategy 6 - EscapeNormalized
# ---------------------------------------------------------------------------


def escape_normalized_replacer(content: str, find: str) -> Iterator[str]:
    """Match after resolving backslash escapes such as ``\\n`` and ``\\"``."""
    unescaped_find = _unescape(find)

    if unescaped_find in content:
        yield unescaped_find

    lines = content.split("\n")
    for block in _windows(lines, len(unescaped_find.split("\n"))):
        if _unescape(block) == unescaped_find:
            yield block


# ---------------------------------------------------------------------------
# Strategy 7 - TrimmedBoundary
# ---------------------------------------------------------------------------


def trimmed_boundary_replacer(content: str, find: str) -> Iterator[str]:
    """Match the search text without its leading and trailing whitespace."""
    trimmed_find = find.strip()
    if trimmed_find == find:
        return

    if trimmed_find in content:
        yield trimmed_find

    lines = content.split("\n")
    for block in _windows(lines, len(find.split("\n"))):
        if block.strip() == trimmed_find:
            yield block


# ---------------------------------------------------------------------------
# Strategy 8 - ContextAware
# ---------------------------------------------------------------------------


def context_aware_replacer(content: str, find: str) -> Iterator[str]:
    """Match same-sized blocks between anchors when enough interior lines agree.

    At least ``CONTEXT_MATCH_THRESHOLD`` of the interior lines that are not
    blank on both sides must match exactly after stripping.
    """
    if len(find.split("\n")) < 3:
        return

    find_lines = _search_lines(find)
    content_lines = content.split("\n")
    first = find_lines[0].strip()
    last = find_lines[-1].strip()

    for start, end in _anchor_pairs(content_lines, first, last):
        block_lines = content_lines[start : end + 1]
        if len(block_lines) != len(find_lines):
            continue

        matching = 0
        total = 0
        for k in range(1, len(block_lines) - 1):
            block_line = block_lines[k].strip()
            find_line = find_lines[k].strip()
            if block_line or find_line:
                total += 1
                if block_line == find_line:
                    matching += 1

        if total == 0 or matching / total >= CONTEXT_MATCH_THRESHOLD:
            yield "\n".join(block_lines)


# ---------------------------------------------------------------------------
# Strategy 9 - MultiOccurrence
# ---------------------------------------------------------------------------


def multi_occurrence_replacer(content: str, find: str) -> Iterator[str]:
    """Yield *find* once per non-overlapping exact occurrence."""
    if not find:
        return

    start = 0
    while True:
        index = content.find(find, start)
        if index == -1:
            break
        yield find
        start = index + len(find)


REPLACERS: tuple[tuple[str, Replacer], ...] = (
    ("exact", simple_replacer),
    ("line_trimmed", line_trimmed_replacer),
    ("block_anchor", block_anchor_replacer),
    ("whitespace_normalized", whitespace_normalized_replacer),
    ("indentation_flexible", indentation_flexible_replacer),
    ("escape_normalized", escape_normalized_replacer),
    ("trimmed_boundary", trimmed_boundary_replacer),
    ("context_aware", context_aware_replacer),
    ("multi_occurrence", multi_occurrence_replacer),
)
