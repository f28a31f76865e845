"""Fuzzy matching engine: replacers, distance scoring and the resolver."""

from .distance import levenshtein, line_similarity
from .replacers import (
    REPLACERS,
    Replacer,
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
from .resolver import MatchResult, replace, resolve_replacement

__all__ = [
    "levenshtein",
    "line_similarity",
    "Replacer",
    "REPLACERS",
    "simple_replacer",
    "line_trimmed_replacer",
    "block_anchor_replacer",
    "whitespace_normalized_replacer",
    "indentation_flexible_replacer",
    "escape_normalized_replacer",
    "trimmed_boundary_replacer",
    "context_aware_replacer",
    "multi_occurrence_replacer",
    "MatchResult",
    "replace",
    "resolve_replacement",
]
