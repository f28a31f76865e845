"""Resolve a search string to one exact span of content and substitute it.

Replacers are consulted strictest-first.  For each candidate they produce the
resolver checks that its literal text really occurs in the content and, unless
every occurrence is to be replaced, that it occurs exactly once.  The first
candidate passing those checks wins and no later replacer runs.
"""

import logging
from dataclasses import dataclass

from ..errors import AmbiguousMatchError, NotFoundError, ValidationError
from .replacers import REPLACERS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchResult:
    """Outcome of a successful replacement."""

    content: str
    strategy: str
    candidate: str
    replacements: int


def resolve_replacement(
    content: str,
    old_string: str,
    new_string: str,
    replace_all: bool = False,
) -> MatchResult:
    """Replace *old_string* in *content*, reporting how the match was found.

    Args:
        content: Full document text with ``\\n`` line endings.
        old_string: Text to locate, possibly differing from the content in
            whitespace, indentation, escaping or boundaries.
        new_string: Replacement text.
        replace_all: Replace every occurrence of the winning candidate
            instead of requiring a unique one.

    Returns:
        MatchResult with the new content, the winning strategy name, the
        literal text that was replaced and the number of replacements.

    Raises:
        ValidationError: If old_string equals new_string.
        NotFoundError: If no strategy located old_string.
        AmbiguousMatchError: If old_string was located but never uniquely.
    """
    if old_string == new_string:
        raise ValidationError()

    found = False

    for name, replacer in REPLACERS:
        for candidate in replacer(content, old_string):
            index = content.find(candidate)
            if index == -1:
                continue

            found = True

            if replace_all:
                count = content.count(candidate)
                logger.debug(f"{name}: replacing {count} occurrence(s)")
                return MatchResult(
                    content=content.replace(candidate, new_string),
                    strategy=name,
                    candidate=candidate,
                    replacements=count,
                )

            if index != content.rfind(candidate):
                logger.debug(f"{name}: candidate occurs more than once, skipping")
                continue

            logger.debug(f"{name}: unique match at offset {index}")
            return MatchResult(
                content=content[:index] + new_string + content[index + len(candidate) :],
                strategy=name,
                candidate=candidate,
                replacements=1,
            )

    if not found:
        raise NotFoundError()

    raise AmbiguousMatchError()


def replace(
    content: str,
    old_string: str,
    new_string: str,
    replace_all: bool = False,
) -> str:
    """Replace *old_string* in *content* and return the new text.

    See :func:`resolve_replacement` for the matching rules and errors.
    """
    return resolve_replacement(content, old_string, new_string, replace_all).content
