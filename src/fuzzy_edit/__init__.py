"""fuzzy-edit: resilient search-and-replace for text documents.

Locates a search string even when the caller's copy differs from the document
in whitespace, indentation, escaping or exact boundaries, and replaces it only
when the match is unambiguous.
"""

__version__ = "0.1.0"

from .errors import (
    AmbiguousMatchError,
    EditError,
    FileAccessError,
    NotFoundError,
    ValidationError,
)
from .matching import REPLACERS, MatchResult, replace, resolve_replacement
from .tools import EditTool, edit_file

__all__ = [
    "__version__",
    "replace",
    "resolve_replacement",
    "MatchResult",
    "REPLACERS",
    "EditTool",
    "edit_file",
    "EditError",
    "ValidationError",
    "NotFoundError",
    "AmbiguousMatchError",
    "FileAccessError",
]
