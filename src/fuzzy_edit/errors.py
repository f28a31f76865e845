"""Exception types raised by fuzzy-edit.

Every error is raised before any text is modified, so callers never see a
partially applied replacement.
"""

from typing import Optional


class EditError(Exception):
    """Base class for all fuzzy-edit errors."""


class ValidationError(EditError, ValueError):
    """The replacement request is invalid (old and new text are identical)."""

    def __init__(self, message: str = "old_string and new_string must be different"):
        super().__init__(message)


class NotFoundError(EditError, LookupError):
    """No strategy located old_string in the content."""

    def __init__(self, message: str = "old_string not found in content"):
        super().__init__(message)


class AmbiguousMatchError(EditError, LookupError):
    """old_string was located, but never at a single unique position."""

    def __init__(
        self,
        message: str = (
            "Found multiple matches for old_string. Provide more surrounding lines "
            "in old_string to identify the correct match, or set replace_all."
        ),
    ):
        super().__init__(message)


class FileAccessError(EditError, OSError):
    """The edit target cannot be used as a text file on disk."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path
