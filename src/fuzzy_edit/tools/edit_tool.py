"""File edit tool built on the fuzzy matching engine.

Reads a file, applies a single string replacement through the resolver,
writes the result back and reports the change as a unified diff.  Failures
are returned as error outcomes rather than raised, so a calling agent always
gets a result it can show.
"""

import logging
from pathlib import Path
from typing import Optional

from ..config import Config
from ..errors import EditError, FileAccessError, ValidationError
from ..matching import resolve_replacement
from ..models.schemas import EditOutcome, EditRequest, EditStatus
from .diff import create_diff, trim_diff

logger = logging.getLogger(__name__)


def normalize_line_endings(text: str) -> str:
    """Convert Windows line endings to Unix style."""
    return text.replace("\r\n", "\n")


class EditTool:
    """Applies fuzzy string replacements to files on disk."""

    def __init__(self, config: Optional[Config] = None):
        """Initialize the tool.

        Args:
            config: Application configuration (defaults when omitted)
        """
        config = config or Config()
        self.encoding = config.edit.encoding
        self.context_lines = config.edit.context_lines
        self.trim_diff = config.edit.trim_diff
        self.normalize_line_endings = config.edit.normalize_line_endings

    def edit(
        self,
        file_path: Path | str,
        old_string: str,
        new_string: str,
        replace_all: bool = False,
    ) -> EditOutcome:
        """Replace old_string with new_string in a file.

        An empty old_string overwrites the whole file with new_string.

        Args:
            file_path: Absolute path, or a path relative to the working directory
            old_string: Text to replace
            new_string: Replacement text
            replace_all: Replace every occurrence instead of a unique one

        Returns:
            EditOutcome describing the change or the failure
        """
        path = self._resolve_path(file_path)

        try:
            if old_string == new_string:
                raise ValidationError()

            self._check_file(path)
            content = self.read(path)

            if old_string == "":
                updated = new_string
                strategy = None
                message = f"File created: {path}"
            else:
                result = resolve_replacement(content, old_string, new_string, replace_all)
                updated = result.content
                strategy = result.strategy
                message = f"File edited: {path}"

            self.write(path, updated)
        except EditError as e:
            logger.warning(f"Failed to edit {path}: {e}")
            return EditOutcome(
                status=EditStatus.ERROR,
                file_path=str(path),
                message=f"Failed to edit {path}",
                error=str(e),
            )

        logger.info(message)
        return EditOutcome(
            status=EditStatus.SUCCESS,
            file_path=str(path),
            message=message,
            diff=self._render_diff(str(path), content, updated),
            strategy=strategy,
        )

    def apply(self, request: EditRequest) -> EditOutcome:
        """Apply an EditRequest."""
        return self.edit(
            request.file_path,
            request.old_string,
            request.new_string,
            replace_all=request.replace_all,
        )

    def read(self, path: Path) -> str:
        """Read a file as-is, normalizing line endings if configured.

        Raises:
            FileAccessError: If the file cannot be opened or decoded
        """
        try:
            with open(path, encoding=self.encoding, newline="") as f:
                content = f.read()
        except (OSError, UnicodeError) as e:
            raise FileAccessError(f"Cannot read {path}: {e}", path=str(path)) from e
        if self.normalize_line_endings:
            content = normalize_line_endings(content)
        return content

    def write(self, path: Path, content: str) -> None:
        """Write content back without translating line endings.

        The text is encoded before the file is opened, so an unencodable
        replacement leaves the file untouched.
        """
        try:
            data = content.encode(self.encoding)
            with open(path, "wb") as f:
                f.write(data)
        except (OSError, UnicodeError) as e:
            raise FileAccessError(f"Cannot write {path}: {e}", path=str(path)) from e

    def _resolve_path(self, file_path: Path | str) -> Path:
        path = Path(file_path)
        if not path.is_absolute():
            path = Path.cwd() / path
        return path

    def _check_file(self, path: Path) -> None:
        if not path.exists():
            raise FileAccessError(f"File {path} not found", path=str(path))
        if path.is_dir():
            raise FileAccessError(f"Path is a directory, not a file: {path}", path=str(path))

    def _render_diff(self, path: str, original: str, modified: str) -> str:
        diff = create_diff(path, original, modified, context_lines=self.context_lines)
        return trim_diff(diff) if self.trim_diff else diff


def edit_file(
    file_path: Path | str,
    old_string: str,
    new_string: str,
    replace_all: bool = False,
    config: Optional[Config] = None,
) -> EditOutcome:
    """Edit a file with a one-off EditTool."""
    return EditTool(config).edit(file_path, old_string, new_string, replace_all=replace_all)
