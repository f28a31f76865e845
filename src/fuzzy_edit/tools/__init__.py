"""File editing tools for fuzzy-edit."""

from .diff import create_diff, trim_diff
from .edit_tool import EditTool, edit_file, normalize_line_endings

__all__ = ["EditTool", "edit_file", "normalize_line_endings", "create_diff", "trim_diff"]
