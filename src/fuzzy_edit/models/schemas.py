"""Pydantic data models for file edits."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class EditStatus(str, Enum):
    """Final status of an edit."""

    SUCCESS = "success"
    ERROR = "error"


class EditRequest(BaseModel):
    """A single string replacement to apply to a file."""

    file_path: str = Field(..., description="Path of the file to modify")
    old_string: str = Field(..., description="The text to replace (empty replaces the whole file)")
    new_string: str = Field(..., description="The replacement text")
    replace_all: bool = Field(False, description="Replace every occurrence of old_string")


class EditOutcome(BaseModel):
    """Result of applying an edit to a file."""

    status: EditStatus = Field(..., description="Whether the edit was applied")
    file_path: str = Field(..., description="Resolved absolute path of the file")
    message: str = Field(..., description="Short human-readable summary")
    diff: Optional[str] = Field(None, description="Unified diff of the change")
    error: Optional[str] = Field(None, description="Error description when the edit failed")
    strategy: Optional[str] = Field(None, description="Matching strategy that located old_string")

    @property
    def succeeded(self) -> bool:
        return self.status == EditStatus.SUCCESS

    def to_model_output(self) -> str:
        """Render the outcome as plain text for a calling agent.

        Returns:
            The error line for failures, otherwise the message followed by the diff
        """
        if self.status == EditStatus.ERROR:
            return f"Error editing {self.file_path}: {self.error}"
        return f"{self.message}\n\nChanges:\n{self.diff or ''}"
