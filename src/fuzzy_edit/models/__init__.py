"""Data models for fuzzy-edit."""

from .schemas import EditOutcome, EditRequest, EditStatus

__all__ = [
    "EditOutcome",
    "EditRequest",
    "EditStatus",
]
