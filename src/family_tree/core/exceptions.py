from __future__ import annotations

from typing import Optional


class FamilyTreeError(Exception):
    """Base exception for family tree failures."""


class PersonNotFoundError(FamilyTreeError, IndexError):
    """Raised when an identifier does not name a stored individual."""

    def __init__(self, person_id: int, size: int):
        super().__init__(
            f"Person id {person_id} out of range (tree holds {size} people)"
        )
        self.person_id = person_id
        self.size = size


class TreeLoadError(FamilyTreeError):
    """Raised when a saved tree cannot be read."""


class TreeFormatError(TreeLoadError, ValueError):
    """Raised when a saved tree is truncated or malformed."""

    def __init__(self, message: str, lineno: Optional[int] = None):
        if lineno is not None:
            message = f"Line {lineno}: {message}"
        super().__init__(message)
        self.lineno = lineno


class TreeSaveError(FamilyTreeError):
    """Raised when a tree cannot be written to its destination."""
