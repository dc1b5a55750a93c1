"""
Centralized error handling for the resume builder.

Defines the exception taxonomy shared by the core and the HTTP service:
validation errors surface as client errors (HTTP 400), everything else is
an internal failure (HTTP 500).
"""

from typing import Any, Optional


class ResumeBuilderError(Exception):
    """Base class for all resume builder errors."""


class ProfileValidationError(ResumeBuilderError):
    """
    A required profile field is missing or a request value is not allowed.

    Attributes:
        field: Dotted path of the offending field (e.g. "personal.fullName")
        message: Human-readable message, safe to return to the client
    """

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field


class InvalidDocumentKindError(ProfileValidationError):
    """Requested document type is not one of resume, cover-letter, both."""

    def __init__(self, kind: Any):
        super().__init__(
            "Invalid type. Must be one of: resume, cover-letter, both",
            field="type",
        )
        self.kind = kind


class SectionUpdateError(ResumeBuilderError):
    """A section update was given an unknown section or a value of the wrong type."""


class DraftStoreError(ResumeBuilderError):
    """The draft slot could not be written or cleared."""


def _resolve(obj: Any, path: str) -> Any:
    """Follow a dotted attribute path, returning None when a link is missing."""
    current = obj
    for part in path.split("."):
        if current is None:
            return None
        if isinstance(current, dict):
            current = current.get(part)
        else:
            current = getattr(current, part, None)
    return current


def require_fields(obj: Any, *paths: str, message: Optional[str] = None) -> None:
    """
    Ensure every dotted path resolves to a non-blank value.

    Args:
        obj: Model instance or dict to inspect
        *paths: Dotted field paths, checked in order
        message: Fixed message to raise instead of one listing the missing fields

    Raises:
        ProfileValidationError: naming the first missing field
    """
    missing = []
    for path in paths:
        value = _resolve(obj, path)
        if value is None or (isinstance(value, str) and not value.strip()):
            missing.append(path)

    if not missing:
        return

    if message is None:
        if len(missing) == 1:
            message = f"Missing required field: {missing[0]} is required"
        else:
            message = f"Missing required fields: {' and '.join(missing)} are required"
    raise ProfileValidationError(message, field=missing[0])
