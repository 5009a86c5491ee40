"""Exceptions raised when loading buildlog documents."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models.validation import ValidationIssue


class BuildlogError(Exception):
    """Base class for buildlog loading failures."""


class BuildlogSyntaxError(BuildlogError, ValueError):
    """Input text is not well-formed JSON."""

    def __init__(self, message: str, lineno: int | None = None, colno: int | None = None):
        super().__init__(message)
        self.lineno = lineno
        self.colno = colno


class BuildlogSchemaError(BuildlogError, ValueError):
    """Input is well-formed JSON but does not match a buildlog schema.

    Carries the same issue list that validate_document() reports.
    """

    def __init__(self, issues: list[ValidationIssue]):
        self.issues = list(issues)
        if self.issues:
            first = self.issues[0]
            where = first.path or "<root>"
            message = f"Invalid buildlog ({len(self.issues)} issue(s)); first at {where}: {first.message}"
        else:
            message = "Invalid buildlog"
        super().__init__(message)
