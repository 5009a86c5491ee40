"""Pydantic models for validation reports."""

from pydantic import BaseModel, Field


class ValidationIssue(BaseModel):
    """A single schema violation."""

    path: str = Field(description="Dot-joined location in the input; empty for the root")
    message: str = Field(description="Human-readable explanation")
    code: str = Field(description="Machine-checkable issue code (pydantic error type)")

    model_config = {"frozen": True}


class ValidationWarning(BaseModel):
    """Advisory finding on a structurally valid document."""

    path: str
    message: str
    suggestion: str

    model_config = {"frozen": True}


class ValidationResult(BaseModel):
    """Outcome of validate_document().

    errors is set only when valid is False; warnings only when valid is True
    and at least one advisory fired.
    """

    valid: bool
    errors: list[ValidationIssue] | None = None
    warnings: list[ValidationWarning] | None = None

    model_config = {"frozen": True}
