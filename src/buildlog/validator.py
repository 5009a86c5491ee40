"""Validate, parse and serialize buildlog documents.

validate_document() never raises: failures come back as a ValidationResult.
parse_document() raises BuildlogSyntaxError for malformed JSON and
BuildlogSchemaError (carrying the same issue list) for schema violations.
safe_parse_document() collapses both to None.

The schema is chosen by the literal ``version`` field before anything else
is checked; v1 and v2 documents share no root schema.
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional, Union

from pydantic import ValidationError

from .config import BuildlogConfig
from .constants import BUILDLOG_V1_VERSION, BUILDLOG_V2_VERSION
from .errors import BuildlogError, BuildlogSchemaError, BuildlogSyntaxError
from .formatting import format_bytes
from .models import (
    BuildlogV1,
    BuildlogV2,
    CaptureFormat,
    Document,
    ValidationIssue,
    ValidationResult,
    ValidationWarning,
)

logger = logging.getLogger(__name__)

SCHEMAS: dict[str, type[BuildlogV1] | type[BuildlogV2]] = {
    BUILDLOG_V1_VERSION: BuildlogV1,
    BUILDLOG_V2_VERSION: BuildlogV2,
}

_EXPECTED_VERSIONS = ", ".join(repr(v) for v in SCHEMAS)


def _issue_path(loc: tuple, data: Any) -> str:
    """Dot-join an error location, following the input to drop union tags.

    pydantic inserts the discriminator value (e.g. "prompt") into the
    location of errors inside a tagged union; it is not part of the input.
    """
    parts: list[str] = []
    current = data
    for part in loc:
        if isinstance(current, list) and isinstance(part, int) and 0 <= part < len(current):
            parts.append(str(part))
            current = current[part]
        elif isinstance(current, dict) and part not in current and current.get("type") == part:
            continue
        elif isinstance(current, dict) and part in current:
            parts.append(str(part))
            current = current[part]
        else:
            parts.append(str(part))
            current = None
    return ".".join(parts)


def _check_schema(data: Any) -> tuple[Optional[Document], list[ValidationIssue]]:
    """Select the schema by version and validate, collecting every issue."""
    if not isinstance(data, dict):
        return None, [
            ValidationIssue(path="", message="Input should be an object", code="model_type")
        ]

    if "version" not in data:
        return None, [
            ValidationIssue(
                path="version",
                message=f"Missing version; expected one of {_EXPECTED_VERSIONS}",
                code="union_tag_not_found",
            )
        ]

    version = data["version"]
    schema = SCHEMAS.get(version) if isinstance(version, str) else None
    if schema is None:
        return None, [
            ValidationIssue(
                path="version",
                message=f"Unsupported version {version!r}; expected one of {_EXPECTED_VERSIONS}",
                code="union_tag_invalid",
            )
        ]

    logger.debug(f"Validating buildlog against {schema.__name__}")
    try:
        return schema.model_validate(data), []
    except ValidationError as e:
        issues = [
            ValidationIssue(
                path=_issue_path(err["loc"], data),
                message=err["msg"],
                code=err["type"],
            )
            for err in e.errors()
        ]
        logger.debug(f"Buildlog rejected with {len(issues)} issue(s)")
        return None, issues


def serialize_document(document: Document, indent: Optional[int] = None) -> str:
    """Serialize to the canonical JSON form (camelCase, absent fields omitted).

    Without indent the output is compact; this is the form sizes are measured on.
    """
    data = document.model_dump(mode="json", by_alias=True, exclude_unset=True)
    if indent is None:
        return json.dumps(data, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    return json.dumps(data, indent=indent, ensure_ascii=False, allow_nan=False)


def document_size_bytes(document: Document) -> int:
    """UTF-8 byte length of the canonical serialization."""
    return len(serialize_document(document).encode("utf-8"))


def _size_warnings(document: Document, config: BuildlogConfig) -> list[ValidationWarning]:
    warnings: list[ValidationWarning] = []
    size = document_size_bytes(document)

    if isinstance(document, BuildlogV2):
        entries_path = "steps"
        if document.format == CaptureFormat.SLIM and size > config.max_slim_size_bytes:
            warnings.append(
                ValidationWarning(
                    path="format",
                    message=(
                        f"Slim buildlog is {format_bytes(size)}, which exceeds the recommended "
                        f"{format_bytes(config.max_slim_size_bytes)} limit"
                    ),
                    suggestion="Consider removing full diffs or AI responses, or switch to full format",
                )
            )
        if document.format == CaptureFormat.FULL and size > config.max_full_size_bytes:
            warnings.append(
                ValidationWarning(
                    path="format",
                    message=(
                        f"Full buildlog is {format_bytes(size)}, which exceeds the recommended "
                        f"{format_bytes(config.max_full_size_bytes)} limit"
                    ),
                    suggestion="Consider splitting into multiple buildlogs",
                )
            )
    else:
        entries_path = "events"
        if size > config.max_v1_size_bytes:
            warnings.append(
                ValidationWarning(
                    path="",
                    message=(
                        f"Buildlog is {format_bytes(size)}, which exceeds the recommended "
                        f"{format_bytes(config.max_v1_size_bytes)} limit"
                    ),
                    suggestion="Consider splitting into multiple buildlogs",
                )
            )

    count = len(document.entries)
    if count > config.max_entries:
        warnings.append(
            ValidationWarning(
                path=entries_path,
                message=f"Buildlog has {count} {entries_path}, more than the recommended {config.max_entries}",
                suggestion="Consider splitting into multiple buildlogs",
            )
        )

    return warnings


def validate_document(data: Any, config: Optional[BuildlogConfig] = None) -> ValidationResult:
    """Validate an already-decoded JSON value.

    Args:
        data: Any JSON-compatible value (typically a dict)
        config: Advisory thresholds; defaults to BuildlogConfig()

    Returns:
        ValidationResult with every schema issue on failure, or advisory
        warnings (if any) on success
    """
    document, issues = _check_schema(data)
    if document is None:
        return ValidationResult(valid=False, errors=issues)

    warnings = _size_warnings(document, config or BuildlogConfig())
    for warning in warnings:
        logger.info(f"Buildlog advisory at '{warning.path}': {warning.message}")

    return ValidationResult(valid=True, warnings=warnings or None)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not a JSON value")


def decode_json(text: Union[str, bytes]) -> Any:
    """Decode strict JSON text.

    Python's json module accepts NaN, Infinity and -Infinity; they are
    rejected here.

    Raises:
        BuildlogSyntaxError: text is not well-formed JSON
    """
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise BuildlogSyntaxError(f"Invalid JSON: {e.msg}", e.lineno, e.colno) from e
    except UnicodeDecodeError as e:
        raise BuildlogSyntaxError(f"Invalid UTF-8: {e}") from e
    except ValueError as e:
        raise BuildlogSyntaxError(f"Invalid JSON: {e}") from e


def parse_document(text: Union[str, bytes]) -> Document:
    """Decode JSON text and validate it as a buildlog.

    Raises:
        BuildlogSyntaxError: text is not well-formed JSON
        BuildlogSchemaError: JSON is well-formed but not a valid buildlog
    """
    data = decode_json(text)

    document, issues = _check_schema(data)
    if document is None:
        raise BuildlogSchemaError(issues)
    return document


def safe_parse_document(text: Union[str, bytes]) -> Optional[Document]:
    """Parse a buildlog, returning None on any syntax or schema failure."""
    try:
        return parse_document(text)
    except BuildlogError:
        return None


def load_document(path: Path) -> Document:
    """Read and parse a buildlog file. OSError propagates."""
    return parse_document(Path(path).read_bytes())
