"""Schema, validation and derived operations for .buildlog session recordings."""

from .config import BuildlogConfig
from .errors import BuildlogError, BuildlogSchemaError, BuildlogSyntaxError
from .files import get_extension, get_mime_type, is_buildlog_file
from .formatting import (
    detect_language,
    format_bytes,
    format_duration,
    get_event_icon,
    get_event_label,
    get_step_icon,
    get_step_label,
    slugify,
)
from .models import (
    BuildlogV1,
    BuildlogV2,
    Document,
    ValidationIssue,
    ValidationResult,
    ValidationWarning,
)
from .operations import (
    BuildlogStatsV1,
    BuildlogStatsV2,
    compute_stats,
    estimate_document_size,
    is_replicable,
    to_slim,
)
from .validator import (
    decode_json,
    document_size_bytes,
    load_document,
    parse_document,
    safe_parse_document,
    serialize_document,
    validate_document,
)

__version__ = "2.0.0"

__all__ = [
    "__version__",
    "BuildlogConfig",
    # Errors
    "BuildlogError",
    "BuildlogSyntaxError",
    "BuildlogSchemaError",
    # Documents
    "Document",
    "BuildlogV1",
    "BuildlogV2",
    "ValidationIssue",
    "ValidationWarning",
    "ValidationResult",
    # Validation and parsing
    "validate_document",
    "parse_document",
    "decode_json",
    "safe_parse_document",
    "load_document",
    "serialize_document",
    "document_size_bytes",
    # Derived operations
    "BuildlogStatsV1",
    "BuildlogStatsV2",
    "compute_stats",
    "estimate_document_size",
    "is_replicable",
    "to_slim",
    # Files and formatting
    "is_buildlog_file",
    "get_extension",
    "get_mime_type",
    "detect_language",
    "format_duration",
    "format_bytes",
    "slugify",
    "get_step_icon",
    "get_step_label",
    "get_event_icon",
    "get_event_label",
]
