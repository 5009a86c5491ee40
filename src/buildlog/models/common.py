"""Shared primitives, vocabularies and nested records for both buildlog generations."""

import re
from datetime import datetime
from enum import Enum
from typing import Annotated, Any
from urllib.parse import urlparse

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    Field,
    Strict,
    StrictStr,
    ValidationInfo,
    field_validator,
)
from pydantic.alias_generators import to_camel

from ..constants import (
    BUILDLOG_MAX_DESCRIPTION_LENGTH,
    BUILDLOG_MAX_TAG_LENGTH,
    BUILDLOG_MAX_TAGS,
    BUILDLOG_MAX_TITLE_LENGTH,
)

# Any version/variant, case-insensitive
UUID_PATTERN = r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"

_DATETIME_RE = re.compile(r"([0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}:[0-9]{2})(\.[0-9]+)?Z")


def _integral_float(value: Any) -> Any:
    # JSON has one number type: 5.0 is an integer
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _check_datetime(value: str) -> str:
    match = _DATETIME_RE.fullmatch(value)
    if not match:
        raise ValueError("Invalid datetime, expected ISO 8601 UTC (YYYY-MM-DDTHH:MM:SS[.fff]Z)")
    try:
        datetime.strptime(match.group(1), "%Y-%m-%dT%H:%M:%S")
    except ValueError as e:
        raise ValueError(f"Invalid datetime: {e}") from e
    return value


def _check_url(value: str) -> str:
    parsed = urlparse(value)
    if not parsed.scheme or not (parsed.netloc or parsed.path):
        raise ValueError("Invalid url")
    return value


Uuid = Annotated[StrictStr, Field(pattern=UUID_PATTERN)]
IsoDatetime = Annotated[StrictStr, AfterValidator(_check_datetime)]
Url = Annotated[StrictStr, AfterValidator(_check_url)]
NonEmptyStr = Annotated[StrictStr, Field(min_length=1)]
NonNegativeInt = Annotated[int, Strict(), Field(ge=0), BeforeValidator(_integral_float)]
StrictInteger = Annotated[int, Strict(), BeforeValidator(_integral_float)]
NonNegativeNumber = Annotated[float, Strict(), Field(ge=0, allow_inf_nan=False)]

Title = Annotated[StrictStr, Field(min_length=1, max_length=BUILDLOG_MAX_TITLE_LENGTH)]
Description = Annotated[StrictStr, Field(max_length=BUILDLOG_MAX_DESCRIPTION_LENGTH)]
Tag = Annotated[StrictStr, Field(max_length=BUILDLOG_MAX_TAG_LENGTH)]
Tags = Annotated[list[Tag], Field(max_length=BUILDLOG_MAX_TAGS)]


class BuildlogModel(BaseModel):
    """Base for every buildlog record.

    Attributes are snake_case in Python and camelCase on the wire.
    Unknown keys are dropped; instances are immutable once validated.
    Optional fields may be omitted but not set to null; an omitted field
    reads as None.
    """

    model_config = {
        "frozen": True,
        "alias_generator": to_camel,
        "populate_by_name": True,
        "extra": "ignore",
    }

    @field_validator("*", mode="before")
    @classmethod
    def reject_null(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None and not cls.model_fields[info.field_name].is_required():
            raise ValueError("Expected a value, received null; omit the field instead")
        return value


class EditorType(str, Enum):
    """Editor or IDE a session was recorded in."""

    CURSOR = "cursor"
    VSCODE = "vscode"
    WINDSURF = "windsurf"
    ZED = "zed"
    NEOVIM = "neovim"
    JETBRAINS = "jetbrains"
    OPENCLAW = "openclaw"
    OTHER = "other"


class AIProvider(str, Enum):
    """AI assistant vendor."""

    CLAUDE = "claude"
    GPT = "gpt"
    COPILOT = "copilot"
    GEMINI = "gemini"
    OTHER = "other"


class ChangeSource(str, Enum):
    """How a code change was made."""

    MANUAL = "manual"
    AI_ACCEPTED = "ai_accepted"
    AI_PARTIAL = "ai_partial"
    AI_REJECTED_THEN_MANUAL = "ai_rejected_then_manual"


class NoteCategory(str, Enum):
    EXPLANATION = "explanation"
    GOTCHA = "gotcha"
    TIP = "tip"
    WARNING = "warning"
    TODO = "todo"


class ErrorCategory(str, Enum):
    BUILD = "build"
    RUNTIME = "runtime"
    LINT = "lint"
    TYPE = "type"
    TEST = "test"
    OTHER = "other"


class BuildlogAuthor(BuildlogModel):
    """Who recorded the session."""

    name: StrictStr | None = None
    username: StrictStr | None = None
    url: Url | None = None
    avatar_url: Url | None = None


class BuildlogProject(BuildlogModel):
    """Repository the session worked against."""

    name: StrictStr | None = None
    repository: StrictStr | None = None
    branch: StrictStr | None = None
    commit: StrictStr | None = None


class FileSnapshot(BuildlogModel):
    """A single file's content at a point in time."""

    path: NonEmptyStr = Field(description="Relative path from workspace root")
    content: StrictStr
    language: StrictStr = Field(description="Language identifier for syntax highlighting")
    size_bytes: NonNegativeInt | None = None
    hash: StrictStr | None = Field(default=None, description="SHA-256 of content")


class BuildlogState(BuildlogModel):
    """Snapshot of tracked files. The file list may be empty."""

    files: list[FileSnapshot]
    file_tree: list[StrictStr] | None = None


class BaseEntry(BuildlogModel):
    """Fields carried by every event (v1) and step (v2).

    sequence is conventionally 0-indexed and gap-free and timestamps are
    non-decreasing, but neither is enforced here.
    """

    id: Uuid
    timestamp: NonNegativeNumber = Field(description="Seconds since session start")
    sequence: NonNegativeInt
