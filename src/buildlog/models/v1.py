"""Pydantic models for the v1 (events + state snapshots) buildlog format.

A v1 buildlog records the initial and final file-system state and every
event between them, keeping full payloads (diffs, code blocks, token usage,
stack traces).
"""

from typing import Annotated, Any, Literal, Union

from pydantic import Field, StrictBool, StrictStr

from .common import (
    AIProvider,
    BaseEntry,
    BuildlogAuthor,
    BuildlogModel,
    BuildlogProject,
    BuildlogState,
    ChangeSource,
    Description,
    EditorType,
    ErrorCategory,
    IsoDatetime,
    NonEmptyStr,
    NonNegativeInt,
    NonNegativeNumber,
    NoteCategory,
    StrictInteger,
    Tags,
    Title,
    Uuid,
)


class TextSelection(BuildlogModel):
    file_path: StrictStr
    start_line: NonNegativeInt
    end_line: NonNegativeInt
    text: StrictStr


class CodeBlock(BuildlogModel):
    """Code block extracted from an AI response."""

    language: StrictStr
    code: StrictStr
    file_path: StrictStr | None = None
    start_line: NonNegativeInt | None = None


class TokenUsage(BuildlogModel):
    input: NonNegativeInt | None = None
    output: NonNegativeInt | None = None


class LinesChanged(BuildlogModel):
    added: NonNegativeInt
    removed: NonNegativeInt


class NoteReference(BuildlogModel):
    file_path: StrictStr
    start_line: NonNegativeInt | None = None
    end_line: NonNegativeInt | None = None


class PromptEvent(BaseEntry):
    """User prompt sent to an AI assistant."""

    type: Literal["prompt"]
    content: NonEmptyStr
    context_files: list[StrictStr] | None = None
    selection: TextSelection | None = None
    provider: AIProvider | None = None
    model: StrictStr | None = None


class AIResponseEvent(BaseEntry):
    """AI response to a prompt."""

    type: Literal["ai_response"]
    content: StrictStr
    code_blocks: list[CodeBlock] | None = None
    prompt_event_id: Uuid | None = None
    provider: AIProvider | None = None
    model: StrictStr | None = None
    token_usage: TokenUsage | None = None


class CodeChangeEvent(BaseEntry):
    """Modification of an existing file, as a unified diff."""

    type: Literal["code_change"]
    file_path: NonEmptyStr
    diff: StrictStr
    source: ChangeSource
    lines_changed: LinesChanged | None = None
    ai_response_event_id: Uuid | None = None


class FileCreateEvent(BaseEntry):
    type: Literal["file_create"]
    file_path: NonEmptyStr
    content: StrictStr
    language: StrictStr
    source: Literal["manual", "ai_accepted"]
    ai_response_event_id: Uuid | None = None


class FileDeleteEvent(BaseEntry):
    type: Literal["file_delete"]
    file_path: NonEmptyStr
    previous_content: StrictStr | None = None


class FileRenameEvent(BaseEntry):
    type: Literal["file_rename"]
    from_path: NonEmptyStr
    to_path: NonEmptyStr


class TerminalEvent(BaseEntry):
    """Terminal command execution."""

    type: Literal["terminal"]
    command: NonEmptyStr
    output: StrictStr | None = Field(default=None, description="Terminal output (may be truncated)")
    exit_code: StrictInteger | None = None
    cwd: StrictStr | None = None
    duration_seconds: NonNegativeNumber | None = None


class NoteEvent(BaseEntry):
    """User annotation (markdown)."""

    type: Literal["note"]
    content: NonEmptyStr
    category: NoteCategory | None = None
    reference: NoteReference | None = None


class CheckpointEvent(BaseEntry):
    """Named milestone, optionally with a full file snapshot."""

    type: Literal["checkpoint"]
    name: NonEmptyStr
    description: StrictStr | None = None
    state: BuildlogState | None = None


class ErrorEvent(BaseEntry):
    """Error that occurred during the session."""

    type: Literal["error"]
    message: NonEmptyStr
    category: ErrorCategory
    file_path: StrictStr | None = None
    line: NonNegativeInt | None = None
    stack_trace: StrictStr | None = None
    resolved: StrictBool | None = None
    resolved_by_event_id: Uuid | None = None


BuildlogEvent = Annotated[
    Union[
        PromptEvent,
        AIResponseEvent,
        CodeChangeEvent,
        FileCreateEvent,
        FileDeleteEvent,
        FileRenameEvent,
        TerminalEvent,
        NoteEvent,
        CheckpointEvent,
        ErrorEvent,
    ],
    Field(discriminator="type"),
]

EVENT_TYPES = (
    "prompt",
    "ai_response",
    "code_change",
    "file_create",
    "file_delete",
    "file_rename",
    "terminal",
    "note",
    "checkpoint",
    "error",
)


class BuildlogMetadataV1(BuildlogModel):
    """Session metadata for v1 buildlogs."""

    id: Uuid
    title: Title
    description: Description | None = None
    author: BuildlogAuthor | None = None
    created_at: IsoDatetime
    updated_at: IsoDatetime | None = None
    duration_seconds: NonNegativeInt
    editor: EditorType
    ai_providers: list[AIProvider] | None = None
    primary_language: StrictStr | None = None
    languages: list[StrictStr] | None = None
    tags: Tags | None = None
    project: BuildlogProject | None = None
    # Extension bag; values are not validated
    custom: dict[str, Any] | None = None


class BuildlogV1(BuildlogModel):
    """Root of a v1 buildlog file."""

    version: Literal["1.0.0"]
    metadata: BuildlogMetadataV1
    initial_state: BuildlogState
    events: list[BuildlogEvent]
    final_state: BuildlogState

    @property
    def entries(self) -> list:
        return self.events
