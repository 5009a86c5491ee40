"""Pydantic models for buildlog documents."""

from typing import Union

from .common import (
    AIProvider,
    BaseEntry,
    BuildlogAuthor,
    BuildlogModel,
    BuildlogProject,
    BuildlogState,
    ChangeSource,
    EditorType,
    ErrorCategory,
    FileSnapshot,
    NoteCategory,
)
from .v1 import (
    EVENT_TYPES,
    AIResponseEvent,
    BuildlogEvent,
    BuildlogMetadataV1,
    BuildlogV1,
    CheckpointEvent,
    CodeBlock,
    CodeChangeEvent,
    ErrorEvent,
    FileCreateEvent,
    FileDeleteEvent,
    FileRenameEvent,
    LinesChanged,
    NoteEvent,
    NoteReference,
    PromptEvent,
    TerminalEvent,
    TextSelection,
    TokenUsage,
)
from .v2 import (
    FULL_ONLY_FIELDS,
    STEP_TYPES,
    ActionStep,
    BuildlogMetadataV2,
    BuildlogOutcome,
    BuildlogStep,
    BuildlogV2,
    CaptureFormat,
    CheckpointStep,
    ErrorStep,
    NoteStep,
    OutcomeStatus,
    PromptStep,
    TerminalResult,
    TerminalStep,
)
from .validation import ValidationIssue, ValidationResult, ValidationWarning

Document = Union[BuildlogV1, BuildlogV2]

__all__ = [
    "Document",
    # Shared
    "BuildlogModel",
    "BaseEntry",
    "EditorType",
    "AIProvider",
    "ChangeSource",
    "NoteCategory",
    "ErrorCategory",
    "BuildlogAuthor",
    "BuildlogProject",
    "FileSnapshot",
    "BuildlogState",
    # v1
    "BuildlogV1",
    "BuildlogMetadataV1",
    "BuildlogEvent",
    "EVENT_TYPES",
    "PromptEvent",
    "AIResponseEvent",
    "CodeChangeEvent",
    "FileCreateEvent",
    "FileDeleteEvent",
    "FileRenameEvent",
    "TerminalEvent",
    "NoteEvent",
    "CheckpointEvent",
    "ErrorEvent",
    "TextSelection",
    "CodeBlock",
    "TokenUsage",
    "LinesChanged",
    "NoteReference",
    # v2
    "BuildlogV2",
    "BuildlogMetadataV2",
    "BuildlogOutcome",
    "BuildlogStep",
    "STEP_TYPES",
    "FULL_ONLY_FIELDS",
    "CaptureFormat",
    "OutcomeStatus",
    "TerminalResult",
    "PromptStep",
    "ActionStep",
    "TerminalStep",
    "NoteStep",
    "CheckpointStep",
    "ErrorStep",
    # Validation reports
    "ValidationIssue",
    "ValidationWarning",
    "ValidationResult",
]
