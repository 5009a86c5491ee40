"""Pydantic models for the v2 (steps + outcome) buildlog format.

v2 folds v1's response and file events into a single ``action`` step that
lists touched paths and a summary. Captures come in two formats:

- slim: prompts, summaries and commands only
- full: additionally keeps ``aiResponse``/``diffs`` on actions and
  ``output``/``exitCode`` on terminal steps

A slim document carrying full-only fields still validates; use
``to_slim()`` to strip them.
"""

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import Field, StrictBool, StrictStr

from .common import (
    AIProvider,
    BaseEntry,
    BuildlogAuthor,
    BuildlogModel,
    BuildlogProject,
    Description,
    EditorType,
    ErrorCategory,
    IsoDatetime,
    NonEmptyStr,
    NonNegativeInt,
    NoteCategory,
    StrictInteger,
    Tags,
    Title,
    Uuid,
)


class CaptureFormat(str, Enum):
    """How much detail a v2 buildlog retains."""

    SLIM = "slim"
    FULL = "full"


class OutcomeStatus(str, Enum):
    SUCCESS = "success"
    PARTIAL = "partial"
    FAILURE = "failure"
    ABANDONED = "abandoned"


class TerminalResult(str, Enum):
    SUCCESS = "success"
    FAILURE = "failure"


class PromptStep(BaseEntry):
    """Prompt given to the AI; the replicable core of a buildlog."""

    type: Literal["prompt"]
    content: NonEmptyStr
    context: list[StrictStr] | None = Field(default=None, description="Files referenced as context")
    intent: StrictStr | None = None


class ActionStep(BaseEntry):
    """What the AI did in response to a prompt."""

    type: Literal["action"]
    summary: NonEmptyStr
    files_created: list[StrictStr] | None = None
    files_modified: list[StrictStr] | None = None
    files_deleted: list[StrictStr] | None = None
    packages_added: list[StrictStr] | None = None
    # full format only
    ai_response: StrictStr | None = None
    diffs: dict[str, StrictStr] | None = Field(default=None, description="Unified diff by file path")


class TerminalStep(BaseEntry):
    type: Literal["terminal"]
    command: NonEmptyStr
    result: TerminalResult | None = None
    # full format only
    output: StrictStr | None = None
    exit_code: StrictInteger | None = None


class NoteStep(BaseEntry):
    type: Literal["note"]
    content: NonEmptyStr
    category: NoteCategory | None = None


class CheckpointStep(BaseEntry):
    type: Literal["checkpoint"]
    name: NonEmptyStr
    summary: StrictStr | None = None


class ErrorStep(BaseEntry):
    type: Literal["error"]
    message: NonEmptyStr
    category: ErrorCategory | None = None
    resolved: StrictBool | None = None
    resolution: StrictStr | None = None


BuildlogStep = Annotated[
    Union[PromptStep, ActionStep, TerminalStep, NoteStep, CheckpointStep, ErrorStep],
    Field(discriminator="type"),
]

STEP_TYPES = ("prompt", "action", "terminal", "note", "checkpoint", "error")

# Fields removed by to_slim(), by step type
FULL_ONLY_FIELDS = {
    "action": frozenset({"ai_response", "diffs"}),
    "terminal": frozenset({"output", "exit_code"}),
}


class BuildlogMetadataV2(BuildlogModel):
    """Session metadata for v2 buildlogs.

    Unlike v1, exactly one AI provider is required and the author must
    state whether the session is replicable.
    """

    id: Uuid
    title: Title
    description: Description | None = None
    author: BuildlogAuthor | None = None
    created_at: IsoDatetime
    updated_at: IsoDatetime | None = None
    duration_seconds: NonNegativeInt
    editor: EditorType
    ai_provider: AIProvider
    model: StrictStr | None = None
    replicable: StrictBool
    language: StrictStr | None = None
    framework: StrictStr | None = None
    dependencies: list[StrictStr] | None = None
    tags: Tags | None = None
    project: BuildlogProject | None = None


class BuildlogOutcome(BuildlogModel):
    """How the session ended.

    files_created/files_modified are advisory; they are not reconciled
    against the step list.
    """

    status: OutcomeStatus
    summary: StrictStr
    files_created: NonNegativeInt
    files_modified: NonNegativeInt
    can_replicate: StrictBool
    replication_notes: StrictStr | None = None


class BuildlogV2(BuildlogModel):
    """Root of a v2 buildlog file."""

    version: Literal["2.0.0"]
    format: CaptureFormat
    metadata: BuildlogMetadataV2
    steps: list[BuildlogStep]
    outcome: BuildlogOutcome

    @property
    def entries(self) -> list:
        return self.steps
