"""Derived operations over validated buildlog documents.

None of these validate their input; pass documents obtained from
parse_document() or a successful schema check. Nothing here mutates a
document.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Literal, Union

from .constants import SIZE_MEDIUM_MAX_BYTES, SIZE_SMALL_MAX_BYTES, SIZE_TINY_MAX_BYTES
from .models import (
    FULL_ONLY_FIELDS,
    BuildlogV1,
    BuildlogV2,
    CaptureFormat,
    CodeChangeEvent,
    Document,
    FileCreateEvent,
)
from .validator import document_size_bytes

SizeCategory = Literal["tiny", "small", "medium", "large"]


@dataclass
class BuildlogStatsV1:
    """Statistics for a v1 (events) buildlog."""

    duration_seconds: int
    event_count: int = 0
    prompt_count: int = 0
    response_count: int = 0
    file_count: int = 0
    lines_added: int = 0
    lines_removed: int = 0
    languages: list[str] = field(default_factory=list)


@dataclass
class BuildlogStatsV2:
    """Statistics for a v2 (steps) buildlog.

    File counts and is_replicable come from the outcome block as declared,
    not recomputed from steps.
    """

    format: CaptureFormat
    duration_seconds: int
    step_count: int = 0
    prompt_count: int = 0
    action_count: int = 0
    terminal_count: int = 0
    note_count: int = 0
    checkpoint_count: int = 0
    error_count: int = 0
    files_created: int = 0
    files_modified: int = 0
    is_replicable: bool = False


BuildlogStats = Union[BuildlogStatsV1, BuildlogStatsV2]


def _require_v2(document: Document, operation: str) -> BuildlogV2:
    if not isinstance(document, BuildlogV2):
        raise TypeError(f"{operation}() requires a v2 buildlog, got {type(document).__name__}")
    return document


def _compute_stats_v1(document: BuildlogV1) -> BuildlogStatsV1:
    stats = BuildlogStatsV1(
        duration_seconds=document.metadata.duration_seconds,
        event_count=len(document.events),
        file_count=len(document.final_state.files),
    )
    languages: set[str] = set()

    for event in document.events:
        if event.type == "prompt":
            stats.prompt_count += 1
        elif event.type == "ai_response":
            stats.response_count += 1
        elif isinstance(event, CodeChangeEvent):
            if event.lines_changed is not None:
                stats.lines_added += event.lines_changed.added
                stats.lines_removed += event.lines_changed.removed
        elif isinstance(event, FileCreateEvent):
            languages.add(event.language)

    languages.update(f.language for f in document.final_state.files)
    stats.languages = sorted(languages)
    return stats


def _compute_stats_v2(document: BuildlogV2) -> BuildlogStatsV2:
    counts = Counter(step.type for step in document.steps)
    return BuildlogStatsV2(
        format=document.format,
        duration_seconds=document.metadata.duration_seconds,
        step_count=len(document.steps),
        prompt_count=counts["prompt"],
        action_count=counts["action"],
        terminal_count=counts["terminal"],
        note_count=counts["note"],
        checkpoint_count=counts["checkpoint"],
        error_count=counts["error"],
        files_created=document.outcome.files_created,
        files_modified=document.outcome.files_modified,
        is_replicable=document.outcome.can_replicate,
    )


def compute_stats(document: Document) -> BuildlogStats:
    """Tally entries by type in a single pass.

    Returns BuildlogStatsV1 or BuildlogStatsV2 matching the document version.
    """
    if isinstance(document, BuildlogV2):
        return _compute_stats_v2(document)
    return _compute_stats_v1(document)


def estimate_document_size(document: Document) -> SizeCategory:
    """Bucket the canonical serialized size.

    Bounds are exclusive: exactly 10 KiB is "small", not "tiny".
    """
    size = document_size_bytes(document)
    if size < SIZE_TINY_MAX_BYTES:
        return "tiny"
    if size < SIZE_SMALL_MAX_BYTES:
        return "small"
    if size < SIZE_MEDIUM_MAX_BYTES:
        return "medium"
    return "large"


def is_replicable(document: Document) -> bool:
    """Whether another agent could re-run the captured prompts.

    Requires at least one prompt step, and both outcome.can_replicate and
    metadata.replicable.
    """
    document = _require_v2(document, "is_replicable")
    if not any(step.type == "prompt" for step in document.steps):
        return False
    if document.outcome is None:
        return False
    return document.outcome.can_replicate and document.metadata.replicable


def to_slim(document: Document) -> BuildlogV2:
    """Return a slim copy of a v2 buildlog.

    Strips aiResponse/diffs from action steps and output/exitCode from
    terminal steps. A document already marked slim is returned as-is, even
    if its steps carry full-only fields.
    """
    document = _require_v2(document, "to_slim")
    if document.format == CaptureFormat.SLIM:
        return document

    steps = []
    for step in document.steps:
        drop = FULL_ONLY_FIELDS.get(step.type)
        if drop:
            data = step.model_dump(exclude_unset=True, exclude=set(drop))
            step = type(step).model_validate(data)
        steps.append(step)

    return document.model_copy(update={"format": CaptureFormat.SLIM, "steps": steps})
