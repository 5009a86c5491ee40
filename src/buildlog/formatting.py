"""Display helpers: durations, byte sizes, slugs, languages and entry labels."""

import math
import re
from typing import Literal

from .constants import SLUG_MAX_LENGTH
from .models import BuildlogEvent, BuildlogStep

_SLUG_SEPARATOR_RE = re.compile(r"[^a-z0-9]+")

LANGUAGE_BY_EXTENSION = {
    "ts": "typescript",
    "tsx": "typescript",
    "js": "javascript",
    "jsx": "javascript",
    "mjs": "javascript",
    "cjs": "javascript",
    "py": "python",
    "rb": "ruby",
    "go": "go",
    "rs": "rust",
    "java": "java",
    "kt": "kotlin",
    "kts": "kotlin",
    "swift": "swift",
    "cpp": "cpp",
    "cc": "cpp",
    "cxx": "cpp",
    "c": "c",
    "h": "c",
    "hpp": "cpp",
    "cs": "csharp",
    "php": "php",
    "css": "css",
    "scss": "scss",
    "sass": "sass",
    "less": "less",
    "html": "html",
    "htm": "html",
    "vue": "vue",
    "svelte": "svelte",
    "json": "json",
    "yaml": "yaml",
    "yml": "yaml",
    "toml": "toml",
    "xml": "xml",
    "md": "markdown",
    "mdx": "markdown",
    "sql": "sql",
    "sh": "bash",
    "bash": "bash",
    "zsh": "bash",
    "fish": "fish",
    "ps1": "powershell",
    "dockerfile": "dockerfile",
    "makefile": "makefile",
    "cmake": "cmake",
    "tf": "terraform",
    "hcl": "hcl",
    "graphql": "graphql",
    "gql": "graphql",
    "proto": "protobuf",
    "r": "r",
    "scala": "scala",
    "clj": "clojure",
    "ex": "elixir",
    "exs": "elixir",
    "erl": "erlang",
    "hs": "haskell",
    "lua": "lua",
    "pl": "perl",
    "dart": "dart",
    "nim": "nim",
    "zig": "zig",
    "v": "v",
    "sol": "solidity",
}

STEP_ICONS = {
    "prompt": "💬",
    "action": "⚡",
    "terminal": "🖥️",
    "note": "📝",
    "checkpoint": "🚩",
    "error": "❌",
}

STEP_LABELS = {
    "prompt": "Prompt",
    "action": "Action",
    "terminal": "Terminal",
    "note": "Note",
    "checkpoint": "Checkpoint",
    "error": "Error",
}

EVENT_ICONS = {
    "prompt": "💬",
    "ai_response": "🤖",
    "code_change": "✏️",
    "file_create": "📄",
    "file_delete": "🗑️",
    "file_rename": "🔀",
    "terminal": "🖥️",
    "note": "📝",
    "checkpoint": "🚩",
    "error": "❌",
}

EVENT_LABELS = {
    "prompt": "Prompt",
    "ai_response": "AI Response",
    "code_change": "Code Change",
    "file_create": "File Created",
    "file_delete": "File Deleted",
    "file_rename": "File Renamed",
    "terminal": "Terminal",
    "note": "Note",
    "checkpoint": "Checkpoint",
    "error": "Error",
}


def _split_duration(seconds: float) -> tuple[int, int, int]:
    total = math.floor(seconds)
    return total // 3600, (total % 3600) // 60, total % 60


def format_duration(seconds: float, style: Literal["units", "clock"] = "units") -> str:
    """Render a duration in seconds.

    units: "1h 1m", "1m 5s", "0s" (seconds are dropped once hours appear)
    clock: "1:01:01", "1:05", "0:00"
    """
    hours, minutes, secs = _split_duration(seconds)

    if style == "clock":
        if hours > 0:
            return f"{hours}:{minutes:02d}:{secs:02d}"
        return f"{minutes}:{secs:02d}"

    if hours > 0:
        return f"{hours}h {minutes}m"
    if minutes > 0:
        return f"{minutes}m {secs}s"
    return f"{secs}s"


def format_bytes(num_bytes: int) -> str:
    """Render a byte count as B, KB or MB (one decimal for KB/MB)."""
    if num_bytes < 1024:
        return f"{num_bytes} B"
    if num_bytes < 1024 * 1024:
        return f"{num_bytes / 1024:.1f} KB"
    return f"{num_bytes / (1024 * 1024):.1f} MB"


def slugify(title: str) -> str:
    """Lowercase, hyphen-separated slug of at most 50 characters.

    Truncation happens after trimming, so a slug may end mid-word or on a hyphen.
    """
    slug = _SLUG_SEPARATOR_RE.sub("-", title.lower()).strip("-")
    return slug[:SLUG_MAX_LENGTH]


def detect_language(file_path: str) -> str:
    """Guess a syntax-highlighting language from a file path's extension."""
    ext = file_path.rsplit(".", 1)[-1].lower()
    return LANGUAGE_BY_EXTENSION.get(ext, "plaintext")


def get_step_icon(step: BuildlogStep) -> str:
    return STEP_ICONS[step.type]


def get_step_label(step: BuildlogStep) -> str:
    return STEP_LABELS[step.type]


def get_event_icon(event: BuildlogEvent) -> str:
    return EVENT_ICONS[event.type]


def get_event_label(event: BuildlogEvent) -> str:
    return EVENT_LABELS[event.type]
