"""Filename and MIME classification for buildlog files."""

from .constants import BUILDLOG_DEFAULT_EXTENSION, BUILDLOG_EXTENSIONS, BUILDLOG_MIME_TYPE


def is_buildlog_file(filename: str) -> bool:
    """Check whether a filename carries a buildlog extension (case-insensitive)."""
    return filename.lower().endswith(BUILDLOG_EXTENSIONS)


def get_extension() -> str:
    return BUILDLOG_DEFAULT_EXTENSION


def get_mime_type() -> str:
    return BUILDLOG_MIME_TYPE
