"""Configuration for buildlog validation advisories."""

import logging
import os
import tomllib
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

from .constants import (
    BUILDLOG_MAX_EVENTS,
    BUILDLOG_MAX_FULL_SIZE_BYTES,
    BUILDLOG_MAX_SIZE_BYTES,
    BUILDLOG_MAX_SLIM_SIZE_BYTES,
)

logger = logging.getLogger(__name__)

CONFIG_RELATIVE_PATH = Path(".buildlog") / "config.toml"


def _find_repo_root(start_dir: Path) -> Path:
    """Find repository root by walking upward looking for .git or pyproject.toml."""
    current_dir = start_dir

    while True:
        if (current_dir / ".git").exists() or (current_dir / "pyproject.toml").exists():
            return current_dir

        parent_dir = current_dir.parent

        # Stop at filesystem root
        if parent_dir == current_dir:
            return start_dir

        current_dir = parent_dir


def _load_config_file(config_file: Path) -> Optional[dict]:
    """Load TOML config data; returns None if missing or malformed."""
    if not config_file.exists():
        return None

    try:
        with open(config_file, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning(f"Ignoring unreadable config file {config_file}: {e}")
        return None


def _get_int(name: str, file_values: dict, key: str, default: int) -> int:
    """Resolve a positive int setting: environment, then config file, then default.

    Unusable values are logged and skipped.
    """
    env_value = os.environ.get(name)
    if env_value is not None and env_value.strip():
        try:
            value = int(env_value)
        except ValueError:
            value = None
        if value is not None and value > 0:
            return value
        logger.warning(f"Ignoring {name}={env_value!r}: expected a positive integer")

    value = file_values.get(key)
    if value is not None:
        if isinstance(value, int) and not isinstance(value, bool) and value > 0:
            return value
        logger.warning(f"Ignoring config value {key}={value!r}: expected a positive integer")
    return default


class BuildlogConfig(BaseModel):
    """Thresholds for advisory warnings raised by validate_document()."""

    max_slim_size_bytes: int = Field(default=BUILDLOG_MAX_SLIM_SIZE_BYTES, gt=0)
    max_full_size_bytes: int = Field(default=BUILDLOG_MAX_FULL_SIZE_BYTES, gt=0)
    max_v1_size_bytes: int = Field(default=BUILDLOG_MAX_SIZE_BYTES, gt=0)
    max_entries: int = Field(default=BUILDLOG_MAX_EVENTS, gt=0)

    model_config = {"frozen": True}

    @classmethod
    def from_env(cls, config_path: Optional[Path] = None) -> "BuildlogConfig":
        """Load configuration with the following precedence:

        1. BUILDLOG_* environment variables
        2. [validation] table of config_path, or of .buildlog/config.toml
           in the repository root (walk upward from CWD)
        3. Built-in defaults

        Args:
            config_path: Explicit TOML config file (skips repo discovery)
        """
        if config_path is None:
            config_path = _find_repo_root(Path.cwd()) / CONFIG_RELATIVE_PATH

        data = _load_config_file(config_path) or {}
        values = data.get("validation", {})
        if not isinstance(values, dict):
            values = {}

        return cls(
            max_slim_size_bytes=_get_int(
                "BUILDLOG_MAX_SLIM_SIZE_BYTES", values, "max_slim_size_bytes", BUILDLOG_MAX_SLIM_SIZE_BYTES
            ),
            max_full_size_bytes=_get_int(
                "BUILDLOG_MAX_FULL_SIZE_BYTES", values, "max_full_size_bytes", BUILDLOG_MAX_FULL_SIZE_BYTES
            ),
            max_v1_size_bytes=_get_int(
                "BUILDLOG_MAX_V1_SIZE_BYTES", values, "max_v1_size_bytes", BUILDLOG_MAX_SIZE_BYTES
            ),
            max_entries=_get_int("BUILDLOG_MAX_ENTRIES", values, "max_entries", BUILDLOG_MAX_EVENTS),
        )
