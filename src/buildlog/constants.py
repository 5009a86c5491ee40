"""Format constants for buildlog files."""

BUILDLOG_V1_VERSION = "1.0.0"
BUILDLOG_V2_VERSION = "2.0.0"
BUILDLOG_VERSION = BUILDLOG_V2_VERSION

BUILDLOG_MIME_TYPE = "application/vnd.buildlog+json"

BUILDLOG_EXTENSIONS = (".buildlog", ".vibe")
BUILDLOG_DEFAULT_EXTENSION = ".buildlog"

BUILDLOG_MAX_TITLE_LENGTH = 200
BUILDLOG_MAX_DESCRIPTION_LENGTH = 2000
BUILDLOG_MAX_TAGS = 20
BUILDLOG_MAX_TAG_LENGTH = 50

# Advisory limits (warnings, never errors)
BUILDLOG_MAX_EVENTS = 10000
BUILDLOG_MAX_SIZE_BYTES = 10 * 1024 * 1024
BUILDLOG_MAX_SLIM_SIZE_BYTES = 100 * 1024
BUILDLOG_MAX_FULL_SIZE_BYTES = 10 * 1024 * 1024

# Size category upper bounds (exclusive)
SIZE_TINY_MAX_BYTES = 10 * 1024
SIZE_SMALL_MAX_BYTES = 50 * 1024
SIZE_MEDIUM_MAX_BYTES = 500 * 1024

SLUG_MAX_LENGTH = 50
