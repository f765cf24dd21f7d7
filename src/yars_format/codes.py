"""Error code constants for yars_format.

These constants prevent stringly-typed error codes and let callers
branch on the kind of failure without matching on messages.
"""

from enum import Enum


class FormatErrorCode(str, Enum):
    """Formatting failure codes."""

    # Core (single document)
    PARSE_FAILURE = "PARSE_FAILURE"
    TOP_LEVEL_LIST = "TOP_LEVEL_LIST"
    ENCODING_FAILURE = "ENCODING_FAILURE"
    INVALID_ROOT = "INVALID_ROOT"

    # File orchestration
    FILE_NOT_FOUND = "FILE_NOT_FOUND"
    READ_FAILURE = "READ_FAILURE"
    WRITE_FAILURE = "WRITE_FAILURE"
