"""File-level formatting: read, format, compare, and optionally write back."""

import logging
import os
from pathlib import Path
from typing import Iterable, Union

from yars_format.api import format_yaml_string
from yars_format.contracts import BatchResult, FileOutcome
from yars_format.errors import FileReadError, FileWriteError, MissingFileError, YamlFormatError

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


def _normalize_path(path: PathLike) -> Path:
    """Normalize path input to Path object."""
    return Path(path) if not isinstance(path, Path) else path


def count_changed_lines(original: str, formatted: str) -> int:
    """Count line positions that differ (the shorter text is padded with empty lines)."""
    original_lines = original.splitlines()
    formatted_lines = formatted.splitlines()
    diff = 0
    for idx in range(max(len(original_lines), len(formatted_lines))):
        old = original_lines[idx] if idx < len(original_lines) else ""
        new = formatted_lines[idx] if idx < len(formatted_lines) else ""
        if old != new:
            diff += 1
    return diff


def read_text(path: Path) -> str:
    if not path.exists():
        raise MissingFileError(str(path))
    try:
        # newline="" keeps CRLF so a CRLF file counts as changed
        with open(path, "r", encoding="utf-8", newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise FileReadError(str(path), str(e)) from e


def write_text(path: Path, text: str) -> None:
    try:
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(text)
    except (OSError, UnicodeEncodeError) as e:
        raise FileWriteError(str(path), str(e)) from e


def process_file(path: PathLike, check_only: bool = False) -> FileOutcome:
    """Format one file and report what changed.

    Args:
        path: YAML file to format
        check_only: If True, never write; only report whether a write is needed

    Returns:
        FileOutcome for the file

    Raises:
        YamlFormatError: Missing/unreadable/unwritable file or unformattable content
    """
    p = _normalize_path(path)
    original = read_text(p)
    logger.debug("Read %d bytes from %s", len(original), p)

    formatted = format_yaml_string(original)
    if formatted == original:
        logger.debug("%s already formatted", p)
        return FileOutcome(path=str(p), changed=False)

    lines_changed = count_changed_lines(original, formatted)
    written = False
    if not check_only:
        write_text(p, formatted)
        written = True
        logger.info("Reformatted %s (%d line(s) changed)", p, lines_changed)
    else:
        logger.debug("%s would change (%d line(s))", p, lines_changed)
    return FileOutcome(path=str(p), changed=True, lines_changed=lines_changed, written=written)


def format_yaml_file(path: PathLike, check_only: bool = False) -> bool:
    """Format a file in place.

    Returns:
        True if the file was (or, with check_only, would be) changed
    """
    return process_file(path, check_only=check_only).changed


def format_yaml_files(paths: Iterable[PathLike], check_only: bool = False) -> BatchResult:
    """Format several files, collecting failures instead of stopping on them."""
    result = BatchResult()
    for path in paths:
        try:
            outcome = process_file(path, check_only=check_only)
        except YamlFormatError as e:
            logger.warning("Failed to format %s: %s", path, e)
            result.errors += 1
            result.messages.append(str(e))
            continue
        result.outcomes.append(outcome)
        if outcome.changed:
            result.changed += 1
    return result
