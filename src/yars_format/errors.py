"""Exception types raised by the formatter.

Every failure is a YamlFormatError so callers can catch one type; the
``code`` attribute tells the kinds apart.
"""

from typing import Optional

from .codes import FormatErrorCode


TOP_LEVEL_LIST_MESSAGE = (
    "Top-level lists are not supported by the YAML formatter. "
    "UMF files should always have a dictionary at the root level with "
    "'column:' and 'validations:' keys. If you're seeing this error, your YAML "
    "file may be structured incorrectly."
)


class YamlFormatError(ValueError):
    """Raised when a document cannot be formatted."""

    code: FormatErrorCode = FormatErrorCode.PARSE_FAILURE

    def __init__(self, message: str, code: Optional[FormatErrorCode] = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code


class YamlParseError(YamlFormatError):
    """The parser could not interpret the input."""

    code = FormatErrorCode.PARSE_FAILURE

    def __init__(self, detail: str):
        super().__init__(f"Error formatting YAML: {detail}")
        self.detail = detail


class TopLevelListError(YamlFormatError):
    """The document root is a sequence."""

    code = FormatErrorCode.TOP_LEVEL_LIST

    def __init__(self):
        super().__init__(TOP_LEVEL_LIST_MESSAGE)


class YamlEncodingError(YamlFormatError):
    """A value in the tree could not be rendered to text."""

    code = FormatErrorCode.ENCODING_FAILURE

    def __init__(self, detail: str):
        super().__init__(f"Error formatting YAML: {detail}")
        self.detail = detail


class MissingFileError(YamlFormatError):
    code = FormatErrorCode.FILE_NOT_FOUND

    def __init__(self, path: str):
        super().__init__(f"File not found: {path}")
        self.path = path


class FileReadError(YamlFormatError):
    code = FormatErrorCode.READ_FAILURE

    def __init__(self, path: str, reason: str):
        super().__init__(f"Failed to read {path}: {reason}")
        self.path = path
        self.reason = reason


class FileWriteError(YamlFormatError):
    code = FormatErrorCode.WRITE_FAILURE

    def __init__(self, path: str, reason: str):
        super().__init__(f"Failed to write {path}: {reason}")
        self.path = path
        self.reason = reason
