"""yars_format: deterministic YAML canonicalizer and formatter."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("yars-format")
except PackageNotFoundError:
    __version__ = "dev"

# Public API exports
# Note: file-level helpers live in yars_format.files; the core entry points
# are re-exported here for convenience.
from yars_format.api import (
    canonicalize_and_emit,
    canonicalize_and_emit_text,
    format_yaml_dict,
    format_yaml_string,
    format_yaml_value,
)
from yars_format.codes import FormatErrorCode
from yars_format.contracts import BatchResult, FileOutcome
from yars_format.errors import (
    FileReadError,
    FileWriteError,
    MissingFileError,
    TopLevelListError,
    YamlEncodingError,
    YamlFormatError,
    YamlParseError,
)
from yars_format.files import format_yaml_file, format_yaml_files
from yars_format.kernel.value import Key, Tagged

# Python-style alias kept for callers of the older name.
YAMLFormatError = YamlFormatError

__all__ = [
    "__version__",
    "canonicalize_and_emit",
    "canonicalize_and_emit_text",
    "format_yaml_value",
    "format_yaml_string",
    "format_yaml_dict",
    "format_yaml_file",
    "format_yaml_files",
    "FormatErrorCode",
    "FileOutcome",
    "BatchResult",
    "Tagged",
    "Key",
    "YamlFormatError",
    "YAMLFormatError",
    "YamlParseError",
    "TopLevelListError",
    "YamlEncodingError",
    "MissingFileError",
    "FileReadError",
    "FileWriteError",
]
