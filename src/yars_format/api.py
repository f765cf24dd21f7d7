"""Public API for yars_format.

High-level functions that take a document (as text or as a value tree)
and return its canonical text. The file-level wrappers live in
yars_format.files.
"""

from typing import Any

from pydantic import BaseModel

from yars_format.codes import FormatErrorCode
from yars_format.errors import TopLevelListError, YamlEncodingError, YamlFormatError
from yars_format.kernel.canonicalize import canonicalize
from yars_format.kernel.emitter import emit
from yars_format.kernel.loader import parse_yaml, strip_document_marker
from yars_format.kernel.value import describe_value, is_mapping, is_sequence


def canonicalize_and_emit(tree: Any) -> str:
    """Sort every mapping in tree and render it as YAML text.

    Raises:
        YamlEncodingError: If the tree contains a value that cannot be written,
            or nests too deeply (including a tree that contains itself)
    """
    try:
        return emit(canonicalize(tree))
    except RecursionError as e:
        raise YamlEncodingError("value tree is nested too deeply") from e


def canonicalize_and_emit_text(source_text: str) -> str:
    """Format YAML text.

    Rules:
    - A leading ``---`` marker is dropped and never written back
    - A document that parses to null is returned unchanged
    - A document whose root is a sequence is rejected

    Args:
        source_text: YAML document text

    Returns:
        Canonical YAML text

    Raises:
        YamlParseError: If the text is not valid YAML
        TopLevelListError: If the root is a sequence
        YamlEncodingError: If a parsed value cannot be written
    """
    tree = parse_yaml(strip_document_marker(source_text))
    if tree is None:
        return source_text
    if is_sequence(tree):
        raise TopLevelListError()
    return canonicalize_and_emit(tree)


def format_yaml_dict(data: Any) -> str:
    """Format a structure built in code; its root must be a mapping.

    Pydantic models are dumped with ``model_dump()`` first. A None root
    formats to the empty string.
    """
    if isinstance(data, BaseModel):
        data = data.model_dump()
    if data is None:
        return ""
    if is_sequence(data):
        raise TopLevelListError()
    if not is_mapping(data):
        raise YamlFormatError(
            f"Error formatting YAML: Expected dict, got {describe_value(data)}",
            code=FormatErrorCode.INVALID_ROOT,
        )
    return canonicalize_and_emit(data)


# Names used by the file layer and the CLI.
format_yaml_string = canonicalize_and_emit_text
format_yaml_value = canonicalize_and_emit
