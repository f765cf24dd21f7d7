"""Block-style YAML emitter for canonicalized value trees.

Layout rules:
- Two spaces per nesting level
- Empty mapping -> ``{}``, empty sequence -> ``[]``
- A mapping or sequence under a key starts on the next line, indented
  two spaces past the key
- A mapping under a sequence item starts on the dash line; its other
  entries are indented two spaces past the dash
- Multi-line strings become ``|-`` literal blocks when safe, otherwise
  scalars are plain or double-quoted (see scalars.py)
- Tagged values render as ``<tag> `` followed by the inner value
- Output ends with exactly one newline

Composite mapping keys are written in flow style (``[a, b]: value``).

Note: a bare sequence root is written one level deeper than a sequence
nested under a key. Callers reject sequence roots before emitting, so this
only shows up when emit() is called directly.
"""

from typing import Any, List

from ..errors import YamlEncodingError
from .scalars import is_block_literal, is_plain_key, is_plain_string, quote_string
from .value import Key, Tagged, describe_value, format_number, is_mapping, is_number, is_sequence

INDENT = 2

CORE_TAG_PREFIX = "tag:yaml.org,2002:"

# A bare "..." line at column 0 ends the document.
DOCUMENT_END_MARKER = "..."


def render_tag(tag: str) -> str:
    """Tag text as written in a document (``!foo``, ``!!set``, ``!<uri>``)."""
    if tag.startswith("!"):
        return tag
    if tag.startswith(CORE_TAG_PREFIX):
        return "!!" + tag[len(CORE_TAG_PREFIX):]
    return f"!<{tag}>"


class Emitter:
    """Accumulates the text for one document."""

    def __init__(self):
        self._parts: List[str] = []

    def getvalue(self) -> str:
        text = "".join(self._parts)
        if text and not text.endswith("\n"):
            text += "\n"
        return text

    def _write(self, text: str) -> None:
        self._parts.append(text)

    def _indent(self, indent: int) -> None:
        self._write(" " * indent)

    # --- structure ---------------------------------------------------------

    def write_root(self, value: Any) -> None:
        if is_mapping(value):
            self.write_mapping(value, 0)
        elif is_sequence(value):
            self.write_sequence(value, INDENT)
        elif isinstance(value, str):
            if is_block_literal(value):
                self._write("|-\n")
                self.write_literal_block(value, INDENT)
            elif value == DOCUMENT_END_MARKER:
                self._write(quote_string(value))
            else:
                self._write(self.render_string(value))
        elif isinstance(value, Tagged):
            self._write(render_tag(value.tag))
            if is_mapping(value.value) and value.value:
                self._write("\n")
                self.write_mapping(value.value, 0)
            elif is_sequence(value.value) and value.value:
                self._write("\n")
                self.write_sequence(value.value, INDENT)
            else:
                self.write_nested(value.value, 0)
        else:
            self._write(self.render_scalar(value))

    def write_mapping(self, mapping: dict, indent: int, inline_first: bool = False) -> None:
        """Write mapping entries at indent.

        With inline_first the first entry continues the current line (used
        for a mapping that follows a sequence dash).
        """
        if not mapping:
            self._write("{}")
            return
        for idx, (key, item) in enumerate(mapping.items()):
            if idx > 0:
                self._write("\n")
            if idx > 0 or not inline_first:
                self._indent(indent)
            self._write(self.render_key(key))
            self._write(":")
            self.write_nested(item, indent)

    def write_sequence(self, items: Any, indent: int) -> None:
        if not items:
            self._write("[]")
            return
        for idx, item in enumerate(items):
            if idx > 0:
                self._write("\n")
            self._indent(indent)
            self._write("-")
            self.write_nested(item, indent, after_dash=True)

    def write_nested(self, value: Any, indent: int, after_dash: bool = False) -> None:
        """Write a value that follows ``key:`` or ``-`` at indent."""
        if is_mapping(value):
            if not value:
                self._write(" {}")
            elif after_dash:
                self._write(" ")
                self.write_mapping(value, indent + INDENT, inline_first=True)
            else:
                self._write("\n")
                self.write_mapping(value, indent + INDENT)
        elif is_sequence(value):
            if not value:
                self._write(" []")
            else:
                self._write("\n")
                self.write_sequence(value, indent + INDENT)
        elif isinstance(value, str):
            if is_block_literal(value):
                self._write(" |-\n")
                self.write_literal_block(value, indent + INDENT)
            else:
                self._write(" ")
                self._write(self.render_string(value))
        elif isinstance(value, Tagged):
            self._write(" ")
            self._write(render_tag(value.tag))
            # Collections under a tag always start on the next line.
            self.write_nested(value.value, indent)
        else:
            self._write(" ")
            self._write(self.render_scalar(value))

    def write_literal_block(self, text: str, indent: int) -> None:
        pad = " " * indent
        self._write("\n".join(pad + line for line in text.split("\n")))

    # --- scalars -----------------------------------------------------------

    def render_string(self, text: str) -> str:
        if is_plain_string(text):
            return text
        return quote_string(text)

    def render_scalar(self, value: Any) -> str:
        if value is None:
            return "null"
        if isinstance(value, bool):
            return "true" if value else "false"
        if is_number(value):
            return format_number(value)
        if isinstance(value, str):
            return self.render_string(value)
        raise YamlEncodingError(f"cannot represent value of type {describe_value(value)}")

    def render_key(self, key: Any) -> str:
        if isinstance(key, Key):
            key = key.value
        if isinstance(key, str):
            return key if is_plain_key(key) else quote_string(key)
        if isinstance(key, Tagged):
            return f"{render_tag(key.tag)} {self.render_flow(key.value)}"
        if is_sequence(key) or is_mapping(key):
            return self.render_flow(key)
        return self.render_scalar(key)

    def render_flow(self, value: Any) -> str:
        """Single-line flow rendering, used for composite keys."""
        if is_mapping(value):
            entries = ", ".join(
                f"{self.render_key(key)}: {self.render_flow(item)}" for key, item in value.items()
            )
            return "{" + entries + "}"
        if is_sequence(value):
            return "[" + ", ".join(self.render_flow(item) for item in value) + "]"
        if isinstance(value, Tagged):
            return f"{render_tag(value.tag)} {self.render_flow(value.value)}"
        return self.render_scalar(value)


def emit(value: Any) -> str:
    """Render a canonicalized tree as YAML text.

    Args:
        value: Canonicalized value tree (usually a mapping)

    Returns:
        YAML text ending with a single newline

    Raises:
        YamlEncodingError: If the tree holds something that cannot be written
            (a non-YAML Python type, or text that cannot be encoded as UTF-8)
    """
    emitter = Emitter()
    emitter.write_root(value)
    text = emitter.getvalue()
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise YamlEncodingError(str(e)) from e
    return text
