"""YAML parsing into value trees.

Uses PyYAML's SafeLoader with YAML 1.2 core-schema implicit typing, so
``yes``/``no``/``on``/``off``, dates, and ``0x``/``0o`` literals stay strings.

Tree shape (see value.py):
- unknown tags (``!foo``, ``tag:example.com,2000:bar``) -> Tagged
- non-string mapping keys -> Key (so 1, 1.0 and true stay distinct keys)
- duplicate mapping keys -> parse error
- an alias inside its own anchor, or nesting deeper than the interpreter
  allows -> parse error
"""

import re
from typing import Any

import yaml
from yaml.constructor import ConstructorError
from yaml.nodes import MappingNode, ScalarNode, SequenceNode

from ..errors import YamlParseError
from .value import Key, Tagged

DOCUMENT_MARKER = "---"

_NULL_TAG = "tag:yaml.org,2002:null"
_BOOL_TAG = "tag:yaml.org,2002:bool"
_INT_TAG = "tag:yaml.org,2002:int"
_FLOAT_TAG = "tag:yaml.org,2002:float"


class CanonicalLoader(yaml.SafeLoader):
    """SafeLoader with core-schema resolution and opaque unknown tags."""

    # Fresh resolver table: SafeLoader's YAML 1.1 resolvers are not inherited.
    yaml_implicit_resolvers: dict = {}

    def construct_object(self, node, deep=False):
        # Children are built eagerly, so an alias inside its own anchor fails
        # as an unconstructable recursive node.
        return super().construct_object(node, deep=True)

    def construct_mapping(self, node, deep=False):
        if not isinstance(node, MappingNode):
            raise ConstructorError(
                None, None, f"expected a mapping node, but found {node.id}", node.start_mark
            )
        mapping = {}
        for key_node, value_node in node.value:
            key = _as_key(self.construct_object(key_node, deep=True))
            if key in mapping:
                raise ConstructorError(
                    "while constructing a mapping", node.start_mark,
                    f"found duplicate key {key!r}", key_node.start_mark,
                )
            mapping[key] = self.construct_object(value_node, deep=deep)
        return mapping

    def construct_core_int(self, node):
        value = self.construct_scalar(node)
        sign = 1
        if value[:1] in ("+", "-"):
            if value[0] == "-":
                sign = -1
            value = value[1:]
        if value.startswith("0x"):
            return sign * int(value[2:], 16)
        if value.startswith("0o"):
            return sign * int(value[2:], 8)
        return sign * int(value, 10)

    def construct_tagged(self, tag_suffix, node):
        if isinstance(node, ScalarNode):
            if node.style is None:
                resolved = self.resolve(ScalarNode, node.value, (True, False))
                inner_node = ScalarNode(resolved, node.value, node.start_mark, node.end_mark, node.style)
            else:
                inner_node = ScalarNode(
                    "tag:yaml.org,2002:str", node.value, node.start_mark, node.end_mark, node.style
                )
            inner = self.construct_object(inner_node, deep=True)
        elif isinstance(node, SequenceNode):
            inner = self.construct_sequence(node, deep=True)
        else:
            inner = self.construct_mapping(node, deep=True)
        return Tagged(node.tag, inner)


CanonicalLoader.add_implicit_resolver(
    _NULL_TAG,
    re.compile(r"^(?:~|null|Null|NULL|)$"),
    ["~", "n", "N", ""],
)
CanonicalLoader.add_implicit_resolver(
    _BOOL_TAG,
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)
CanonicalLoader.add_implicit_resolver(
    _INT_TAG,
    re.compile(r"^[-+]?[0-9]+$"),
    list("-+0123456789"),
)
CanonicalLoader.add_implicit_resolver(
    _FLOAT_TAG,
    re.compile(
        r"""^(?:[-+]?(?:\.[0-9]+|[0-9]+(?:\.[0-9]*)?)(?:[eE][-+]?[0-9]+)?
            |[-+]?\.(?:inf|Inf|INF)
            |\.(?:nan|NaN|NAN))$""",
        re.X,
    ),
    list("-+0123456789."),
)
CanonicalLoader.add_constructor(_INT_TAG, CanonicalLoader.construct_core_int)
CanonicalLoader.add_multi_constructor("!", CanonicalLoader.construct_tagged)
CanonicalLoader.add_multi_constructor("tag:", CanonicalLoader.construct_tagged)


def _as_key(value: Any) -> Any:
    """Strings and null are their own keys; everything else is wrapped in Key."""
    if value is None or isinstance(value, str):
        return value
    return Key(value)


def strip_document_marker(text: str) -> str:
    """Drop leading whitespace and a leading ``---`` marker."""
    trimmed = text.lstrip()
    if trimmed.startswith(DOCUMENT_MARKER + "\n"):
        return trimmed[len(DOCUMENT_MARKER) + 1:]
    if trimmed.startswith(DOCUMENT_MARKER):
        return trimmed[len(DOCUMENT_MARKER):]
    return trimmed


def parse_yaml(text: str) -> Any:
    """Parse one YAML document into a value tree.

    Raises:
        YamlParseError: If the text is not valid YAML (message from the parser),
            refers to itself through an alias, or nests too deeply to parse
    """
    try:
        return yaml.load(text, Loader=CanonicalLoader)
    # Constructors raise ValueError for malformed explicitly tagged scalars (!!int abc).
    except (yaml.YAMLError, ValueError) as e:
        raise YamlParseError(str(e)) from e
    except RecursionError as e:
        raise YamlParseError("document is nested too deeply") from e
