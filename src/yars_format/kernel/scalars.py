"""Scalar classification predicates.

Each predicate is a pure character scan over a string and decides one
thing about how the string may be written:

- is_block_literal: may be written as a ``|-`` literal block
- is_plain_string: may be written unquoted (values and keys alike)
- looks_like_number: would be read back as a number if left unquoted

quote_string produces the double-quoted form used when neither applies.
"""

import json
import re

RESERVED_WORDS = frozenset(["true", "false", "null", "~", "yes", "no", "on", "off"])

# Float words a YAML reader resolves to inf/nan.
SPECIAL_FLOAT_WORDS = frozenset([".inf", "-.inf", "+.inf", ".nan"])

_PLAIN_EXTRA_CHARS = frozenset("_-./")

# Characters a YAML reader refuses or folds inside a quoted scalar; json.dumps
# leaves them raw.
_UNPRINTABLE_RE = re.compile("[\u007f-\u009f\u2028\u2029\ud800-\udfff\ufffe\uffff]")


def is_disallowed_control(ch: str) -> bool:
    """C0 controls other than tab/LF/CR, DEL, and the C1 range."""
    code = ord(ch)
    if code < 0x20:
        return ch not in "\t\n\r"
    return code == 0x7F or 0x80 <= code <= 0x9F


def is_reserved_word(text: str) -> bool:
    return text.lower() in RESERVED_WORDS


def is_block_literal(text: str) -> bool:
    if "\n" not in text:
        return False
    if any(is_disallowed_control(ch) for ch in text):
        return False
    if text[0].isspace() or text[-1].isspace():
        return False
    return True


def looks_like_number(text: str) -> bool:
    """True if text has the shape of an integer or float literal.

    Shape: optional single leading ``-``, then digits with at most one ``.``
    and at most one ``e``/``E`` (only after a digit; a single ``+``/``-`` may
    follow it directly). The special float words ``.inf``, ``-.inf``,
    ``.nan`` (any case) also count.
    """
    if text.lower() in SPECIAL_FLOAT_WORDS:
        return True
    body = text[1:] if text.startswith("-") else text
    if not body:
        return False
    if body.isascii() and body.isdigit():
        return True

    has_decimal = False
    has_exp = False
    has_digits = False
    for idx, ch in enumerate(body):
        if "0" <= ch <= "9":
            has_digits = True
        elif ch == "." and not has_decimal and not has_exp:
            has_decimal = True
        elif ch in "eE" and not has_exp and has_digits:
            has_exp = True
            has_digits = False
        elif ch in "+-" and has_exp and body[idx - 1] in "eE":
            pass
        else:
            return False
    return has_digits


def _is_plain_char(ch: str) -> bool:
    return ("a" <= ch <= "z") or ("A" <= ch <= "Z") or ("0" <= ch <= "9") or ch in _PLAIN_EXTRA_CHARS


def is_plain_string(text: str) -> bool:
    if (
        not text
        or text[0].isspace()
        or text[-1].isspace()
        or text.startswith("-")
        or "\n" in text
        or is_reserved_word(text)
        or looks_like_number(text)
    ):
        return False
    return all(_is_plain_char(ch) for ch in text)


# Keys follow the same rule as values.
is_plain_key = is_plain_string


def quote_string(text: str) -> str:
    """Double-quoted scalar using JSON escaping (a subset of YAML's)."""
    encoded = json.dumps(text, ensure_ascii=False)
    return _UNPRINTABLE_RE.sub(lambda m: "\\u%04x" % ord(m.group(0)), encoded)
