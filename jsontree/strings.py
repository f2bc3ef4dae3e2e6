"""Decoding and encoding of JSON string literals."""

from __future__ import annotations

from typing import Optional, Tuple

__all__ = ["StringSyntaxError", "decode_string", "encode_string"]

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

_SIMPLE_ESCAPES = {
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    '"': '"',
    "\\": "\\",
    "/": "/",
}

_SHORT_ENCODINGS = {
    '"': '\\"',
    "\\": "\\\\",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


class StringSyntaxError(ValueError):
    """A string literal could not be decoded; ``position`` marks where."""

    def __init__(self, message: str, position: int) -> None:
        super().__init__(f"{message} at position {position}")
        self.message = message
        self.position = position


def _hex4(digits: str) -> int:
    """Value of four hex digits; any invalid digit makes the whole value 0."""
    if len(digits) != 4 or not all(char in _HEX_DIGITS for char in digits):
        return 0
    return int(digits, 16)


def _decode_utf16(text: str, position: int, end: int) -> Tuple[str, int]:
    """Decode one ``\\uXXXX`` escape, or a surrogate pair of two.

    Returns the character and the number of input characters consumed.
    """
    if end - position < 6:
        raise StringSyntaxError("truncated unicode escape", position)
    first = _hex4(text[position + 2:position + 6])
    if 0xDC00 <= first <= 0xDFFF:
        raise StringSyntaxError("unexpected low surrogate", position)
    if not 0xD800 <= first <= 0xDBFF:
        return chr(first), 6

    second_start = position + 6
    if end - second_start < 6:
        raise StringSyntaxError("truncated surrogate pair", position)
    if text[second_start:second_start + 2] != "\\u":
        raise StringSyntaxError("missing low surrogate", position)
    second = _hex4(text[second_start + 2:second_start + 6])
    if not 0xDC00 <= second <= 0xDFFF:
        raise StringSyntaxError("invalid low surrogate", position)
    codepoint = 0x10000 + (((first & 0x3FF) << 10) | (second & 0x3FF))
    return chr(codepoint), 12


def _closing_quote(text: str, start: int) -> int:
    """Index of the unescaped quote that closes the literal opening at ``start``."""
    position = start + 1
    length = len(text)
    while position < length and text[position] != '"':
        if text[position] == "\\":
            if position + 1 >= length:
                raise StringSyntaxError("string ends in a backslash", start + 1)
            position += 1
        position += 1
    if position >= length:
        raise StringSyntaxError("unterminated string", start + 1)
    return position


def decode_string(text: str, start: int = 0) -> Tuple[str, int]:
    """Decode the string literal that begins at ``text[start]``.

    Returns the decoded text and the index just past the closing quote.
    Raw control characters are accepted; invalid hex digits in a unicode
    escape make that escape decode to U+0000.
    """
    if start < 0 or start >= len(text) or text[start] != '"':
        raise StringSyntaxError("expected a string", start)
    end = _closing_quote(text, start)

    pieces = []
    position = start + 1
    while position < end:
        backslash = text.find("\\", position, end)
        if backslash < 0:
            pieces.append(text[position:end])
            break
        pieces.append(text[position:backslash])
        position = backslash
        code = text[position + 1]
        if code in _SIMPLE_ESCAPES:
            pieces.append(_SIMPLE_ESCAPES[code])
            position += 2
        elif code == "u":
            char, consumed = _decode_utf16(text, position, end)
            pieces.append(char)
            position += consumed
        else:
            raise StringSyntaxError(f"invalid escape sequence '\\{code}'", position)
    return "".join(pieces), end + 1


def _encode_char(char: str) -> str:
    short = _SHORT_ENCODINGS.get(char)
    if short is not None:
        return short
    if ord(char) < 32:
        return f"\\u{ord(char):04x}"
    return char


def encode_string(value: Optional[str]) -> str:
    """Quote ``value`` as a JSON string literal; None gives an empty literal.

    Quotes, backslashes and control characters are escaped; every other
    character is copied as it is.
    """
    if value is None:
        return '""'
    return '"' + "".join(_encode_char(char) for char in value) + '"'