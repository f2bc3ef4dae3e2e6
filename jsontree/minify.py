"""Strip whitespace and comments from JSON text."""

from __future__ import annotations

__all__ = ["minify"]

_BLANKS = frozenset(" \t\r\n")


def _string_end(text: str, start: int) -> int:
    """Index just past the string literal opening at ``start``, or the text end."""
    position = start + 1
    length = len(text)
    while position < length:
        char = text[position]
        if char == '"':
            return position + 1
        if char == "\\" and text[position + 1:position + 2] == '"':
            position += 2
        else:
            position += 1
    return length


def minify(text: str) -> str:
    """Return ``text`` without blanks, ``//`` and ``/* */`` comments outside strings.

    A slash that does not start a comment is dropped. String literals are
    copied unchanged; an unterminated comment or string runs to the end.
    """
    pieces = []
    position = 0
    length = len(text)
    while position < length:
        char = text[position]
        if char in _BLANKS:
            position += 1
        elif char == "/":
            follower = text[position + 1:position + 2]
            if follower == "/":
                end = text.find("\n", position + 2)
                position = length if end < 0 else end + 1
            elif follower == "*":
                end = text.find("*/", position + 2)
                position = length if end < 0 else end + 2
            else:
                position += 1
        elif char == '"':
            end = _string_end(text, position)
            pieces.append(text[position:end])
            position = end
        else:
            pieces.append(char)
            position += 1
    return "".join(pieces)