"""Structural equality and deep copies of JSON trees."""

from __future__ import annotations

import sys
from typing import Optional

from jsontree.item import JsonItem, JsonType

__all__ = ["compare", "duplicate"]

_EPSILON = sys.float_info.epsilon
_ALWAYS_EQUAL = frozenset({JsonType.FALSE, JsonType.TRUE, JsonType.NULL})


def _close(a: float, b: float) -> bool:
    """Relative comparison of two floats within one machine epsilon."""
    largest = max(abs(a), abs(b))
    return abs(a - b) <= largest * _EPSILON


def _contained(source: JsonItem, target: JsonItem, case_sensitive: bool) -> bool:
    """Every member of ``source`` has an equal member of the same key in ``target``."""
    for member in source:
        if member.name is None:
            return False
        match = target.get_object_item(member.name, case_sensitive)
        if match is None or not compare(member, match, case_sensitive):
            return False
    return True


def compare(a: Optional[JsonItem], b: Optional[JsonItem], case_sensitive: bool = False) -> bool:
    """Whether two trees hold equal values.

    Missing or invalid nodes are never equal. Numbers are compared with a
    relative tolerance of one machine epsilon, object members regardless of
    their order; ``case_sensitive`` decides how object keys are matched.
    """
    if a is None or b is None or a.type is not b.type:
        return False
    kind = a.type
    if kind is JsonType.INVALID:
        return False
    if a is b:
        return True
    if kind in _ALWAYS_EQUAL:
        return True
    if kind is JsonType.NUMBER:
        return _close(a.number, b.number)
    if kind in (JsonType.STRING, JsonType.RAW):
        if a.string is None or b.string is None:
            return False
        return a.string == b.string
    if kind is JsonType.ARRAY:
        if len(a) != len(b):
            return False
        return all(compare(x, y, case_sensitive) for x, y in zip(a, b))
    if kind is JsonType.OBJECT:
        return _contained(a, b, case_sensitive) and _contained(b, a, case_sensitive)
    return False


def _copy_node(item: JsonItem) -> JsonItem:
    node = JsonItem(item.type, name=item.name)
    node.string = item.string
    node.number = item.number
    return node


def duplicate(item: JsonItem, recurse: bool = True) -> JsonItem:
    """A new, independent copy of ``item``.

    The copy is never a reference. With ``recurse`` the children are copied
    as well; without it the copy has no children.
    """
    if item is None:
        raise ValueError("no item to duplicate")
    root = _copy_node(item)
    if not recurse:
        return root
    pending = [(item, root)]
    while pending:
        source, target = pending.pop()
        for child in source:
            copy = _copy_node(child)
            target.children.append(copy)
            pending.append((child, copy))
    return root