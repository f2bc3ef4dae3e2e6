"""Constructors for JSON nodes and helpers that add new nodes to objects."""

from __future__ import annotations

import operator
import struct
from typing import Iterable, List, Optional

from jsontree.item import JsonItem, JsonType

__all__ = [
    "create_null",
    "create_true",
    "create_false",
    "create_bool",
    "create_number",
    "create_string",
    "create_raw",
    "create_array",
    "create_object",
    "create_string_reference",
    "create_object_reference",
    "create_array_reference",
    "create_int_array",
    "create_float_array",
    "create_double_array",
    "create_string_array",
    "add_null_to_object",
    "add_true_to_object",
    "add_false_to_object",
    "add_bool_to_object",
    "add_number_to_object",
    "add_string_to_object",
    "add_raw_to_object",
    "add_object_to_object",
    "add_array_to_object",
    "add_string_or_null_to_object",
]

_SINGLE = struct.Struct("<f")


def _require_text(value: Optional[str], what: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{what} must be a str, not {type(value).__name__}")
    return value


def _require_sequence(values: Optional[Iterable], what: str) -> list:
    if values is None:
        raise TypeError(f"{what} must be given")
    return list(values)


def _to_single(number: float) -> float:
    """Round a float to single precision, as a 32-bit float store would."""
    return _SINGLE.unpack(_SINGLE.pack(float(number)))[0]


# Scalars and containers


def create_null() -> JsonItem:
    return JsonItem(JsonType.NULL)


def create_true() -> JsonItem:
    return JsonItem(JsonType.TRUE)


def create_false() -> JsonItem:
    return JsonItem(JsonType.FALSE)


def create_bool(value: bool) -> JsonItem:
    return JsonItem(JsonType.TRUE if value else JsonType.FALSE)


def create_number(number: float) -> JsonItem:
    if isinstance(number, bool):
        raise TypeError("booleans are not numbers here")
    return JsonItem(JsonType.NUMBER, value=float(number))


def create_string(value: str) -> JsonItem:
    return JsonItem(JsonType.STRING, value=_require_text(value, "string"))


def create_raw(raw: str) -> JsonItem:
    """A node whose text is emitted verbatim when the tree is rendered."""
    return JsonItem(JsonType.RAW, value=_require_text(raw, "raw text"))


def create_array() -> JsonItem:
    return JsonItem(JsonType.ARRAY)


def create_object() -> JsonItem:
    return JsonItem(JsonType.OBJECT)


# References


def create_string_reference(value: str) -> JsonItem:
    """A string node marked as a reference; its text cannot be replaced."""
    return JsonItem(JsonType.STRING, value=value, is_reference=True)


def create_object_reference(children: Optional[List[JsonItem]]) -> JsonItem:
    """An object node that shares the given list of children."""
    return JsonItem(
        JsonType.OBJECT,
        children=children if children is not None else [],
        is_reference=True,
    )


def create_array_reference(children: Optional[List[JsonItem]]) -> JsonItem:
    """An array node that shares the given list of children."""
    return JsonItem(
        JsonType.ARRAY,
        children=children if children is not None else [],
        is_reference=True,
    )


# Arrays from sequences


def _array_of(items: Iterable[JsonItem]) -> JsonItem:
    array = create_array()
    array.children.extend(items)
    return array


def create_int_array(numbers: Iterable[int]) -> JsonItem:
    values = _require_sequence(numbers, "numbers")
    return _array_of(create_number(operator.index(n)) for n in values)


def create_float_array(numbers: Iterable[float]) -> JsonItem:
    """An array of numbers, each rounded to single precision first."""
    values = _require_sequence(numbers, "numbers")
    return _array_of(create_number(_to_single(n)) for n in values)


def create_double_array(numbers: Iterable[float]) -> JsonItem:
    values = _require_sequence(numbers, "numbers")
    return _array_of(create_number(n) for n in values)


def create_string_array(strings: Iterable[str]) -> JsonItem:
    values = _require_sequence(strings, "strings")
    return _array_of(create_string(s) for s in values)


# Adding new nodes to objects


def _attach(obj: JsonItem, name: str, item: JsonItem) -> JsonItem:
    if obj is None:
        raise ValueError("no object to add to")
    obj.add_item_to_object(name, item)
    return item


def add_null_to_object(obj: JsonItem, name: str) -> JsonItem:
    return _attach(obj, name, create_null())


def add_true_to_object(obj: JsonItem, name: str) -> JsonItem:
    return _attach(obj, name, create_true())


def add_false_to_object(obj: JsonItem, name: str) -> JsonItem:
    return _attach(obj, name, create_false())


def add_bool_to_object(obj: JsonItem, name: str, value: bool) -> JsonItem:
    return _attach(obj, name, create_bool(value))


def add_number_to_object(obj: JsonItem, name: str, number: float) -> JsonItem:
    return _attach(obj, name, create_number(number))


def add_string_to_object(obj: JsonItem, name: str, value: str) -> JsonItem:
    return _attach(obj, name, create_string(value))


def add_raw_to_object(obj: JsonItem, name: str, raw: str) -> JsonItem:
    return _attach(obj, name, create_raw(raw))


def add_object_to_object(obj: JsonItem, name: str) -> JsonItem:
    return _attach(obj, name, create_object())


def add_array_to_object(obj: JsonItem, name: str) -> JsonItem:
    return _attach(obj, name, create_array())


def add_string_or_null_to_object(obj: JsonItem, name: str, value: Optional[str]) -> JsonItem:
    """Add a string node, or a null node when ``value`` is None."""
    if value is None:
        return add_null_to_object(obj, name)
    return add_string_to_object(obj, name, value)