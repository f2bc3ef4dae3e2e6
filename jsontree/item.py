"""Tree nodes for JSON documents and the operations on their children."""

from __future__ import annotations

import math
import string
from enum import IntEnum
from typing import Iterator, List, Optional, Union

VERSION = (1, 7, 16)
NESTING_LIMIT = 1000
INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


class JsonType(IntEnum):
    """Kind of value a node holds."""

    INVALID = 0
    FALSE = 1 << 0
    TRUE = 1 << 1
    NULL = 1 << 2
    NUMBER = 1 << 3
    STRING = 1 << 4
    ARRAY = 1 << 5
    OBJECT = 1 << 6
    RAW = 1 << 7


def version() -> str:
    """Return the library version as 'major.minor.patch'."""
    return ".".join(str(part) for part in VERSION)


def _fold(name: str) -> str:
    """Lower-case ASCII letters only, leaving every other character alone."""
    return name.translate(_ASCII_LOWER)


def _saturate(number: float) -> int:
    if math.isnan(number):
        return 0
    if number >= INT_MAX:
        return INT_MAX
    if number <= INT_MIN:
        return INT_MIN
    return int(number)


class JsonItem:
    """A node of a JSON tree: a scalar, a string, raw text or a container.

    Children of arrays and objects are kept in order in ``children``; children
    of an object carry their key in ``name``. A reference node shares the
    children list it was given instead of copying it.
    """

    def __init__(
        self,
        type: JsonType = JsonType.INVALID,
        value: Union[str, int, float, None] = None,
        name: Optional[str] = None,
        children: Optional[List["JsonItem"]] = None,
        is_reference: bool = False,
    ) -> None:
        self.type = JsonType(type)
        self.string: Optional[str] = None
        self.number: float = 0.0
        if isinstance(value, bool):
            raise TypeError("booleans are expressed through the node type")
        if isinstance(value, str):
            self.string = value
        elif isinstance(value, (int, float)):
            self.number = float(value)
        elif value is not None:
            raise TypeError(f"unsupported value: {value!r}")
        self.name = name
        self.is_reference = bool(is_reference)
        if children is None:
            self.children: List[JsonItem] = []
        elif is_reference and isinstance(children, list):
            self.children = children
        else:
            self.children = list(children)

    def __repr__(self) -> str:
        parts = [self.type.name]
        if self.name is not None:
            parts.append(f"name={self.name!r}")
        if self.type is JsonType.NUMBER:
            parts.append(f"number={self.number!r}")
        elif self.string is not None:
            parts.append(f"string={self.string!r}")
        if self.children:
            parts.append(f"children={len(self.children)}")
        if self.is_reference:
            parts.append("reference")
        return f"JsonItem({', '.join(parts)})"

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self) -> Iterator["JsonItem"]:
        return iter(self.children)

    # Type checks

    def is_invalid(self) -> bool:
        return self.type is JsonType.INVALID

    def is_false(self) -> bool:
        return self.type is JsonType.FALSE

    def is_true(self) -> bool:
        return self.type is JsonType.TRUE

    def is_bool(self) -> bool:
        return self.type in (JsonType.TRUE, JsonType.FALSE)

    def is_null(self) -> bool:
        return self.type is JsonType.NULL

    def is_number(self) -> bool:
        return self.type is JsonType.NUMBER

    def is_string(self) -> bool:
        return self.type is JsonType.STRING

    def is_array(self) -> bool:
        return self.type is JsonType.ARRAY

    def is_object(self) -> bool:
        return self.type is JsonType.OBJECT

    def is_raw(self) -> bool:
        return self.type is JsonType.RAW

    # Values

    def string_value(self) -> Optional[str]:
        """The text of a string node, or None for any other kind."""
        return self.string if self.is_string() else None

    def number_value(self) -> float:
        """The value of a number node, or NaN for any other kind."""
        return self.number if self.is_number() else math.nan

    def int_value(self) -> int:
        """The number truncated to a 32-bit signed integer, saturating."""
        return _saturate(self.number)

    def set_number_value(self, number: float) -> float:
        """Store a new number and return it as a float."""
        self.number = float(number)
        return self.number

    def set_string_value(self, value: str) -> str:
        """Replace the text of a string node that is not a reference."""
        if self.type is not JsonType.STRING or self.is_reference:
            raise TypeError("only an owned string node can take a new string value")
        self.string = value
        return value

    def set_bool_value(self, value: bool) -> JsonType:
        """Switch a boolean node to true or false and return the new type."""
        if not self.is_bool():
            raise TypeError("node is not a boolean")
        self.type = JsonType.TRUE if value else JsonType.FALSE
        return self.type

    # Lookup

    def get_array_item(self, index: int) -> Optional["JsonItem"]:
        """The child at ``index``, or None when the index is negative or past the end."""
        if index < 0 or index >= len(self.children):
            return None
        return self.children[index]

    def get_object_item(self, name: str, case_sensitive: bool = False) -> Optional["JsonItem"]:
        """The first child whose key matches ``name``, or None."""
        if case_sensitive:
            for child in self.children:
                if child.name is None:
                    return None
                if child.name == name:
                    return child
            return None
        folded = _fold(name)
        return next(
            (child for child in self.children
             if child.name is not None and _fold(child.name) == folded),
            None,
        )

    def has_object_item(self, name: str) -> bool:
        return self.get_object_item(name) is not None

    # Adding

    def add_item_to_array(self, item: "JsonItem") -> None:
        if item is None or item is self:
            raise ValueError("cannot add this item")
        self.children.append(item)

    def add_item_to_object(self, name: str, item: "JsonItem") -> None:
        if name is None or item is None or item is self:
            raise ValueError("cannot add this item")
        item.name = name
        self.children.append(item)

    def _reference(self) -> "JsonItem":
        ref = JsonItem(self.type, is_reference=True, children=self.children)
        ref.string = self.string
        ref.number = self.number
        return ref

    def add_item_reference_to_array(self, item: "JsonItem") -> None:
        if item is None:
            raise ValueError("cannot reference a missing item")
        self.add_item_to_array(item._reference())

    def add_item_reference_to_object(self, name: str, item: "JsonItem") -> None:
        if item is None:
            raise ValueError("cannot reference a missing item")
        self.add_item_to_object(name, item._reference())

    # Removing

    def _index_of(self, item: "JsonItem") -> int:
        for position, child in enumerate(self.children):
            if child is item:
                return position
        raise ValueError("item is not a child of this node")

    def detach_item(self, item: "JsonItem") -> "JsonItem":
        """Remove ``item`` from the children and return it."""
        del self.children[self._index_of(item)]
        return item

    def detach_item_from_array(self, which: int) -> Optional["JsonItem"]:
        item = self.get_array_item(which)
        return None if item is None else self.detach_item(item)

    def delete_item_from_array(self, which: int) -> None:
        self.detach_item_from_array(which)

    def detach_item_from_object(self, name: str, case_sensitive: bool = False) -> Optional["JsonItem"]:
        item = self.get_object_item(name, case_sensitive)
        return None if item is None else self.detach_item(item)

    def delete_item_from_object(self, name: str, case_sensitive: bool = False) -> None:
        self.detach_item_from_object(name, case_sensitive)

    # Inserting and replacing

    def insert_item_in_array(self, which: int, item: "JsonItem") -> None:
        """Insert before position ``which``, or append when it is past the end."""
        if which < 0:
            raise IndexError("negative index")
        if item is None or item is self:
            raise ValueError("cannot insert this item")
        self.children.insert(which, item)

    def replace_item(self, item: "JsonItem", replacement: "JsonItem") -> None:
        """Put ``replacement`` where ``item`` stands among the children."""
        if not self.children or item is None or replacement is None:
            raise ValueError("nothing to replace")
        if replacement is item:
            return
        self.children[self._index_of(item)] = replacement

    def replace_item_in_array(self, which: int, item: "JsonItem") -> None:
        current = self.get_array_item(which)
        if current is None:
            raise IndexError("array index out of range")
        self.replace_item(current, item)

    def replace_item_in_object(self, name: str, item: "JsonItem", case_sensitive: bool = False) -> None:
        if name is None or item is None:
            raise ValueError("a name and a replacement are required")
        item.name = name
        current = self.get_object_item(name, case_sensitive)
        if current is None:
            raise KeyError(name)
        self.replace_item(current, item)