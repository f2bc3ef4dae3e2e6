# jsontree

`jsontree` keeps a JSON document as a tree of `JsonItem` nodes. You can build
the tree, look up and edit its children, compare two trees, and make deep
copies. It can also strip whitespace and comments from JSON text and decode
or encode single JSON string literals. It needs nothing outside the standard
library.

## Install

```
pip install jsontree
```

## Nodes

`jsontree.item` defines `JsonType` (`INVALID`, `FALSE`, `TRUE`, `NULL`,
`NUMBER`, `STRING`, `ARRAY`, `OBJECT`, `RAW`) and `JsonItem`. A node has a
`type`, a `string` or a `number`, a `name` when it is a member of an object,
and an ordered list of `children`. `len(node)` and iteration go over the
children. `version()` returns `'1.7.16'`.

Type checks: `is_invalid`, `is_false`, `is_true`, `is_bool`, `is_null`,
`is_number`, `is_string`, `is_array`, `is_object`, `is_raw`.

Values: `string_value()` gives the text of a string node or `None`;
`number_value()` gives the number or NaN for other kinds; `int_value()`
truncates to a 32-bit signed integer, saturating at the limits.
`set_number_value`, `set_string_value` (owned string nodes only, otherwise
`TypeError`) and `set_bool_value` (boolean nodes only, otherwise `TypeError`)
change a node in place.

## Building and editing

```python
from jsontree.build import (
    create_object, create_int_array, add_string_to_object,
    add_number_to_object, add_string_or_null_to_object,
)

doc = create_object()
add_string_to_object(doc, "name", "Widget")
add_number_to_object(doc, "count", 3)
add_string_or_null_to_object(doc, "note", None)      # adds a null member
doc.add_item_to_object("ids", create_int_array([1, 2, 3]))

doc.get_object_item("NAME").string_value()           # 'Widget' (keys matched without ASCII case)
doc.get_object_item("NAME", True)                    # None
ids = doc.get_object_item("ids")
[item.number_value() for item in ids]                # [1.0, 2.0, 3.0]
ids.get_array_item(1).int_value()                    # 2

doc.delete_item_from_object("count", True)
len(doc)                                             # 3
```

`jsontree.build` has a constructor for every kind (`create_null`,
`create_true`, `create_false`, `create_bool`, `create_number`,
`create_string`, `create_raw`, `create_array`, `create_object`), array
constructors from sequences (`create_int_array`, `create_float_array` which
rounds each value to single precision, `create_double_array`,
`create_string_array`), reference constructors (`create_string_reference`,
`create_object_reference`, `create_array_reference`), and `add_*_to_object`
helpers that create a node, add it under a key and return it.

`JsonItem` can insert (`insert_item_in_array`), replace (`replace_item`,
`replace_item_in_array`, `replace_item_in_object`), detach and delete
children by position or by key. `add_item_reference_to_array` and
`add_item_reference_to_object` add a reference node that shares the
original's children instead of copying them. Bad positions raise
`IndexError`, a missing key on replacement raises `KeyError`, and adding a
node to itself raises `ValueError`.

## Comparing and copying

```python
from jsontree.compare import compare, duplicate

copy = duplicate(doc)          # deep copy, never a reference
compare(doc, copy, True)       # True
```

Numbers are equal within one machine epsilon of relative difference; object
members are matched by key regardless of order. `duplicate(item, False)`
copies only the node itself, without children.

## Minifying

```python
from jsontree.minify import minify

minify('{ "a" : 1 /* note */ } // trailing')   # '{"a":1}'
```

Blanks, `//` and `/* */` comments outside string literals are removed; string
literals are kept as they are.

## String literals

```python
from jsontree.strings import decode_string, encode_string, StringSyntaxError

decode_string('"a\\u00e9b" tail')    # ('aéb', 10): text and index past the closing quote
encode_string('say "hi"\n')          # '"say \\"hi\\"\\n"'
```

`decode_string` handles the short escapes and `\uXXXX` escapes, including
surrogate pairs, and raises `StringSyntaxError` (a `ValueError` with a
`position`) for malformed literals.

## What it does not do

The package does not read a whole JSON document into a tree, and it does not
render a tree back to JSON text; numbers in JSON text are neither parsed nor
formatted. Trees are built with the constructors above, and only string
literals are decoded and encoded.