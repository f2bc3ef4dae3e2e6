import math

import pytest
from hypothesis import given, strategies as st

from jsontree.item import JsonItem, JsonType, version


def _array(*values):
    arr = JsonItem(JsonType.ARRAY)
    for value in values:
        arr.add_item_to_array(JsonItem(JsonType.NUMBER, value))
    return arr


def _numbers(item):
    return [child.number for child in item]


def test_version_string():
    assert version() == "1.7.16"


def test_type_checks_are_exclusive():
    checks = {
        JsonType.INVALID: "is_invalid",
        JsonType.FALSE: "is_false",
        JsonType.TRUE: "is_true",
        JsonType.NULL: "is_null",
        JsonType.NUMBER: "is_number",
        JsonType.STRING: "is_string",
        JsonType.ARRAY: "is_array",
        JsonType.OBJECT: "is_object",
        JsonType.RAW: "is_raw",
    }
    for kind, method in checks.items():
        item = JsonItem(kind)
        results = {name: getattr(item, name)() for name in checks.values()}
        assert results[method] is True
        assert sum(results.values()) == 1


def test_is_bool():
    assert JsonItem(JsonType.TRUE).is_bool()
    assert JsonItem(JsonType.FALSE).is_bool()
    assert not JsonItem(JsonType.NULL).is_bool()


def test_string_value_only_for_strings():
    assert JsonItem(JsonType.STRING, "abc").string_value() == "abc"
    assert JsonItem(JsonType.RAW, "abc").string_value() is None


def test_number_value_nan_for_non_numbers():
    assert JsonItem(JsonType.NUMBER, 2.5).number_value() == 2.5
    assert math.isnan(JsonItem(JsonType.STRING, "x").number_value())


def test_int_value_saturates():
    item = JsonItem(JsonType.NUMBER, 1e20)
    assert item.int_value() == 2147483647
    item.set_number_value(-1e20)
    assert item.int_value() == -2147483648


def test_int_value_truncates():
    assert JsonItem(JsonType.NUMBER, 3.9).int_value() == 3
    assert JsonItem(JsonType.NUMBER, -7.0).int_value() == -7


def test_set_number_value_returns_float():
    item = JsonItem(JsonType.NUMBER, 1)
    assert item.set_number_value(42) == 42.0
    assert item.number_value() == 42.0
    assert item.int_value() == 42


def test_set_string_value():
    item = JsonItem(JsonType.STRING, "short")
    assert item.set_string_value("a much longer value") == "a much longer value"
    assert item.string_value() == "a much longer value"


def test_set_string_value_rejects_non_strings_and_references():
    with pytest.raises(TypeError):
        JsonItem(JsonType.NUMBER, 1).set_string_value("x")
    with pytest.raises(TypeError):
        JsonItem(JsonType.STRING, "x", is_reference=True).set_string_value("y")


def test_set_bool_value():
    item = JsonItem(JsonType.FALSE)
    assert item.set_bool_value(True) is JsonType.TRUE
    assert item.is_true()
    assert item.set_bool_value(False) is JsonType.FALSE
    with pytest.raises(TypeError):
        JsonItem(JsonType.NULL).set_bool_value(True)


def test_bool_value_rejected_in_constructor():
    with pytest.raises(TypeError):
        JsonItem(JsonType.TRUE, True)


def test_len_and_iter():
    arr = _array(1, 2, 3)
    assert len(arr) == 3
    assert _numbers(arr) == [1.0, 2.0, 3.0]


def test_get_array_item_bounds():
    arr = _array(10, 20)
    assert arr.get_array_item(1).number == 20.0
    assert arr.get_array_item(2) is None
    assert arr.get_array_item(-1) is None


def test_get_object_item_case_handling():
    obj = JsonItem(JsonType.OBJECT)
    obj.add_item_to_object("Key", JsonItem(JsonType.NULL))
    assert obj.get_object_item("key") is obj.children[0]
    assert obj.get_object_item("key", case_sensitive=True) is None
    assert obj.get_object_item("Key", case_sensitive=True) is obj.children[0]
    assert obj.has_object_item("KEY")
    assert not obj.has_object_item("other")


def test_case_folding_is_ascii_only():
    obj = JsonItem(JsonType.OBJECT)
    obj.add_item_to_object("É", JsonItem(JsonType.NULL))
    assert obj.get_object_item("é") is None


def test_case_sensitive_lookup_stops_at_unnamed_child():
    obj = JsonItem(JsonType.OBJECT)
    obj.add_item_to_array(JsonItem(JsonType.NULL))
    obj.add_item_to_object("a", JsonItem(JsonType.TRUE))
    assert obj.get_object_item("a", case_sensitive=True) is None
    assert obj.get_object_item("a").is_true()


def test_add_item_to_itself_fails():
    arr = JsonItem(JsonType.ARRAY)
    with pytest.raises(ValueError):
        arr.add_item_to_array(arr)
    with pytest.raises(ValueError):
        arr.add_item_to_object("x", arr)
    with pytest.raises(ValueError):
        arr.add_item_to_array(None)


def test_add_item_to_object_sets_name():
    obj = JsonItem(JsonType.OBJECT)
    child = JsonItem(JsonType.NUMBER, 5, name="old")
    obj.add_item_to_object("new", child)
    assert child.name == "new"
    assert obj.get_object_item("new") is child


def test_reference_to_array_shares_children():
    inner = _array(1)
    outer = JsonItem(JsonType.ARRAY)
    outer.add_item_reference_to_array(inner)
    ref = outer.children[0]
    assert ref is not inner
    assert ref.is_reference and ref.is_array()
    inner.add_item_to_array(JsonItem(JsonType.NUMBER, 2))
    assert _numbers(ref) == [1.0, 2.0]


def test_reference_to_object_gets_own_name():
    source = JsonItem(JsonType.STRING, "text", name="orig")
    obj = JsonItem(JsonType.OBJECT)
    obj.add_item_reference_to_object("alias", source)
    ref = obj.get_object_item("alias")
    assert ref.string_value() == "text"
    assert source.name == "orig"
    with pytest.raises(TypeError):
        ref.set_string_value("changed")


def test_detach_item():
    arr = _array(1, 2, 3)
    middle = arr.children[1]
    assert arr.detach_item(middle) is middle
    assert _numbers(arr) == [1.0, 3.0]
    with pytest.raises(ValueError):
        arr.detach_item(middle)


def test_detach_and_delete_from_array():
    arr = _array(1, 2, 3)
    assert arr.detach_item_from_array(0).number == 1.0
    assert arr.detach_item_from_array(5) is None
    arr.delete_item_from_array(1)
    assert _numbers(arr) == [2.0]
    arr.delete_item_from_array(-1)
    assert _numbers(arr) == [2.0]


def test_detach_and_delete_from_object():
    obj = JsonItem(JsonType.OBJECT)
    obj.add_item_to_object("a", JsonItem(JsonType.TRUE))
    obj.add_item_to_object("B", JsonItem(JsonType.FALSE))
    assert obj.detach_item_from_object("b", case_sensitive=True) is None
    detached = obj.detach_item_from_object("b")
    assert detached.is_false()
    obj.delete_item_from_object("A", case_sensitive=True)
    assert len(obj) == 1
    obj.delete_item_from_object("A")
    assert len(obj) == 0


def test_insert_item_in_array():
    arr = _array(1, 3)
    arr.insert_item_in_array(1, JsonItem(JsonType.NUMBER, 2))
    arr.insert_item_in_array(0, JsonItem(JsonType.NUMBER, 0))
    arr.insert_item_in_array(100, JsonItem(JsonType.NUMBER, 4))
    assert _numbers(arr) == [0.0, 1.0, 2.0, 3.0, 4.0]
    with pytest.raises(IndexError):
        arr.insert_item_in_array(-1, JsonItem(JsonType.NULL))


def test_replace_item():
    arr = _array(1, 2)
    old = arr.children[1]
    arr.replace_item(old, JsonItem(JsonType.NULL))
    assert arr.children[1].is_null()
    same = arr.children[0]
    arr.replace_item(same, same)
    assert arr.children[0] is same
    with pytest.raises(ValueError):
        JsonItem(JsonType.ARRAY).replace_item(old, JsonItem(JsonType.NULL))


def test_replace_item_in_array():
    arr = _array(1, 2)
    arr.replace_item_in_array(0, JsonItem(JsonType.STRING, "x"))
    assert arr.children[0].string_value() == "x"
    with pytest.raises(IndexError):
        arr.replace_item_in_array(2, JsonItem(JsonType.NULL))
    with pytest.raises(IndexError):
        arr.replace_item_in_array(-1, JsonItem(JsonType.NULL))


@given(st.lists(st.floats(allow_nan=False), max_size=20))
def test_array_preserves_order(values):
    arr = _array(*values)
    assert len(arr) == len(values)
    assert _numbers(arr) == values


@given(st.lists(st.integers(), max_size=10), st.integers(min_value=0, max_value=15))
def test_insert_then_detach_round_trip(values, position):
    arr = _array(*values)
    extra = JsonItem(JsonType.NULL)
    arr.insert_item_in_array(position, extra)
    assert len(arr) == len(values) + 1
    assert arr.detach_item(extra) is extra
    assert _numbers(arr) == [float(v) for v in values]


@given(st.floats(allow_nan=False))
def test_int_value_within_int32(number):
    result = JsonItem(JsonType.NUMBER, number).int_value()
    assert -(2**31) <= result <= 2**31 - 1