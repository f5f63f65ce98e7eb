"""Tests for emptiness, equality and identity formatting helpers."""

import collections
import re

import pytest

import mirror


class Point:
    """Value class with equality and a constant hash."""

    def __init__(self, x, y):
        self.x = x
        self.y = y

    def __eq__(self, other):
        return isinstance(other, Point) and (self.x, self.y) == (other.x, other.y)

    def __hash__(self):
        return 7

    def move(self):
        pass


def test_empty_objects():
    assert mirror.EMPTY_OBJECTS == ()
    assert mirror.is_empty(mirror.EMPTY_OBJECTS)


class TestIsEmpty:

    def test_none(self):
        assert mirror.is_empty(None)

    def test_empty(self):
        assert mirror.is_empty([])
        assert mirror.is_empty(mirror.Array(mirror.type_i32))

    def test_not_empty(self):
        assert not mirror.is_empty([None])
        assert not mirror.is_empty((1, 2))


class TestNullSafeEquals:

    def test_both_none(self):
        assert mirror.null_safe_equals(None, None)

    def test_one_none(self):
        assert not mirror.null_safe_equals(None, 1)
        assert not mirror.null_safe_equals(1, None)

    def test_equal_values(self):
        assert mirror.null_safe_equals(Point(1, 2), Point(1, 2))
        assert mirror.null_safe_equals("a", "a")

    def test_unequal_values(self):
        assert not mirror.null_safe_equals(Point(1, 2), Point(2, 1))
        assert not mirror.null_safe_equals(1, "1")

    def test_same_object(self):
        nan = float("nan")
        assert mirror.null_safe_equals(nan, nan)


class TestQualifiedMethodName:

    def test_method(self):
        assert mirror.get_qualified_method_name(Point.move) == f"{__name__}.Point.move"

    def test_bound_method(self):
        assert mirror.get_qualified_method_name(Point(1, 2).move) == f"{__name__}.Point.move"

    def test_library_method(self):
        name = mirror.get_qualified_method_name(collections.OrderedDict.popitem)
        assert name.endswith("OrderedDict.popitem")

    def test_function(self):
        assert mirror.get_qualified_method_name(re.compile) == "re.compile"

    def test_none(self):
        with pytest.raises(mirror.ArgumentNullError) as info:
            mirror.get_qualified_method_name(None)
        assert info.value.param_name == "method"
        assert str(info.value) == "method must not be None"


class TestIdentity:

    def test_none(self):
        assert mirror.identity_to_string(None) == ""

    def test_format(self):
        point = Point(1, 2)
        text = mirror.identity_to_string(point)
        assert re.fullmatch(rf"{re.escape(__name__)}\.Point@[0-9A-F]{{6,8}}", text)
        assert text.endswith("@" + mirror.get_identity_hex_string(point))

    def test_builtin_type(self):
        assert mirror.identity_to_string("text").startswith("builtins.str@")

    def test_ignores_hash_override(self):
        first = Point(1, 2)
        second = Point(1, 2)
        assert hash(first) == hash(second)
        assert mirror.get_identity_hex_string(first) == mirror.get_identity_hex_string(first)
        assert mirror.get_identity_hex_string(first) != mirror.get_identity_hex_string(second)

    def test_hex_digits(self):
        assert re.fullmatch(r"[0-9A-F]{6,8}", mirror.get_identity_hex_string(object()))

    def test_unhashable_object(self):
        assert re.fullmatch(r"[0-9A-F]{6,8}", mirror.get_identity_hex_string([1, 2]))
