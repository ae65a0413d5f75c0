"""Tests for airs.core.predicates."""

from __future__ import annotations

from collections import OrderedDict

from airs.core.predicates import is_literal_object, is_number, is_object, is_string


class TestPredicates:
    def test_is_string(self):
        assert is_string("falcon")
        assert not is_string(b"falcon")

    def test_is_number(self):
        assert is_number(1)
        assert is_number(1.5)
        assert not is_number(True)
        assert not is_number("1")

    def test_is_object(self):
        assert is_object({})
        assert is_object([])
        assert not is_object(None)
        assert not is_object(3)
        assert not is_object("s")

    def test_is_literal_object(self):
        assert is_literal_object({"a": 1})
        assert not is_literal_object(OrderedDict(a=1))
        assert not is_literal_object([("a", 1)])
        assert not is_literal_object(None)

    def test_exported_from_package(self):
        import airs

        assert airs.is_string is is_string
        assert airs.is_number is is_number
        assert airs.is_object is is_object
        assert airs.is_literal_object is is_literal_object
