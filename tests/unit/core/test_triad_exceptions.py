# tests/unit/core/test_triad_exceptions.py
# Target: antifragile/core/exceptions.py

import pytest

from antifragile.core.exceptions import (
    InvalidTriadValue,
    ParseTriadError,
    RecordFormatError,
    TriadError,
)


class TestHierarchy:
    def test_all_subclass_triad_error(self):
        for cls in (InvalidTriadValue, ParseTriadError, RecordFormatError):
            assert issubclass(cls, TriadError)

    def test_triad_error_is_value_error(self):
        assert issubclass(TriadError, ValueError)

    def test_catchable_as_value_error(self):
        with pytest.raises(ValueError):
            raise InvalidTriadValue(9)


class TestTriadError:
    def test_empty_message_rejected(self):
        with pytest.raises(ValueError):
            TriadError("")

    def test_non_str_message_rejected(self):
        with pytest.raises(ValueError):
            TriadError(42)

    def test_repr(self):
        err = InvalidTriadValue(5)
        assert repr(err) == (
            "InvalidTriadValue(value=5, "
            "message='invalid triad value: 5 (expected 0, 1, or 2)')"
        )

    def test_equality_by_type_value_message(self):
        assert InvalidTriadValue(5) == InvalidTriadValue(5)
        assert InvalidTriadValue(5) != InvalidTriadValue(6)

    def test_different_types_not_equal(self):
        assert ParseTriadError() != RecordFormatError("x")

    def test_non_exception_comparison(self):
        assert InvalidTriadValue(5) != "invalid triad value: 5"


class TestInvalidTriadValue:
    def test_keeps_value(self):
        assert InvalidTriadValue(300).value == 300

    def test_message(self):
        assert InvalidTriadValue(42).message == "invalid triad value: 42 (expected 0, 1, or 2)"


class TestParseTriadError:
    def test_message_lists_tokens(self):
        assert str(ParseTriadError()) == (
            'invalid triad string (expected "antifragile", "fragile", or "robust")'
        )

    def test_carries_no_value(self):
        assert ParseTriadError().value is None

    def test_identical_instances_equal(self):
        assert ParseTriadError() == ParseTriadError()


class TestRecordFormatError:
    def test_message_prefix(self):
        err = RecordFormatError("bad version", value="9.9")
        assert str(err) == "record format error: bad version"
        assert err.detail == "bad version"
        assert err.value == "9.9"

    def test_empty_detail_rejected(self):
        with pytest.raises(ValueError):
            RecordFormatError("")
