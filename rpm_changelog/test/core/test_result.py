"""Tests for rpm_changelog.core.result module."""

from __future__ import annotations

import pytest

from rpm_changelog.core.result import Err, Ok, Result


class TestOk:
    def test_repr(self) -> None:
        assert repr(Ok("a")) == "Ok('a')"

    def test_frozen(self) -> None:
        result = Ok(1)
        with pytest.raises(AttributeError):
            result.value = 2  # type: ignore[misc]


class TestErr:
    def test_repr(self) -> None:
        assert repr(Err("boom")) == "Err('boom')"

    def test_not_equal_to_ok(self) -> None:
        assert Err(1) != Ok(1)


class TestPatternMatching:
    def test_match(self) -> None:
        def describe(result: Result[int, str]) -> str:
            match result:
                case Ok(value):
                    return f"ok {value}"
                case Err(error):
                    return f"err {error}"

        assert describe(Ok(1)) == "ok 1"
        assert describe(Err("no")) == "err no"
