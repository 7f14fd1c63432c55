"""Tests for wren.errors — exception hierarchy and error messages."""

import pytest

from wren.errors import (
    ConfigurationError,
    DuplicateRouteNameError,
    InvalidPatternError,
    UnknownMatchTypeError,
    UnknownRouteNameError,
    WrenError,
)


class TestHierarchy:
    def test_configuration_error_is_wren_error(self) -> None:
        assert issubclass(ConfigurationError, WrenError)

    @pytest.mark.parametrize(
        "exc_type", [DuplicateRouteNameError, InvalidPatternError, UnknownMatchTypeError]
    )
    def test_startup_errors_are_configuration_errors(self, exc_type: type) -> None:
        assert issubclass(exc_type, ConfigurationError)

    def test_unknown_route_name_is_lookup_error(self) -> None:
        assert issubclass(UnknownRouteNameError, WrenError)
        assert issubclass(UnknownRouteNameError, LookupError)
        assert not issubclass(UnknownRouteNameError, ConfigurationError)


class TestMessages:
    def test_duplicate_route_name(self) -> None:
        err = DuplicateRouteNameError("home")
        assert err.name == "home"
        assert str(err) == "Cannot redeclare route 'home'"

    def test_invalid_pattern(self) -> None:
        err = InvalidPatternError("/a/[b", "unbalanced '[' at offset 3")
        assert err.pattern == "/a/[b"
        assert err.reason == "unbalanced '[' at offset 3"
        assert str(err) == "Invalid route pattern '/a/[b': unbalanced '[' at offset 3"

    def test_unknown_match_type(self) -> None:
        err = UnknownMatchTypeError("/p/[slug:s]", "slug")
        assert err.type_key == "slug"
        assert "'slug'" in str(err)
        assert "add_match_types" in str(err)

    def test_unknown_route_name(self) -> None:
        err = UnknownRouteNameError("missing")
        assert err.name == "missing"
        assert str(err) == "Route 'missing' does not exist."
