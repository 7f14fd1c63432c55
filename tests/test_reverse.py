"""Tests for wren.routing.reverse — URL generation from patterns."""

import pytest

from wren.errors import InvalidPatternError
from wren.routing.reverse import build_url


class TestBuildUrl:
    def test_literal(self) -> None:
        assert build_url("/users") == "/users"

    def test_required_value(self) -> None:
        assert build_url("/users/[i:id]", {"id": "42"}) == "/users/42"

    def test_non_string_value(self) -> None:
        assert build_url("/users/[i:id]", {"id": 7}) == "/users/7"

    def test_several_values(self) -> None:
        url = build_url("/users/[i:id]/posts/[:slug]", {"id": 1, "slug": "hello"})
        assert url == "/users/1/posts/hello"

    def test_missing_required_keeps_prefix(self) -> None:
        assert build_url("/users/[i:id]") == "/users/"

    def test_optional_supplied(self) -> None:
        assert build_url("/feed[.:format]?", {"format": "json"}) == "/feed.json"

    def test_later_optional_missing_drops_prefix(self) -> None:
        assert build_url("/posts/[i:year]/[:slug]?", {"year": 2024}) == "/posts/2024"

    def test_first_optional_missing_keeps_prefix(self) -> None:
        assert build_url("/[:lang]?") == "/"
        assert build_url("/feed.[:format]?") == "/feed."

    def test_separator_inside_bracket_goes_with_the_block(self) -> None:
        assert build_url("/feed[.:format]") == "/feed"
        assert build_url("/feed[.:format]?") == "/feed"
        assert build_url("/feed[.:format]", {"format": "rss"}) == "/feed.rss"
        assert build_url("/list[/i:page]?", {"page": 3}) == "/list/3"

    def test_none_counts_as_missing(self) -> None:
        assert build_url("/posts/[i:year]/[:slug]?", {"year": 1, "slug": None}) == "/posts/1"

    def test_positional_placeholder_is_removed(self) -> None:
        assert build_url("/archive/[i]/[i:month]", {"month": "05"}) == "/archive//05"

    def test_identical_blocks_are_filled_in_order(self) -> None:
        assert build_url("/[:x]/and/[:x]", {"x": "a"}) == "/a/and/a"

    def test_value_looking_like_a_block_is_not_replaced(self) -> None:
        url = build_url("/[:a]/[:b]", {"a": "[:b]", "b": "two"})
        assert url == "/[:b]/two"

    def test_base_path(self) -> None:
        assert build_url("/users/[i:id]", {"id": 3}, base_path="/app") == "/app/users/3"

    def test_extra_params_ignored(self) -> None:
        assert build_url("/users", {"id": 3}) == "/users"

    def test_malformed_pattern(self) -> None:
        with pytest.raises(InvalidPatternError):
            build_url("/users/[i:id")
