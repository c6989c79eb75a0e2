"""Tests for root-relative URL rewriting."""

from __future__ import annotations

import pytest

from wgrep.urls import reroot


class TestReroot:
    def test_root_with_trailing_slash_no_double_slash(self) -> None:
        assert reroot("/x/y", "http://h/") == "http://h/x/y"

    def test_root_without_trailing_slash(self) -> None:
        assert reroot("/x", "http://h") == "http://h/x"

    @pytest.mark.parametrize(
        "uri",
        ["page.html", "https://other.example.com/a", "#frag", "", "../up"],
    )
    def test_non_absolute_path_unchanged(self, uri: str) -> None:
        assert reroot(uri, "http://h/") == uri

    def test_root_is_used_verbatim(self) -> None:
        # The root is the full response URL, path included
        assert reroot("/img.png", "http://h/dir/page") == "http://h/dir/page/img.png"
