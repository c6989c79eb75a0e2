"""Tests for content-type classification and the two query evaluators."""

from __future__ import annotations

import json

import pytest

from wgrep.evaluators import QueryKind, classify, evaluate, query_markup, query_structured
from wgrep.models import OutputOptions

ROOT = "http://h/"

_LINKS_HTML = """\
<html><body>
  <ul>
    <li><a href="/one" rel="nofollow">One</a></li>
    <li><a href="https://other.example.com/two">Two</a></li>
  </ul>
</body></html>
"""


class TestClassify:
    @pytest.mark.parametrize(
        "content_type, kind",
        [
            ("application/json", QueryKind.STRUCTURED),
            ("text/html", QueryKind.MARKUP),
            ("application/xml", QueryKind.MARKUP),
            ("application/xhtml+xml", QueryKind.MARKUP),
            ("text/plain", QueryKind.UNSUPPORTED),
            ("", QueryKind.UNSUPPORTED),
        ],
    )
    def test_media_types(self, content_type: str, kind: QueryKind) -> None:
        assert classify(content_type) is kind

    def test_unsupported_evaluates_to_none(self) -> None:
        assert evaluate(QueryKind.UNSUPPORTED, "x", "a", ROOT, OutputOptions()) is None


# ---------------------------------------------------------------------------
# Structured data (JSONPath)
# ---------------------------------------------------------------------------

class TestQueryStructured:
    _BODY = '{"a": [1, 2, 3], "items": [{"n": "x"}, {"n": "y"}]}'

    def test_json_output_is_compact_array(self) -> None:
        assert query_structured(self._BODY, "$.a[*]", ROOT, OutputOptions(json=True)) == "[1,2,3]"

    def test_plain_output_one_node_per_line(self) -> None:
        assert query_structured(self._BODY, "$.a[*]", ROOT, OutputOptions()) == "1\n2\n3"

    def test_markdown_ordered_list(self) -> None:
        options = OutputOptions(markdown=True, ordered=True)
        out = query_structured(self._BODY, "$.items[*].n", ROOT, options)
        assert out == "1.  x\n\n2.  y"

    def test_object_nodes_rendered_as_json(self) -> None:
        out = query_structured(self._BODY, "$.items[*]", ROOT, OutputOptions())
        assert out == '{"n":"x"}\n{"n":"y"}'

    def test_no_matches(self) -> None:
        assert query_structured(self._BODY, "$.missing", ROOT, OutputOptions()) == ""
        assert query_structured(self._BODY, "$.missing", ROOT, OutputOptions(json=True)) == "[]"

    def test_malformed_body_raises(self) -> None:
        with pytest.raises(json.JSONDecodeError):
            query_structured("{not json", "$.a", ROOT, OutputOptions())

    def test_whole_number_floats_print_as_integers(self) -> None:
        body = '{"a": [1.0, 2.5, 3e2]}'
        assert query_structured(body, "$.a[*]", ROOT, OutputOptions(json=True)) == "[1,2.5,300]"
        assert query_structured(body, "$.a[*]", ROOT, OutputOptions()) == "1\n2.5\n300"

    @pytest.mark.parametrize("literal", ["NaN", "Infinity", "-Infinity"])
    def test_non_standard_constants_rejected(self, literal: str) -> None:
        with pytest.raises(ValueError):
            query_structured('{"a": ' + literal + "}", "$.a", ROOT, OutputOptions())


# ---------------------------------------------------------------------------
# Markup (CSS selectors)
# ---------------------------------------------------------------------------

class TestQueryMarkup:
    def test_plain_text_nodes(self) -> None:
        html = "<div><p>First</p><p>Second</p></div>"
        assert query_markup(html, "p", ROOT, OutputOptions()) == "First\nSecond"

    def test_empty_link_uses_title(self) -> None:
        html = '<a href="/x" title="T"></a>'
        assert query_markup(html, "a", ROOT, OutputOptions()) == "Title: T\thttp://h/x"

    def test_empty_link_without_title(self) -> None:
        html = '<a href="/x"></a>'
        assert query_markup(html, "a", ROOT, OutputOptions()) == "Title: \thttp://h/x"

    def test_links_rerooted_only_when_root_relative(self) -> None:
        out = query_markup(_LINKS_HTML, "a", ROOT, OutputOptions())
        assert out == "One\thttp://h/one\nTwo\thttps://other.example.com/two"

    def test_markdown_unordered_list(self) -> None:
        options = OutputOptions(markdown=True, list=True)
        out = query_markup(_LINKS_HTML, "a", ROOT, options)
        assert out == "*   [One](http://h/one)\n\n*   [Two](https://other.example.com/two)"

    def test_json_records(self) -> None:
        out = query_markup(_LINKS_HTML, "a", ROOT, OutputOptions(json=True))
        assert json.loads(out) == [
            {"text": "One", "link": "http://h/one", "isImg": False, "rel": "nofollow"},
            {"text": "Two", "link": "https://other.example.com/two", "isImg": False, "rel": False},
        ]

    def test_image_with_alt(self) -> None:
        html = '<img src="/pic.png" alt="A picture">'
        options = OutputOptions(markdown=True)
        assert query_markup(html, "img", ROOT, options) == "![A picture](http://h/pic.png)"

    def test_image_without_alt_is_skipped(self) -> None:
        html = '<img src="/pic.png">'
        assert query_markup(html, "img", ROOT, OutputOptions()) == ""

    def test_image_wins_over_link_on_same_element(self) -> None:
        html = '<a href="/page" alt="A" src="/pic.png">Text</a>'
        out = query_markup(html, "a", ROOT, OutputOptions(json=True))
        assert json.loads(out) == [
            {"text": "A", "link": "http://h/pic.png", "isImg": True, "rel": False}
        ]

    def test_skipped_elements_keep_their_position_number(self) -> None:
        html = "<ul><li>one</li><li></li><li>three</li></ul>"
        options = OutputOptions(markdown=True, ordered=True)
        assert query_markup(html, "li", ROOT, options) == "1.  one\n\n3.  three"

    def test_no_matches(self) -> None:
        assert query_markup("<p>x</p>", "table", ROOT, OutputOptions()) == ""
        assert query_markup("<p>x</p>", "table", ROOT, OutputOptions(json=True)) == "[]"

    def test_xml_body(self) -> None:
        xml = "<feed><entry><title>Hello</title></entry><entry><title>World</title></entry></feed>"
        assert query_markup(xml, "entry > title", ROOT, OutputOptions()) == "Hello\nWorld"
