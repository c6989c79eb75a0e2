"""Query evaluators, selected by the response's media type.

Two kinds of body can be queried:

* structured data (``application/json``) with a JSONPath expression;
* markup (HTML, XML, XHTML) with a CSS selector.

Anything else is :attr:`QueryKind.UNSUPPORTED` and yields no output.
"""

from __future__ import annotations

import enum
import json
from typing import Any, List, Union

from bs4 import BeautifulSoup, Tag
from jsonpath_ng.ext import parse as jsonpath_parse

from wgrep.formatters import Fragment, decorate_all, format_link, format_result, join_results, to_json
from wgrep.logger import get_logger
from wgrep.models import OutputOptions
from wgrep.urls import reroot

logger = get_logger(__name__)


class QueryKind(enum.Enum):
    STRUCTURED = "structured"
    MARKUP = "markup"
    UNSUPPORTED = "unsupported"


_MEDIA_TYPES = {
    "application/json": QueryKind.STRUCTURED,
    "text/html": QueryKind.MARKUP,
    "application/xml": QueryKind.MARKUP,
    "application/xhtml+xml": QueryKind.MARKUP,
}


def classify(media_type: str) -> QueryKind:
    """Map a normalised media type (see ``HttpResponse.content_type``) to its :class:`QueryKind`."""
    return _MEDIA_TYPES.get(media_type, QueryKind.UNSUPPORTED)


# ---------------------------------------------------------------------------
# Structured data
# ---------------------------------------------------------------------------

def _parse_number(literal: str):
    """Whole-number floats (``1.0``, ``2e3``) load as ints so they print as ``1``, ``2000``."""
    value = float(literal)
    if value.is_integer():
        return int(value)
    return value


def _reject_constant(name: str):
    raise ValueError(f"Unexpected token {name} in JSON")


def query_structured(body: str, query: str, root: str, options: OutputOptions) -> str:
    """Run JSONPath *query* over the JSON document in *body*.

    *root* is accepted for a uniform signature and not used.

    Raises:
        json.JSONDecodeError: If *body* is not valid JSON.
        ValueError: If *body* uses the non-standard ``NaN``/``Infinity`` literals.
    """
    data = json.loads(body, parse_float=_parse_number, parse_constant=_reject_constant)
    matches = [match.value for match in jsonpath_parse(query).find(data)]
    logger.debug("JSONPath %r matched %d node(s)", query, len(matches))

    if options.json:
        return to_json(matches)
    return join_results(options, decorate_all(options, matches))


# ---------------------------------------------------------------------------
# Markup
# ---------------------------------------------------------------------------

def _attr(element: Tag, name: str) -> Union[str, None]:
    """Return attribute *name* as a string; multi-valued attributes are space-joined."""
    value = element.get(name)
    if isinstance(value, list):
        return " ".join(value)
    return value


def _extract(element: Tag, root: str, options: OutputOptions) -> Fragment:
    """Turn one matched element into a text, link or image fragment.

    An element carrying both ``alt`` and ``src`` is always reported as an
    image, even when it also has an ``href``.
    """
    text = element.get_text()
    href = _attr(element, "href")
    src = _attr(element, "src")
    alt = _attr(element, "alt")
    parsed: Fragment = text

    if href:
        href = reroot(href, root)
        if not text:
            text = "Title: " + (_attr(element, "title") or "")
        parsed = format_link(options, text, href, _attr(element, "rel") or False, False)

    if alt and src:
        src = reroot(src, root)
        parsed = format_link(options, alt, src, False, True)

    return parsed


def query_markup(body: str, query: str, root: str, options: OutputOptions) -> str:
    """Run CSS selector *query* over the HTML/XML document in *body*.

    Root-relative ``href`` and ``src`` values are rewritten against *root*.
    Elements yielding nothing are skipped, but Markdown ordered-list numbers
    still follow each element's position among all matches.
    """
    soup = BeautifulSoup(body, "html.parser")
    elements = soup.select(query)
    logger.debug("Selector %r matched %d element(s)", query, len(elements))

    results: List[Fragment] = []
    for i, element in enumerate(elements):
        parsed = _extract(element, root, options)
        if parsed:
            results.append(format_result(options, parsed, i))
    return join_results(options, results)


def evaluate(kind: QueryKind, body: str, query: str, root: str, options: OutputOptions) -> Any:
    """Dispatch to the evaluator for *kind*; ``None`` for unsupported types."""
    if kind is QueryKind.STRUCTURED:
        return query_structured(body, query, root, options)
    if kind is QueryKind.MARKUP:
        return query_markup(body, query, root, options)
    return None
