"""Output formatting: links, Markdown list decoration and result joining.

Every function takes the frozen :class:`OutputOptions` explicitly; there is
no module-level output state.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Sequence, Union

from wgrep.models import LinkRecord, OutputOptions

Fragment = Union[str, Dict[str, Any]]

# JSON output is compact, matching what browsers' JSON.stringify produces
_JSON_SEPARATORS = (",", ":")


def to_json(value: Any) -> str:
    """Serialise *value* as compact JSON, keeping non-ASCII text readable."""
    return json.dumps(value, separators=_JSON_SEPARATORS, ensure_ascii=False)


def node_text(node: Any) -> str:
    """Render a structured-data node as a plain string.

    Strings pass through; everything else (numbers, booleans, null, objects,
    arrays) is written as compact JSON.
    """
    if isinstance(node, str):
        return node
    return to_json(node)


def format_link(
    options: OutputOptions,
    text: str,
    link: str,
    rel: Union[str, bool] = False,
    is_img: bool = False,
) -> Fragment:
    """Format a link (or image) for the selected output mode.

    Markdown is checked before structured output, so ``-m -j`` yields
    Markdown strings inside a JSON array.
    """
    if options.markdown:
        prefix = "!" if is_img else ""
        return f"{prefix}[{text}]({link})"
    if options.json:
        return LinkRecord(text=text, link=link, is_img=is_img, rel=rel).to_dict()
    return f"{text}\t{link}"


def format_result(options: OutputOptions, result: Fragment, index: int) -> Fragment:
    """Decorate *result* as a Markdown list item when ``-m -l`` or ``-m -i`` is set.

    ``index`` is the zero-based position of the matched node, so ordered
    items are numbered from 1.
    """
    if options.markdown and options.list:
        return f"*   {result}"
    if options.markdown and options.ordered:
        return f"{index + 1}.  {result}"
    return result


def join_results(options: OutputOptions, results: Sequence[Fragment]) -> str:
    """Combine formatted fragments into the final output string."""
    if options.json:
        return to_json(list(results))
    joiner = "\n\n" if options.markdown else "\n"
    return joiner.join(node_text(result) for result in results)


def decorate_all(options: OutputOptions, nodes: Sequence[Any]) -> List[Fragment]:
    """Apply :func:`format_result` to every node by position."""
    return [format_result(options, node_text(node), i) for i, node in enumerate(nodes)]
