"""Printing of final results."""

from __future__ import annotations

import json
import pprint
from typing import Optional

import typer

from wgrep.models import OutputOptions

# Levels shown below the top-level value in --inspect mode
INSPECT_DEPTH = 2


def display_results(results: Optional[str], options: OutputOptions) -> None:
    """Print *results* to stdout; empty or missing results print nothing.

    With ``-j -n`` the JSON is parsed back and pretty-printed, nesting
    deeper than :data:`INSPECT_DEPTH` levels collapsed to ``...``.
    Output is written byte-for-byte; ANSI sequences survive even when
    stdout is not a terminal.
    """
    if not results:
        return
    if options.json and options.inspect:
        value = json.loads(results)
        typer.echo(pprint.pformat(value, depth=INSPECT_DEPTH + 1), color=True)
    else:
        typer.echo(results, color=True)
