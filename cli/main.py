"""wgrep CLI: run a selector query against a single URL.

Usage:
    wgrep [options] <url>
    python cli/main.py --help

One run is one pipeline: parse flags → (prompt for a password) → GET the
URL → pick an evaluator by content type → format → print.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from wgrep.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import logging
from typing import Optional

import click
import typer
from typer.core import TyperCommand

from wgrep.config import __version__
from wgrep.dispatcher import ResponseError, dispatch
from wgrep.display import display_results
from wgrep.fetcher import FetchError, fetch
from wgrep.logger import setup_logging
from wgrep.models import Credentials, OutputOptions, QueryRequest

USAGE = "Usage: wgrep [options] <url>\nwgrep --help for available options."

app = typer.Typer(
    name="wgrep",
    help="Run selector queries against URL resources.",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"wgrep {__version__}")
        raise typer.Exit()


class OptionalPasswordCommand(TyperCommand):
    """Command whose ``-p/--password`` may be given with or without a value.

    Typer cannot declare optional-value options, so the generated parameter
    is swapped for a click option that yields ``""`` when used bare.
    """

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.params = [
            _password_option() if param.name == "password" else param for param in self.params
        ]


def _password_option() -> click.Option:
    return click.Option(
        ["-p", "--password", "password"],
        is_flag=False,
        flag_value="",
        default=None,
        metavar="[password]",
        help="Provide a password for basic authentication.",
    )


def resolve_credentials(user: Optional[str], password: Optional[str]) -> Optional[Credentials]:
    """Build basic-auth credentials, prompting for the password when none was given.

    A bare ``-p`` arrives as an empty string and also triggers the prompt.
    """
    if not user:
        return None
    if not password:
        password = typer.prompt("Password", hide_input=True)
    return Credentials(user=user, password=password)


# ---------------------------------------------------------------------------
# Command
# ---------------------------------------------------------------------------
@app.command(cls=OptionalPasswordCommand)
def main(
    url: Optional[str] = typer.Argument(None, metavar="<url>", help="URL to fetch."),
    user: Optional[str] = typer.Option(
        None, "-u", "--user", metavar="<username>", help="Provide a basic authentication user."
    ),
    query: Optional[str] = typer.Option(
        None, "-q", "--query", metavar="<query>", help="Provide a dom selector to query the dom."
    ),
    password: Optional[str] = typer.Option(
        None,
        "-p",
        "--password",
        metavar="[password]",
        help="Provide a password for basic authentication.",
    ),
    markdown: bool = typer.Option(False, "-m", "--markdown", help="Output as Markdown."),
    list_: bool = typer.Option(
        False, "-l", "--list", help="With -m, output results as an unordered list."
    ),
    ordered: bool = typer.Option(
        False, "-i", "--ordered", help="With -m, output results as an ordered list."
    ),
    json_: bool = typer.Option(False, "-j", "--json", help="Return results as a json object."),
    inspect: bool = typer.Option(
        False, "-n", "--inspect", help="With -j, inspect the json results in a formatted output."
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Log request details to stderr."),
    version: Optional[bool] = typer.Option(
        None, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit."
    ),
) -> None:
    """Fetch <url> and print the nodes matching --query (or the whole body)."""
    if not url:
        typer.echo(USAGE)
        raise typer.Exit(code=1)

    setup_logging(logging.DEBUG if verbose else None)

    options = OutputOptions(
        markdown=markdown,
        list=list_,
        ordered=ordered,
        json=json_,
        inspect=inspect,
    )
    request = QueryRequest(url=url, query=query, auth=resolve_credentials(user, password))

    try:
        response = fetch(request)
        results = dispatch(response, request.query, options)
    except FetchError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=1)
    except ResponseError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=exc.status_code)

    display_results(results, options)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
