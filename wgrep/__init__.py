"""wgrep: run selector queries against URL resources."""

from wgrep.config import __version__
from wgrep.dispatcher import ResponseError, dispatch
from wgrep.display import display_results
from wgrep.evaluators import QueryKind, classify, query_markup, query_structured
from wgrep.fetcher import FetchError, fetch
from wgrep.models import Credentials, HttpResponse, OutputOptions, QueryRequest
from wgrep.urls import reroot

__all__ = [
    "__version__",
    "fetch",
    "dispatch",
    "display_results",
    "classify",
    "query_markup",
    "query_structured",
    "reroot",
    "QueryKind",
    "QueryRequest",
    "Credentials",
    "HttpResponse",
    "OutputOptions",
    "FetchError",
    "ResponseError",
]
