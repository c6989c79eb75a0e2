"""Response dispatch: status check, then query evaluation by media type."""

from __future__ import annotations

from typing import Optional

from wgrep.evaluators import QueryKind, classify, evaluate
from wgrep.logger import get_logger
from wgrep.models import HttpResponse, OutputOptions

logger = get_logger(__name__)


class ResponseError(Exception):
    """The server answered with anything other than ``200 OK``."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"{status_code}: {body}")
        self.status_code = status_code
        self.body = body


def dispatch(response: HttpResponse, query: Optional[str], options: OutputOptions) -> Optional[str]:
    """Turn *response* into the text to display.

    Without a query the body is returned unmodified.  With a query, the
    evaluator matching the response's media type runs against the body; an
    unsupported media type returns ``None`` (nothing is displayed).

    Raises:
        ResponseError: If the status code is not 200.
    """
    if response.status_code != 200:
        raise ResponseError(response.status_code, response.body)

    if not query:
        return response.body

    kind = classify(response.content_type)
    logger.debug("Content type %r handled as %s", response.content_type, kind.value)
    if kind is QueryKind.UNSUPPORTED:
        logger.warning("No query support for content type %r", response.content_type)
        return None

    return evaluate(kind, response.body, query, response.url, options)
