"""HTTP fetcher: issues the single GET request of a wgrep run."""

from __future__ import annotations

import httpx

from wgrep.config import settings
from wgrep.logger import get_logger
from wgrep.models import HttpResponse, QueryRequest

logger = get_logger(__name__)


class FetchError(Exception):
    """The request failed before any HTTP response was received."""


def _default_headers() -> dict:
    return {"User-Agent": settings.user_agent}


def fetch(request: QueryRequest) -> HttpResponse:
    """GET ``request.url`` and return the response, whatever its status.

    Redirects are followed; ``HttpResponse.url`` is the final URL.  Status
    codes are not checked here, that is the dispatcher's job.

    Raises:
        FetchError: On transport failures (DNS, refused connection,
            timeout, malformed URL).
    """
    auth = None
    if request.auth is not None:
        auth = httpx.BasicAuth(request.auth.user, request.auth.password)

    logger.debug("GET %s (auth=%s)", request.url, "basic" if auth else "none")

    try:
        with httpx.Client(
            headers=_default_headers(),
            timeout=settings.request_timeout,
            follow_redirects=True,
        ) as client:
            response = client.get(request.url, auth=auth)
            body = response.text
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise FetchError(f"{request.url}: {exc}") from exc

    result = HttpResponse(
        url=str(response.url),
        status_code=response.status_code,
        body=body,
        headers={key.lower(): value for key, value in response.headers.items()},
    )
    logger.debug("HTTP %d %s", result.status_code, result.content_type or "(no content type)")
    return result
