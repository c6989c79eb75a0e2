"""Data models for a single wgrep run."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union


@dataclass(frozen=True)
class Credentials:
    """Basic-auth credentials, already resolved (password prompted if needed)."""

    user: str
    password: str

    def __repr__(self) -> str:
        return f"Credentials(user={self.user!r}, password='***')"


@dataclass(frozen=True)
class QueryRequest:
    """What the user asked for: one URL, an optional query, optional auth."""

    url: str
    query: Optional[str] = None
    auth: Optional[Credentials] = None


@dataclass(frozen=True)
class OutputOptions:
    """Output-mode flags, frozen once from the command line.

    ``list`` takes precedence over ``ordered`` when both are set.
    """

    markdown: bool = False
    list: bool = False
    ordered: bool = False
    json: bool = False
    inspect: bool = False


@dataclass
class HttpResponse:
    """The raw HTTP response for the one request issued per run."""

    url: str
    status_code: int
    body: str
    headers: Dict[str, str] = field(default_factory=dict)

    @property
    def content_type(self) -> str:
        """Media type with parameters stripped, e.g. ``text/html``."""
        raw = self.headers.get("content-type", "")
        return raw.split(";")[0].strip().lower()


@dataclass
class LinkRecord:
    """A link or image extracted from markup, as emitted in structured output."""

    text: str
    link: str
    is_img: bool = False
    rel: Union[str, bool] = False

    def to_dict(self) -> Dict[str, Any]:
        return {"text": self.text, "link": self.link, "isImg": self.is_img, "rel": self.rel}
