"""URL helpers."""

from __future__ import annotations


def reroot(uri: str, root: str) -> str:
    """Prepend *root* to *uri* when *uri* is a root-relative path.

    Exactly one ``/`` joins the two.  Anything not starting with ``/`` is
    returned untouched; no attempt is made to validate either value.

    >>> reroot("/x", "http://h/")
    'http://h/x'
    >>> reroot("page.html", "http://h/")
    'page.html'
    """
    if uri.startswith("/"):
        if root.endswith("/"):
            return root + uri[1:]
        return root + uri
    return uri
