"""Resolving hrefs into absolute, crawlable URLs."""

from __future__ import annotations

from urllib.parse import urljoin, urlsplit, urlunsplit

_BAD_SCHEMES = frozenset({"mailto", "javascript", "tel", "data"})
_ALLOWED_SCHEMES = frozenset({"http", "https"})


def resolve_link(base: str, raw: str) -> str:
    """Resolve ``raw`` against ``base``; return ``""`` for links to ignore.

    Fragments are dropped and an empty path becomes ``/``.
    """
    raw = raw.strip()
    if not raw or raw.startswith("#"):
        return ""
    try:
        urlsplit(base)
        ref = urlsplit(raw)
    except ValueError:
        return ""

    if ref.scheme:
        scheme = ref.scheme.lower()
        if scheme in _BAD_SCHEMES or scheme not in _ALLOWED_SCHEMES:
            return ""

    try:
        joined = urlsplit(urljoin(base, raw))
    except ValueError:
        return ""
    return urlunsplit(
        (joined.scheme, joined.netloc, joined.path or "/", joined.query, "")
    )