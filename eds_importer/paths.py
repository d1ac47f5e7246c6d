"""Destination-path derivation and path sanitization."""

from __future__ import annotations

import re
import unicodedata
from urllib.parse import unquote, urlparse

_HTML_EXTENSION_RE = re.compile(r"\.html?$", re.IGNORECASE)
_NON_NAME_RE = re.compile(r"[^a-z0-9]+")

ROOT_DOCUMENT_PATH = "/index"


class InvalidURLError(ValueError):
    """Raised when a source URL has no scheme or host.

    Attributes:
        url -- the rejected URL
    """

    def __init__(self, message: str, url: str = "") -> None:
        super().__init__(message)
        self.url = url


def document_path_from_url(url: str) -> str:
    """Return the unsanitized document path for *url*.

    Example:
        https://example.com/about.html → /about
        https://example.com/           → /index
    """
    try:
        parsed = urlparse(url.strip())
    except ValueError as exc:
        # e.g. an unbalanced IPv6 bracket in the host
        raise InvalidURLError(f"Invalid URL: {url!r}", url=url) from exc
    if not parsed.scheme or not parsed.netloc:
        raise InvalidURLError(f"Invalid URL: {url!r}", url=url)

    path = _HTML_EXTENSION_RE.sub("", parsed.path)
    if not path or path == "/":
        path = ROOT_DOCUMENT_PATH
    return path


def sanitize_name(name: str) -> str:
    """Reduce *name* to lowercase ``[a-z0-9]`` runs joined by single dashes."""
    decomposed = unicodedata.normalize("NFKD", name)
    ascii_only = "".join(c for c in decomposed if not unicodedata.combining(c))
    return _NON_NAME_RE.sub("-", ascii_only.lower()).strip("-")


def sanitize_path(path: str) -> str:
    """Sanitize every segment of *path*, keeping a trailing file extension.

    The result always starts with ``/`` and is never just ``/``.
    """
    segments = [s for s in unquote(path).split("/") if s]
    if not segments:
        return ROOT_DOCUMENT_PATH

    *dirs, last = segments
    stem, dot, ext = last.rpartition(".")
    if dot and stem and sanitize_name(ext):
        last = f"{sanitize_name(stem) or 'index'}.{sanitize_name(ext)}"
    else:
        last = sanitize_name(last)

    parts = [sanitize_name(s) for s in dirs] + [last]
    parts = [p for p in parts if p]
    if not parts:
        return ROOT_DOCUMENT_PATH
    return "/" + "/".join(parts)
