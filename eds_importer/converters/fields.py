"""Tolerant field readers shared by the block converters.

Each helper accepts ``None`` for a missing element and degrades to an empty
string, so one absent field never sinks a whole block.
"""

from __future__ import annotations

import copy
from urllib.parse import urljoin

from bs4 import Tag


def text_of(el: Tag | None) -> str:
    """Return the trimmed text content of *el*, or ``""``."""
    if el is None:
        return ""
    return el.get_text().strip()


def clone_of(el: Tag | None) -> Tag | str:
    """Return a detached deep copy of *el*, or ``""`` when it is missing."""
    if el is None:
        return ""
    return copy.copy(el)


def href_of(el: Tag | None, base_url: str = "") -> str:
    """Return the link target of *el* resolved against *base_url*."""
    if el is None:
        return ""
    href = el.get("href")
    if isinstance(href, list):
        href = " ".join(href)
    href = (href or "").strip()
    if not href:
        return ""
    return urljoin(base_url, href) if base_url else href
