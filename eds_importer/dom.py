"""DOM operations used by the block converters.

The converters never touch table construction, node removal or metadata
injection directly; they go through a :class:`DomOps` collaborator bound to
one parsed document.  :class:`SoupDomOps` is the BeautifulSoup implementation,
and tests can substitute any object satisfying the protocol.

Usage::

    from bs4 import BeautifulSoup
    from eds_importer.dom import SoupDomOps

    soup = BeautifulSoup(html, "lxml")
    dom = SoupDomOps(soup, url="https://www.westpac.com.au/")
    dom.remove(["script", ".footer-wrapper"])
    table = dom.build_table([["Hero"], ["Title", "Welcome"]])
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag
from soupsieve import SelectorSyntaxError

from eds_importer import settings

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from eds_importer.items import Cell, Row

logger = logging.getLogger(__name__)

_TITLE_CONTROL_RE = re.compile(r"[\n\t]")


# ---------------------------------------------------------------------------
# Protocol
# ---------------------------------------------------------------------------

@runtime_checkable
class DomOps(Protocol):
    """Document-bound DOM capabilities consumed by the converters."""

    def remove(self, selectors: Iterable[str]) -> int:
        """Remove every node matching any of *selectors*; return the count."""
        ...

    def build_table(self, rows: Sequence[Row]) -> Tag:
        """Return a detached block table built from *rows*."""
        ...

    def inject_metadata(self, main: Tag) -> Tag | None:
        """Append a Metadata block to *main*; None when there is nothing to add."""
        ...


# ---------------------------------------------------------------------------
# Node removal
# ---------------------------------------------------------------------------

def remove(document: BeautifulSoup | Tag, selectors: Iterable[str]) -> int:
    """Decompose every element of *document* matching one of *selectors*."""
    removed = 0
    for selector in selectors:
        try:
            matches = document.select(selector)
        except SelectorSyntaxError as exc:
            logger.debug("Skipping invalid selector %r: %s", selector, exc)
            continue
        for el in matches:
            # Already gone with an ancestor matched earlier
            if el.decomposed:
                continue
            el.decompose()
            removed += 1
    return removed


# ---------------------------------------------------------------------------
# Table construction
# ---------------------------------------------------------------------------

def _fill_cell(cell: Tag, value: Cell | Sequence[Cell] | None) -> None:
    if value is None:
        return
    if isinstance(value, Tag):
        cell.append(value)
    elif isinstance(value, str):
        if value:
            cell.append(value)
    else:
        for item in value:
            _fill_cell(cell, item)


def create_table(rows: Sequence[Row], document: BeautifulSoup) -> Tag:
    """Build a block ``<table>`` from *rows*.

    The first row is the block-name row and is rendered with ``<th>`` cells;
    when it is narrower than the widest row its last cell spans the
    remaining columns.
    """
    table = document.new_tag("table")
    max_cols = max((len(row) for row in rows), default=0)

    for index, row in enumerate(rows):
        tr = document.new_tag("tr")
        table.append(tr)
        for value in row:
            cell = document.new_tag("th" if index == 0 else "td")
            _fill_cell(cell, value)
            tr.append(cell)
        if index == 0 and row and len(row) < max_cols:
            tr.find_all("th")[-1]["colspan"] = str(max_cols - len(row) + 1)

    return table


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------

def _meta_content(
    document: BeautifulSoup,
    *,
    prop: str | None = None,
    name: str | None = None,
) -> str:
    attrs = {"property": prop} if prop else {"name": name}
    tag = document.find("meta", attrs=attrs)
    if not isinstance(tag, Tag):
        return ""
    return str(tag.get("content") or "").strip()


def get_metadata(document: BeautifulSoup, url: str = "") -> dict[str, Any]:
    """Collect the Title / Description / Image entries for the Metadata block."""
    meta: dict[str, Any] = {}

    title = ""
    if document.title is not None:
        title = _TITLE_CONTROL_RE.sub("", document.title.get_text()).strip()
    title = title or _meta_content(document, prop=settings.META_TITLE_PROPERTY)
    if title:
        meta["Title"] = title

    description = _meta_content(
        document, prop=settings.META_DESCRIPTION_PROPERTY,
    ) or _meta_content(document, name=settings.META_DESCRIPTION_NAME)
    if description:
        meta["Description"] = description

    image_src = _meta_content(document, prop=settings.META_IMAGE_PROPERTY)
    if image_src:
        meta["Image"] = document.new_tag(
            "img", src=urljoin(url, image_src) if url else image_src,
        )

    return meta


def create_metadata(
    main: Tag,
    document: BeautifulSoup,
    url: str = "",
) -> Tag | None:
    """Append a Metadata block built from the document head to *main*."""
    meta = get_metadata(document, url)
    if not meta:
        logger.debug("No page metadata found; Metadata block skipped")
        return None

    rows: list[Row] = [[settings.METADATA_BLOCK_NAME]]
    rows.extend([key, value] for key, value in meta.items())
    table = create_table(rows, document)
    main.append(table)
    return table


# ---------------------------------------------------------------------------
# BeautifulSoup implementation
# ---------------------------------------------------------------------------

class SoupDomOps:
    """:class:`DomOps` backed by a parsed BeautifulSoup document.

    Args:
        document: The parsed page.  All created nodes belong to it.
        url:      Original page URL, used to resolve the metadata image.
    """

    def __init__(self, document: BeautifulSoup, url: str = "") -> None:
        self._document = document
        self._url = url

    @property
    def document(self) -> BeautifulSoup:
        return self._document

    def remove(self, selectors: Iterable[str]) -> int:
        return remove(self._document, selectors)

    def build_table(self, rows: Sequence[Row]) -> Tag:
        return create_table(rows, self._document)

    def inject_metadata(self, main: Tag) -> Tag | None:
        return create_metadata(main, self._document, self._url)
