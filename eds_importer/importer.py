"""eds_importer.importer - entry points called once per source document.

The host import framework calls :func:`transform_dom` to get the subtree to
render and :func:`generate_document_path` to decide where the result goes.
Both take the same keyword arguments (``document``, ``url``, ``html``,
``params``) so a host can pass one argument bundle to each.

Basic usage::

    from eds_importer import import_page

    result = import_page(html, url="https://www.westpac.com.au/")
    print(result.path)      # /index
    print(result.blocks)    # ['Hero', 'Tiles', 'Tiles', 'Metadata']
    print(result.html())

Lower-level access::

    from bs4 import BeautifulSoup
    from eds_importer.importer import generate_document_path, transform_dom

    soup = BeautifulSoup(html, "lxml")
    main = transform_dom(document=soup, url=url, html=html, params={})
    path = generate_document_path(document=soup, url=url, html=html, params={})
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from bs4 import BeautifulSoup, Tag

from eds_importer import settings
from eds_importer.converters import convert_hero, convert_tiles_section, find_tiles_sections
from eds_importer.dom import SoupDomOps
from eds_importer.items import ImportParams, ImportResult, params_from_mapping
from eds_importer.paths import document_path_from_url, sanitize_path

if TYPE_CHECKING:
    from eds_importer.dom import DomOps

logger = logging.getLogger(__name__)


def _main_root(document: BeautifulSoup | Tag, selector: str) -> Tag:
    main = document.select_one(selector) if selector else None
    if main is not None:
        return main
    body = document.find("body")
    if isinstance(body, Tag):
        return body
    # Fragment without <body>
    return document


def transform_dom(
    *,
    document: BeautifulSoup,
    url: str = "",
    html: str = "",
    params: dict[str, Any] | ImportParams | None = None,
    dom: DomOps | None = None,
) -> Tag:
    """Rewrite *document* in place and return the root element to render.

    Steps, in order: strip page chrome, convert the hero carousel, convert
    each tiles section, append the Metadata block.

    Args:
        document: Parsed page; mutated in place.
        url:      Original page URL.  Relative links are resolved against it.
        html:     Raw page HTML (unused; part of the host calling convention).
        params:   Host parameters; see :class:`~eds_importer.items.ImportParams`.
        dom:      DOM collaborator.  Defaults to a :class:`SoupDomOps` bound
                  to *document*.

    Returns:
        The main content root (``main.content``, else ``<body>``).

    Raises:
        pydantic.ValidationError: If *params* does not validate.
    """
    opts = params_from_mapping(params)
    dom = dom if dom is not None else SoupDomOps(document, url=url)
    logger.info("Transforming %s", url or "<document>")

    removed = dom.remove(opts.remove_selectors)
    logger.debug("Removed %d chrome node(s)", removed)

    main = _main_root(document, opts.main_selector)

    convert_hero(main, document, dom, base_url=url)

    for section in find_tiles_sections(document, opts.tiles_section_selector):
        # Nested inside a section (or carousel) that was already consumed
        if section.decomposed:
            continue
        convert_tiles_section(
            main,
            section,
            dom,
            base_url=url,
            default_heading=opts.default_tiles_heading,
        )

    dom.inject_metadata(main)
    return main


def generate_document_path(
    *,
    document: BeautifulSoup | None = None,
    url: str,
    html: str = "",
    params: dict[str, Any] | ImportParams | None = None,
) -> str:
    """Return the sanitized destination path for the page at *url*.

    Raises:
        :class:`~eds_importer.paths.InvalidURLError`: If *url* has no scheme
            or host.
    """
    path = sanitize_path(document_path_from_url(url))
    logger.info("Document path for %s: %s", url, path)
    return path


def _block_names(main: Tag) -> list[str]:
    names: list[str] = []
    for table in main.find_all("table", recursive=False):
        first_row = table.find("tr")
        name_cell = first_row.find("th") if isinstance(first_row, Tag) else None
        if isinstance(name_cell, Tag):
            names.append(name_cell.get_text().strip())
    return names


def import_page(
    html: str,
    url: str,
    params: dict[str, Any] | ImportParams | None = None,
) -> ImportResult:
    """Parse *html*, transform it and compute its destination path.

    Pure in-memory; nothing is fetched or written.
    """
    document = BeautifulSoup(html, settings.HTML_PARSER)
    path = generate_document_path(document=document, url=url, html=html, params=params)
    main = transform_dom(document=document, url=url, html=html, params=params)
    return ImportResult(url=url, path=path, main=main, blocks=_block_names(main))
