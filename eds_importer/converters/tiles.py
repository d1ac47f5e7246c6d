"""Convert tile-group sections (Personal, Business, ...) into Tiles blocks."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from eds_importer import settings
from eds_importer.converters.fields import clone_of, href_of, text_of

if TYPE_CHECKING:
    from bs4 import BeautifulSoup, Tag

    from eds_importer.dom import DomOps
    from eds_importer.items import Row

logger = logging.getLogger(__name__)


def find_tiles_sections(
    document: BeautifulSoup | Tag,
    selector: str = settings.TILES_SECTION_SELECTOR,
) -> list[Tag]:
    """Return every tiles section of *document* in document order.

    An empty *selector* matches nothing.
    """
    if not selector:
        return []
    return document.select(selector)


def tile_row(tile: Tag, base_url: str = "") -> Row:
    """Extract ``[title, text, image, link]`` from one tile."""
    return [
        text_of(tile.select_one(settings.TILE_TITLE_SELECTOR)),
        text_of(tile.select_one(settings.TILE_BODY_SELECTOR)),
        clone_of(tile.select_one(settings.TILE_IMAGE_SELECTOR)),
        href_of(tile.select_one(settings.TILE_LINK_SELECTOR), base_url),
    ]


def convert_tiles_section(
    main: Tag,
    section: Tag,
    dom: DomOps,
    *,
    base_url: str = "",
    default_heading: str = settings.TILES_DEFAULT_HEADING,
) -> Tag | None:
    """Replace *section* with a Tiles block appended to the end of *main*.

    The block's name row carries the section heading; the second row names
    the columns.  Returns the appended table, or ``None`` when the section
    holds no tiles (nothing is mutated then).
    """
    heading_el = section.select_one(settings.TILES_HEADING_SELECTOR)
    heading = text_of(heading_el) if heading_el is not None else default_heading

    tiles = section.select(settings.TILE_SELECTOR)
    if not tiles:
        logger.debug("Tiles section %r has no tiles; skipped", heading)
        return None

    rows: list[Row] = [
        [settings.TILES_BLOCK_NAME, heading],
        list(settings.TILES_COLUMNS),
    ]
    rows.extend(tile_row(tile, base_url) for tile in tiles)

    table = dom.build_table(rows)
    main.append(table)
    section.decompose()
    logger.debug("Tiles block %r built from %d tile(s)", heading, len(tiles))
    return table
