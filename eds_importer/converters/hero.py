"""Convert the homepage's main carousel into a Hero block.

Only the first slide of the first matching carousel is consumed; the rest of
the carousel markup is dropped.
"""

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


def hero_rows(slide: Tag, base_url: str = "") -> list[Row]:
    """Extract the six Hero rows from a carousel *slide*."""
    img = slide.select_one(settings.HERO_IMAGE_SELECTOR)
    title = slide.select_one(settings.HERO_TITLE_SELECTOR)
    desc = slide.select_one(settings.HERO_DESCRIPTION_SELECTOR)
    cta = slide.select_one(settings.HERO_CTA_SELECTOR)

    return [
        [settings.HERO_BLOCK_NAME],
        ["Image", clone_of(img)],
        ["Title", text_of(title)],
        ["Description", text_of(desc)],
        ["CTA Text", text_of(cta)],
        ["CTA Link", href_of(cta, base_url)],
    ]


def convert_hero(
    main: Tag,
    document: BeautifulSoup | Tag,
    dom: DomOps,
    *,
    base_url: str = "",
) -> Tag | None:
    """Replace the main carousel with a Hero block at the top of *main*.

    Returns the inserted table, or ``None`` when the carousel or its first
    slide is missing (the document is left untouched in that case).
    """
    carousel = document.select_one(settings.HERO_CAROUSEL_SELECTOR)
    if carousel is None:
        logger.debug("No carousel %r; Hero skipped", settings.HERO_CAROUSEL_SELECTOR)
        return None

    slide = carousel.select_one(settings.HERO_SLIDE_SELECTOR)
    if slide is None:
        logger.debug("Carousel has no slide; Hero skipped")
        return None

    table = dom.build_table(hero_rows(slide, base_url))
    main.insert(0, table)
    carousel.decompose()
    return table
