"""Default selectors and block vocabulary for the homepage importer.

Every value here can be overridden per call through the ``params`` mapping
passed to :func:`eds_importer.importer.transform_dom`; see
:class:`eds_importer.items.ImportParams`.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Page chrome stripped before any block conversion
# ---------------------------------------------------------------------------
REMOVE_SELECTORS: tuple[str, ...] = (
    "noindex",
    ".header-wrapper",
    ".homepage-cta-wrapper",
    ".nav-sidebar",
    ".footer-wrapper",
    "script",
    "noscript",
    "style",
)

# Subtree rendered to the output document; falls back to <body>
MAIN_SELECTOR = "main.content"

# ---------------------------------------------------------------------------
# Hero (main carousel, first slide only)
# ---------------------------------------------------------------------------
HERO_BLOCK_NAME = "Hero"
HERO_CAROUSEL_SELECTOR = "#carousel34"
HERO_SLIDE_SELECTOR = ".slide"
HERO_IMAGE_SELECTOR = "img.slide-img"
HERO_TITLE_SELECTOR = ".slide-text-classic"
HERO_DESCRIPTION_SELECTOR = ".slide-text-body p"
HERO_CTA_SELECTOR = ".slide-text-footer a"

# ---------------------------------------------------------------------------
# Tiles (Personal / Business sections)
# ---------------------------------------------------------------------------
TILES_BLOCK_NAME = "Tiles"
TILES_SECTION_SELECTOR = ".tiles-wrapper.column-container"
TILES_HEADING_SELECTOR = ".solution-heading"
TILES_DEFAULT_HEADING = "Tiles"
TILE_SELECTOR = ".tiles-tile"
TILE_TITLE_SELECTOR = ".tile-heading"
TILE_BODY_SELECTOR = "p"
TILE_IMAGE_SELECTOR = "img.tiles-tile-img"
TILE_LINK_SELECTOR = "a.tiles-anchor"
TILES_COLUMNS: tuple[str, ...] = ("Tile Title", "Text", "Image", "Link")

# ---------------------------------------------------------------------------
# Metadata block
# ---------------------------------------------------------------------------
METADATA_BLOCK_NAME = "Metadata"
META_TITLE_PROPERTY = "og:title"
META_DESCRIPTION_PROPERTY = "og:description"
META_DESCRIPTION_NAME = "description"
META_IMAGE_PROPERTY = "og:image"

# Parser handed to BeautifulSoup for raw HTML input
HTML_PARSER = "lxml"
