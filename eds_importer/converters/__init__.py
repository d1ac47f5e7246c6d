"""Block converters: rewrite page-specific markup into named block tables."""

from .hero import convert_hero, hero_rows
from .tiles import convert_tiles_section, find_tiles_sections, tile_row

__all__ = [
    "convert_hero",
    "convert_tiles_section",
    "find_tiles_sections",
    "hero_rows",
    "tile_row",
]
