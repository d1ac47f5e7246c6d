"""Pydantic models for import parameters and results, plus block-table cell types."""

from __future__ import annotations

from typing import Any

import soupsieve
from bs4 import Tag
from pydantic import BaseModel, Field, field_validator
from soupsieve import SelectorSyntaxError

from eds_importer import settings

# ---------------------------------------------------------------------------
# Block table cells
# ---------------------------------------------------------------------------

# A cell is plain text, a URL string, or a detached DOM node (e.g. an <img>)
Cell = str | Tag
Row = list[Cell]


# ---------------------------------------------------------------------------
# Per-call parameters
# ---------------------------------------------------------------------------

class ImportParams(BaseModel):
    """Overrides accepted through the ``params`` mapping of the entry points.

    Unknown keys (host parameters such as ``originalURL``) are ignored.
    """

    remove_selectors: list[str] = Field(
        default_factory=lambda: list(settings.REMOVE_SELECTORS),
    )
    main_selector: str = settings.MAIN_SELECTOR
    tiles_section_selector: str = settings.TILES_SECTION_SELECTOR
    default_tiles_heading: str = settings.TILES_DEFAULT_HEADING

    @field_validator("remove_selectors", mode="before")
    @classmethod
    def clean_selectors(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = [v]
        if isinstance(v, (list, tuple)):
            return [s.strip() for s in v if isinstance(s, str) and s.strip()]
        return v

    @field_validator("main_selector", "tiles_section_selector", mode="before")
    @classmethod
    def strip_selector(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = v.strip()
            # Empty disables the lookup (body fallback / no tiles sections)
            if v:
                try:
                    soupsieve.compile(v)
                except SelectorSyntaxError as exc:
                    raise ValueError(f"Invalid CSS selector {v!r}: {exc}") from exc
        return v


def params_from_mapping(params: dict[str, Any] | ImportParams | None) -> ImportParams:
    """Validate a host ``params`` mapping (or pass through an ImportParams)."""
    if isinstance(params, ImportParams):
        return params
    return ImportParams.model_validate(params or {})


# ---------------------------------------------------------------------------
# Result of a full page import
# ---------------------------------------------------------------------------

class ImportResult(BaseModel):
    """Transformed root element and destination path for one document."""

    model_config = {"arbitrary_types_allowed": True}

    url: str
    path: str
    main: Tag
    blocks: list[str] = Field(default_factory=list)

    def html(self) -> str:
        """Serialize the transformed root element."""
        return str(self.main)
