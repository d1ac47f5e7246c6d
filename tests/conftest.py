"""Shared pytest fixtures."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
from bs4 import BeautifulSoup, Tag

from eds_importer.dom import SoupDomOps

FIXTURES_DIR = Path(__file__).parent / "fixtures"

HOMEPAGE_URL = "https://www.westpac.com.au/"


def _read_fixture(name: str) -> str:
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


class FakeDomOps:
    """Minimal DomOps that records calls and builds bare tables."""

    def __init__(self) -> None:
        self._factory = BeautifulSoup("", "lxml")
        self.removed: list[list[str]] = []
        self.tables: list[list[list[Any]]] = []
        self.metadata_calls = 0

    def remove(self, selectors) -> int:
        self.removed.append(list(selectors))
        return 0

    def build_table(self, rows) -> Tag:
        self.tables.append([list(r) for r in rows])
        table = self._factory.new_tag("table")
        table["data-block"] = str(rows[0][0])
        return table

    def inject_metadata(self, main: Tag) -> Tag | None:
        self.metadata_calls += 1
        return None


@pytest.fixture
def homepage_html() -> str:
    return _read_fixture("homepage.html")


@pytest.fixture
def homepage_soup(homepage_html: str) -> BeautifulSoup:
    return BeautifulSoup(homepage_html, "lxml")


@pytest.fixture
def soup_dom(homepage_soup: BeautifulSoup) -> SoupDomOps:
    return SoupDomOps(homepage_soup, url=HOMEPAGE_URL)


@pytest.fixture
def fake_dom() -> FakeDomOps:
    return FakeDomOps()
