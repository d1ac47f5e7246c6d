"""Tests for eds_importer.importer entry points."""

from __future__ import annotations

import pytest
from bs4 import BeautifulSoup
from pydantic import ValidationError

from eds_importer import InvalidURLError, import_page
from eds_importer.importer import generate_document_path, transform_dom
from eds_importer.items import ImportParams, ImportResult

URL = "https://www.westpac.com.au/"


def _block_tables(main):
    return main.find_all("table", recursive=False)


# ---------------------------------------------------------------------------
# transform_dom
# ---------------------------------------------------------------------------

class TestTransformDom:
    def test_returns_main_content(self, homepage_soup, homepage_html):
        main = transform_dom(document=homepage_soup, url=URL, html=homepage_html, params={})
        assert main.name == "main"
        assert "content" in main["class"]

    def test_chrome_removed(self, homepage_soup):
        transform_dom(document=homepage_soup, url=URL)
        for selector in (
            "noindex", ".header-wrapper", ".homepage-cta-wrapper", ".nav-sidebar",
            ".footer-wrapper", "script", "noscript", "style",
        ):
            assert homepage_soup.select(selector) == [], selector

    def test_block_order(self, homepage_soup):
        main = transform_dom(document=homepage_soup, url=URL)
        names = [t.find("th").get_text() for t in _block_tables(main)]
        assert names == ["Hero", "Tiles", "Tiles", "Metadata"]
        assert main.contents[0].name == "table"
        assert main.contents[-1].find("th").get_text() == "Metadata"

    def test_source_markup_consumed(self, homepage_soup):
        main = transform_dom(document=homepage_soup, url=URL)
        assert main.select_one("#carousel34") is None
        assert main.select(".tiles-wrapper") == []

    def test_untouched_sections_stay_in_place(self, homepage_soup):
        main = transform_dom(document=homepage_soup, url=URL)
        assert main.select_one(".supporting-links") is not None
        assert main.select_one(".acknowledgement") is not None

    def test_links_resolved_against_url(self, homepage_soup):
        main = transform_dom(document=homepage_soup, url=URL)
        hero = _block_tables(main)[0]
        assert hero.find_all("tr")[5].find_all("td")[1].get_text() == (
            "https://www.westpac.com.au/about-westpac/"
        )

    def test_falls_back_to_body(self):
        soup = BeautifulSoup("<body><p>Plain page</p></body>", "lxml")
        main = transform_dom(document=soup, url=URL)
        assert main.name == "body"
        assert _block_tables(main) == []

    def test_params_override_selectors(self, homepage_soup):
        main = transform_dom(
            document=homepage_soup,
            url=URL,
            params={
                "remove_selectors": [".acknowledgement"],
                "tiles_section_selector": ".nothing-matches",
                "originalURL": URL,
            },
        )
        assert main.select_one(".acknowledgement") is None
        assert homepage_soup.find("script") is not None
        assert len(main.select(".tiles-wrapper")) == 2

    def test_invalid_params_raise(self, homepage_soup):
        with pytest.raises(ValidationError):
            transform_dom(document=homepage_soup, url=URL, params={"remove_selectors": 5})

    @pytest.mark.parametrize("field", ["main_selector", "tiles_section_selector"])
    def test_malformed_selector_params_raise(self, homepage_soup, field):
        with pytest.raises(ValidationError):
            transform_dom(document=homepage_soup, url=URL, params={field: "[["})

    def test_empty_tiles_selector_converts_no_sections(self, homepage_soup):
        main = transform_dom(
            document=homepage_soup, url=URL, params={"tiles_section_selector": "  "},
        )
        names = [t.find("th").get_text() for t in _block_tables(main)]
        assert names == ["Hero", "Metadata"]
        assert len(main.select(".tiles-wrapper")) == 2

    def test_empty_main_selector_falls_back_to_body(self, homepage_soup):
        main = transform_dom(document=homepage_soup, url=URL, params={"main_selector": ""})
        assert main.name == "body"

    def test_uses_injected_dom_ops(self, homepage_soup, fake_dom):
        main = transform_dom(document=homepage_soup, url=URL, dom=fake_dom)
        assert fake_dom.removed == [list(ImportParams().remove_selectors)]
        assert [t[0][0] for t in fake_dom.tables] == ["Hero", "Tiles", "Tiles"]
        assert fake_dom.metadata_calls == 1
        # Fake removes nothing
        assert homepage_soup.find("script") is not None
        assert main.contents[0]["data-block"] == "Hero"

    def test_nested_section_inside_consumed_section_skipped(self, fake_dom):
        soup = BeautifulSoup(
            "<main class='content'>"
            "<div class='tiles-wrapper column-container'>"
            "<div class='tiles-tile'><h3 class='tile-heading'>Outer</h3></div>"
            "<div class='tiles-wrapper column-container'>"
            "<div class='tiles-tile'><h3 class='tile-heading'>Inner</h3></div>"
            "</div></div></main>",
            "lxml",
        )
        transform_dom(document=soup, url=URL, dom=fake_dom)
        assert len(fake_dom.tables) == 1
        assert [r[0] for r in fake_dom.tables[0][2:]] == ["Outer", "Inner"]


# ---------------------------------------------------------------------------
# generate_document_path
# ---------------------------------------------------------------------------

class TestGenerateDocumentPath:
    @pytest.mark.parametrize(
        ("url", "expected"),
        [
            ("https://example.com/", "/index"),
            ("https://example.com/about.html", "/about"),
            ("https://example.com/about", "/about"),
            ("https://www.westpac.com.au/Personal Banking/Home Loans.html", "/personal-banking/home-loans"),
        ],
    )
    def test_paths(self, url, expected):
        assert generate_document_path(url=url) == expected

    def test_ignores_document_and_params(self, homepage_soup):
        path = generate_document_path(
            document=homepage_soup, url=URL, html="<html></html>", params={"x": 1},
        )
        assert path == "/index"

    def test_invalid_url(self):
        with pytest.raises(InvalidURLError):
            generate_document_path(url="about.html")


# ---------------------------------------------------------------------------
# import_page
# ---------------------------------------------------------------------------

class TestImportPage:
    def test_full_import(self, homepage_html):
        result = import_page(homepage_html, url="https://www.westpac.com.au/index.html")
        assert isinstance(result, ImportResult)
        assert result.path == "/index"
        assert result.blocks == ["Hero", "Tiles", "Tiles", "Metadata"]
        html = result.html()
        assert html.startswith("<main")
        assert "Welcome to Westpac" in html
        assert "<script" not in html

    def test_independent_documents(self, homepage_html):
        first = import_page(homepage_html, url=URL)
        second = import_page(homepage_html, url=URL)
        assert first.main is not second.main
        assert first.html() == second.html()

    def test_page_without_blocks(self):
        result = import_page("<html><body><p>Hi</p></body></html>", url="https://example.com/a.htm")
        assert result.path == "/a"
        assert result.blocks == []
