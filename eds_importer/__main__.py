"""CLI entry point: python -m eds_importer --html FILE --url URL [options]"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from bs4 import Tag
from pydantic import ValidationError
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.rule import Rule
from rich.table import Table

from eds_importer.importer import import_page
from eds_importer.paths import InvalidURLError

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="eds_importer",
        description=(
            "Rewrite a saved homepage into Hero / Tiles / Metadata blocks.\n"
            "Reads a local HTML file; nothing is fetched or written."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--html", required=True, metavar="FILE",
                        help="Path to the saved page HTML")
    parser.add_argument("--url", required=True, metavar="URL",
                        help="Original URL of the page (drives links and the document path)")
    parser.add_argument("--params", default=None, metavar="JSON",
                        help="JSON object of import parameters (selector overrides)")
    parser.add_argument("--emit-html", action="store_true", default=False,
                        help="Print the transformed HTML instead of the block summary")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        metavar="{DEBUG,INFO,WARNING,ERROR}",
                        help="Logging level (default: WARNING)")
    return parser


def _load_params(raw: str | None) -> dict[str, Any]:
    if not raw:
        return {}
    data = json.loads(raw)
    if not isinstance(data, dict):
        raise ValueError("--params must be a JSON object")
    return data


def _cell_text(cell: Tag) -> str:
    img = cell.find("img")
    if isinstance(img, Tag):
        return f"[img] {img.get('src', '')}"
    return cell.get_text().strip()


def _print_blocks(console: Console, main: Tag) -> None:
    for block in main.find_all("table", recursive=False):
        rows = block.find_all("tr")
        if not rows:
            continue
        header = [_cell_text(c) for c in rows[0].find_all(["th", "td"])]
        name = header[0] if header else "?"
        tbl = Table(
            title=f"[bold cyan]{escape(name)}[/bold cyan] {escape(' '.join(header[1:]))}".rstrip(),
            box=box.SIMPLE_HEAVY,
            show_header=False,
        )
        width = max((len(r.find_all(["th", "td"])) for r in rows[1:]), default=1)
        for _ in range(width):
            tbl.add_column(overflow="fold")
        for row in rows[1:]:
            cells = [_cell_text(c) for c in row.find_all(["th", "td"])]
            tbl.add_row(*(escape(c) for c in cells))
        console.print(tbl)


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        params = _load_params(args.params)
    except ValueError as exc:
        print(f"ERROR: Invalid --params: {exc}", file=sys.stderr)
        return 1

    html_path = Path(args.html)
    try:
        html = html_path.read_text(encoding="utf-8")
    except OSError as exc:
        print(f"ERROR: Could not read {html_path}: {exc}", file=sys.stderr)
        return 1

    try:
        result = import_page(html, url=args.url, params=params)
    except InvalidURLError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    except ValidationError as exc:
        print(f"ERROR: Invalid import parameters:\n{exc}", file=sys.stderr)
        return 1

    logger.info("Imported %s -> %s (%d block(s))", args.url, result.path, len(result.blocks))

    if args.emit_html:
        sys.stdout.write(result.html() + "\n")
        return 0

    console = Console()
    console.print(Rule("[bold cyan]Import Summary[/bold cyan]"))
    console.print(f"  [bold]Source URL    :[/bold] [green]{escape(result.url)}[/green]")
    console.print(f"  [bold]Document path :[/bold] [yellow]{escape(result.path)}[/yellow]")
    console.print(f"  [bold]Blocks        :[/bold] {escape(', '.join(result.blocks)) or '-'}")
    console.print()
    _print_blocks(console, result.main)
    return 0


if __name__ == "__main__":
    sys.exit(main())
