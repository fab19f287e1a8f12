"""Command-line front end for trying the parsers on raw values."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from prompt_toolkit import PromptSession
from prompt_toolkit.formatted_text import HTML
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .config import settings as settings_module
from .context import ParserContext, build_context
from .media.types import MediaRecord

console = Console()


def _media_table(raw: str, records: list[MediaRecord]) -> Table:
    table = Table(title=escape(raw), title_justify="left", show_lines=False)
    for column in ("identifier", "format", "type", "references"):
        table.add_column(column)
    for record in records:
        row = record.to_dict()
        table.add_row(*(escape(row[c] or "-") for c in ("identifier", "format", "type", "references")))
    return table


def _print_media(ctx: ParserContext, raw: str) -> None:
    records = ctx.parse_associated_media_records(raw)
    if not records:
        console.print(f"[yellow]no media URLs in[/yellow] {escape(repr(raw))}")
        return
    console.print(_media_table(raw, records))


def _print_result(label: str, value: str, result) -> None:
    if result:
        console.print(f"{escape(repr(value))} -> [bold]{escape(str(result.payload))}[/bold] [dim]({result.confidence})[/dim]")
    else:
        console.print(f"{escape(repr(value))} -> [red]no {label}[/red]")


def _interactive(ctx: ParserContext) -> None:
    console.print("[bold green]dwcmedia[/bold green]\nPaste an associatedMedia value, [bold]/quit[/bold] to exit.\n")
    session: PromptSession[str] = PromptSession()
    while True:
        try:
            text = session.prompt(HTML("<b>media &gt;</b> ")).strip()
        except (EOFError, KeyboardInterrupt):
            break
        if not text:
            continue
        if text.lower() in ("/quit", "/exit"):
            break
        _print_media(ctx, text)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dwcmedia",
        description="Normalize Darwin Core associatedMedia, basisOfRecord and typeStatus values.",
    )
    parser.add_argument("--log-level", default=None, help="Override DWCMEDIA_LOG_LEVEL.")
    sub = parser.add_subparsers(dest="command")

    media = sub.add_parser("media", help="Split and classify associatedMedia values.")
    media.add_argument("values", nargs="+")
    basis = sub.add_parser("basis", help="Parse basisOfRecord values.")
    basis.add_argument("values", nargs="+")
    typified = sub.add_parser("typified", help="Extract typified names from typeStatus values.")
    typified.add_argument("values", nargs="+")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = settings_module.cfg
    logging.basicConfig(
        level=(args.log_level or settings.log_level).upper(),
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )

    ctx = build_context(settings)
    if args.command == "media":
        for value in args.values:
            _print_media(ctx, value)
    elif args.command == "basis":
        for value in args.values:
            _print_result("basisOfRecord", value, ctx.basis_of_record.parse(value))
    elif args.command == "typified":
        for value in args.values:
            _print_result("typified name", value, ctx.typified_name.parse(value))
    else:
        _interactive(ctx)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
