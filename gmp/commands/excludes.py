"""Komenda: gmp excludes — wykluczone wersje z pliku go.mod."""

from __future__ import annotations

import argparse

from rich.console import Console

from gmp._config import console_width
from gmp._source import add_source_args, load_module
from mod_parser import has_exclude

console = Console(width=console_width())


def run(args: argparse.Namespace) -> None:
    mod = load_module(args)

    if args.check:
        path, version = args.check
        if has_exclude(mod, path, version):
            console.print(f"[red]{path} {version} jest wykluczony.[/red]")
        else:
            console.print(f"[green]{path} {version} nie jest wykluczony.[/green]")
        return

    if not mod.excludes:
        console.print("[yellow]Brak wykluczeń.[/yellow]")
        return

    console.print("[bold]Wykluczone wersje:[/bold]")
    for e in mod.excludes:
        console.print(f"  {e.path} {e.version}")
    console.print(f"  [dim]razem: {len(mod.excludes)}[/dim]")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "excludes",
        help="Listuje dyrektywy exclude.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Przykłady:
  gmp excludes
  gmp excludes --check github.com/some/dep v1.2.3
        """,
    )
    add_source_args(p)
    p.add_argument(
        "--check",
        nargs=2,
        metavar=("ŚCIEŻKA", "WERSJA"),
        help="Sprawdź, czy para (ścieżka, wersja) jest wykluczona.",
    )
    p.set_defaults(func=run)
