"""Komenda: gmp replaces — reguły replace z pliku go.mod."""

from __future__ import annotations

import argparse

from rich.console import Console
from rich.table import Table
from rich import box
from rich.text import Text

from gmp._config import console_width
from gmp._source import add_source_args, load_module
from mod_parser import find_replace

console = Console(width=console_width())


def run(args: argparse.Namespace) -> None:
    mod = load_module(args)

    if args.check:
        rep = find_replace(mod, args.check)
        if rep is None:
            console.print(f"[yellow]Moduł {args.check} nie ma reguły replace.[/yellow]")
            return
        console.print(f"{args.check} => {rep.new_path} {rep.new_version}".rstrip())
        return

    if not mod.replaces:
        console.print("[yellow]Brak reguł replace.[/yellow]")
        return

    table = Table(box=box.SIMPLE_HEAD, header_style="bold white", show_header=True)
    table.add_column("STARA ŚCIEŻKA", style="cyan", no_wrap=True)
    table.add_column("STARA WERSJA", no_wrap=True)
    table.add_column("NOWA ŚCIEŻKA", style="green", no_wrap=True)
    table.add_column("NOWA WERSJA", no_wrap=True)
    table.add_column("TYP", no_wrap=True)
    for r in mod.replaces:
        kind = Text("lokalny", style="magenta") if r.is_local else Text("zdalny", style="blue")
        table.add_row(r.old_path, r.old_version or "-", r.new_path, r.new_version or "-", kind)

    console.print()
    console.print(table)
    console.print(f"  [dim]{len(mod.replaces)} reguł replace[/dim]\n")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "replaces",
        help="Listuje reguły replace.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Listuje reguły replace. TYP: lokalny = zamiennik z systemu plików
(./, ../, /), zdalny = inny moduł.

Przykłady:
  gmp replaces
  gmp replaces --check github.com/old/module
        """,
    )
    add_source_args(p)
    p.add_argument(
        "--check",
        metavar="ŚCIEŻKA",
        help="Pokaż zamiennik dla podanej ścieżki modułu.",
    )
    p.set_defaults(func=run)
