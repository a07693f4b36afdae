"""Komenda: gmp retracts — wycofane wersje modułu (retract)."""

from __future__ import annotations

import argparse

from rich.console import Console
from rich.markup import escape

from gmp._config import console_width
from gmp._source import add_source_args, load_module
from mod_model import GoMod
from mod_parser import is_retracted, retraction_rationales

console = Console(width=console_width())


def _check(mod: GoMod, version: str, why: bool) -> None:
    if not is_retracted(mod, version):
        console.print(f"[green]Wersja {version} nie jest wycofana.[/green]")
        return

    console.print(f"[red]Wersja {version} jest wycofana.[/red]")
    if not why:
        return
    rationales = retraction_rationales(mod, version)
    if not rationales:
        console.print("  [dim]brak podanego powodu[/dim]")
        return
    console.print("Powody:")
    for r in rationales:
        console.print(f"  {escape(r)}")


def _list(mod: GoMod, why: bool) -> None:
    console.print("[bold]Wycofane wersje:[/bold]")
    if not mod.retracts:
        console.print("  [dim]brak[/dim]")
    for r in mod.retracts:
        line = escape(str(r))
        if why and r.rationale:
            line += f"  [dim]// {escape(r.rationale)}[/dim]"
        console.print(f"  {line}")
    console.print(f"\n  [dim]{len(mod.retracts)} deklaracji retract[/dim]")


def run(args: argparse.Namespace) -> None:
    mod = load_module(args)
    if args.check:
        _check(mod, args.check, args.why)
    else:
        _list(mod, args.why)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "retracts",
        help="Listuje wycofane wersje (retract).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Zakresy [od, do] porównywane są jako stringi, nie według semver
(np. v0.10.0 < v0.9.0).

Przykłady:
  gmp retracts --why
  gmp retracts --check v1.0.0 --why
        """,
    )
    add_source_args(p)
    p.add_argument("--check", metavar="WERSJA", help="Sprawdź, czy wersja jest wycofana.")
    p.add_argument("--why", action="store_true", help="Pokaż powody wycofania.")
    p.set_defaults(func=run)
