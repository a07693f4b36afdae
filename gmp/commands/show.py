"""Komenda: gmp show — podsumowanie pliku go.mod (tabele lub JSON)."""

from __future__ import annotations

import argparse
import json

from rich.console import Console
from rich.table import Table
from rich import box
from rich.text import Text
from rich.markup import escape

from gmp._config import console_width
from gmp._source import add_source_args, load_module
from mod_model import GoMod, to_dict

console = Console(width=console_width())


# ---------------------------------------------------------------------------
# Wyświetlanie
# ---------------------------------------------------------------------------

def _section(title: str, count: int) -> None:
    console.print(f"\n[bold]{title}[/bold] [dim]({count})[/dim]")


def _show_requires(mod: GoMod) -> None:
    _section("require", len(mod.requires))
    if not mod.requires:
        return
    table = Table(box=box.SIMPLE_HEAD, header_style="bold white", show_header=True)
    table.add_column("ŚCIEŻKA", style="cyan", no_wrap=True)
    table.add_column("WERSJA", no_wrap=True)
    table.add_column("INDIRECT", justify="center", no_wrap=True)
    for r in mod.requires:
        flag = Text("indirect", style="yellow") if r.indirect else Text("-", style="dim")
        table.add_row(r.path, r.version, flag)
    console.print(table)


def _show_replaces(mod: GoMod) -> None:
    _section("replace", len(mod.replaces))
    for r in mod.replaces:
        old = f"{r.old_path} {r.old_version}".rstrip()
        new = f"{r.new_path} {r.new_version}".rstrip()
        console.print(f"  {old} => {new}")


def _show_excludes(mod: GoMod) -> None:
    _section("exclude", len(mod.excludes))
    for e in mod.excludes:
        console.print(f"  {e.path} {e.version}")


def _show_retracts(mod: GoMod) -> None:
    _section("retract", len(mod.retracts))
    for r in mod.retracts:
        suffix = f"  [dim]// {escape(r.rationale)}[/dim]" if r.rationale else ""
        console.print(f"  {escape(str(r))}{suffix}")


def _show_pretty(mod: GoMod) -> None:
    console.print(f"Moduł: [bold cyan]{mod.name or '-'}[/bold cyan]")
    console.print(f"Go:    [bold]{mod.go_version or '-'}[/bold]")
    _show_requires(mod)
    _show_replaces(mod)
    _show_excludes(mod)
    _show_retracts(mod)


def run(args: argparse.Namespace) -> None:
    mod = load_module(args)
    if args.json:
        # print() zamiast console.print — czysty JSON bez markupu rich
        print(json.dumps(to_dict(mod), ensure_ascii=False, indent=2))
        return
    _show_pretty(mod)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "show",
        help="Wyświetla zawartość pliku go.mod.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Parsuje go.mod i wyświetla moduł, wersję Go oraz dyrektywy
require / replace / exclude / retract.

Przykłady:
  gmp show
  gmp show --file ścieżka/do/go.mod
  gmp show --dir ścieżka/do/projektu --json
        """,
    )
    add_source_args(p)
    p.add_argument(
        "--json",
        action="store_true",
        help="Wypisz dokument jako JSON zamiast tabel.",
    )
    p.set_defaults(func=run)
