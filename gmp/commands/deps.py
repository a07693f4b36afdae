"""Komenda: gmp deps — analiza zależności (require) pliku go.mod."""

from __future__ import annotations

import argparse

from rich.console import Console

from gmp._config import console_width
from gmp._source import add_source_args, load_module
from mod_model import GoMod, Require
from mod_parser import (
    direct_requires,
    effective_require,
    has_exclude,
    indirect_requires,
    requires_with_prefix,
)

console = Console(width=console_width())


def _print_list(title: str, requires: list[Require], mark_indirect: bool = False) -> None:
    console.print(f"\n[bold]{title}:[/bold]")
    for r in requires:
        suffix = " [yellow](indirect)[/yellow]" if mark_indirect and r.indirect else ""
        console.print(f"  {r.path} {r.version}{suffix}")
    console.print(f"  [dim]razem: {len(requires)}[/dim]")


def _check_dep(mod: GoMod, path: str) -> None:
    found = effective_require(mod, path)
    if found is None:
        console.print(f"[red]Zależność {path} nie istnieje.[/red]")
        raise SystemExit(1)

    req, rep = found
    console.print(f"Zależność [bold cyan]{req.path}[/bold cyan]:")
    console.print(f"  wersja:   {req.version}")
    console.print(f"  indirect: {'tak' if req.indirect else 'nie'}")
    if rep is not None:
        console.print(f"  zastąpiona przez: {rep.new_path} {rep.new_version}".rstrip())
    if has_exclude(mod, req.path, req.version):
        console.print("  [red]uwaga: ta wersja jest wykluczona (exclude)[/red]")


def _summary(mod: GoMod) -> None:
    direct   = len(direct_requires(mod))
    indirect = len(indirect_requires(mod))
    console.print(f"Zależności modułu [bold cyan]{mod.name}[/bold cyan]:")
    console.print(f"  bezpośrednie: {direct}")
    console.print(f"  pośrednie:    {indirect}")
    console.print(f"  razem:        {direct + indirect}")
    console.print("[dim]Opcje: --direct, --indirect, --prefix PREFIKS, --dep ŚCIEŻKA[/dim]")


def run(args: argparse.Namespace) -> None:
    mod = load_module(args)

    if args.dep:
        _check_dep(mod, args.dep)
        return

    if args.direct:
        _print_list("Zależności bezpośrednie", direct_requires(mod))
    if args.indirect:
        _print_list("Zależności pośrednie", indirect_requires(mod))
    if args.prefix:
        matches = requires_with_prefix(mod, args.prefix)
        if matches:
            _print_list(f"Zależności z prefiksem '{args.prefix}'", matches, mark_indirect=True)
        else:
            console.print(f"[yellow]Brak zależności z prefiksem '{args.prefix}'.[/yellow]")

    if not (args.direct or args.indirect or args.prefix):
        _summary(mod)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "deps",
        help="Analizuje zależności (require).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Bez opcji wypisuje liczbę zależności bezpośrednich i pośrednich.

Przykłady:
  gmp deps
  gmp deps --direct --indirect
  gmp deps --prefix golang.org/x/
  gmp deps --dep github.com/pkg/errors
        """,
    )
    add_source_args(p)
    p.add_argument("--direct", action="store_true", help="Lista zależności bezpośrednich.")
    p.add_argument("--indirect", action="store_true", help="Lista zależności pośrednich (// indirect).")
    p.add_argument("--prefix", metavar="PREFIKS", help="Zależności o ścieżce zaczynającej się od PREFIKS.")
    p.add_argument(
        "--dep",
        metavar="ŚCIEŻKA",
        help="Szczegóły jednej zależności: wersja, replace, exclude.",
    )
    p.set_defaults(func=run)
