"""
gmp — narzędzie CLI do analizy plików go.mod.

Użycie:
  gmp <komenda> [opcje]

Komendy:
  show       Wyświetla zawartość go.mod (tabele lub --json).
  deps       Analiza zależności: bezpośrednie / pośrednie / prefiks / jedna zależność.
  replaces   Listuje reguły replace.
  excludes   Listuje wykluczone wersje.
  retracts   Listuje wycofane wersje, sprawdza pojedynczą wersję.
  locate     Wypisuje ścieżkę najbliższego go.mod.

Bez --file każda komenda szuka go.mod od bieżącego katalogu (lub --dir) w górę.
"""

from __future__ import annotations

import argparse
import sys

# Windows: terminal może używać cp1252 — wymuszamy UTF-8, żeby polskie znaki
# w tekstach pomocy argparse były wypisywane poprawnie.
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from gmp.commands import show as cmd_show
from gmp.commands import deps as cmd_deps
from gmp.commands import replaces as cmd_replaces
from gmp.commands import excludes as cmd_excludes
from gmp.commands import retracts as cmd_retracts
from gmp.commands import locate as cmd_locate


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gmp",
        description="gmp — parser plików go.mod.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version="gmp 0.1.0"
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_show.add_parser(subparsers)
    cmd_deps.add_parser(subparsers)
    cmd_replaces.add_parser(subparsers)
    cmd_excludes.add_parser(subparsers)
    cmd_retracts.add_parser(subparsers)
    cmd_locate.add_parser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
