"""Komenda: gmp locate — wypisuje ścieżkę najbliższego pliku go.mod."""

from __future__ import annotations

import argparse

from gmp._source import resolve_path


def run(args: argparse.Namespace) -> None:
    # print() zamiast rich — ścieżka ma być używalna w skryptach powłoki
    print(resolve_path(args))


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "locate",
        help="Wypisuje ścieżkę do go.mod (szukając w górę drzewa katalogów).",
    )
    p.add_argument(
        "--dir", "-d",
        metavar="KATALOG",
        default="",
        help="Katalog startowy (domyślnie: bieżący).",
    )
    p.set_defaults(func=run, file=None)
