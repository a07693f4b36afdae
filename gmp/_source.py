"""Wspólne opcje wyboru pliku go.mod i jego wczytywanie dla komend gmp."""

from __future__ import annotations

import argparse
import pathlib

from rich.console import Console
from rich.markup import escape

from gmp._config import console_width, manifest_name
from mod_model import GoMod
from mod_parser import (
    ManifestNotFoundError,
    ModParseError,
    find_manifest,
    parse_file,
)

console = Console(width=console_width())


def add_source_args(p: argparse.ArgumentParser) -> None:
    src = p.add_mutually_exclusive_group()
    src.add_argument(
        "--file", "-f",
        metavar="PLIK",
        help="Ścieżka do pliku go.mod.",
    )
    src.add_argument(
        "--dir", "-d",
        metavar="KATALOG",
        default="",
        help="Katalog, od którego szukać go.mod w górę (domyślnie: bieżący).",
    )


def resolve_path(args: argparse.Namespace) -> pathlib.Path:
    """Ścieżka do go.mod z --file albo wyszukana od --dir w górę."""
    if args.file:
        return pathlib.Path(args.file)
    try:
        return find_manifest(args.dir, manifest_name())
    except ManifestNotFoundError as e:
        console.print(f"[red]{e.code}:[/red] {escape(str(e))}")
        raise SystemExit(1)


def load_module(args: argparse.Namespace) -> GoMod:
    path = resolve_path(args)
    try:
        return parse_file(path)
    except ModParseError as e:
        console.print(f"[red]{e.code}[/red] {escape(str(path))}: {escape(str(e))}")
        raise SystemExit(1)
    except OSError as e:
        console.print(f"[red]Błąd odczytu pliku:[/red] {escape(str(e))}")
        raise SystemExit(1)
