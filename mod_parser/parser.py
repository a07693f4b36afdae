"""
mod_parser/parser.py — parsowanie pliku go.mod do GoMod.

Architektura:
  tekst / strumień / plik → linie fizyczne (numerowane od 1)
  → _skip()            puste linie i czyste komentarze
  → _ParseState        czy jesteśmy w bloku "keyword (" ... ")" i jakiego rodzaju
  → Directive          handler wybrany po słowie kluczowym (pierwszy token)
  → GoModBuilder       → build() → GoMod

Każdy błąd jest fatalny dla całego parsowania i wychodzi jako ModParseError
z numerem linii. Koniec wejścia wewnątrz otwartego bloku nie jest błędem.

Publiczne API:
  parse_string(content)   -> GoMod
  parse_stream(lines)     -> GoMod
  parse_file(path)        -> GoMod
  find_and_parse(dir)     -> GoMod
  find_and_parse_in_cwd() -> GoMod
"""

from __future__ import annotations

import io
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from mod_model import GoMod, GoModBuilder

from .directives import BLOCK_HANDLERS, DIRECTIVES, BlockKind
from .errors import ErrorCode, ModParseError
from .locator import MANIFEST_NAME, find_manifest
from .patterns import BLOCK_CLOSE, BLOCK_OPEN, COMMENT


# ---------------------------------------------------------------------------
# Maszyna stanów
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class _ParseState:
    block: BlockKind | None = None

    @property
    def in_block(self) -> bool:
        return self.block is not None


def _skip(line: str) -> bool:
    """Puste linie i czyste komentarze (także "// indirect") nie są treścią."""
    return not line or line.startswith(COMMENT)


def _opener_keyword(line: str) -> str | None:
    """
    Słowo przed "(" gdy linia ma kształt "keyword (" (co najwyżej jeden token
    przed nawiasem); None dla zwykłych linii, także tych, których komentarz
    kończy się nawiasem.
    """
    if not line.endswith(BLOCK_OPEN):
        return None
    head = line[:-len(BLOCK_OPEN)].split()
    if len(head) > 1:
        return None
    return head[0] if head else ""


def _open_block(keyword: str, line: str) -> BlockKind:
    """Zwraca rodzaj bloku dla słowa kluczowego lub rzuca UNKNOWN_BLOCK."""
    try:
        return BlockKind(keyword)
    except ValueError:
        raise ModParseError(
            ErrorCode.UNKNOWN_BLOCK,
            f"Nieznany rodzaj bloku: '{keyword}' "
            f"(dozwolone: {', '.join(k.value for k in BlockKind)}).",
            text=line,
        ) from None


def _handle_single_line(builder: GoModBuilder, line: str) -> None:
    keyword = line.split(maxsplit=1)[0]
    directive = DIRECTIVES.get(keyword)
    if directive is None:
        raise ModParseError(
            ErrorCode.UNRECOGNIZED_LINE,
            f"Nierozpoznany format linii: '{line}'.",
            text=line,
        )
    if not directive.parse_line(builder, line):
        raise ModParseError(
            ErrorCode.UNRECOGNIZED_LINE,
            f"Nieprawidłowa deklaracja {keyword}: '{line}' (oczekiwano: {directive.usage}).",
            text=line,
        )


def _handle_block_line(builder: GoModBuilder, block: BlockKind, line: str) -> None:
    BLOCK_HANDLERS[block](builder, line)


def _consume(builder: GoModBuilder, state: _ParseState, line: str) -> None:
    if state.in_block and line == BLOCK_CLOSE:
        state.block = None
        return

    keyword = _opener_keyword(line)
    if keyword is not None:
        state.block = _open_block(keyword, line)
        return

    if state.block is not None:
        _handle_block_line(builder, state.block, line)
    else:
        _handle_single_line(builder, line)


# ---------------------------------------------------------------------------
# Publiczne API
# ---------------------------------------------------------------------------

def parse_stream(lines: Iterable[str]) -> GoMod:
    """
    Parsuje go.mod z dowolnego iterowalnego źródła linii (plik tekstowy,
    io.StringIO, lista stringów).

    Raises:
        ModParseError z numerem linii (1-based, liczone są także linie puste
        i komentarze) przy pierwszym błędzie.
    """
    builder = GoModBuilder()
    state   = _ParseState()

    for lineno, raw in enumerate(lines, start=1):
        line = raw.strip()
        if _skip(line):
            continue
        try:
            _consume(builder, state, line)
        except ModParseError as e:
            raise e.with_line(lineno, line) from None

    return builder.build()


def parse_string(content: str) -> GoMod:
    """Parsuje zawartość pliku go.mod podaną jako string."""
    # Końce linii jak przy czytaniu pliku (\n, \r\n, \r); znaki typu
    # \u2028 czy \x0c zostają w treści linii.
    return parse_stream(io.StringIO(content, newline=None))


def parse_file(path: str | Path) -> GoMod:
    """
    Parsuje plik go.mod z dysku. Plik jest zamykany niezależnie od wyniku.

    Raises:
        OSError (np. FileNotFoundError) gdy pliku nie da się otworzyć/odczytać,
        ModParseError gdy treść jest niepoprawna.
    """
    with open(path, encoding="utf-8") as f:
        return parse_stream(f)


def find_and_parse(start_dir: str | Path = "", filename: str = MANIFEST_NAME) -> GoMod:
    """Szuka go.mod od start_dir w górę drzewa katalogów i parsuje go."""
    return parse_file(find_manifest(start_dir, filename))


def find_and_parse_in_cwd() -> GoMod:
    """Szuka go.mod od bieżącego katalogu w górę i parsuje go."""
    return find_and_parse("")
