"""
mod_parser/directives.py — handlery poszczególnych dyrektyw go.mod.

Każda dyrektywa ma:
  - handler jednoliniowy  (builder, line) -> bool
        True  = linia skonsumowana (wpis dopisany do buildera),
        False = linia nie ma kształtu tej dyrektywy;
  - dla require / replace / exclude / retract handler linii bloku
        (builder, line) -> None, zarejestrowany w BLOCK_HANDLERS;
        linia w bloku jest zawsze treścią, więc zły kształt to wyjątek
        ModParseError (bez numeru linii — dokleja go maszyna stanów).

DIRECTIVES mapuje słowo kluczowe na Directive; parser wybiera handler po
pierwszym tokenie linii, więc dla danej linii uruchamia się dokładnie jeden.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Callable, TypeAlias

from mod_model import Exclude, GoModBuilder, Replace, Require, Retract

from .errors import ErrorCode, ModParseError
from .patterns import (
    COMMENT,
    EXCLUDE_RE,
    GO_RE,
    INDIRECT_RE,
    MODULE_RE,
    RATIONALE_RE,
    REPLACE_ARROW,
    REPLACE_RE,
    REQUIRE_RE,
    RETRACT_RANGE_RE,
    RETRACT_VERSION_RE,
    VERSION_PREFIXES,
)

LineHandler: TypeAlias = Callable[[GoModBuilder, str], bool]
BlockHandler: TypeAlias = Callable[[GoModBuilder, str], None]


class BlockKind(StrEnum):
    """Dyrektywy, które mogą otwierać blok "keyword (" ... ")"."""
    REQUIRE = "require"
    REPLACE = "replace"
    EXCLUDE = "exclude"
    RETRACT = "retract"


@dataclass(frozen=True, slots=True)
class Directive:
    keyword:     str
    parse_line:  LineHandler
    usage:       str


# ---------------------------------------------------------------------------
# Pomocnicze
# ---------------------------------------------------------------------------

def _rationale(text: str) -> str:
    """Treść komentarza "// ..." z końcówki linii, przycięta ("" gdy brak)."""
    m = RATIONALE_RE.search(text)
    return m.group(1).strip() if m else ""


def _comment_tail(parts: list[str], start: int, prefix_only: bool = False) -> str | None:
    """
    Sklejony komentarz od pierwszego tokenu (od indeksu start) zawierającego
    "//" (przy prefix_only: zaczynającego się od "//") do końca linii;
    None gdy linia nie ma komentarza.
    """
    for i in range(start, len(parts)):
        if parts[i].startswith(COMMENT) if prefix_only else COMMENT in parts[i]:
            return " ".join(parts[i:])
    return None


def _fail(code: ErrorCode, message: str, line: str) -> ModParseError:
    return ModParseError(code, message, text=line)


# ---------------------------------------------------------------------------
# module / go
# ---------------------------------------------------------------------------

def parse_module_line(builder: GoModBuilder, line: str) -> bool:
    m = MODULE_RE.match(line)
    if not m:
        return False
    builder.set_name(m.group(1))
    return True


def parse_go_line(builder: GoModBuilder, line: str) -> bool:
    m = GO_RE.match(line)
    if not m:
        return False
    builder.set_go_version(m.group(1))
    return True


# ---------------------------------------------------------------------------
# require
# ---------------------------------------------------------------------------

def parse_require_line(builder: GoModBuilder, line: str) -> bool:
    m = REQUIRE_RE.match(line)
    if not m:
        return False
    tail = m.group(3)
    builder.add_require(Require(
        path=m.group(1),
        version=m.group(2),
        indirect=bool(tail) and INDIRECT_RE.search(tail) is not None,
    ))
    return True


def parse_require_block_line(builder: GoModBuilder, line: str) -> None:
    parts = line.split()
    if len(parts) < 2:
        raise _fail(
            ErrorCode.INVALID_REQUIRE,
            f"Nieprawidłowa deklaracja require: '{line}' (oczekiwano: <ścieżka> <wersja>).",
            line,
        )

    comment = _comment_tail(parts, 2)
    builder.add_require(Require(
        path=parts[0],
        version=parts[1],
        indirect=comment is not None and INDIRECT_RE.search(comment) is not None,
    ))


# ---------------------------------------------------------------------------
# replace
# ---------------------------------------------------------------------------

def parse_replace_line(builder: GoModBuilder, line: str) -> bool:
    m = REPLACE_RE.match(line)
    if not m:
        return False
    builder.add_replace(Replace(
        old_path=m.group(1),
        new_path=m.group(2),
        new_version=m.group(3),
    ))
    return True


def parse_replace_block_line(builder: GoModBuilder, line: str) -> None:
    sides = line.split(REPLACE_ARROW)
    old = sides[0].split() if len(sides) == 2 else []
    new = sides[1].split() if len(sides) == 2 else []
    if not old or not new:
        raise _fail(
            ErrorCode.INVALID_REPLACE,
            f"Nieprawidłowa deklaracja replace: '{line}' "
            f"(oczekiwano: <ścieżka> [wersja] => <ścieżka> [wersja]).",
            line,
        )

    builder.add_replace(Replace(
        old_path=old[0],
        old_version=old[1] if len(old) > 1 else "",
        new_path=new[0],
        new_version=new[1] if len(new) > 1 else "",
    ))


# ---------------------------------------------------------------------------
# exclude
# ---------------------------------------------------------------------------

def parse_exclude_line(builder: GoModBuilder, line: str) -> bool:
    m = EXCLUDE_RE.match(line)
    if not m:
        return False
    builder.add_exclude(Exclude(path=m.group(1), version=m.group(2)))
    return True


def parse_exclude_block_line(builder: GoModBuilder, line: str) -> None:
    parts = line.split()
    if len(parts) < 2:
        raise _fail(
            ErrorCode.INVALID_EXCLUDE,
            f"Nieprawidłowa deklaracja exclude: '{line}' (oczekiwano: <ścieżka> <wersja>).",
            line,
        )
    builder.add_exclude(Exclude(path=parts[0], version=parts[1]))


# ---------------------------------------------------------------------------
# retract
# ---------------------------------------------------------------------------

def parse_retract_line(builder: GoModBuilder, line: str) -> bool:
    m = RETRACT_VERSION_RE.match(line)
    if m:
        builder.add_retract(Retract(
            version=m.group(1),
            rationale=_rationale(m.group(2)),
        ))
        return True

    m = RETRACT_RANGE_RE.match(line)
    if m:
        builder.add_retract(Retract(
            version_low=m.group(1),
            version_high=m.group(2),
            rationale=_rationale(m.group(3)),
        ))
        return True

    return False


def _retract_range(line: str) -> Retract | None:
    """Rozbiera "[low, high] [// powód]"; None gdy zakres jest niepoprawny."""
    start = line.index("[")
    end   = line.index("]")
    if end < start:
        return None

    bounds = line[start + 1:end].split(",")
    if len(bounds) != 2:
        return None
    low, high = bounds[0].strip(), bounds[1].strip()
    if not low or not high:
        return None

    rest = line[end + 1:].strip()
    return Retract(
        version_low=low,
        version_high=high,
        rationale=_rationale(rest) if rest.startswith(COMMENT) else "",
    )


def parse_retract_block_line(builder: GoModBuilder, line: str) -> None:
    line = line.strip()
    if not line or line.startswith(COMMENT):
        return

    if "[" in line and "]" in line:
        retract = _retract_range(line)
        if retract is None:
            raise _fail(
                ErrorCode.INVALID_RETRACT,
                f"Nieprawidłowy zakres retract: '{line}' (oczekiwano: [<od>, <do>]).",
                line,
            )
        builder.add_retract(retract)
        return

    parts = line.split()
    if not parts[0].startswith(VERSION_PREFIXES):
        raise _fail(
            ErrorCode.INVALID_RETRACT,
            f"Nieprawidłowa wersja retract: '{parts[0]}' (wersja musi zaczynać się od 'v').",
            line,
        )

    comment = _comment_tail(parts, 1, prefix_only=True)
    builder.add_retract(Retract(
        version=parts[0],
        rationale=_rationale(comment) if comment is not None else "",
    ))


# ---------------------------------------------------------------------------
# Rejestr dyrektyw
# ---------------------------------------------------------------------------

DIRECTIVES: dict[str, Directive] = {
    d.keyword: d
    for d in (
        Directive(
            keyword="module",
            parse_line=parse_module_line,
            usage="module <ścieżka>",
        ),
        Directive(
            keyword="go",
            parse_line=parse_go_line,
            usage="go <wersja>",
        ),
        Directive(
            keyword=BlockKind.REQUIRE,
            parse_line=parse_require_line,
            usage="require <ścieżka> <wersja> [// indirect]",
        ),
        Directive(
            keyword=BlockKind.REPLACE,
            parse_line=parse_replace_line,
            usage="replace <ścieżka> => <ścieżka> <wersja>",
        ),
        Directive(
            keyword=BlockKind.EXCLUDE,
            parse_line=parse_exclude_line,
            usage="exclude <ścieżka> <wersja>",
        ),
        Directive(
            keyword=BlockKind.RETRACT,
            parse_line=parse_retract_line,
            usage="retract <wersja> | retract [<od>, <do>]",
        ),
    )
}

BLOCK_HANDLERS: dict[BlockKind, BlockHandler] = {
    BlockKind.REQUIRE: parse_require_block_line,
    BlockKind.REPLACE: parse_replace_block_line,
    BlockKind.EXCLUDE: parse_exclude_block_line,
    BlockKind.RETRACT: parse_retract_block_line,
}
