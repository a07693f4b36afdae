"""
Wpisy dyrektyw pliku go.mod: require, replace, exclude, retract.

Każda dyrektywa to jeden wpis w odpowiedniej sekwencji GoMod, w kolejności
deklaracji w pliku źródłowym. Wpisy są niemutowalne (frozen).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

# ---------------------------------------------------------------------------
# Aliasy typów
# ---------------------------------------------------------------------------

# np. "github.com/pkg/errors", "./local/fork", "../shared"
ModulePath: TypeAlias = str

# np. "v1.2.3", "v0.0.0-20230101000000-abcdef123456"; porównywane jako string
Version: TypeAlias = str

# Prefiksy ścieżek oznaczające zamiennik z lokalnego systemu plików
_LOCAL_PREFIXES = ("./", "../", "/")


# ---------------------------------------------------------------------------
# Require
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Require:
    """
    Zależność modułu.

    - path:     ścieżka modułu
    - version:  wersja
    - indirect: True gdy linia ma komentarz "// indirect" (zależność
                przechodnia, nie importowana bezpośrednio)
    """
    path:     ModulePath
    version:  Version
    indirect: bool = False


# ---------------------------------------------------------------------------
# Replace
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Replace:
    """
    Reguła zastąpienia: old_path[@old_version] => new_path[@new_version].

    Puste old_version oznacza zastąpienie wszystkich wersji, puste
    new_version — zamiennik bez wersji (zwykle katalog lokalny).
    """
    old_path:    ModulePath
    new_path:    ModulePath
    old_version: Version = ""
    new_version: Version = ""

    @property
    def is_local(self) -> bool:
        """Czy zamiennik wskazuje na katalog w systemie plików."""
        return self.new_path.startswith(_LOCAL_PREFIXES)


# ---------------------------------------------------------------------------
# Exclude
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Exclude:
    """Zabroniona para (path, version); oba pola niepuste."""
    path:    ModulePath
    version: Version


# ---------------------------------------------------------------------------
# Retract
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Retract:
    """
    Wycofana wersja lub zakres wersji.

    Wariant pojedynczy:  version niepuste, version_low/version_high puste.
    Wariant zakresowy:   version_low i version_high niepuste, version puste.
    - rationale: treść komentarza "// ..." z końca linii ("" gdy brak)
    """
    version:      Version = ""
    version_low:  Version = ""
    version_high: Version = ""
    rationale:    str = ""

    @property
    def is_range(self) -> bool:
        return bool(self.version_low and self.version_high)

    def __str__(self) -> str:
        if self.is_range:
            return f"[{self.version_low}, {self.version_high}]"
        return self.version
