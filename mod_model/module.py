"""
mod_model/module.py — dokument GoMod i jego builder.

GoModBuilder jest własnością pojedynczego wywołania parsera: handlery
dopisują do niego wpisy linia po linii, a build() zamraża wynik do GoMod
(sekwencje jako krotki). Przy błędzie parsowania builder jest porzucany —
częściowy dokument nigdy nie wychodzi na zewnątrz.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

from .directives import Exclude, Replace, Require, Retract


# ---------------------------------------------------------------------------
# GoMod — sparsowany dokument
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class GoMod:
    """
    Zawartość pliku go.mod.

    - name:       ścieżka modułu z dyrektywy "module"
    - go_version: wersja z dyrektywy "go"
    - requires / replaces / excludes / retracts: wpisy w kolejności deklaracji;
      duplikaty są dozwolone (deduplikacja to sprawa wywołującego)
    """
    name:       str = ""
    go_version: str = ""
    requires:   tuple[Require, ...] = ()
    replaces:   tuple[Replace, ...] = ()
    excludes:   tuple[Exclude, ...] = ()
    retracts:   tuple[Retract, ...] = ()


def to_dict(mod: GoMod) -> dict[str, Any]:
    """Zwraca GoMod jako zwykły słownik (np. do zapisu w JSON)."""
    return asdict(mod)


# ---------------------------------------------------------------------------
# GoModBuilder
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class GoModBuilder:
    name:       str = ""
    go_version: str = ""
    requires:   list[Require] = field(default_factory=list)
    replaces:   list[Replace] = field(default_factory=list)
    excludes:   list[Exclude] = field(default_factory=list)
    retracts:   list[Retract] = field(default_factory=list)

    # Dyrektywy skalarne — brak kontroli duplikatów, ostatnia wygrywa
    def set_name(self, name: str) -> None:
        self.name = name

    def set_go_version(self, version: str) -> None:
        self.go_version = version

    def add_require(self, require: Require) -> None:
        self.requires.append(require)

    def add_replace(self, replace: Replace) -> None:
        self.replaces.append(replace)

    def add_exclude(self, exclude: Exclude) -> None:
        self.excludes.append(exclude)

    def add_retract(self, retract: Retract) -> None:
        self.retracts.append(retract)

    def build(self) -> GoMod:
        return GoMod(
            name=self.name,
            go_version=self.go_version,
            requires=tuple(self.requires),
            replaces=tuple(self.replaces),
            excludes=tuple(self.excludes),
            retracts=tuple(self.retracts),
        )
