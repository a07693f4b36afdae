"""
mod_parser/lookup.py — zapytania o gotowy dokument GoMod.

Wszystkie funkcje są czyste i skanują sekwencje liniowo; przy duplikatach
wygrywa pierwszy pasujący wpis.

Wersje porównywane są jako zwykłe stringi (porządek leksykograficzny),
nie według semver — np. "v0.10.0" < "v0.9.0". To świadome uproszczenie.
"""

from __future__ import annotations

from mod_model import GoMod, Replace, Require, Retract


# ---------------------------------------------------------------------------
# require
# ---------------------------------------------------------------------------

def find_require(mod: GoMod, path: str) -> Require | None:
    return next((r for r in mod.requires if r.path == path), None)


def has_require(mod: GoMod, path: str) -> bool:
    return find_require(mod, path) is not None


def direct_requires(mod: GoMod) -> list[Require]:
    return [r for r in mod.requires if not r.indirect]


def indirect_requires(mod: GoMod) -> list[Require]:
    return [r for r in mod.requires if r.indirect]


def requires_with_prefix(mod: GoMod, prefix: str) -> list[Require]:
    """Zależności, których ścieżka zaczyna się od prefix (np. "golang.org/x/")."""
    return [r for r in mod.requires if r.path.startswith(prefix)]


# ---------------------------------------------------------------------------
# replace
# ---------------------------------------------------------------------------

def find_replace(mod: GoMod, old_path: str) -> Replace | None:
    return next((r for r in mod.replaces if r.old_path == old_path), None)


def has_replace(mod: GoMod, old_path: str) -> bool:
    return find_replace(mod, old_path) is not None


def effective_require(mod: GoMod, path: str) -> tuple[Require, Replace | None] | None:
    """
    Zależność `path` razem z regułą replace, która ją podmienia.

    Reguła pasuje gdy old_path == path i old_version jest puste lub równe
    wersji z require. Zwraca None gdy modułu nie ma w require.
    """
    req = find_require(mod, path)
    if req is None:
        return None
    for rep in mod.replaces:
        if rep.old_path == path and rep.old_version in ("", req.version):
            return req, rep
    return req, None


# ---------------------------------------------------------------------------
# exclude
# ---------------------------------------------------------------------------

def has_exclude(mod: GoMod, path: str, version: str) -> bool:
    return any(e.path == path and e.version == version for e in mod.excludes)


# ---------------------------------------------------------------------------
# retract
# ---------------------------------------------------------------------------

def _covers(retract: Retract, version: str) -> bool:
    if retract.version == version:
        return True
    return retract.is_range and retract.version_low <= version <= retract.version_high


def is_retracted(mod: GoMod, version: str) -> bool:
    """
    Czy wersja jest wycofana: dokładne dopasowanie wersji pojedynczej albo
    version_low <= version <= version_high (porównanie stringów).
    """
    return any(_covers(r, version) for r in mod.retracts)


def retraction_rationales(mod: GoMod, version: str) -> list[str]:
    """Niepuste, unikalne powody wycofania wersji, w kolejności deklaracji."""
    seen: dict[str, None] = {}
    for r in mod.retracts:
        if r.rationale and _covers(r, version):
            seen.setdefault(r.rationale, None)
    return list(seen)
