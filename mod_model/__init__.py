"""
mod_model — struktury danych sparsowanego pliku go.mod.

Użycie:
  from mod_model import GoMod, Require, Replace, Exclude, Retract

Moduły:
  directives — Require, Replace, Exclude, Retract, ModulePath, Version
  module     — GoMod, GoModBuilder, to_dict

Mapowanie na dyrektywy go.mod:
  module  → GoMod.name
  go      → GoMod.go_version
  require → GoMod.requires  (list[Require])
  replace → GoMod.replaces  (list[Replace])
  exclude → GoMod.excludes  (list[Exclude])
  retract → GoMod.retracts  (list[Retract])
"""

from .directives import (
    ModulePath,
    Version,
    Require,
    Replace,
    Exclude,
    Retract,
)
from .module import (
    GoMod,
    GoModBuilder,
    to_dict,
)

__all__ = [
    # directives
    "ModulePath",
    "Version",
    "Require",
    "Replace",
    "Exclude",
    "Retract",
    # module
    "GoMod",
    "GoModBuilder",
    "to_dict",
]
