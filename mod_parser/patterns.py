"""
mod_parser/patterns.py — wzorce regex dyrektyw go.mod.

Wzorce są dopasowywane do linii już przyciętej (strip). Formy jednoliniowe
zaczynają się od słowa kluczowego dyrektywy; linie wewnątrz bloków
"keyword (" ... ")" są rozbierane w mod_parser.directives bez wzorców
(split po białych znakach / separatorze "=>").

Stałe są tworzone raz przy imporcie i tylko czytane.
"""

from __future__ import annotations

import re

COMMENT       = "//"
BLOCK_OPEN    = "("
BLOCK_CLOSE   = ")"
REPLACE_ARROW = "=>"

# Pierwszy znak tokenu wersji w bloku retract
VERSION_PREFIXES = ("v", "V")


# ---------------------------------------------------------------------------
# Formy jednoliniowe
# ---------------------------------------------------------------------------

# module example.com/app
MODULE_RE = re.compile(r"^module\s+(\S+)$")

# go 1.21
GO_RE = re.compile(r"^go\s+(\S+)$")

# require example.com/dep v1.0.0 [// indirect ...]
REQUIRE_RE = re.compile(r"^require\s+(\S+)\s+(\S+)(.*)$")

# replace example.com/old => example.com/new v1.0.0  (bez wersji po lewej)
REPLACE_RE = re.compile(r"^replace\s+(\S+)\s+=>\s+(\S+)\s+(\S+)$")

# exclude example.com/dep v1.0.0
EXCLUDE_RE = re.compile(r"^exclude\s+(\S+)\s+(\S+)$")

# retract v1.0.0 [// powód]
RETRACT_VERSION_RE = re.compile(r"^retract\s+([^\s\[\]]+)(.*)$")

# retract [v1.0.0, v1.9.9] [// powód]
RETRACT_RANGE_RE = re.compile(r"^retract\s+\[\s*([^\s,]+)\s*,\s*([^\s,\]]+)\s*\](.*)$")


# ---------------------------------------------------------------------------
# Komentarze
# ---------------------------------------------------------------------------

# "// indirect" gdziekolwiek w końcówce linii (także "// indirect; coś")
INDIRECT_RE = re.compile(r"//\s*indirect")

# Treść komentarza po "//" — powód wycofania wersji
RATIONALE_RE = re.compile(r"//\s*(.+)")
