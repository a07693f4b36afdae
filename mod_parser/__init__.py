"""
mod_parser — parser plików go.mod.

Interfejs publiczny:
    parse_string, parse_stream, parse_file   — parsowanie do GoMod
    find_manifest, find_and_parse            — wyszukiwanie go.mod w górę drzewa
    find_require, has_require, ...           — zapytania o gotowy dokument
    ModParseError, ManifestNotFoundError, ErrorCode — błędy

Typowe użycie:
    from mod_parser import find_and_parse, is_retracted

    mod = find_and_parse("path/to/project")
    print(mod.name, mod.go_version, len(mod.requires))
    if is_retracted(mod, "v1.0.0"):
        ...
"""

from .errors import ErrorCode, ManifestNotFoundError, ModParseError
from .locator import MANIFEST_NAME, find_manifest
from .lookup import (
    direct_requires,
    effective_require,
    find_replace,
    find_require,
    has_exclude,
    has_replace,
    has_require,
    indirect_requires,
    is_retracted,
    requires_with_prefix,
    retraction_rationales,
)
from .parser import (
    find_and_parse,
    find_and_parse_in_cwd,
    parse_file,
    parse_stream,
    parse_string,
)

__all__ = [
    # errors
    "ErrorCode",
    "ManifestNotFoundError",
    "ModParseError",
    # locator
    "MANIFEST_NAME",
    "find_manifest",
    # parser
    "parse_string",
    "parse_stream",
    "parse_file",
    "find_and_parse",
    "find_and_parse_in_cwd",
    # lookup
    "find_require",
    "has_require",
    "direct_requires",
    "indirect_requires",
    "requires_with_prefix",
    "find_replace",
    "has_replace",
    "effective_require",
    "has_exclude",
    "is_retracted",
    "retraction_rationales",
]
