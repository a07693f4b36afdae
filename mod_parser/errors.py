"""
mod_parser/errors.py — kody błędów i wyjątki parsera go.mod.

ModParseError — błąd składni jednej linii; po przejściu przez maszynę stanów
    zawsze niesie 1-based numer linii fizycznej i jej treść.
ManifestNotFoundError — wyszukiwanie go.mod doszło do korzenia systemu plików.

Błędy wejścia/wyjścia (brak pliku, brak uprawnień, błąd odczytu) nie są
opakowywane — wychodzą jako wbudowane OSError bez numeru linii.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    """Stałe kody błędów parsera."""

    # Błędna linia wewnątrz bloku danej dyrektywy
    INVALID_REQUIRE    = "E_INVALID_REQUIRE"
    INVALID_REPLACE    = "E_INVALID_REPLACE"
    INVALID_EXCLUDE    = "E_INVALID_EXCLUDE"
    INVALID_RETRACT    = "E_INVALID_RETRACT"

    # Struktura pliku
    UNRECOGNIZED_LINE  = "E_UNRECOGNIZED_LINE"
    UNKNOWN_BLOCK      = "E_UNKNOWN_BLOCK"

    # Wyszukiwanie pliku
    MANIFEST_NOT_FOUND = "E_MANIFEST_NOT_FOUND"


class ModParseError(ValueError):
    """
    Błąd parsowania pliku go.mod.

    - code:    ErrorCode
    - message: czytelny opis błędu
    - line:    1-based numer linii fizycznej (None przed adnotacją)
    - text:    przycięta treść linii, której dotyczy błąd
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        line: int | None = None,
        text: str = "",
    ) -> None:
        self.code = code
        self.message = message
        self.line = line
        self.text = text
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        return f"linia {self.line}: {self.message}"

    def __reduce__(self):
        return (type(self), (self.code, self.message, self.line, self.text))

    def with_line(self, line: int, text: str) -> "ModParseError":
        """Zwraca kopię błędu z numerem linii i jej treścią."""
        return ModParseError(self.code, self.message, line=line, text=text)


class ManifestNotFoundError(FileNotFoundError):
    """Nie znaleziono pliku go.mod w katalogu startowym ani w żadnym z rodziców."""

    code = ErrorCode.MANIFEST_NOT_FOUND

    def __init__(self, start_dir: str, filename: str = "go.mod") -> None:
        self.start_dir = start_dir
        self.filename = filename
        super().__init__(f"Nie znaleziono pliku {filename} (szukano w górę od {start_dir})")
