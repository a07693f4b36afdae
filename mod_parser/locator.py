"""mod_parser/locator.py — wyszukiwanie pliku go.mod w górę drzewa katalogów."""

from __future__ import annotations

from pathlib import Path

from .errors import ManifestNotFoundError

MANIFEST_NAME = "go.mod"


def find_manifest(start_dir: str | Path = "", filename: str = MANIFEST_NAME) -> Path:
    """
    Zwraca bezwzględną ścieżkę do pliku `filename` w start_dir lub najbliższym
    katalogu nadrzędnym.

    Pusty start_dir oznacza bieżący katalog roboczy. Wyszukiwanie kończy się
    na korzeniu systemu plików (katalog, którego rodzicem jest on sam).

    Raises:
        ManifestNotFoundError gdy plik nie istnieje w żadnym katalogu po drodze.
    """
    directory = Path(start_dir or Path.cwd()).absolute()

    while True:
        candidate = directory / filename
        if candidate.is_file():
            return candidate
        parent = directory.parent
        if parent == directory:
            raise ManifestNotFoundError(str(start_dir or directory), filename)
        directory = parent
