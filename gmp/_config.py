"""Konfiguracja gmp — zmienne środowiskowe, opcjonalnie z pliku .env w katalogu głównym."""

from __future__ import annotations

import os
import pathlib

from dotenv import load_dotenv

ROOT = pathlib.Path(__file__).resolve().parent.parent

# Zmienne już ustawione w środowisku mają pierwszeństwo przed .env
load_dotenv(ROOT / ".env", override=False)


def manifest_name() -> str:
    return os.getenv("GMP_MANIFEST_NAME", "go.mod")


def console_width() -> int:
    return int(os.getenv("GMP_CONSOLE_WIDTH", "160"))
