"""Wspólne fixture'y testów parsera go.mod."""

import pytest


FULL_GOMOD = """\
module github.com/example/project

go 1.21

require (
\tgithub.com/pkg/errors v0.9.1
\tgolang.org/x/text v0.3.7 // indirect
)

replace github.com/old/module => github.com/new/module v1.0.0

exclude github.com/bad/module v1.0.0

retract (
\tv1.0.0 // Published accidentally
\t[v1.1.0, v1.2.0]
)
"""


@pytest.fixture
def full_gomod() -> str:
    """go.mod ze wszystkimi rodzajami dyrektyw."""
    return FULL_GOMOD


@pytest.fixture
def write_gomod(tmp_path):
    """Zapisuje go.mod w podkatalogu tmp_path i zwraca ścieżkę do pliku."""

    def _write(content: str, subdir: str = ""):
        directory = tmp_path / subdir if subdir else tmp_path
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / "go.mod"
        path.write_text(content, encoding="utf-8")
        return path

    return _write
