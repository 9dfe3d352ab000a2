"""Pytest fixtures for hugo-literate tests."""

import pytest
from pathlib import Path

from hugo_literate import config


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """Keep tests independent of the caller's environment and .env file."""
    for name in ("LITERATE_LEXER", "LITERATE_ANCHOR", "LITERATE_ENCODING"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(config, "_settings", None)
    yield


@pytest.fixture
def sample_lines() -> list[str]:
    """Go source with one literate block between two free lines."""
    return ["a", "// START", "// hello", "code1", "code2", "// END", "b"]


@pytest.fixture
def sample_rendered() -> list[str]:
    """Rendered output for sample_lines with lexer 'go' and anchor '//'."""
    return [
        "hello",
        "",
        '{{< highlight go "linenos=table,linenostart=2" >}}',
        "code1",
        "code2",
        "{{< / highlight >}}",
    ]


@pytest.fixture
def sample_source_file(tmp_path: Path, sample_lines: list[str]) -> Path:
    """Write sample_lines to a temporary source file."""
    file_path = tmp_path / "main.go"
    file_path.write_text("\n".join(sample_lines), encoding="utf-8")
    return file_path
