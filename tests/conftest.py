"""Shared pytest fixtures for wp_readme tests."""

from pathlib import Path

import pytest


@pytest.fixture
def document_dir() -> Path:
    """Return the directory holding the README.md / readme-sample.txt pair."""
    return Path(__file__).parent / "document"


@pytest.fixture
def readme_source(document_dir: Path) -> str:
    """Load the sample README.md."""
    return (document_dir / "README.md").read_text(encoding="utf-8")


@pytest.fixture
def readme_expected(document_dir: Path) -> str:
    """Load the expected readme.txt for the sample README.md."""
    return (document_dir / "readme-sample.txt").read_text(encoding="utf-8")


@pytest.fixture
def plugin_dir(tmp_path: Path, readme_source: str) -> Path:
    """Create a plugin directory containing the sample README.md."""
    (tmp_path / "README.md").write_text(readme_source, encoding="utf-8")
    return tmp_path


@pytest.fixture
def clean_environ(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Clear WP_README_* variables and run from a directory without a .env file."""
    monkeypatch.delenv("WP_README_DIR", raising=False)
    monkeypatch.delenv("WP_README_ENV", raising=False)
    monkeypatch.chdir(tmp_path)
