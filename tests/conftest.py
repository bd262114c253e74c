"""Shared pytest fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def _read_fixture(name: str) -> str:
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def article_md() -> str:
    return _read_fixture("article.md")


@pytest.fixture
def broken_md() -> str:
    return _read_fixture("broken.md")


@pytest.fixture
def plain_note_md() -> str:
    return _read_fixture("2023-12-01_plain-note.md")
