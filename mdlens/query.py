"""Document-level API.

Combines every extractor into one :class:`~mdlens.items.DocumentSchema`.

Usage::

    from mdlens import load, parse

    doc = parse("# Hello\\n\\nFirst paragraph.", path="notes/2024-01-05_hello.md")
    print(doc.title, doc.slug, doc.created_at)

    doc = load("content/posts/intro.md")
    print(doc.reading_time_minutes, [h.anchor for h in doc.headings])
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from mdlens import settings
from mdlens.extractors.metadata import extract_metadata
from mdlens.extractors.paths import is_markdown_file
from mdlens.extractors.plaintext import reading_time, word_count
from mdlens.extractors.structure import (
    all_headings,
    extract_code_blocks,
    extract_images,
    extract_links,
)
from mdlens.items import DocumentSchema

logger = logging.getLogger(__name__)


class LoadError(RuntimeError):
    """Raised when a markdown file cannot be read.

    Attributes:
        path -- the file that failed
    """

    def __init__(self, message: str, path: str = "") -> None:
        super().__init__(message)
        self.path = path


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def parse(
    text: str,
    path: str = "",
    *,
    words_per_minute: int = settings.WORDS_PER_MINUTE,
    max_heading_level: int = settings.MAX_HEADING_LEVEL,
) -> DocumentSchema:
    """Parse markdown *text* with no file access.

    Args:
        text:              Raw markdown, frontmatter included.
        path:              Where the text came from, if known.  Feeds the
                           slug and the title/date fallbacks.
        words_per_minute:  Reading speed for ``reading_time_minutes``.
        max_heading_level: Deepest heading level to report.

    Returns:
        :class:`~mdlens.items.DocumentSchema` with all available fields
        populated.
    """
    meta = extract_metadata(text, path)
    body = meta["body"]
    return DocumentSchema(
        path=path,
        title=meta["title"],
        slug=meta["slug"],
        summary=meta["summary"],
        headings=all_headings(body, max_heading_level),
        links=extract_links(body),
        images=extract_images(body),
        code_blocks=extract_code_blocks(body),
        frontmatter=meta["frontmatter"],
        word_count=word_count(body),
        reading_time_minutes=reading_time(body, words_per_minute),
        created_at=meta["created_at"],
        updated_at=meta["updated_at"],
        last_modified=meta["last_modified"],
    )


# ---------------------------------------------------------------------------
# Files
# ---------------------------------------------------------------------------

def load(
    path: str | Path,
    *,
    words_per_minute: int = settings.WORDS_PER_MINUTE,
    max_heading_level: int = settings.MAX_HEADING_LEVEL,
) -> DocumentSchema:
    """Read the UTF-8 markdown file at *path* and parse it.

    Raises:
        LoadError: the file is missing, unreadable, or not UTF-8.
    """
    file_path = Path(path)
    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise LoadError(f"Could not read {file_path}: {exc}", path=str(file_path)) from exc
    return parse(
        text,
        path=file_path.as_posix(),
        words_per_minute=words_per_minute,
        max_heading_level=max_heading_level,
    )


def load_many(
    paths: Iterable[str | Path],
    *,
    words_per_minute: int = settings.WORDS_PER_MINUTE,
    max_heading_level: int = settings.MAX_HEADING_LEVEL,
) -> list[DocumentSchema]:
    """Load every file in *paths*, skipping (and logging) the unreadable ones."""
    documents: list[DocumentSchema] = []
    for path in paths:
        try:
            documents.append(
                load(
                    path,
                    words_per_minute=words_per_minute,
                    max_heading_level=max_heading_level,
                ),
            )
        except LoadError as exc:
            logger.warning("Skipping %s: %s", exc.path, exc)
    return documents


def find_markdown_files(root: str | Path) -> list[str]:
    """Return every markdown file under *root* as a sorted list of POSIX paths."""
    root_path = Path(root)
    if root_path.is_file():
        return [root_path.as_posix()] if is_markdown_file(root_path.name) else []
    return sorted(
        p.as_posix() for p in root_path.rglob("*") if p.is_file() and is_markdown_file(p.name)
    )
