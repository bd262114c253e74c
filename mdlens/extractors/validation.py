"""Structural checks for markdown documents.

Pure functions, no I/O.  Flags malformed links, images, tables and
frontmatter by regex matching and counting, then folds the findings into a
:class:`~mdlens.items.ValidationReport`.

Usage::

    from mdlens.extractors.validation import validate_markdown

    report = validate_markdown(text)
    if not report.is_valid:
        print(report.errors)
    for warning in report.warnings:
        print(warning)
"""

from __future__ import annotations

import logging
import re

import yaml

from mdlens.extractors.plaintext import word_count
from mdlens.extractors.structure import all_headings, extract_images, extract_links
from mdlens.items import (
    DocumentStats,
    FrontmatterResult,
    ImageCheck,
    LinkCheck,
    TableCheck,
    ValidationReport,
)

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Compiled patterns (evaluated once at import time)
# ---------------------------------------------------------------------------

_HEADING_LINE_RE = re.compile(r"^#{1,6}\s+.+$", re.MULTILINE)
_MARKDOWN_SYNTAX_RE = re.compile(
    r"(\*\*.*\*\*|\*.*\*|`.*`|\[.*\]\(.*\)|^[-*+]\s+)",
    re.MULTILINE,
)
_FRONTMATTER_RE = re.compile(r"^---[ \t]*\r?\n(.*?)\r?\n---[ \t]*(?:\r?\n|$)(.*)\Z", re.DOTALL)
_HTTP_URL_RE = re.compile(
    r"^https?://(www\.)?[-a-zA-Z0-9@:%._+~#=]{1,256}\.[a-zA-Z0-9()]{1,6}\b"
    r"([-a-zA-Z0-9()@:%_+.~#?&/=]*)$",
)
_TABLE_SEPARATOR_RE = re.compile(r"^\|?\s*:?-+:?\s*\|")

# Texts shorter than this need a heading or markdown syntax to count as markdown.
_MIN_PLAIN_LENGTH = 10


# ---------------------------------------------------------------------------
# Whole-document sniff
# ---------------------------------------------------------------------------

def is_valid_markdown(text: str) -> bool:
    """Return True if *text* looks like markdown (non-blank, and structured or long enough)."""
    if not text or not isinstance(text, str) or not text.strip():
        return False
    has_headings = bool(_HEADING_LINE_RE.search(text))
    has_syntax = bool(_MARKDOWN_SYNTAX_RE.search(text))
    return has_headings or has_syntax or len(text) > _MIN_PLAIN_LENGTH


# ---------------------------------------------------------------------------
# Frontmatter
# ---------------------------------------------------------------------------

def validate_frontmatter(text: str) -> FrontmatterResult:
    """Parse a leading ``---`` YAML block.

    A document without frontmatter is valid.  A block that is not valid YAML,
    or is not a mapping, is reported with the parser's message in ``error``.
    """
    match = _FRONTMATTER_RE.match(text or "")
    if not match:
        return FrontmatterResult(is_valid=True, content=text)

    raw_block, body = match.group(1), match.group(2)
    try:
        data = yaml.safe_load(raw_block)
    except yaml.YAMLError as exc:
        logger.debug("Frontmatter is not valid YAML: %s", exc)
        return FrontmatterResult(is_valid=False, error=str(exc))

    if data is None:
        data = {}
    if not isinstance(data, dict):
        return FrontmatterResult(
            is_valid=False,
            error=f"Frontmatter must be a mapping, got {type(data).__name__}",
        )
    return FrontmatterResult(
        is_valid=True,
        frontmatter={str(key): value for key, value in data.items()},
        content=body,
    )


# ---------------------------------------------------------------------------
# Links and images
# ---------------------------------------------------------------------------

def _check_url(url: str) -> str | None:
    """Return an error message for *url*, or None when it looks fine."""
    if not url or not url.strip():
        return "Empty URL"
    if url.startswith(("http://", "https://")):
        return None if _HTTP_URL_RE.match(url) else "Invalid URL format"
    if url.startswith("#"):
        return "Empty anchor" if len(url) == 1 else None
    if (url.startswith("/") or "." in url) and ".." in url and "./" in url:
        return "Potentially unsafe relative path"
    return None


def validate_links(text: str) -> list[LinkCheck]:
    results: list[LinkCheck] = []
    for link in extract_links(text):
        error = _check_url(link.url)
        results.append(
            LinkCheck(text=link.text, url=link.url, is_valid=error is None, error=error),
        )
    return results


def validate_images(text: str) -> list[ImageCheck]:
    results: list[ImageCheck] = []
    for image in extract_images(text):
        error: str | None = None
        if not image.alt.strip():
            error = "Missing alt text"
        if not image.src.strip():
            error = "Missing image source"
        elif image.src.startswith(("http://", "https://")) and not _HTTP_URL_RE.match(image.src):
            error = "Invalid image URL format"
        results.append(
            ImageCheck(
                alt=image.alt,
                src=image.src,
                title=image.title,
                is_valid=error is None,
                error=error,
            ),
        )
    return results


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------

def _count_cells(row: str) -> int:
    return sum(1 for cell in row.split("|") if cell.strip())


def validate_tables(text: str) -> list[TableCheck]:
    """Check every table separator row against the header row above it."""
    lines = (text or "").split("\n")
    results: list[TableCheck] = []

    for index, raw_line in enumerate(lines):
        line = raw_line.strip()
        if not _TABLE_SEPARATOR_RE.match(line):
            continue
        line_number = index + 1
        header = lines[index - 1].strip() if index > 0 else ""

        if not header or "|" not in header:
            results.append(
                TableCheck(
                    line_number=line_number,
                    is_valid=False,
                    error="Table separator without header row",
                ),
            )
            continue

        header_cols = _count_cells(header)
        separator_cols = _count_cells(line)
        if header_cols != separator_cols:
            results.append(
                TableCheck(
                    line_number=line_number,
                    is_valid=False,
                    error=(
                        f"Column count mismatch: header has {header_cols}, "
                        f"separator has {separator_cols}"
                    ),
                ),
            )
        else:
            results.append(TableCheck(line_number=line_number, is_valid=True))

    return results


# ---------------------------------------------------------------------------
# Report
# ---------------------------------------------------------------------------

def validate_markdown(text: str) -> ValidationReport:
    """Run every check over *text* and aggregate the findings.

    Not looking like markdown and broken frontmatter are errors; link, image
    and table problems are warnings and never affect ``is_valid``.
    """
    errors: list[str] = []
    warnings: list[str] = []

    if not is_valid_markdown(text):
        errors.append("Content does not appear to be valid markdown")

    frontmatter = validate_frontmatter(text)
    if not frontmatter.is_valid:
        errors.append(f"Frontmatter error: {frontmatter.error}")

    for link in validate_links(text):
        if not link.is_valid:
            warnings.append(f'Invalid link "{link.text}": {link.error}')

    for image in validate_images(text):
        if not image.is_valid:
            warnings.append(f'Invalid image "{image.alt}": {image.error}')

    for table in validate_tables(text):
        if not table.is_valid:
            warnings.append(f"Table error at line {table.line_number}: {table.error}")

    stats = DocumentStats(
        word_count=word_count(text),
        heading_count=len(all_headings(text)),
        link_count=len(extract_links(text)),
        image_count=len(extract_images(text)),
    )
    return ValidationReport(
        is_valid=not errors,
        errors=errors,
        warnings=warnings,
        stats=stats,
    )
