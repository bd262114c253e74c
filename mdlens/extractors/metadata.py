"""Deterministic metadata extraction from a markdown document.

Priority chains (highest → lowest):
    title:    first H1 → frontmatter ``title`` → title derived from the filename
    summary:  frontmatter ``description`` → first paragraph
    created:  labelled date in the body → frontmatter ``date`` → date in the filename
    updated:  labelled date in the body → ``updated:`` line → frontmatter ``updated``
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any

from mdlens.extractors.dates import (
    creation_date,
    most_recent,
    parse_date,
    update_date,
    updated_time_from_content,
)
from mdlens.extractors.paths import (
    extract_date_from_path,
    file_name_without_extension,
    filename_to_slug,
    filename_to_title,
    slugify,
)
from mdlens.extractors.structure import first_heading, first_paragraph
from mdlens.extractors.validation import validate_frontmatter

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _first(*values: Any) -> Any:
    """Return the first non-empty, non-None value."""
    for v in values:
        if v:
            return v
    return None


def _frontmatter_date(value: Any) -> date | None:
    """Coerce a frontmatter value (YAML date, datetime, or string) to a date."""
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return parse_date(value)
    return None


def _frontmatter_str(value: Any) -> str | None:
    if value is None or isinstance(value, (dict, list)):
        return None
    return str(value).strip() or None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def extract_metadata(text: str, path: str = "") -> dict:
    """Extract all available metadata from a markdown document.

    Args:
        text: Raw markdown, frontmatter included.
        path: File path of the document.  Used for the slug and as a
              fallback source for the title and creation date.

    Returns a dict with keys:
        title, slug, summary, created_at, updated_at, last_modified,
        frontmatter, body
    """
    text = text or ""
    fm_result = validate_frontmatter(text)
    frontmatter: dict[str, Any] = fm_result.frontmatter or {}
    if not fm_result.is_valid:
        logger.debug("Ignoring unparsable frontmatter in %r: %s", path, fm_result.error)
    body = fm_result.content if fm_result.content is not None else text

    filename = file_name_without_extension(path) if path else ""

    # ---- title ----
    title = _first(
        first_heading(body),
        _frontmatter_str(frontmatter.get("title")),
        filename_to_title(filename) if filename else None,
    )

    # ---- slug ----
    slug = _first(
        _frontmatter_str(frontmatter.get("slug")),
        filename_to_slug(filename) if filename else None,
        slugify(title or ""),
    )

    # ---- summary ----
    summary = _first(
        _frontmatter_str(frontmatter.get("description")),
        first_paragraph(body),
    )

    # ---- dates ----
    created_at = _first(
        creation_date(body),
        _frontmatter_date(frontmatter.get("date") or frontmatter.get("created")),
        extract_date_from_path(path) if path else None,
    )
    updated_at = _first(
        update_date(body),
        updated_time_from_content(body),
        _frontmatter_date(frontmatter.get("updated") or frontmatter.get("modified")),
    )

    return {
        "title": (title or "").strip(),
        "slug": slug or "",
        "summary": (summary or "").strip(),
        "created_at": created_at,
        "updated_at": updated_at,
        "last_modified": most_recent(created_at, updated_at),
        "frontmatter": frontmatter,
        "body": body,
    }
