"""File path normalization, slug/title generation, and path-embedded dates."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from datetime import date, datetime

from mdlens import settings

logger = logging.getLogger(__name__)

_EXTENSION_RE = re.compile(r"\.[^/.]+$")
_DATE_PREFIX_RE = re.compile(r"^\d{4}-\d{2}-\d{2}[_-]?")
_GIT_HASH_RE = re.compile(r"_([a-f0-9]+)$")

# Characters allowed in slugs
_SLUG_UNSAFE_RE = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE_RE = re.compile(r"\s+")
_MULTI_DASH_RE = re.compile(r"-{2,}")

_WORD_START_RE = re.compile(r"(?<!\S)\S")

# Tried in this order; the first structural match that is a real calendar
# date wins.  Underscores are normalized to hyphens before parsing.
_PATH_DATE_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"(\d{4}-\d{2}-\d{2})"), "%Y-%m-%d"),
    (re.compile(r"(\d{4}_\d{2}_\d{2})"), "%Y-%m-%d"),
    (re.compile(r"(\d{8})"), "%Y%m%d"),
    (re.compile(r"(\d{2}-\d{2}-\d{4})"), "%m-%d-%Y"),
    (re.compile(r"(\d{2}_\d{2}_\d{4})"), "%m-%d-%Y"),
)

_SORT_ORDERS = frozenset({"asc", "desc"})


# ---------------------------------------------------------------------------
# Separators and components
# ---------------------------------------------------------------------------

def normalize_path(path: str) -> str:
    """Replace every backslash in *path* with a forward slash."""
    return path.replace("\\", "/")


def file_name_without_extension(path: str) -> str:
    """``"docs/2024-01-02_intro.md"`` -> ``"2024-01-02_intro"``."""
    filename = normalize_path(path).rsplit("/", 1)[-1]
    return _EXTENSION_RE.sub("", filename)


def directory_of(path: str) -> str:
    """Every segment of *path* but the last, joined with ``/``."""
    parts = normalize_path(path).split("/")
    return "/".join(parts[:-1])


def relative_to(path: str, base: str) -> str:
    """Return *path* relative to the folder *base*.

    When *path* starts with *base* the remainder is returned with one leading
    slash removed.  Otherwise *base* is looked for as a whole folder anywhere
    inside *path* (``relative_to("/srv/site/content/a.md", "content")`` ->
    ``"a.md"``).  When *path* has no such folder it is returned unchanged.
    """
    normalized = normalize_path(path)
    normalized_base = normalize_path(base).rstrip("/")
    if not normalized_base:
        return path

    if normalized.startswith(normalized_base):
        remainder = normalized[len(normalized_base):]
        return remainder[1:] if remainder.startswith("/") else remainder

    inner = re.compile(r"^(?:.*?/)?" + re.escape(normalized_base.lstrip("/")) + "/")
    match = inner.match(normalized)
    if match and match.end() < len(normalized):
        return normalized[match.end():]
    return path


def git_hash(path: str) -> str:
    """Return the trailing ``_<hex>`` revision suffix of *path*, or ``"-"``."""
    match = _GIT_HASH_RE.search(path or "")
    return match.group(1) if match else "-"


# ---------------------------------------------------------------------------
# Slugs and titles
# ---------------------------------------------------------------------------

def slugify(text: str) -> str:
    """Lowercase *text* and reduce it to ``a-z``, ``0-9`` and single hyphens."""
    slug = (text or "").lower()
    slug = slug.replace("_", "-")
    slug = _SLUG_UNSAFE_RE.sub("", slug)
    slug = _WHITESPACE_RE.sub("-", slug)
    slug = _MULTI_DASH_RE.sub("-", slug)
    return slug.strip("-")


def filename_to_slug(filename: str) -> str:
    """Convert a filename into a URL-safe slug.

    Example:
        My Great Article!.md -> my-great-article
    """
    return slugify(_EXTENSION_RE.sub("", filename or ""))


def filename_to_title(filename: str) -> str:
    """Convert a filename into a human-readable title.

    Example:
        2023-12-01_my-article.md -> My Article
    """
    title = _EXTENSION_RE.sub("", filename)
    title = _DATE_PREFIX_RE.sub("", title)
    title = title.replace("-", " ").replace("_", " ")
    title = _WORD_START_RE.sub(lambda m: m.group(0).upper(), title)
    return title.strip()


# ---------------------------------------------------------------------------
# Dates embedded in filenames
# ---------------------------------------------------------------------------

def extract_date_from_path(path: str) -> date | None:
    """Return the calendar date embedded in the filename of *path*, if any."""
    filename = file_name_without_extension(path or "")
    for pattern, fmt in _PATH_DATE_RULES:
        match = pattern.search(filename)
        if not match:
            continue
        raw = match.group(1).replace("_", "-")
        try:
            return datetime.strptime(raw, fmt).date()
        except ValueError:
            logger.debug("Ignoring impossible date %r in %r", raw, path)
    return None


def sort_paths_by_date(paths: Iterable[str], order: str = "desc") -> list[str]:
    """Return *paths* sorted by the date in their filenames.

    ``"desc"`` puts the newest first and undated paths last; ``"asc"`` puts
    undated paths first and then the oldest.  Ties keep their input order.
    The input is not modified.
    """
    if order not in _SORT_ORDERS:
        raise ValueError(f"order must be 'asc' or 'desc', got {order!r}")

    def _key(path: str) -> tuple[bool, date]:
        found = extract_date_from_path(path)
        return (found is not None, found or date.min)

    return sorted(paths, key=_key, reverse=(order == "desc"))


# ---------------------------------------------------------------------------
# Collections
# ---------------------------------------------------------------------------

def group_paths_by_directory(paths: Iterable[str]) -> dict[str, list[str]]:
    """Group *paths* by directory, keeping first-seen directory and path order."""
    groups: dict[str, list[str]] = {}
    for path in paths:
        directory = directory_of(path) or settings.ROOT_GROUP
        groups.setdefault(directory, []).append(path)
    return groups


def is_markdown_file(path: str) -> bool:
    return (path or "").lower().endswith(settings.MARKDOWN_EXTENSIONS)
