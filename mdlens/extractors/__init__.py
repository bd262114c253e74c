"""Extraction sub-package: deterministic, regex-driven markdown analysis."""

from .dates import creation_date, format_date, most_recent, time_ago, update_date
from .metadata import extract_metadata
from .paths import (
    extract_date_from_path,
    filename_to_slug,
    filename_to_title,
    group_paths_by_directory,
    sort_paths_by_date,
)
from .plaintext import reading_time, strip_markdown, word_count
from .structure import (
    all_headings,
    extract_code_blocks,
    extract_images,
    extract_links,
    first_heading,
    first_paragraph,
)
from .validation import validate_markdown

__all__ = [
    "all_headings",
    "creation_date",
    "extract_code_blocks",
    "extract_date_from_path",
    "extract_images",
    "extract_links",
    "extract_metadata",
    "filename_to_slug",
    "filename_to_title",
    "first_heading",
    "first_paragraph",
    "format_date",
    "group_paths_by_directory",
    "most_recent",
    "reading_time",
    "sort_paths_by_date",
    "strip_markdown",
    "time_ago",
    "update_date",
    "validate_markdown",
    "word_count",
]
