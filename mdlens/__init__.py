"""mdlens - pull metadata and structure out of markdown documents.

Quick single-document usage::

    from mdlens import load

    doc = load("content/posts/2024-03-01_launch.md")
    print(doc.title, doc.created_at, doc.reading_time_minutes)

Individual rules::

    from mdlens import all_headings, filename_to_slug, strip_markdown

    filename_to_slug("My Great Article!.md")     # "my-great-article"
    [h.anchor for h in all_headings(text, 2)]
    strip_markdown("**bold** and [a link](https://example.com)")

Validation::

    from mdlens import validate_markdown

    report = validate_markdown(text)
    print(report.is_valid, report.warnings, report.stats.word_count)
"""

from mdlens.export import to_jsonl
from mdlens.extractors.dates import (
    creation_date,
    format_date,
    most_recent,
    time_ago,
    update_date,
    updated_time_from_content,
)
from mdlens.extractors.paths import (
    directory_of,
    extract_date_from_path,
    file_name_without_extension,
    filename_to_slug,
    filename_to_title,
    git_hash,
    group_paths_by_directory,
    is_markdown_file,
    normalize_path,
    relative_to,
    slugify,
    sort_paths_by_date,
)
from mdlens.extractors.plaintext import reading_time, strip_markdown, word_count
from mdlens.extractors.structure import (
    all_headings,
    extract_code_blocks,
    extract_images,
    extract_links,
    first_heading,
    first_paragraph,
    heading_anchor,
)
from mdlens.extractors.validation import (
    is_valid_markdown,
    validate_frontmatter,
    validate_images,
    validate_links,
    validate_markdown,
    validate_tables,
)
from mdlens.items import (
    CodeBlock,
    DocumentSchema,
    DocumentStats,
    FrontmatterResult,
    Heading,
    Image,
    ImageCheck,
    Link,
    LinkCheck,
    TableCheck,
    ValidationReport,
)
from mdlens.query import LoadError, find_markdown_files, load, load_many, parse

__version__ = "0.1.0"
__all__ = [
    "CodeBlock",
    "DocumentSchema",
    "DocumentStats",
    "FrontmatterResult",
    "Heading",
    "Image",
    "ImageCheck",
    "Link",
    "LinkCheck",
    "LoadError",
    "TableCheck",
    "ValidationReport",
    "all_headings",
    "creation_date",
    "directory_of",
    "extract_code_blocks",
    "extract_date_from_path",
    "extract_images",
    "extract_links",
    "file_name_without_extension",
    "filename_to_slug",
    "filename_to_title",
    "find_markdown_files",
    "first_heading",
    "first_paragraph",
    "format_date",
    "git_hash",
    "group_paths_by_directory",
    "heading_anchor",
    "is_markdown_file",
    "is_valid_markdown",
    "load",
    "load_many",
    "most_recent",
    "normalize_path",
    "parse",
    "reading_time",
    "relative_to",
    "slugify",
    "sort_paths_by_date",
    "strip_markdown",
    "time_ago",
    "to_jsonl",
    "update_date",
    "updated_time_from_content",
    "validate_frontmatter",
    "validate_images",
    "validate_links",
    "validate_markdown",
    "validate_tables",
    "word_count",
]
