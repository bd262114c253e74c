"""Pydantic record models returned by the extractors.

Attributes use snake_case in Python.  Serialized output (:meth:`to_dict`,
:meth:`to_json`) uses camelCase keys and leaves out unset optional fields,
so an image without a title serializes without a ``title`` key at all.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

# ---------------------------------------------------------------------------
# Base
# ---------------------------------------------------------------------------

class Record(BaseModel):
    """Immutable value record with camelCase serialization."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self, **kwargs: Any) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True, **kwargs)


# ---------------------------------------------------------------------------
# Structure
# ---------------------------------------------------------------------------

class Heading(Record):
    level: int = Field(ge=1, le=6)
    text: str
    anchor: str


class Link(Record):
    text: str
    url: str


class Image(Record):
    alt: str
    src: str
    title: str | None = None


class CodeBlock(Record):
    language: str = "text"
    content: str


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

class LinkCheck(Link):
    is_valid: bool
    error: str | None = None


class ImageCheck(Image):
    is_valid: bool
    error: str | None = None


class TableCheck(Record):
    line_number: int
    is_valid: bool
    error: str | None = None


class FrontmatterResult(Record):
    """Outcome of parsing a leading ``---`` YAML block.

    ``frontmatter`` and ``content`` are set when the block parsed (or there
    was no block); ``error`` carries the YAML parser message otherwise.
    """

    is_valid: bool
    frontmatter: dict[str, Any] | None = None
    content: str | None = None
    error: str | None = None


class DocumentStats(Record):
    word_count: int = 0
    heading_count: int = 0
    link_count: int = 0
    image_count: int = 0


class ValidationReport(Record):
    is_valid: bool
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    stats: DocumentStats = Field(default_factory=DocumentStats)

    @model_validator(mode="after")
    def _valid_iff_no_errors(self) -> ValidationReport:
        if self.is_valid != (not self.errors):
            raise ValueError("is_valid must be True exactly when errors is empty")
        return self


# ---------------------------------------------------------------------------
# Document
# ---------------------------------------------------------------------------

class DocumentSchema(Record):
    """Everything mdlens knows about one markdown document."""

    # Identity
    path: str = ""
    title: str = ""
    slug: str = ""

    # Content
    summary: str = ""
    headings: list[Heading] = Field(default_factory=list)
    links: list[Link] = Field(default_factory=list)
    images: list[Image] = Field(default_factory=list)
    code_blocks: list[CodeBlock] = Field(default_factory=list)
    frontmatter: dict[str, Any] = Field(default_factory=dict)

    # Stats
    word_count: int = 0
    reading_time_minutes: int = 1

    # Dates
    created_at: datetime | date | None = None
    updated_at: datetime | date | None = None
    last_modified: datetime | date | None = None
