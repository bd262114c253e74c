"""Heading, paragraph, link, image, and code-block extraction from markdown.

Pure functions over a markdown string.  Nothing here raises on unmatched
input: a missing structure yields ``""`` or ``[]``.

Usage::

    from mdlens.extractors.structure import all_headings, extract_links

    for heading in all_headings(text, max_level=2):
        print(heading.level, heading.text, heading.anchor)
"""

from __future__ import annotations

import re

from mdlens import settings
from mdlens.items import CodeBlock, Heading, Image, Link

# ---------------------------------------------------------------------------
# Compiled patterns (evaluated once at import time)
# ---------------------------------------------------------------------------

_FIRST_H1_RE = re.compile(r"^# (.*)$", re.MULTILINE)
_HEADING_RE = re.compile(r"^(#{1,6})[ \t]+(.*)$", re.MULTILINE)

# A negative lookbehind keeps image syntax out of link matches.
_LINK_RE = re.compile(r"(?<!!)\[([^\]]*)\]\(([^)]*)\)")
_IMAGE_RE = re.compile(r'!\[([^\]]*)\]\(([^)]*?)(?:\s+"([^"]*)")?\)')
_CODE_BLOCK_RE = re.compile(r"```([^\s`]*)[^\n`]*\n(.*?)```", re.DOTALL)

_ANCHOR_STRIP_RE = re.compile(r"[^\w\s-]")
_WHITESPACE_RE = re.compile(r"\s+")
_PARAGRAPH_SPLIT_RE = re.compile(r"\n\s*\n")

# Removal rules applied by first_paragraph(), in order.
_PARAGRAPH_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"^#{1,6}[ \t]+.*$", re.MULTILINE), ""),     # headings
    (re.compile(r"```.*?```", re.DOTALL), ""),               # fenced code
    (re.compile(r"`[^`]*`"), ""),                            # inline code
    (re.compile(r"!\[[^\]]*\]\([^)]*\)"), ""),               # images
    (re.compile(r"\*\*([^*]*)\*\*"), r"\1"),                 # bold
    (re.compile(r"\*([^*]*)\*"), r"\1"),                     # italic
    (re.compile(r"\[([^\]]*)\]\([^)]*\)"), r"\1"),           # links
)


# ---------------------------------------------------------------------------
# Headings
# ---------------------------------------------------------------------------

def heading_anchor(text: str) -> str:
    """Return the in-page anchor for a heading, e.g. ``"Hello, World"`` -> ``"hello-world"``."""
    anchor = _ANCHOR_STRIP_RE.sub("", text.lower())
    return _WHITESPACE_RE.sub("-", anchor)


def first_heading(text: str) -> str:
    """Return the text of the first level-1 heading, or ``""``."""
    match = _FIRST_H1_RE.search(text or "")
    return match.group(1).strip() if match else ""


def all_headings(text: str, max_level: int = settings.MAX_HEADING_LEVEL) -> list[Heading]:
    """Return every ATX heading up to *max_level*, in document order."""
    headings: list[Heading] = []
    for match in _HEADING_RE.finditer(text or ""):
        level = len(match.group(1))
        if level > max_level:
            continue
        heading_text = match.group(2).strip()
        headings.append(
            Heading(level=level, text=heading_text, anchor=heading_anchor(heading_text)),
        )
    return headings


# ---------------------------------------------------------------------------
# Paragraphs
# ---------------------------------------------------------------------------

def first_paragraph(text: str) -> str:
    """Return the first block of prose after headings, code and images are removed.

    Bold/italic markers are unwrapped and links are replaced by their text.
    Blocks are separated by blank lines.
    """
    cleaned = text or ""
    for pattern, replacement in _PARAGRAPH_RULES:
        cleaned = pattern.sub(replacement, cleaned)

    for block in _PARAGRAPH_SPLIT_RE.split(cleaned.strip()):
        if block.strip():
            return block.strip()
    return ""


# ---------------------------------------------------------------------------
# Links, images, code
# ---------------------------------------------------------------------------

def extract_links(text: str) -> list[Link]:
    """Return every ``[text](url)`` link in document order, images excluded."""
    return [
        Link(text=match.group(1), url=match.group(2))
        for match in _LINK_RE.finditer(text or "")
    ]


def extract_images(text: str) -> list[Image]:
    """Return every ``![alt](src "title")`` image; ``title`` is None when absent."""
    return [
        Image(alt=match.group(1), src=match.group(2), title=match.group(3) or None)
        for match in _IMAGE_RE.finditer(text or "")
    ]


def extract_code_blocks(text: str) -> list[CodeBlock]:
    blocks: list[CodeBlock] = []
    for match in _CODE_BLOCK_RE.finditer(text or ""):
        blocks.append(
            CodeBlock(
                language=match.group(1) or settings.DEFAULT_TEXT_LANGUAGE,
                content=match.group(2).strip(),
            ),
        )
    return blocks
