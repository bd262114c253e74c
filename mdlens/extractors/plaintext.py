"""Markdown to plain text, plus word-count and reading-time estimates."""

from __future__ import annotations

import math
import re

from mdlens import settings

# A whole run of nested heading, list and quote markers, e.g. "> - 1. ".
_LINE_PREFIX_RE = re.compile(r"^[ \t]*(?:(?:#{1,6}|[-*+]|\d+\.|>)[ \t]+)+", re.MULTILINE)

# Ordered (pattern, replacement) rules for one stripping pass.
_STRIP_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    (_LINE_PREFIX_RE, ""),                                       # heading, list and quote markers
    (re.compile(r"\*\*([^*]*)\*\*"), r"\1"),                     # bold
    (re.compile(r"\*([^*]*)\*"), r"\1"),                         # italic
    (re.compile(r"~~([^~]*)~~"), r"\1"),                         # strikethrough
    (re.compile(r"```.*?```", re.DOTALL), ""),                   # fenced code
    (re.compile(r"`([^`]*)`"), r"\1"),                           # inline code
    (re.compile(r"!\[([^\]]*)\]\([^)]*\)"), r"\1"),              # images -> alt
    (re.compile(r"\[([^\]]*)\]\([^)]*\)"), r"\1"),               # links -> text
    (_LINE_PREFIX_RE, ""),                                       # markers uncovered by unwrapping
    (re.compile(r"\n\s*\n"), "\n"),                              # blank lines
)


# Unwrapping in the first pass can expose markup the second pass removes.
_PASSES = 2


def _strip_once(text: str) -> str:
    for pattern, replacement in _STRIP_RULES:
        text = pattern.sub(replacement, text)
    return text.strip()


def strip_markdown(text: str) -> str:
    """Return *text* with markdown syntax removed.

    Fenced code blocks are dropped, links and images collapse to their text,
    runs of nested list and quote markers (``"> - 1. item"``) are removed in
    one match and blank lines collapse.  Runs a fixed number of passes, so
    the cost stays linear in the length of *text*.
    """
    stripped = text or ""
    for _ in range(_PASSES):
        stripped = _strip_once(stripped)
    return stripped


def word_count(text: str) -> int:
    """Number of whitespace-separated words in the plain-text rendering of *text*."""
    return len(strip_markdown(text).split())


def reading_time(text: str, words_per_minute: int = settings.WORDS_PER_MINUTE) -> int:
    """Estimated reading time in whole minutes (never less than 1)."""
    if words_per_minute <= 0:
        raise ValueError("words_per_minute must be > 0")
    return max(1, math.ceil(word_count(text) / words_per_minute))
