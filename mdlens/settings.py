"""Default settings for mdlens.

Every value here can be overridden per directory through a YAML profile
(see :mod:`mdlens.profiles`) or from the command line.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Text statistics
# ---------------------------------------------------------------------------
# Average adult reading speed used for reading-time estimates.
WORDS_PER_MINUTE = 200

# Deepest heading level reported by all_headings().
MAX_HEADING_LEVEL = 6

# ---------------------------------------------------------------------------
# Structure extraction
# ---------------------------------------------------------------------------
# Language reported for fenced code blocks opened without a language tag.
DEFAULT_TEXT_LANGUAGE = "text"

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
# Group key for paths that have no directory component.
ROOT_GROUP = "root"

MARKDOWN_EXTENSIONS: tuple[str, ...] = (".md", ".markdown")

# ---------------------------------------------------------------------------
# Dates
# ---------------------------------------------------------------------------
# One of: short, medium, long, full, iso
DATE_STYLE = "medium"

# Passed verbatim to dateparser.parse() for labelled dates found in text.
DATE_PARSER_SETTINGS: dict[str, object] = {
    "PREFER_DAY_OF_MONTH": "first",
    "PREFER_LOCALE_DATE_ORDER": False,
    "DATE_ORDER": "MDY",
    "RETURN_AS_TIMEZONE_AWARE": False,
}

# Languages dateparser tries for free-text dates.
DATE_PARSER_LANGUAGES: list[str] = ["en"]
