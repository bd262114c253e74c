"""Labelled-date sniffing from free text, plus date display helpers.

Creation and update dates are found by label (``Created:``, ``**Date:**``,
``Last Changed:`` ...) on a single line and the rest of that line is handed
to :mod:`dateparser`.  Nothing here raises on text without a date.
"""

from __future__ import annotations

import logging
import re
from datetime import date, datetime, timezone

import dateparser

from mdlens import settings

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Label patterns
# ---------------------------------------------------------------------------

_CREATED_RE = re.compile(
    r"(?:\*\*Date:?\*\*|Date:|Created(?: At| On| Date| Time)?:)[ \t]+(.+?)[ \t]*$",
    re.MULTILINE,
)
_UPDATED_RE = re.compile(
    r"(?:\*\*(?:Updated|Modified|Changed|Last Changed):?\*\*"
    r"|(?:Updated|Modified|Changed|Last Changed):)[ \t]+(.+?)[ \t]*$",
    re.MULTILINE,
)
_UPDATED_LINE_RE = re.compile(r"^updated:\s*(.+)$", re.IGNORECASE)
_WHITESPACE_RE = re.compile(r"\s+")

# Largest unit first; the first unit with a count of at least one wins.
_TIME_AGO_UNITS: tuple[tuple[str, int], ...] = (
    ("year", 31_536_000),
    ("month", 2_592_000),
    ("week", 604_800),
    ("day", 86_400),
    ("hour", 3_600),
    ("minute", 60),
)

_MONTHS = (
    "January", "February", "March", "April", "May", "June", "July",
    "August", "September", "October", "November", "December",
)
_WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def parse_date(raw: str | None) -> datetime | None:
    """Parse a free-form date string, returning None when it is not a date."""
    if not raw:
        return None
    raw = _WHITESPACE_RE.sub(" ", raw.strip())
    try:
        return dateparser.parse(
            raw,
            languages=settings.DATE_PARSER_LANGUAGES,
            settings=settings.DATE_PARSER_SETTINGS,
        )
    except Exception as exc:
        logger.debug("Date parse failed for %r: %s", raw, exc)
    return None


def _comparable(value: date) -> datetime:
    """Map dates and naive/aware datetimes onto one naive-UTC timeline."""
    if not isinstance(value, datetime):
        return datetime(value.year, value.month, value.day)
    if value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


# ---------------------------------------------------------------------------
# Sniffing
# ---------------------------------------------------------------------------

def creation_date(text: str) -> datetime | None:
    """Date following the first ``Date:``/``Created...:`` label in *text*."""
    match = _CREATED_RE.search(text or "")
    return parse_date(match.group(1)) if match else None


def update_date(text: str) -> datetime | None:
    """Date following the first ``Updated:``/``Modified:``/``Changed:`` label in *text*."""
    match = _UPDATED_RE.search(text or "")
    return parse_date(match.group(1)) if match else None


def updated_time_from_content(text: str) -> datetime | None:
    """Date on the first line that starts with ``updated:`` (any case)."""
    for line in (text or "").splitlines():
        match = _UPDATED_LINE_RE.match(line)
        if match:
            return parse_date(match.group(1))
    return None


def most_recent(
    created: date | None = None,
    updated: date | None = None,
) -> date | None:
    """Return the later of *created* and *updated*.

    Whichever is present wins when only one is given.  *updated* has to be
    strictly later to win, so equal timestamps return *created*.
    """
    if created is None:
        return updated
    if updated is None:
        return created
    return updated if _comparable(updated) > _comparable(created) else created


# ---------------------------------------------------------------------------
# Display
# ---------------------------------------------------------------------------

def format_date(value: date, style: str = settings.DATE_STYLE) -> str:
    """Format *value* the way an en-US reader expects.

    Styles:
        short   12/7/24
        medium  Dec 7, 2024
        long    December 7, 2024
        full    Saturday, December 7, 2024
        iso     2024-12-07
    """
    month = _MONTHS[value.month - 1]
    if style == "short":
        return f"{value.month}/{value.day}/{value.year % 100:02d}"
    if style == "medium":
        return f"{month[:3]} {value.day}, {value.year}"
    if style == "long":
        return f"{month} {value.day}, {value.year}"
    if style == "full":
        return f"{_WEEKDAYS[value.weekday()]}, {month} {value.day}, {value.year}"
    if style == "iso":
        return value.strftime("%Y-%m-%d")
    raise ValueError(f"Unknown date style: {style!r}")


def time_ago(value: date, now: datetime | None = None) -> str:
    """Render *value* relative to *now*, e.g. ``"3 days ago"``.

    *now* defaults to the current time.  Anything under a minute old, and
    anything in the future, is ``"just now"``.
    """
    if now is None:
        tz = value.tzinfo if isinstance(value, datetime) else None
        now = datetime.now(tz)
    elapsed = int((_comparable(now) - _comparable(value)).total_seconds())

    for label, seconds in _TIME_AGO_UNITS:
        count = elapsed // seconds
        if count >= 1:
            return f"{count} {label}{'s' if count > 1 else ''} ago"
    return "just now"
