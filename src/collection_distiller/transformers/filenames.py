"""Filename derivation for collection documents.

Jekyll collections expect "YYYY-MM-DD-<slug>.md" names; the slug is the
entry URL with separators removed.
"""

import re
from datetime import date, datetime, timezone

from collection_distiller.exceptions import InvalidDateError

SLUG_STRIP_PATTERN = re.compile(r"[\s/]")


def slugify_url(url: str) -> str:
    """Remove all whitespace and slashes from a URL.

    Examples:
        >>> slugify_url("/hello world")
        'helloworld'
    """
    return SLUG_STRIP_PATTERN.sub("", url)


def _fromisoformat(value) -> datetime:
    if not isinstance(value, str):
        raise InvalidDateError(value)
    try:
        return datetime.fromisoformat(value.strip())
    except ValueError as e:
        raise InvalidDateError(value) from e


def parse_iso_date(value) -> date:
    """Return the calendar date written in an ISO-8601 string.

    The offset of a datetime value is ignored; "2024-01-05T23:00:00-05:00"
    is 2024-01-05.

    Raises:
        InvalidDateError: If the value is not a parseable ISO-8601 string
    """
    return _fromisoformat(value).date()


def parse_iso_datetime(value) -> datetime:
    """Parse an ISO-8601 date or datetime string for ordering.

    Timezone-aware values are converted to naive UTC so that they compare
    with naive ones.

    Raises:
        InvalidDateError: If the value is not a parseable ISO-8601 string
    """
    parsed = _fromisoformat(value)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def build_filename(date: str, url: str) -> str:
    """Build the collection filename for an entry.

    Args:
        date: ISO-8601 publish date
        url: Entry URL

    Returns:
        Filename like "2024-01-05-helloworld.md"

    Raises:
        InvalidDateError: If the date cannot be parsed
    """
    return f"{parse_iso_date(date).isoformat()}-{slugify_url(url)}.md"
