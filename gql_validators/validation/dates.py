"""
Date string parsing for Date/DateTime fields.

A date string is accepted if any one of the configured formats parses it.
Two format names are special, everything else is a `strptime` pattern:

    "iso8601"   datetime.fromisoformat, with a trailing 'Z' read as UTC.
                Basic ('20200801') and week ('2020-W31-6') forms are
                accepted too
    "rfc2822"   email.utils.parsedate_to_datetime

The defaults cover ISO 8601, RFC 2822, the 'YYYY-MM-DDTHH:mm:ss' form with an
offset or 'Z' suffix, and the short 'MM/DD/YYYY' form.
"""

import logging
from datetime import datetime
from email.utils import parsedate_to_datetime
from typing import Iterable, Optional

logger = logging.getLogger(__name__)

ISO_8601 = "iso8601"
RFC_2822 = "rfc2822"
DEFAULT_FORMAT = "%Y-%m-%dT%H:%M:%S%z"  # %z also accepts 'Z'
SHORT_DATE_FORMAT = "%m/%d/%Y"

DEFAULT_DATE_FORMATS = (ISO_8601, RFC_2822, DEFAULT_FORMAT, SHORT_DATE_FORMAT)


def _parse_iso(value: str) -> datetime:
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


def parse_with_format(value: str, date_format: str) -> datetime:
    """
    Parse a date string with a single format.

    Args:
        value: Date string
        date_format: ISO_8601, RFC_2822 or a strptime pattern

    Returns:
        datetime: Parsed value

    Raises:
        ValueError, TypeError: If the string does not match the format
    """
    if date_format == ISO_8601:
        return _parse_iso(value)
    if date_format == RFC_2822:
        return parsedate_to_datetime(value)
    return datetime.strptime(value, date_format)


def parse_date(value: str, formats: Iterable[str] = DEFAULT_DATE_FORMATS) -> Optional[datetime]:
    """
    Parse a date string with the first matching format.

    Args:
        value: Date string
        formats: Formats to try, in order

    Returns:
        datetime, or None if no format matches

    Example:
        ```python
        parse_date("2020-08-01T10:00:00Z")   # datetime(2020, 8, 1, 10, 0, tzinfo=utc)
        parse_date("08/01/2020")             # datetime(2020, 8, 1, 0, 0)
        parse_date("some date")              # None
        ```
    """
    for date_format in formats:
        try:
            return parse_with_format(value, date_format)
        except (TypeError, ValueError, IndexError, OverflowError):
            continue

    logger.debug(f"No date format matched {value!r}")
    return None
