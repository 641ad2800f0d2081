"""
Date rule for todo lines.

Dates are written YEAR-MONTH-DAY with no zero padding required on month or
day and no time component (e.g. "2024-3-5"). A token is a date only if the
whole token matches; "2024-3-5x" or "2024-3" are plain text.

Pure functions, no external dependencies.
"""

import re
from datetime import date
from typing import Optional

# Display form of the format, for help text and error messages
DATE_FORMAT = "YYYY-M-D"

_DATE_RE = re.compile(r"(\d{4})-(\d{1,2})-(\d{1,2})", re.ASCII)


def parse_date(token: str) -> Optional[date]:
    """
    Parse a token as a date.

    Args:
        token: A single whitespace-free token

    Returns:
        The calendar date, or None if the token is not a full, valid date
        (out-of-range months and days such as "2024-2-30" are rejected)
    """
    m = _DATE_RE.fullmatch(token)
    if not m:
        return None
    try:
        return date(int(m.group(1)), int(m.group(2)), int(m.group(3)))
    except ValueError:
        return None


def format_date(value: date) -> str:
    """Format a date without zero padding on month and day ("2024-3-5")."""
    return f"{value.year:04d}-{value.month}-{value.day}"
