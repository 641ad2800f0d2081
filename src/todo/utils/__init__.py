from .dates import DATE_FORMAT, format_date, parse_date
from .formatting import display, unparse

__all__ = [
    "DATE_FORMAT",
    "format_date",
    "parse_date",
    "display",
    "unparse",
]
