from .task_parser import (
    TOKEN_RULES,
    classify_token,
    from_lines,
    from_reader,
    parse,
    parse_file,
    write_file,
)

__all__ = [
    "TOKEN_RULES",
    "classify_token",
    "from_lines",
    "from_reader",
    "parse",
    "parse_file",
    "write_file",
]
