# lexistack_app/modules/shared/utils/csv_parser.py
# Version: 1.0
# Purpose: Parse and rebuild single lines of CSV text for vocabulary imports.
# Notes:
# - Separator is always ',' and each call handles exactly one line.
# - Every field is trimmed after quote processing, including quoted ones,
#   using the same character set as JavaScript trim().
#   Leading/trailing spaces written inside quotes are therefore lost as well.
# - An unmatched opening quote swallows the rest of the line into the last field.

"""Helpers for splitting one CSV line into fields and joining fields back."""

from __future__ import annotations

from typing import Iterable, List

QUOTE = '"'
SEPARATOR = ','

# Characters removed by JavaScript's String.prototype.trim(): whitespace
# (including the byte-order mark and Unicode Zs spaces) and line terminators.
# str.strip() with no argument differs: it keeps U+FEFF and drops \x1c-\x1f, \x85.
_TRIM_CHARS = (
    '\t\n\v\f\r \u00a0\u1680\u2000\u2001\u2002\u2003\u2004\u2005'
    '\u2006\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000\ufeff'
)


def parse_csv_line(line: str) -> List[str]:
    """Split ``line`` into its field values.

    Quoted regions may contain commas, and ``""`` inside a quoted region stands
    for one literal quote. The function never raises: malformed input simply
    ends up in the last field.
    """
    result: List[str] = []
    current: List[str] = []
    in_quotes = False
    i = 0
    length = len(line)

    while i < length:
        char = line[i]
        next_char = line[i + 1] if i + 1 < length else ''

        if char == QUOTE:
            if in_quotes and next_char == QUOTE:
                # Escaped quote inside a quoted field
                current.append(QUOTE)
                i += 2
            else:
                in_quotes = not in_quotes
                i += 1
        elif char == SEPARATOR and not in_quotes:
            result.append(''.join(current).strip(_TRIM_CHARS))
            current = []
            i += 1
        else:
            current.append(char)
            i += 1

    result.append(''.join(current).strip(_TRIM_CHARS))
    return result


def count_csv_fields(line: str) -> int:
    """Return how many fields :func:`parse_csv_line` yields for ``line``."""
    count = 1
    in_quotes = False
    i = 0
    length = len(line)

    while i < length:
        char = line[i]
        if char == QUOTE:
            if in_quotes and i + 1 < length and line[i + 1] == QUOTE:
                i += 2
                continue
            in_quotes = not in_quotes
        elif char == SEPARATOR and not in_quotes:
            count += 1
        i += 1

    return count


def quote_csv_field(value: str) -> str:
    """Wrap ``value`` in quotes when it holds a separator or a quote."""
    if SEPARATOR not in value and QUOTE not in value:
        return value
    return QUOTE + value.replace(QUOTE, QUOTE * 2) + QUOTE


def format_csv_line(fields: Iterable[str]) -> str:
    """Join ``fields`` into one line that :func:`parse_csv_line` reads back."""
    return SEPARATOR.join(quote_csv_field(field) for field in fields)
