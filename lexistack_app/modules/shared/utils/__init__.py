from .csv_parser import (
    count_csv_fields,
    format_csv_line,
    parse_csv_line,
    quote_csv_field,
)

__all__ = [
    "count_csv_fields",
    "format_csv_line",
    "parse_csv_line",
    "quote_csv_field",
]
