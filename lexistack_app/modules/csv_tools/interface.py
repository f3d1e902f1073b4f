from typing import Iterable, Optional

from .schemas import FormattedLineDTO, LineCheckDTO, ParsedLineDTO
from .services import CsvLineService


def parse_line(line: str, max_length: Optional[int] = None) -> ParsedLineDTO:
    """
    Public API to split one CSV line into fields.
    """
    return CsvLineService.parse_line(line, max_length)


def format_line(fields: Iterable[str], max_length: Optional[int] = None) -> FormattedLineDTO:
    """
    Public API to join fields into one CSV line, quoting where needed.
    """
    return CsvLineService.format_line(fields, max_length)


def check_line(line: str, expected_fields: int, max_length: Optional[int] = None) -> LineCheckDTO:
    """
    Public API to compare the field count of a line with the expected one.
    """
    return CsvLineService.check_line(line, expected_fields, max_length)
