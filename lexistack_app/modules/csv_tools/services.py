import logging
from typing import Iterable, Optional

from ...core.error_handlers import ValidationError
from ..shared.utils.csv_parser import (
    count_csv_fields,
    format_csv_line,
    parse_csv_line,
)
from .schemas import FormattedLineDTO, LineCheckDTO, ParsedLineDTO

logger = logging.getLogger(__name__)


class CsvLineService:
    """Single-line CSV operations used by the import screens."""

    @staticmethod
    def _check_length(line: str, max_length: Optional[int]) -> None:
        if max_length is not None and len(line) > max_length:
            raise ValidationError(
                f'Line is too long ({len(line)} > {max_length} characters)',
                errors={'line': 'too_long'},
            )

    @staticmethod
    def parse_line(line: str, max_length: Optional[int] = None) -> ParsedLineDTO:
        CsvLineService._check_length(line, max_length)
        fields = parse_csv_line(line)
        logger.debug("Parsed CSV line into %d fields", len(fields))
        return ParsedLineDTO(line=line, fields=fields, field_count=len(fields))

    @staticmethod
    def format_line(fields: Iterable[str], max_length: Optional[int] = None) -> FormattedLineDTO:
        fields = list(fields)
        if not fields:
            # An empty list has no line form: "" reads back as one empty field.
            raise ValidationError(
                'At least one field is required',
                errors={'fields': 'empty'},
            )
        line = format_csv_line(fields)
        CsvLineService._check_length(line, max_length)
        logger.debug("Formatted %d fields into a CSV line", len(fields))
        return FormattedLineDTO(fields=fields, line=line)

    @staticmethod
    def check_line(line: str, expected_fields: int, max_length: Optional[int] = None) -> LineCheckDTO:
        CsvLineService._check_length(line, max_length)
        field_count = count_csv_fields(line)
        matches = field_count == expected_fields
        if not matches:
            logger.info(
                "CSV line has %d fields, expected %d", field_count, expected_fields
            )
        return LineCheckDTO(
            line=line,
            field_count=field_count,
            expected_fields=expected_fields,
            matches=matches,
        )
