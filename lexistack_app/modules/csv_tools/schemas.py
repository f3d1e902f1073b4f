from dataclasses import dataclass, field
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _reject_line_breaks(value: str) -> str:
    if '\n' in value or '\r' in value:
        raise ValueError('line must not contain line breaks')
    return value


class ParseLineRequest(BaseModel):
    line: str

    model_config = ConfigDict(extra="ignore")

    @field_validator('line')
    @classmethod
    def single_line(cls, value: str) -> str:
        return _reject_line_breaks(value)


class FormatLineRequest(BaseModel):
    fields: List[str] = Field(min_length=1)

    model_config = ConfigDict(extra="ignore")

    @field_validator('fields')
    @classmethod
    def no_line_breaks(cls, value: List[str]) -> List[str]:
        for item in value:
            _reject_line_breaks(item)
        return value


class CheckLineRequest(ParseLineRequest):
    expected_fields: int = Field(ge=1)


@dataclass
class ParsedLineDTO:
    line: str
    fields: List[str] = field(default_factory=list)
    field_count: int = 0


@dataclass
class FormattedLineDTO:
    fields: List[str]
    line: str


@dataclass
class LineCheckDTO:
    line: str
    field_count: int
    expected_fields: int
    matches: bool
