from dataclasses import asdict

from flask import current_app, jsonify, request
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ...core.error_handlers import ValidationError, success_response
from . import csv_tools_bp
from .schemas import CheckLineRequest, FormatLineRequest, ParseLineRequest
from .services import CsvLineService


def _load_body(model: type[BaseModel]):
    """Validate the JSON body against ``model`` or raise a 400 error."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError('Request body must be a JSON object')
    try:
        return model.model_validate(data)
    except PydanticValidationError as exc:
        errors = [
            {'field': '.'.join(str(part) for part in err['loc']), 'message': err['msg']}
            for err in exc.errors()
        ]
        raise ValidationError('Invalid request data', errors=errors) from exc


def _max_length():
    return current_app.config.get('CSV_MAX_LINE_LENGTH')


@csv_tools_bp.route('/api/parse-line', methods=['POST'])
def parse_line():
    """
    Split one CSV line into fields.
    Body: { "line": "..." }
    """
    payload = _load_body(ParseLineRequest)
    result = CsvLineService.parse_line(payload.line, _max_length())
    return jsonify(success_response({
        'fields': result.fields,
        'field_count': result.field_count,
    }))


@csv_tools_bp.route('/api/format-line', methods=['POST'])
def format_line():
    """
    Join fields into one CSV line.
    Body: { "fields": ["...", "..."] }
    """
    payload = _load_body(FormatLineRequest)
    result = CsvLineService.format_line(payload.fields, _max_length())
    return jsonify(success_response({'line': result.line}))


@csv_tools_bp.route('/api/check-line', methods=['POST'])
def check_line():
    """
    Compare the field count of a line with the expected column count.
    Body: { "line": "...", "expected_fields": 3 }
    """
    payload = _load_body(CheckLineRequest)
    result = CsvLineService.check_line(payload.line, payload.expected_fields, _max_length())
    data = asdict(result)
    data.pop('line')
    return jsonify(success_response(data))
