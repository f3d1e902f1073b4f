import pytest

from lexistack_app.core.error_handlers import ValidationError
from lexistack_app.modules.csv_tools import interface


def test_parse_line_endpoint_returns_fields(client):
    response = client.post('/csv/api/parse-line', json={'line': 'Haus, "house, home" ,A1'})

    assert response.status_code == 200
    payload = response.get_json()
    assert payload['success'] is True
    assert payload['data'] == {'fields': ['Haus', 'house, home', 'A1'], 'field_count': 3}


def test_parse_line_endpoint_accepts_empty_line(client):
    response = client.post('/csv/api/parse-line', json={'line': ''})

    assert response.status_code == 200
    assert response.get_json()['data']['fields'] == ['']


def test_parse_line_endpoint_rejects_line_breaks(client):
    response = client.post('/csv/api/parse-line', json={'line': 'a,b\nc,d'})

    assert response.status_code == 400
    payload = response.get_json()
    assert payload['success'] is False
    assert payload['code'] == 'VALIDATION_ERROR'
    assert payload['details']['errors'][0]['field'] == 'line'


def test_parse_line_endpoint_rejects_missing_line(client):
    response = client.post('/csv/api/parse-line', json={'text': 'a,b'})

    assert response.status_code == 400
    assert response.get_json()['code'] == 'VALIDATION_ERROR'


def test_parse_line_endpoint_rejects_non_string_line(client):
    response = client.post('/csv/api/parse-line', json={'line': 42})

    assert response.status_code == 400


def test_parse_line_endpoint_rejects_non_object_body(client):
    response = client.post('/csv/api/parse-line', data='a,b,c', content_type='text/plain')

    assert response.status_code == 400
    assert response.get_json()['message'] == 'Request body must be a JSON object'


def test_parse_line_endpoint_enforces_max_length(client):
    response = client.post('/csv/api/parse-line', json={'line': 'x' * 201})

    assert response.status_code == 400
    payload = response.get_json()
    assert payload['details']['errors'] == {'line': 'too_long'}


def test_format_line_endpoint_quotes_fields(client):
    response = client.post('/csv/api/format-line', json={'fields': ['a,b', 'say "hi"', 'c']})

    assert response.status_code == 200
    assert response.get_json()['data'] == {'line': '"a,b","say ""hi""",c'}


def test_format_line_endpoint_requires_fields(client):
    response = client.post('/csv/api/format-line', json={'fields': []})

    assert response.status_code == 400


def test_check_line_endpoint_reports_match(client):
    response = client.post(
        '/csv/api/check-line',
        json={'line': 'n1,"Haus, das",A1', 'expected_fields': 3},
    )

    assert response.status_code == 200
    assert response.get_json()['data'] == {
        'field_count': 3,
        'expected_fields': 3,
        'matches': True,
    }


def test_check_line_endpoint_reports_mismatch(client):
    response = client.post(
        '/csv/api/check-line',
        json={'line': '"unterminated,c', 'expected_fields': 2},
    )

    data = response.get_json()['data']
    assert data['field_count'] == 1
    assert data['matches'] is False


def test_check_line_endpoint_rejects_non_positive_expectation(client):
    response = client.post('/csv/api/check-line', json={'line': 'a', 'expected_fields': 0})

    assert response.status_code == 400


def test_parse_line_endpoint_only_accepts_post(client):
    response = client.get('/csv/api/parse-line')

    assert response.status_code == 405
    assert response.get_json()['code'] == 'METHOD_NOT_ALLOWED'


def test_interface_parse_line_returns_dto():
    result = interface.parse_line('"a""b",c')

    assert result.line == '"a""b",c'
    assert result.fields == ['a"b', 'c']
    assert result.field_count == 2


def test_interface_format_line_round_trips():
    result = interface.format_line(['x,y', 'z'])

    assert result.line == '"x,y",z'
    assert interface.parse_line(result.line).fields == ['x,y', 'z']


def test_interface_check_line():
    result = interface.check_line('a,b,c', expected_fields=3)

    assert result.matches is True
    assert result.field_count == 3


def test_interface_raises_for_too_long_line():
    with pytest.raises(ValidationError) as excinfo:
        interface.parse_line('abcdef', max_length=5)

    assert excinfo.value.status_code == 400


def test_interface_format_line_rejects_empty_field_list():
    with pytest.raises(ValidationError) as excinfo:
        interface.format_line([])

    assert excinfo.value.details == {'errors': {'fields': 'empty'}}


def test_parse_line_endpoint_ignores_unknown_keys(client):
    response = client.post('/csv/api/parse-line', json={'line': 'a,b', 'source': 'import'})

    assert response.status_code == 200
    assert response.get_json()['data']['fields'] == ['a', 'b']
