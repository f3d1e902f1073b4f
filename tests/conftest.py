import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from lexistack_app import create_app
from lexistack_app.config import Config


class TestConfig(Config):
    TESTING = True
    LOG_LEVEL = 'DEBUG'
    LOG_TO_FILE = False
    CSV_MAX_LINE_LENGTH = 200


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    return app.test_client()
