# File: lexistack_app/config.py
# Purpose: Application configuration, read from the environment (and .env).

import os

from dotenv import load_dotenv

load_dotenv()

# The project root sits one level above the package directory.
BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ('1', 'true', 'yes', 'on')


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return default


class Config:
    """Cấu hình ứng dụng LexiStack."""

    SECRET_KEY = os.environ.get('SECRET_KEY')
    if not SECRET_KEY:
        # Fallback for development, though env is preferred
        SECRET_KEY = 'dev-secret-key-replace-in-production'

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_DIR = os.environ.get('LOG_DIR') or os.path.join(BASE_DIR, 'logs')
    LOG_JSON = _env_bool('LOG_JSON', False)
    LOG_TO_FILE = _env_bool('LOG_TO_FILE', True)

    # CSV tools
    CSV_MAX_LINE_LENGTH = _env_int('CSV_MAX_LINE_LENGTH', 10000)

    @classmethod
    def init_app(cls, app):
        """Khởi tạo các thư mục cần thiết."""
        if app.config.get('LOG_TO_FILE'):
            os.makedirs(app.config['LOG_DIR'], exist_ok=True)
