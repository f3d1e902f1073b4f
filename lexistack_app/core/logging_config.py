"""
Centralized Logging Configuration for LexiStack

Provides consistent logging setup across the application with:
- JSON-like format for log shippers
- Human-readable format for development
- Optional file rotation
"""

import os
import logging
import logging.handlers
from typing import Optional

LOGGER_NAME = 'lexistack_app'
LOG_FILE_NAME = 'lexistack.log'
PLAIN_FORMAT = '%(asctime)s [%(levelname)s] %(module)s: %(message)s'
JSON_FORMAT = '{"time": "%(asctime)s", "level": "%(levelname)s", "module": "%(module)s", "message": "%(message)s"}'


def setup_logging(
    app=None,
    log_level: str = 'INFO',
    log_dir: Optional[str] = None,
    json_format: bool = False,
    log_to_file: bool = True
) -> logging.Logger:
    """
    Configure the ``lexistack_app`` logger that module loggers propagate to.

    Args:
        app: Flask application instance (optional)
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_dir: Directory for log files (default: logs/ at the project root)
        json_format: Use JSON format for structured logging
        log_to_file: Attach a rotating file handler next to the console one

    Returns:
        Configured logger instance
    """
    level = getattr(logging, str(log_level).upper(), logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Clear existing handlers so repeated app creation does not duplicate output
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        JSON_FORMAT if json_format else PLAIN_FORMAT,
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_to_file:
        if log_dir is None:
            base_dir = os.path.dirname(os.path.dirname(os.path.dirname(__file__)))
            log_dir = os.path.join(base_dir, 'logs')
        os.makedirs(log_dir, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            os.path.join(log_dir, LOG_FILE_NAME),
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # If Flask app provided, keep werkzeug request logs quiet
    if app:
        logging.getLogger('werkzeug').setLevel(logging.WARNING)

    logger.info("Logging initialized: level=%s, file=%s", log_level, log_dir if log_to_file else 'disabled')

    return logger
