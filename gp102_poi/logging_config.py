"""
Logging configuration utility - configures logging from Settings
"""
import json
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from gp102_poi.config import Settings, get_settings

LOG_LEVEL_MAP = {
    'DEBUG': logging.DEBUG,
    'INFO': logging.INFO,
    'WARNING': logging.WARNING,
    'ERROR': logging.ERROR,
    'CRITICAL': logging.CRITICAL
}


class JSONFormatter(logging.Formatter):
    """One JSON object per log line."""

    def format(self, record):
        log_entry = {
            'timestamp': self.formatTime(record, self.datefmt),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno
        }
        if record.exc_info:
            log_entry['exception'] = self.formatException(record.exc_info)
        return json.dumps(log_entry)


def setup_logging_from_config(settings: Optional[Settings] = None) -> None:
    """
    Configure logging from settings.

    Console output goes to stderr; stdout is reserved for command output.
    A rotating log file is added when log_file is set.
    """
    settings = settings or get_settings()

    log_level_str = settings.log_level.upper()
    log_level = LOG_LEVEL_MAP.get(log_level_str)
    invalid_level = log_level is None
    if invalid_level:
        log_level = logging.WARNING

    # Remove existing handlers to avoid duplicates
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter(settings.console_format))

    root_logger.setLevel(log_level)
    root_logger.addHandler(console_handler)

    if settings.log_file:
        # Ensure logs directory exists
        logs_dir = os.path.dirname(settings.log_file)
        if logs_dir and not os.path.exists(logs_dir):
            os.makedirs(logs_dir, exist_ok=True)

        file_handler = RotatingFileHandler(
            settings.log_file,
            maxBytes=settings.log_max_bytes,
            backupCount=settings.log_backup_count,
            encoding='utf-8'
        )
        if settings.log_json_format:
            file_handler.setFormatter(JSONFormatter())
        else:
            file_handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
        file_handler.setLevel(log_level)
        root_logger.addHandler(file_handler)

    logger = logging.getLogger(__name__)
    if invalid_level:
        logger.warning(f"Invalid log level {settings.log_level!r}, using WARNING")
    logger.debug(f"Logging configured: file={settings.log_file}, level={logging.getLevelName(log_level)}, "
                 f"json={settings.log_json_format}, max_bytes={settings.log_max_bytes}, "
                 f"backups={settings.log_backup_count}")
