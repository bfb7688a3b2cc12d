# 📄 File: soundcave/shared/utils/logging.py

# 🧭 Purpose (Layman Explanation):
# Sets up the app's diary: every event is written in a structured way with the request
# and user it belongs to, so problems can be traced back to a single call.

# 🧪 Purpose (Technical Summary):
# Structured logging with python-json-logger, request/user context variables injected
# into every record, and a text fallback formatter for local development.

# 🔗 Dependencies:
# - python-json-logger: JSON log formatting
# - logging: Python standard logging
# - contextvars: Request context tracking

# 🔄 Connected Modules / Calls From:
# Used by: soundcave.main (setup), soundcave.api.middleware.logging (request context),
# soundcave.shared.core.dependencies (user context), error handling middleware

import logging
import os
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Optional

from pythonjsonlogger.json import JsonFormatter

from soundcave.shared.config.settings import get_settings

# Context variables for request tracking
request_id_var: ContextVar[str] = ContextVar('request_id', default='')
user_id_var: ContextVar[str] = ContextVar('user_id', default='')

SERVICE_NAME = 'soundcave-api'

_logging_configured = False


class ContextFilter(logging.Filter):
    """Copy request context onto every record passing through a handler."""

    def __init__(self):
        super().__init__()
        self.hostname = os.uname().nodename if hasattr(os, 'uname') else 'unknown'

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get('')
        record.user_id = user_id_var.get('')
        record.service = SERVICE_NAME
        record.hostname = self.hostname
        return True


class ContextualFormatter(logging.Formatter):
    """Plain-text formatter including request and user ids."""

    def format(self, record):
        record.timestamp = datetime.now(timezone.utc).isoformat()
        if not hasattr(record, 'request_id'):
            record.request_id = request_id_var.get('')
        return super().format(record)


class JSONFormatter(JsonFormatter):
    """
    JSON formatter for structured logging.

    Emits one object per record with a fixed envelope (timestamp, level,
    logger, message, request_id, user_id) plus any ``extra`` fields.
    """

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        log_record['timestamp'] = datetime.now(timezone.utc).isoformat()
        log_record['level'] = record.levelname
        log_record['logger'] = record.name
        log_record['service'] = SERVICE_NAME
        for key in ('request_id', 'user_id'):
            value = getattr(record, key, '')
            if value:
                log_record[key] = value
            else:
                log_record.pop(key, None)


def setup_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    force: bool = False
) -> logging.Logger:
    """
    Configure the root logger once per process.

    Args:
        log_level: Overrides LOG_LEVEL from settings
        log_format: 'json' or 'text'; overrides LOG_FORMAT from settings
        force: Reconfigure even if logging was already set up

    Returns:
        logging.Logger: The startup logger
    """
    global _logging_configured

    if _logging_configured and not force:
        return logging.getLogger("soundcave.startup")

    settings = get_settings()
    log_level = (log_level or settings.LOG_LEVEL).upper()
    log_format = (log_format or settings.LOG_FORMAT).lower()
    numeric_level = getattr(logging, log_level, logging.INFO)

    if log_format == 'json':
        formatter: logging.Formatter = JSONFormatter('%(message)s')
    else:
        formatter = ContextualFormatter(
            '%(timestamp)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s'
        )

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    console_handler.addFilter(ContextFilter())
    root_logger.addHandler(console_handler)

    logging.getLogger('sqlalchemy.engine').setLevel(
        logging.INFO if settings.DB_ECHO else logging.WARNING
    )
    logging.getLogger('httpx').setLevel(logging.WARNING)
    logging.getLogger('asyncio').setLevel(logging.WARNING)

    _logging_configured = True
    return logging.getLogger("soundcave.startup")


def bind_request_id(request_id: str):
    """Set the request id for the current context; returns a reset token."""
    return request_id_var.set(request_id)


def bind_user_id(user_id: str):
    return user_id_var.set(user_id)
