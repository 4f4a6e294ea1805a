# 📄 File: agroscan/shared/utils/logging.py

# 🧭 Purpose (Layman Explanation):
# Sets up how AgroScan writes its logs, so every line says which request and which
# user it belongs to and can be read by people or by log collection tools.

# 🧪 Purpose (Technical Summary):
# Structured logging with python-json-logger, request/user context variables injected
# into every record, and a plain-text fallback format selected by configuration.

# 🔗 Dependencies:
# - python-json-logger: JSON log formatting
# - logging: Python standard logging
# - contextvars: Request context tracking

# 🔄 Connected Modules / Calls From:
# Used by: agroscan.main (startup), api.middleware.logging (request ids),
# shared.core.dependencies (user ids), every module via logging.getLogger(__name__)

import logging
import os
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pythonjsonlogger import jsonlogger

from agroscan.shared.config.settings import get_settings

# Context variables for request tracking
request_id_var: ContextVar[str] = ContextVar('request_id', default='')
user_id_var: ContextVar[str] = ContextVar('user_id', default='')

SERVICE_NAME = 'agroscan-api'

_logging_configured = False


class ContextFilter(logging.Filter):
    """
    Adds request ID, user ID and host information to every log record.
    """

    def __init__(self):
        super().__init__()
        self.hostname = os.uname().nodename if hasattr(os, 'uname') else 'unknown'

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get('')
        record.user_id = user_id_var.get('')
        record.hostname = self.hostname
        record.service = SERVICE_NAME
        return True


class JSONFormatter(jsonlogger.JsonFormatter):
    """
    JSON formatter for structured logging.

    Outputs logs in JSON format with consistent structure for
    log aggregation and analysis tools.
    """

    def add_fields(
        self,
        log_record: Dict[str, Any],
        record: logging.LogRecord,
        message_dict: Dict[str, Any],
    ) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record['timestamp'] = datetime.now(timezone.utc).isoformat()
        log_record['level'] = record.levelname
        log_record['logger'] = record.name
        log_record['service'] = getattr(record, 'service', SERVICE_NAME)

        # Drop empty context values to keep lines short
        for key in ('request_id', 'user_id'):
            if not log_record.get(key):
                log_record.pop(key, None)


TEXT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s'
JSON_FORMAT = '%(message)s %(module)s %(funcName)s %(lineno)d %(request_id)s %(user_id)s %(hostname)s'


def setup_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    enable_console: bool = True
) -> logging.Logger:
    """
    Setup application logging configuration.

    Args:
        log_level: Level name, defaults to LOG_LEVEL
        log_format: 'json' or 'text', defaults to LOG_FORMAT
        enable_console: Attach a stdout handler

    Returns:
        logging.Logger: The startup logger
    """
    global _logging_configured

    if _logging_configured:
        return logging.getLogger("startup")

    settings = get_settings()
    log_level = log_level or settings.LOG_LEVEL
    log_format = log_format or settings.LOG_FORMAT

    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    if log_format.lower() == 'json':
        formatter: logging.Formatter = JSONFormatter(JSON_FORMAT)
    else:
        formatter = logging.Formatter(TEXT_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if enable_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(numeric_level)
        console_handler.setFormatter(formatter)
        console_handler.addFilter(ContextFilter())
        root_logger.addHandler(console_handler)

    logging.getLogger('sqlalchemy.engine').setLevel(logging.WARNING)
    logging.getLogger('asyncio').setLevel(logging.WARNING)
    logging.getLogger('passlib').setLevel(logging.ERROR)

    _logging_configured = True
    return logging.getLogger("startup")


def log_startup_event(service_name: str, version: str, extra: Optional[Dict] = None):
    """Log application startup."""
    logging.getLogger("startup").info(
        f"{service_name} v{version} starting",
        extra={'event_type': 'startup', **(extra or {})}
    )


def log_shutdown_event(service_name: str, extra: Optional[Dict] = None):
    """Log application shutdown."""
    logging.getLogger("startup").info(
        f"{service_name} shutting down",
        extra={'event_type': 'shutdown', **(extra or {})}
    )
