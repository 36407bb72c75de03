from contextvars import ContextVar
from datetime import datetime
from enum import StrEnum
import logging
import os
import sys

from loguru import logger as loguru_logger

from room_reservation.platform.config.core_setting import settings
from room_reservation.platform.constant.path import LOG_DIR
from room_reservation.platform.logging.service_context import get_service_context


# Use test log directory if in test environment
LOG_DIR = os.environ.get('TEST_LOG_DIR', LOG_DIR)


# Constants and shared variables for Logger.io
SENSITIVE_KEYWORDS = {
    'password',
}

# Visual marker for nested call depth
DEPTH_LINE = '│'

chain_start_time_var: ContextVar[float] = ContextVar('first_time_var', default=0)
call_depth_var: ContextVar[int] = ContextVar('call_depth_var', default=0)


class ExtraField(StrEnum):
    SERVICE_CONTEXT = 'service_context'
    CHAIN_START_TIME = 'chain_start_time'
    CALL_TARGET = 'call_target'


def _parse_http_status_level(message: str) -> str | None:
    """
    Parse HTTP status code from uvicorn access logs and return appropriate log level.

    Format: '127.0.0.1:51234 - "GET /api/reservation/1 HTTP/1.1" 404'
    """
    if ' HTTP/' not in message:
        return None

    try:
        parts = message.split('"')
        if len(parts) < 3:
            return None

        status_code = int(parts[2].strip().split()[0])

        if status_code >= 500:
            return 'CRITICAL'
        if status_code >= 400:
            return 'ERROR'
        if status_code >= 300:
            return 'WARNING'
        if status_code >= 200:
            return 'SUCCESS'
        return 'INFO'

    except (ValueError, IndexError):
        return None


class InterceptHandler(logging.Handler):
    def emit(self, record: logging.LogRecord) -> None:
        message = record.getMessage()

        # Block asyncio selector debug messages
        if record.levelno <= logging.DEBUG and 'Using selector:' in message:
            return

        # aiosqlite logs every cursor operation at DEBUG
        if record.name.startswith('aiosqlite') and record.levelno <= logging.DEBUG:
            return

        level = _parse_http_status_level(message)
        if level is None:
            # Get corresponding Loguru level if it exists
            try:
                level = loguru_logger.level(record.levelname).name
            except ValueError:
                level = record.levelno

        # Find caller from where originated the logged message
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back  # type: ignore
            depth += 1

        custom_logger.opt(depth=depth, exception=record.exc_info).log(level, message)


# Log format shared by Logger.io and Logger.base
io_log_format = ' | '.join(
    (
        '<lk>{time:YYYY-MM-DD HH:mm:ss.SSS}</>',
        f'<c>{{extra[{ExtraField.SERVICE_CONTEXT}]}}</>',
        '<lvl>{level:<8}</>',
        f'<c>{{file}}::{{function}}:{{line}}</>=><y>{{extra[{ExtraField.CALL_TARGET}]}}</>',
        '{message}',
        '<lk>{elapsed}</>',
        f'<lk>{{extra[{ExtraField.CHAIN_START_TIME}]:<18}}</>',
    )
)


# Configure logger
loguru_logger.remove()  # Remove default handler to avoid duplicate output and use custom format
custom_logger = loguru_logger.bind(
    **{
        ExtraField.SERVICE_CONTEXT: get_service_context(),
        ExtraField.CHAIN_START_TIME: '',
        ExtraField.CALL_TARGET: '',
    }
)

# Determine minimum log level based on DEBUG setting
min_log_level = 'DEBUG' if settings.DEBUG else 'INFO'

# Add console output with custom format
custom_logger.add(sys.stdout, format=io_log_format, level=min_log_level)

# File output only in DEBUG mode; production ships stdout to the log collector
if settings.DEBUG:
    log_filename = (
        f'test_{datetime.now().strftime("%Y-%m-%d_%H")}.log'
        if os.environ.get('TEST_LOG_DIR')
        else f'{datetime.now().strftime("%Y-%m-%d_%H")}.log'
    )
    custom_logger.add(
        f'{LOG_DIR}/{log_filename}',
        format=io_log_format,
        rotation='1 hour',
        retention='7 days',
        compression='gz',
        enqueue=True,
        level=min_log_level,
    )

# Intercept standard logging
logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)

for logger_name in [
    'uvicorn',
    'uvicorn.error',
    'uvicorn.access',
    'fastapi',
    'sqlalchemy.engine',
    'sqlalchemy.pool',
]:
    logging_logger = logging.getLogger(logger_name)
    logging_logger.handlers = [InterceptHandler()]
    logging_logger.propagate = False
