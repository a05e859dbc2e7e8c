"""
Logging configuration for the Swing Notes API.
"""
import json
import logging
import logging.config
import sys
import time
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

from ..config import Settings

# attributes every LogRecord has; anything else came in through ``extra``
_RECORD_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__.keys()
) | {"message", "asctime", "taskName"}


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_entry: Dict[str, Any] = {
            'timestamp': datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
        }

        # Add exception info if present
        if record.exc_info:
            log_entry['exception'] = {
                'type': record.exc_info[0].__name__ if record.exc_info[0] else None,
                'message': str(record.exc_info[1]) if record.exc_info[1] else None,
                'traceback': self.formatException(record.exc_info),
            }

        extra = {k: v for k, v in record.__dict__.items() if k not in _RECORD_ATTRS}
        if extra:
            log_entry['extra'] = extra

        return json.dumps(log_entry, ensure_ascii=False, default=str)


class ColoredFormatter(logging.Formatter):
    """Colored formatter for console output."""

    COLORS = {
        'DEBUG': '\033[36m',    # Cyan
        'INFO': '\033[32m',     # Green
        'WARNING': '\033[33m',  # Yellow
        'ERROR': '\033[31m',    # Red
        'CRITICAL': '\033[35m', # Magenta
    }
    RESET = '\033[0m'
    BOLD = '\033[1m'

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with colors."""
        # work on a copy, other handlers share the record
        record = logging.makeLogRecord(record.__dict__)
        color = self.COLORS.get(record.levelname, '')
        record.levelname = f"{color}{self.BOLD}{record.levelname}{self.RESET}"
        record.name = f"\033[90m{record.name}{self.RESET}"
        return super().format(record)


def get_log_level(level_str: Optional[str]) -> int:
    """Map a level name to its logging constant, INFO when unknown."""
    levels = {
        'CRITICAL': logging.CRITICAL,
        'ERROR': logging.ERROR,
        'WARNING': logging.WARNING,
        'INFO': logging.INFO,
        'DEBUG': logging.DEBUG,
    }
    return levels.get((level_str or '').upper(), logging.INFO)


def build_logging_config(settings: Settings) -> Dict[str, Any]:
    """Build the dictConfig for the given settings."""
    level = get_log_level(settings.log_level)
    app_handlers = ['console']

    handlers: Dict[str, Any] = {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'colored' if settings.debug else 'json',
            'stream': sys.stdout,
            'level': level,
        },
    }

    if settings.log_file:
        log_path = Path(settings.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers['file'] = {
            'class': 'logging.handlers.RotatingFileHandler',
            'filename': str(log_path),
            'maxBytes': 10_000_000,  # 10MB
            'backupCount': 5,
            'formatter': 'file',
            'level': 'DEBUG',
        }
        app_handlers.append('file')

    return {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'json': {
                '()': JSONFormatter,
            },
            'colored': {
                '()': ColoredFormatter,
                'format': '%(asctime)s | %(levelname)s | %(name)s | %(message)s',
                'datefmt': '%Y-%m-%d %H:%M:%S',
            },
            'file': {
                'format': '%(asctime)s | %(levelname)-8s | %(name)-25s | %(funcName)-20s:%(lineno)-4d | %(message)s',
                'datefmt': '%Y-%m-%d %H:%M:%S',
            },
        },
        'handlers': handlers,
        'loggers': {
            'swingnotes': {
                'handlers': app_handlers,
                'level': level,
                'propagate': False,
            },
            'uvicorn': {
                'handlers': ['console'],
                'level': 'INFO',
                'propagate': False,
            },
            'sqlalchemy.engine': {
                'handlers': ['console'],
                'level': 'INFO' if settings.database_echo else 'WARNING',
                'propagate': False,
            },
            'alembic': {
                'handlers': ['console'],
                'level': 'INFO',
                'propagate': False,
            },
        },
    }


def setup_logging(settings: Settings) -> None:
    """Apply the logging configuration."""
    logging.config.dictConfig(build_logging_config(settings))

    logger = get_logger('logging')
    logger.info("Logging system initialized", extra={
        'log_level': settings.log_level,
        'debug': settings.debug,
        'environment': settings.environment,
    })


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the application namespace."""
    return logging.getLogger(f"swingnotes.{name}")


class LoggingMiddleware:
    """ASGI middleware for request logging."""

    def __init__(self, app, logger_name: str = "http"):
        self.app = app
        self.logger = get_logger(logger_name)

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        start_time = time.perf_counter()
        request_id = uuid.uuid4().hex[:12]

        # never log headers, Authorization carries the bearer token
        self.logger.info("HTTP Request", extra={
            'request_id': request_id,
            'method': scope['method'],
            'path': scope['path'],
            'client_ip': scope['client'][0] if scope.get('client') else 'unknown',
        })

        async def send_wrapper(message):
            if message["type"] == "http.response.start":
                duration = (time.perf_counter() - start_time) * 1000
                self.logger.info("HTTP Response", extra={
                    'request_id': request_id,
                    'status_code': message.get('status', 0),
                    'duration_ms': round(duration, 2),
                    'method': scope['method'],
                    'path': scope['path'],
                })
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        except Exception as exc:
            duration = (time.perf_counter() - start_time) * 1000
            self.logger.error("HTTP Request Failed", extra={
                'request_id': request_id,
                'method': scope['method'],
                'path': scope['path'],
                'duration_ms': round(duration, 2),
                'exception_type': type(exc).__name__,
            })
            raise
