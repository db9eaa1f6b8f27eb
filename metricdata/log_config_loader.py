import logging
import sys
from typing import Any

import orjson

from metricdata.config import Settings

PACKAGE_LOGGER = 'metricdata'

# Attributes every LogRecord carries; anything else came in through ``extra``.
_RECORD_FIELDS = frozenset(logging.makeLogRecord({}).__dict__) | {'message', 'asctime'}


class MetricDataFormatter(logging.Formatter):
    """Renders package records as JSON or text, keeping ``extra`` context.

    The data model only attaches small counters (``resource_metrics``), so
    extras are rendered as-is.
    """

    def __init__(self, log_format: str, service_name: str, version: str) -> None:
        super().__init__()
        self.as_json = log_format.lower() == 'json'
        self.service_name = service_name
        self.version = version

    @staticmethod
    def extra_fields(record: logging.LogRecord) -> dict[str, Any]:
        return {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RECORD_FIELDS and not key.startswith('_')
        }

    def format(self, record: logging.LogRecord) -> str:
        extra = self.extra_fields(record)
        if self.as_json:
            entry: dict[str, Any] = {
                'timestamp': self.formatTime(record),
                'level': record.levelname,
                'service': self.service_name,
                'version': self.version,
                'logger': record.name,
                'message': record.getMessage(),
                **extra,
            }
            if record.exc_info:
                entry['exception'] = self.formatException(record.exc_info)
            return orjson.dumps(entry, default=str).decode('utf-8')

        context = ' '.join(f'[{k}={v}]' for k, v in extra.items())
        line = f'{record.levelname} {record.name}: {record.getMessage()} {context}'.rstrip()
        if record.exc_info:
            line += f'\n{self.formatException(record.exc_info)}'
        return line


def setup_logging(
    service_name: str,
    level: str,
    log_format: str,
    version: str,
) -> logging.Logger:
    """Route the package's own logger to stdout; host loggers stay untouched.

    Calling this again replaces only the handler installed by a previous call.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in logger.handlers[:]:
        if isinstance(handler.formatter, MetricDataFormatter):
            logger.removeHandler(handler)

    log_level = getattr(logging, level.upper(), logging.INFO)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(MetricDataFormatter(log_format, service_name, version))
    handler.setLevel(log_level)

    logger.addHandler(handler)
    logger.setLevel(log_level)
    # records stop at the package handler
    logger.propagate = False
    return logger


def setup_logging_from_settings(settings: Settings | None = None) -> logging.Logger:
    settings = settings or Settings()
    return setup_logging(
        service_name=settings.SERVICE_NAME,
        level=settings.LOG_LEVEL,
        log_format=settings.LOG_FORMAT,
        version=settings.SERVICE_VERSION,
    )
