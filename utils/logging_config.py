"""
Structured logging configuration.
"""
import logging
import sys
import json
from datetime import datetime, timezone
from typing import Optional, TextIO, Union


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno
        }

        context = getattr(record, 'context', None)
        if context:
            log_data['context'] = context

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


def setup_logging(
    level: Union[int, str] = logging.INFO,
    json_format: Optional[bool] = None,
    stream: Optional[TextIO] = None
) -> logging.Logger:
    """
    Setup application logging.

    Args:
        level: Logging level, as an int or a name such as "DEBUG"
        json_format: Force JSON (True) or plain (False) output; by default
            JSON is used whenever the stream is not a terminal
        stream: Output stream, stdout by default

    Returns:
        Configured root logger
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved

    logger = logging.getLogger()
    logger.setLevel(level)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    if stream is None:
        stream = sys.stdout

    console_handler = logging.StreamHandler(stream)
    console_handler.setLevel(level)

    if json_format is None:
        json_format = not (hasattr(stream, "isatty") and stream.isatty())

    if json_format:
        formatter = JSONFormatter()
    else:
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    return logger
