"""Log wiring for the drill and the content tools.

The engine logs through the standard library and content loading logs
through loguru; ``configure_logging`` sends both to the same sinks, as
plain text or one JSON object per line.
"""

import inspect
import json
import logging
import sys
from contextlib import contextmanager
from datetime import UTC, datetime
from pathlib import Path
from typing import Any, Dict, Optional, Union

from loguru import logger as loguru_logger

# Attributes every LogRecord carries; anything else came in through ``extra``
_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))
) | {"message", "asctime"}

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class JsonFormatter(logging.Formatter):
    """One JSON object per record: timestamp, level, logger, message, extra."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        extra = {
            key: value for key, value in vars(record).items() if key not in _RECORD_ATTRS
        }
        if extra:
            payload["extra"] = extra

        return json.dumps(payload, ensure_ascii=False, default=str)


class InterceptHandler(logging.Handler):
    """Hand standard library records over to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = loguru_logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Walk out of the logging module so loguru reports the real caller
        frame, depth = inspect.currentframe(), 0
        while frame and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1

        loguru_logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def _forward_to_stdlib(message) -> None:
    record = message.record
    logging.getLogger("vocabdrill.loguru").log(record["level"].no, record["message"])


def configure_logging(
    level: Union[str, int] = logging.INFO,
    log_file: Optional[Union[str, Path]] = None,
    json_format: bool = False,
    console_output: bool = True,
    use_loguru: bool = False,
) -> None:
    """Set up sinks for both logging front ends.

    Args:
        level: Minimum level, name or number
        log_file: Also write to this file (parent directories are created)
        json_format: Emit JSON lines instead of text
        console_output: Write to stderr; stdout belongs to the drill screen
        use_loguru: Let loguru own the sinks and route stdlib records into it;
            by default loguru messages are routed into the stdlib handlers

    Example:
        >>> configure_logging(level="DEBUG", json_format=True)
    """
    if isinstance(level, str):
        level = level.upper()

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(level)
    loguru_logger.remove()

    if use_loguru:
        root_logger.addHandler(InterceptHandler())
        if console_output:
            loguru_logger.add(sys.stderr, level=level, diagnose=False, serialize=json_format)
        if log_file:
            loguru_logger.add(str(log_file), level=level, serialize=json_format)
        logging.info(f"Logging through loguru at {level}")
        return

    formatter = JsonFormatter() if json_format else logging.Formatter(
        TEXT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"
    )

    handlers = []
    if console_output:
        handlers.append(logging.StreamHandler(sys.stderr))
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    loguru_logger.add(_forward_to_stdlib, level=level, format="{message}")

    logging.info(
        f"Logging at {logging.getLevelName(root_logger.level)} "
        f"({'json' if json_format else 'text'})"
    )


@contextmanager
def timed_operation(operation: str, **context):
    """Log start, completion or failure of ``operation`` with its duration.

    ``context`` is attached to every record as ``extra`` fields.

    Example:
        >>> with timed_operation("validate_content", content_dir="data") as log:
        ...     log.info("checking stages")
    """
    log = logging.getLogger(f"vocabdrill.{operation}")
    started = datetime.now(UTC)

    def elapsed_ms() -> float:
        return round((datetime.now(UTC) - started).total_seconds() * 1000, 2)

    log.info(f"Starting: {operation}", extra={"status": "started", **context})
    try:
        yield log
    except Exception as e:
        log.error(
            f"Failed: {operation}",
            extra={"status": "failed", "duration_ms": elapsed_ms(), "error": str(e)[:200], **context},
        )
        raise
    log.info(
        f"Completed: {operation}",
        extra={"status": "completed", "duration_ms": elapsed_ms(), **context},
    )
