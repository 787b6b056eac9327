"""Loguru-based structured logging configuration.

With a log file, all logs are written there as JSON lines and errors are
also appended to error.log in the same directory. Without one, only warnings
and errors go to stderr so the interactive prompts on stdout stay clean.
Stdlib logging is intercepted and funneled to loguru.
Context vars (game, db_path) from contextualize() are included at top level.
"""

import json
import logging
import os
import sys

from loguru import logger

_configured = False

# Context keys we promote to top-level JSON for traceability
_CONTEXT_KEYS = ("game", "db_path")

# Records bound with this extra key were already shown to the user
SHOWN_TO_USER = "shown_to_user"


def _serialize_with_context(record) -> str:
    """Build the JSON line for a record, with context vars at top level.

    The JSON is stashed in record["extra"]["_json"] and the returned
    template only prints that field.
    """
    extra = record.get("extra", {})
    out = {
        "time": str(record["time"]),
        "level": record["level"].name,
        "message": record["message"],
        "module": record["name"],
        "function": record["function"],
        "line": record["line"],
    }
    for key in _CONTEXT_KEYS:
        if key in extra and extra[key] is not None:
            out[key] = extra[key]
    record["extra"]["_json"] = json.dumps(out, default=str)
    return "{extra[_json]}\n"


class InterceptHandler(logging.Handler):
    """Redirect stdlib logging to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def configure_logging(
    log_file: str | None, level: str = "DEBUG", *, force: bool = False
) -> None:
    """Configure loguru sinks and intercept stdlib logging.

    Idempotent: skips if already configured.
    Use force=True to reconfigure (e.g. in tests with a different log path).
    """
    global _configured
    if _configured and not force:
        return
    _configured = True

    # Remove default loguru handler (writes DEBUG to stderr)
    logger.remove()

    if log_file:
        logger.add(
            log_file,
            level=level,
            format=_serialize_with_context,
            encoding="utf-8",
            mode="a",
        )

        error_log_file = os.path.join(os.path.dirname(log_file), "error.log")
        logger.add(
            error_log_file,
            level="ERROR",
            format=_serialize_with_context,
            encoding="utf-8",
            mode="a",
        )
    else:
        logger.add(
            sys.stderr,
            level="WARNING",
            format="<level>{level}</level>: {message}",
            filter=lambda record: not record["extra"].get(SHOWN_TO_USER),
        )

    # Intercept stdlib logging: route all root logger output to loguru
    intercept = InterceptHandler()
    logging.root.handlers = [intercept]
    logging.root.setLevel(logging.DEBUG)
