import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Optional

import structlog

from sysfetch.internal.constants import ENV_LOG_LEVEL

_LOGGING_CONFIGURED = False

DEFAULT_LOG_LEVEL = "WARNING"


def _foreign_pre_chain() -> list:
    return [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
    ]


def setup_logging(
    log_level_name: Optional[str] = None,
    log_file_path: Optional[Path] = None,
    console_output: bool = True,
):
    """
    Configure logging for sysfetch.
    - Uses structlog on top of the stdlib logging module.
    - Console logs go to stderr; stdout is reserved for the rendered output.
    - Writes to a rotating file if log_file_path is provided. Files ending in
      '.json' get JSON lines, anything else the plain console format.
    - An explicit log_level_name wins; otherwise SYSFETCH_LOG_LEVEL, then WARNING.
    """
    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    effective_log_level_name = (log_level_name or os.environ.get(ENV_LOG_LEVEL) or DEFAULT_LOG_LEVEL).upper()
    log_level = getattr(logging, effective_log_level_name, logging.WARNING)

    handlers = []

    if log_file_path:
        log_file_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file_path,
            maxBytes=1024 * 1024,  # 1 MB
            backupCount=3,
        )
        file_handler.setFormatter(structlog.stdlib.ProcessorFormatter(
            processor=structlog.processors.JSONRenderer()
            if log_file_path.name.endswith(".json")
            else structlog.dev.ConsoleRenderer(colors=False),
            foreign_pre_chain=_foreign_pre_chain(),
        ))
        handlers.append(file_handler)

    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(structlog.stdlib.ProcessorFormatter(
            processor=structlog.dev.ConsoleRenderer(),
            foreign_pre_chain=_foreign_pre_chain(),
        ))
        handlers.append(console_handler)

    if not handlers:
        handlers.append(logging.NullHandler())

    # psutil and friends stay quiet unless something is wrong
    logging.getLogger("psutil").setLevel(logging.WARNING)

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        level=log_level,
        handlers=handlers,
        force=True,
    )
    _LOGGING_CONFIGURED = True


def get_logger(name: str | None = None):
    return structlog.get_logger(name)
