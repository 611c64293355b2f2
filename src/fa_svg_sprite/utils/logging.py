"""Logging configuration module for the SVG sprite generator.

Log records go to stderr so the tool can be combined with commands reading
its stdout. Text output is colored on the console only; log files always get
plain text or JSON lines.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler

import structlog
from structlog.stdlib import ProcessorFormatter

from fa_svg_sprite.models.config import LoggingConfig
from fa_svg_sprite.utils import file_utils
from fa_svg_sprite.utils.early_error_handler import handle_startup_error

BYTES_PER_MEGABYTE = 1024 * 1024

# Processors applied to records from plain ``logging`` loggers
PRE_CHAIN: list[structlog.typing.Processor] = [
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
]


def _make_formatter(log_format: str, colors: bool) -> ProcessorFormatter:
    renderer = (
        structlog.processors.JSONRenderer()
        if log_format.lower() == "json"
        else structlog.dev.ConsoleRenderer(colors=colors)
    )
    return ProcessorFormatter(processor=renderer, foreign_pre_chain=PRE_CHAIN)


def setup_logging(config: LoggingConfig, name: str) -> logging.Logger:
    """Set up logging with the specified configuration.

    Args:
        config: Logging configuration.
        name: Logger name.

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger(name)
    logger.handlers = []

    level = getattr(logging, config.level.upper(), logging.INFO)
    logger.setLevel(level)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *PRE_CHAIN,
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        cache_logger_on_first_use=True,
    )

    if config.file:
        try:
            log_path = file_utils.normalize_path(config.file)
            file_utils.ensure_dir_exists(log_path.parent)

            file_handler = RotatingFileHandler(
                log_path,
                maxBytes=config.max_size_mb * BYTES_PER_MEGABYTE,
                backupCount=config.backup_count,
                encoding="utf-8",
            )
            file_handler.setFormatter(_make_formatter(config.format, colors=False))
            file_handler.setLevel(level)
            logger.addHandler(file_handler)
            return logger
        except OSError as e:
            error_msg = f"Failed to set up file logging: {e}"
            handle_startup_error("LOGGING_FILE_ERROR", error_msg, {"log_file": str(config.file)})
            _add_console_handler(logger, config.format, level)
            logger.error(error_msg)
            return logger

    _add_console_handler(logger, config.format, level)
    return logger


def _add_console_handler(logger: logging.Logger, log_format: str, level: int) -> None:
    """Attach a console handler writing to stderr."""
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(_make_formatter(log_format, colors=sys.stderr.isatty()))
    console_handler.setLevel(level)
    logger.addHandler(console_handler)
