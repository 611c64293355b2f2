"""Error reporting for the command line tool before logging is configured.

Logging settings live in the configuration file, so a configuration that
cannot be loaded is reported directly on stderr.
"""

import sys
from datetime import datetime
from pathlib import Path
from typing import Any

from fa_svg_sprite.exceptions import ConfigurationError


def handle_startup_error(
    error_type: str, message: str, details: dict[str, Any] | None = None
) -> None:
    """Write a startup error and its details to stderr.

    Args:
        error_type: Type of error (e.g., "CONFIG_ERROR")
        message: Main error message
        details: Optional dictionary of additional error details
    """
    timestamp = datetime.now().isoformat(timespec="seconds")

    sys.stderr.write(f"\n[{timestamp}] {error_type}: {message}\n")

    if details:
        sys.stderr.write("Details:\n")
        for key, value in details.items():
            sys.stderr.write(f"  {key}: {value}\n")

    sys.stderr.flush()


def handle_config_error(error: ConfigurationError, config_path: Path) -> None:
    """Report a configuration file that could not be loaded.

    Args:
        error: The configuration error.
        config_path: Configuration file passed to the tool.
    """
    details = {"config": str(config_path), **error.details}
    details.pop("path", None)
    handle_startup_error("CONFIG_ERROR", error.message, details)
    sys.stderr.write("Pass another configuration file with --config PATH\n")
    sys.stderr.flush()


def handle_keyboard_interrupt() -> None:
    """Report that sprite generation was cancelled."""
    sys.stderr.write("\n\nSprite generation cancelled by user (Ctrl+C)\n")
    sys.stderr.flush()
