"""Decorators for command functions."""

import functools
import time
import traceback
from collections.abc import Callable

import typer

from focuscard.services.config_service import ConfigError
from focuscard.utils.exit_codes import ERROR_CONFIG, ERROR_GENERAL, get_exit_code_name
from focuscard.utils.logger import get_logger
from focuscard.utils.ui.formatters import format_error, format_info


class AppError(Exception):
    """Custom application error with exit code."""

    def __init__(self, message: str, exit_code: int = ERROR_GENERAL):
        super().__init__(message)
        self.exit_code = exit_code


def command_wrapper(func: Callable):
    """Log a command's lifetime and turn failures into clean exits.

    A config file that cannot be loaded exits with ``ERROR_CONFIG`` from any
    command; ``config reset`` is the way out.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger()
        cmd = func.__name__
        start = time.monotonic()
        logger.info("command started: %s", cmd)
        try:
            result = func(*args, **kwargs)
            logger.info("command completed: %s (%.3fs)", cmd, time.monotonic() - start)
            return result

        except AppError as e:
            logger.error(
                "command failed: %s (%.3fs) %s - %s",
                cmd,
                time.monotonic() - start,
                get_exit_code_name(e.exit_code),
                e,
            )
            format_error(str(e))
            raise typer.Exit(code=e.exit_code) from e

        except typer.Exit:
            raise

        except ConfigError as e:
            logger.error(
                "command failed: %s (%.3fs) %s - %s",
                cmd,
                time.monotonic() - start,
                get_exit_code_name(ERROR_CONFIG),
                e,
            )
            format_error(str(e))
            format_info("Run 'focuscard config reset' to restore defaults")
            raise typer.Exit(code=ERROR_CONFIG) from e

        except Exception as e:
            logger.error(
                "command failed: %s (%.3fs) %s - %s\n%s",
                cmd,
                time.monotonic() - start,
                get_exit_code_name(ERROR_GENERAL),
                e,
                traceback.format_exc(),
            )
            format_error(f"An unexpected error occurred: {e}")
            raise typer.Exit(code=ERROR_GENERAL) from e

    return wrapper
