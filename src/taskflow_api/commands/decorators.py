"""Decorators for command functions."""

import asyncio
import functools
import inspect
import time
import traceback
from collections.abc import Callable

import httpx
import typer

from taskflow_api.api.client import APIError
from taskflow_api.ui.formatters import format_error
from taskflow_api.utils.exit_codes import (
    ERROR_GENERAL,
    ERROR_NETWORK,
    exit_code_for_status,
)
from taskflow_api.utils.logger import get_logger


def command_wrapper(func: Callable):
    """Run a command (sync or async) with logging and uniform error exits."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger()
        cmd = func.__name__
        start = time.monotonic()
        logger.info("command started: %s", cmd)
        try:
            if inspect.iscoroutinefunction(func):
                result = asyncio.run(func(*args, **kwargs))
            else:
                result = func(*args, **kwargs)

            logger.info(
                "command completed: %s (%.3fs)", cmd, time.monotonic() - start
            )
            return result

        except APIError as e:
            logger.error(
                "command failed: %s (%.3fs) - HTTP %s %s",
                cmd,
                time.monotonic() - start,
                e.status_code,
                str(e),
            )
            format_error(str(e))
            raise typer.Exit(code=exit_code_for_status(e.status_code)) from e

        except httpx.RequestError as e:
            logger.error(
                "command failed: %s (%.3fs) - %s", cmd, time.monotonic() - start, e
            )
            format_error(f"Could not reach the TaskFlow server: {e}")
            raise typer.Exit(code=ERROR_NETWORK) from e

        except typer.Exit:
            raise

        except Exception as e:
            logger.error(
                "command failed: %s (%.3fs) - %s\n%s",
                cmd,
                time.monotonic() - start,
                str(e),
                traceback.format_exc(),
            )
            format_error(f"An unexpected error occurred: {str(e)}")
            raise typer.Exit(code=ERROR_GENERAL) from e

    return wrapper
