# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
"""Logging configuration for sundries.

The library logs through loguru under the ``sundries`` namespace, which is
disabled on import so applications stay quiet unless they opt in with
:func:`configure_logging`.
"""
import sys
from typing import TYPE_CHECKING

from loguru import logger

from sundries.config import load_settings


if TYPE_CHECKING:
    from loguru import Record


LOGGER_NAMESPACE = "sundries"

BASE_FORMAT = "<green>{time:HH:mm:ss}</green> <level>{level: <8}</level> <cyan>{name}</cyan> {message}"


def _render_extra(extra: dict[str, object]) -> str:
    """Render structured fields as ``key=value`` pairs safe to embed in a format."""
    rendered = " ".join(f"{key}={value!r}" for key, value in extra.items())
    # Braces and angle brackets would be read as fields and colour tags
    return rendered.replace("{", "{{").replace("}", "}}").replace("<", r"\<")


def _log_format(record: "Record") -> str:
    fmt = BASE_FORMAT
    if record["extra"]:
        fmt += " <dim>" + _render_extra(record["extra"]) + "</dim>"
    fmt += "\n"
    if record["exception"]:
        fmt += "{exception}\n"
    return fmt


def configure_logging(level: str | None = None) -> None:
    """Send sundries log records to stderr.

    Removes loguru's default handler, installs a level-coloured handler and
    enables the ``sundries`` namespace.

    Args:
        level: Minimum log level to display (e.g., "DEBUG", "INFO"). Defaults
            to ``log_level`` from :func:`sundries.config.load_settings`.
    """
    if level is None:
        level = load_settings().log_level
    logger.remove()
    logger.add(sys.stderr, level=level, format=_log_format, colorize=True)
    logger.enable(LOGGER_NAMESPACE)


def disable_logging() -> None:
    """Silence the ``sundries`` namespace again."""
    logger.disable(LOGGER_NAMESPACE)
