"""Logging helpers used by the LEXISCORE CLI.

This module configures console logging with Rich and provides a filter that
annotates third-party log records with a short prefix used by console
formatting. Scored inputs are never passed to these helpers unredacted.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from importlib.metadata import version
from typing import TYPE_CHECKING, Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "lexiscore"


class ThirdPartyPrefixFilter(logging.Filter):
    """Annotate third-party log records with a short prefix.

    For records whose logger name does not start with the project prefix,
    sets `record.prefix` to a short bracketed token like "[click_extra]". For
    project loggers the prefix is set to an empty string. The filter always
    returns True to allow the record to be processed.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not record.name.startswith(PROJECT_PREFIX):
            # e.g. "click_extra.colorize" -> "[click_extra]"
            record.prefix = f"[{record.name.split('.')[0]}]"
        else:
            record.prefix = ""
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Configure and return a RichHandler for console output.

    The handler writes to stderr so stdout stays free for scores. In debug
    mode the handler is set to DEBUG and includes source file/line
    information; otherwise a short third-party prefix is applied.

    Args:
        level: Minimum level for console output (overridden to DEBUG in debug_mode).
        debug_mode: When True, enable debug formatting (show_path, timestamps).
        color: Enable color output when True.

    Returns:
        RichHandler: Configured handler suitable to attach to the root logger.
    """

    # Keep consistent with click-extra's --color / --no-color option
    ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]
    color_system: ColorSystem | None = "auto" if color else None

    console = Console(color_system=color_system, stderr=True)

    if debug_mode:
        level = logging.DEBUG

    handler = RichHandler(
        level=level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )

    fmt = (
        "%(prefix)s %(message)s"
        if not debug_mode
        else "%(asctime)s %(name)s: %(message)s"
    )
    handler.setFormatter(logging.Formatter(fmt=fmt))

    if not debug_mode:
        handler.addFilter(ThirdPartyPrefixFilter())

    return handler


def log_startup(
    logger: Logger,
    *,
    app_version: str,
    level: int,
    handlers: list[logging.Handler],
    logger_levels: dict[str, int],
    redactor_mode: str,
    rule_names: list[str],
) -> None:
    """Log human-friendly startup info and detailed diagnostics.

    Emits an informational one-line summary with the application version,
    console level and redaction mode. Additional DEBUG-level diagnostics cover
    Python and platform versions, process id, Click version, the active
    handler types, the active rules and any per-logger overrides.

    Args:
        logger: Logger used to emit startup messages.
        app_version: Application version string to display.
        level: Effective console logging level (numeric).
        handlers: Active logging handlers attached to the root logger.
        logger_levels: Mapping of logger names to their configured numeric levels.
        redactor_mode: Active redaction mode name.
        rule_names: Names of the scoring rules, in evaluation order.
    """

    logger.info(
        "LEXISCORE %s (console=%s, redaction=%s)",
        app_version,
        logging.getLevelName(level),
        redactor_mode,
    )

    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s", os.getpid())
    logger.debug("Click: %s", version("click"))
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    logger.debug("Rules: %s", rule_names)
    if logger_levels:
        logger.debug(
            "Per-logger overrides: %s",
            {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()},
        )
    else:
        logger.debug("Per-logger overrides: <none>")
