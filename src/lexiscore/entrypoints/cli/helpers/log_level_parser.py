"""Helpers for parsing logger-level CLI options.

Parses options of the form NAME=LEVEL, given either repeatedly on the command
line or as one comma/space-separated string from `LEXISCORE_LOGGER_LEVELS`.
"""

import logging
import re

import click

# click-extra logs its own setup chatter at INFO/DEBUG
DEFAULT_LIB_LEVELS = {"click_extra": logging.WARNING}


def _normalize_items(value: str | list[str] | tuple[str, ...] | None) -> list[str]:
    """Normalize an option value into a flat list of NAME=LEVEL items.

    Splits on commas and whitespace and drops empty fragments. Accepts a
    single string (as read from `LEXISCORE_LOGGER_LEVELS`) or a sequence of
    strings (as provided by the repeatable ``-L`` option).

    Args:
        value: The raw option value from Click; ``None`` when unset.

    Returns:
        list[str]: Non-empty item strings, in the order given.
    """
    if value is None:
        return []
    chunks = [value] if isinstance(value, str) else list(value)
    items: list[str] = []
    for chunk in chunks:
        items.extend(s for s in re.split(r"[,\s]+", chunk) if s)
    return items


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...] | None,
) -> dict[str, int]:
    """Click callback that parses NAME=LEVEL pairs into a name->level dict.

    Starts from DEFAULT_LIB_LEVELS; later items override earlier ones for the
    same logger. Level names are case-insensitive.

    Args:
        ctx: Click context (passed by Click, not used here).
        param: Click parameter (passed by Click, not used here).
        value: The raw option value(s), or ``None`` when unset.

    Returns:
        dict[str, int]: Mapping of logger names to numeric logging levels.

    Raises:
        click.BadParameter: If an item is not NAME=LEVEL or LEVEL is unknown.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in _normalize_items(value):
        name, sep, level_str = item.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
        lvl = logging.getLevelName(level_str.strip().upper())
        if not isinstance(lvl, int):
            raise click.BadParameter(f"Invalid log level: {level_str}")
        levels[name.strip()] = lvl
    return levels
