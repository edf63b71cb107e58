"""Configuration utilities for LEXISCORE.

This module centralizes the environment variables that tune the application
and the helpers that read and validate them.
"""

import os

from lexiscore.interfaces.redactor import RedactorMode

REDACTOR_MODE_ENV = "LEXISCORE_REDACTOR_MODE"  # pragma: no mutate
DIGIT_BONUS_ENV = "LEXISCORE_DIGIT_BONUS"  # pragma: no mutate
LOGGER_LEVELS_ENV = "LEXISCORE_LOGGER_LEVELS"  # pragma: no mutate


class InvalidSettingError(Exception):
    """Raised when an environment setting holds an unusable value."""

    def __init__(self, name: str, value: str, reason: str) -> None:
        super().__init__(f"{name}={value!r} is invalid: {reason}")
        self.name = name
        self.value = value
        self.reason = reason


def get_redactor_mode() -> RedactorMode:
    """Get the redaction mode from the environment.

    Returns:
        The mode named by `LEXISCORE_REDACTOR_MODE` (case-insensitive), or
        `RedactorMode.LENIENT` when unset or empty.

    Raises:
        InvalidSettingError: If the value is not a known mode.
    """
    if not (raw := os.environ.get(REDACTOR_MODE_ENV, "").strip()):
        return RedactorMode.LENIENT
    try:
        return RedactorMode(raw.lower())
    except ValueError as e:
        choices = ", ".join(m.value for m in RedactorMode)
        raise InvalidSettingError(
            REDACTOR_MODE_ENV, raw, f"expected one of {choices}"
        ) from e


def get_digit_bonus() -> int | None:
    """Get the optional digit presence bonus from the environment.

    Returns:
        The bonus from `LEXISCORE_DIGIT_BONUS`, or ``None`` when unset, empty
        or ``0`` (no digit rule).

    Raises:
        InvalidSettingError: If the value is not a non-negative integer.
    """
    if not (raw := os.environ.get(DIGIT_BONUS_ENV, "").strip()):
        return None
    try:
        bonus = int(raw)
    except ValueError as e:
        raise InvalidSettingError(DIGIT_BONUS_ENV, raw, "expected an integer") from e
    if bonus < 0:
        raise InvalidSettingError(DIGIT_BONUS_ENV, raw, "must not be negative")
    return bonus or None
