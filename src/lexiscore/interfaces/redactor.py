"""Interfaces for redacting scored inputs.

Strings handed to the scoring engine are usually secrets. This module defines
the Redactor interface and the RedactorMode enumeration used by adapters to
turn an input into a display-safe form before it is printed or logged.
"""

import abc
from enum import Enum

# pylint: disable=too-few-public-methods


class RedactorMode(Enum):
    """Enumeration for redactor modes.

    Modes:
    - LENIENT: keep the first character, mask the rest.
    - STRICT: replace the whole input with a fixed placeholder (hides length).
    - OFF: show the input verbatim.
    """

    LENIENT = "lenient"
    STRICT = "strict"
    OFF = "off"


class Redactor(abc.ABC):
    """Interface for masking scored inputs."""

    _mode: RedactorMode

    @abc.abstractmethod
    def mask(self, raw: str) -> str:
        """Return a display-safe version of a scored input.

        Args:
            raw: The raw input string.

        Returns:
            The input with sensitive characters masked according to the mode.
        """

    @property
    def mode(self) -> RedactorMode:
        """Return the redaction mode."""
        return self._mode
