"""Character-masking redactor for scored inputs.

Lenient mode keeps the first character so a user can tell inputs apart in a
batch; strict mode replaces the input with a fixed placeholder so not even
the length leaks.
"""

from lexiscore.interfaces import redactor
from lexiscore.interfaces.redactor import RedactorMode

# pylint: disable=too-few-public-methods

PLACEHOLDER = "***"
MASK_CHARACTER = "*"


class Redactor(redactor.Redactor):
    """Redactor implementation that masks characters."""

    def __init__(self, mode: RedactorMode = RedactorMode.LENIENT) -> None:
        self._mode = mode

    def mask(self, raw: str) -> str:
        if not raw or self._mode == RedactorMode.OFF:
            return raw
        if self._mode == RedactorMode.STRICT:
            return PLACEHOLDER
        return raw[0] + MASK_CHARACTER * (len(raw) - 1)
