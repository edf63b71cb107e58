"""Scoring rules.

A rule maps the full input string to an integer contribution. Rules are
immutable and hold no per-call state, so one instance can be shared by any
number of engines and callers.

Two kinds of rule cover the default scoring:

- `LengthRule` contributes one point per code point.
- `PresenceRule` contributes a fixed bonus *once* when its predicate holds.
  It never counts occurrences: ``"AB"`` and ``"A"`` earn the same
  uppercase bonus.
"""

import abc
from collections.abc import Callable
from dataclasses import dataclass

from lexiscore.domain import charclass

# pylint: disable=too-few-public-methods


class ScoringRule(abc.ABC):
    """Interface for a single weighted scoring rule."""

    name: str
    description: str

    @abc.abstractmethod
    def weight(self, text: str) -> int:
        """Return this rule's contribution for *text*.

        Args:
            text: The complete input string.

        Returns:
            A signed integer contribution. Must not raise for any ``str``.
        """


@dataclass(frozen=True)
class LengthRule(ScoringRule):
    """Contributes the number of code points in the input."""

    name: str = "length"
    description: str = "one point per character"

    def weight(self, text: str) -> int:
        return len(text)


@dataclass(frozen=True)
class PresenceRule(ScoringRule):
    """Contributes ``bonus`` once if ``predicate`` holds for the input."""

    name: str
    predicate: Callable[[str], bool]
    bonus: int
    description: str = ""

    def weight(self, text: str) -> int:
        return self.bonus if self.predicate(text) else 0


UPPERCASE_BONUS = 1
SPECIAL_BONUS = 3

LENGTH = LengthRule()
UPPERCASE_PRESENCE = PresenceRule(
    name="uppercase",
    predicate=charclass.has_uppercase,
    bonus=UPPERCASE_BONUS,
    description=f"+{UPPERCASE_BONUS} if any ASCII uppercase letter is present",
)
SPECIAL_PRESENCE = PresenceRule(
    name="special",
    predicate=charclass.has_special,
    bonus=SPECIAL_BONUS,
    description=f"+{SPECIAL_BONUS} if any non-alphanumeric character is present",
)

# Order is part of the public contract; append, never reorder.
DEFAULT_RULES: tuple[ScoringRule, ...] = (LENGTH, UPPERCASE_PRESENCE, SPECIAL_PRESENCE)


def digit_presence(bonus: int) -> PresenceRule:
    """Build an opt-in digit presence rule.

    Digits only count through length in the default rule set; this rule lets a
    caller reward them explicitly.

    Args:
        bonus: Points added once when at least one ASCII digit is present.

    Returns:
        A `PresenceRule` named ``"digit"``.
    """
    return PresenceRule(
        name="digit",
        predicate=charclass.has_digit,
        bonus=bonus,
        description=f"+{bonus} if any ASCII digit is present",
    )
