"""Module including value objects used across the domain layer."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RuleContribution:
    """Points a single rule contributed to a score."""

    rule: str
    points: int


@dataclass(frozen=True)
class ScoreBreakdown:
    """Value object describing how a score was reached.

    ``contributions`` follow the engine's rule order. ``total`` is the sum of
    the contributions, clamped to zero.
    """

    total: int
    contributions: tuple[RuleContribution, ...]

    def as_dict(self) -> dict[str, int]:
        """Return the contributions as an ordered ``{rule: points}`` mapping."""
        return {c.rule: c.points for c in self.contributions}
