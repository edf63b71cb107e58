"""Scoring engine.

The engine owns an immutable, ordered tuple of rules and reduces their
contributions to a single non-negative integer. The rule set is validated once
at construction; scoring itself is total over ``str`` and never raises.

Example:
    ```py
    engine = ScoringEngine()
    engine.score("Password!")  # 13
    engine.with_rules(digit_presence(2)).score("Password1")  # 12
    ```
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from lexiscore.domain.errors import DuplicateRuleError, EmptyRuleSetError, NotARuleError
from lexiscore.domain.rules import DEFAULT_RULES, ScoringRule
from lexiscore.domain.value_objects import RuleContribution, ScoreBreakdown

logger = logging.getLogger(__name__)


def _validate(rules: tuple[ScoringRule, ...]) -> None:
    """Check a rule set before an engine accepts it.

    Args:
        rules: The rules in evaluation order.

    Raises:
        EmptyRuleSetError: If ``rules`` is empty.
        NotARuleError: If an item does not implement `ScoringRule`.
        DuplicateRuleError: If two rules share a name.
    """
    if not rules:
        raise EmptyRuleSetError
    seen: set[str] = set()
    for rule in rules:
        if not isinstance(rule, ScoringRule):
            raise NotARuleError(rule)
        if rule.name in seen:
            raise DuplicateRuleError(rule.name)
        seen.add(rule.name)


class ScoringEngine:
    """Apply an ordered set of rules to strings.

    Args:
        rules: Rules to evaluate, in order. Defaults to `DEFAULT_RULES`.

    Raises:
        InvalidRuleSetError: If the rule set is empty, contains a non-rule,
            or repeats a rule name.
    """

    def __init__(self, rules: Iterable[ScoringRule] = DEFAULT_RULES) -> None:
        self._rules = tuple(rules)
        _validate(self._rules)
        logger.debug("Scoring engine assembled with rules: %s", self.rule_names)

    @property
    def rules(self) -> tuple[ScoringRule, ...]:
        """The rules this engine evaluates, in order."""
        return self._rules

    @property
    def rule_names(self) -> list[str]:
        """Names of the rules, in evaluation order."""
        return [rule.name for rule in self._rules]

    def with_rules(self, *extra: ScoringRule) -> ScoringEngine:
        """Return a new engine with *extra* appended to this engine's rules."""
        return ScoringEngine(self._rules + extra)

    def breakdown(self, text: str) -> ScoreBreakdown:
        """Score *text* and report each rule's contribution.

        Args:
            text: Any string, including the empty string.

        Returns:
            The per-rule contributions in rule order and the clamped total.
        """
        contributions = tuple(
            RuleContribution(rule=rule.name, points=rule.weight(text))
            for rule in self._rules
        )
        total = max(0, sum(c.points for c in contributions))
        return ScoreBreakdown(total=total, contributions=contributions)

    def score(self, text: str) -> int:
        """Return the complexity score of *text*.

        Args:
            text: Any string, including the empty string.

        Returns:
            A non-negative integer; ``0`` for the empty string.
        """
        return max(0, sum(rule.weight(text) for rule in self._rules))

    def __repr__(self) -> str:
        return f"ScoringEngine(rules={self.rule_names!r})"


_DEFAULT_ENGINE = ScoringEngine()


def score(text: str) -> int:
    """Score *text* with the default rule set."""
    return _DEFAULT_ENGINE.score(text)
