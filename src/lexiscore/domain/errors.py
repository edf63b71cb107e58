"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


# ============================================================================
#                           Rule set errors
# ============================================================================


class InvalidRuleSetError(DomainError):
    """Raised when a scoring engine is assembled from an invalid rule set."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Invalid rule set: {reason}")
        self.reason = reason


class EmptyRuleSetError(InvalidRuleSetError):
    """Raised when a scoring engine is given no rules at all."""

    def __init__(self) -> None:
        super().__init__("at least one rule is required")


class DuplicateRuleError(InvalidRuleSetError):
    """Raised when two rules in the same rule set share a name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"rule name '{name}' is used more than once")
        self.name = name


class NotARuleError(InvalidRuleSetError):
    """Raised when an item in a rule set does not implement `ScoringRule`."""

    def __init__(self, item: object) -> None:
        super().__init__(f"{item!r} is not a ScoringRule")
        self.item = item
