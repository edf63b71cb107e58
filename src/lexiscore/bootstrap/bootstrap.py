"""Bootstrap the scoring engine and redactor from configuration."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from lexiscore import config
from lexiscore.adapters.redactor import Redactor
from lexiscore.domain.engine import ScoringEngine
from lexiscore.domain.rules import DEFAULT_RULES, digit_presence
from lexiscore.interfaces import redactor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppContainer:
    """A class to hold application wiring constants."""

    engine: ScoringEngine
    redactor: redactor.Redactor


def build_engine(digit_bonus: int | None = None) -> ScoringEngine:
    """Build the scoring engine, optionally with a digit presence rule appended."""
    engine = ScoringEngine(DEFAULT_RULES)
    if digit_bonus:
        logger.debug("Appending digit presence rule (bonus=%d)", digit_bonus)
        engine = engine.with_rules(digit_presence(digit_bonus))
    return engine


def bootstrap(redactor_mode: redactor.RedactorMode | None = None) -> AppContainer:
    """Assemble the application from the environment.

    Args:
        redactor_mode: Explicit redaction mode; falls back to
            `LEXISCORE_REDACTOR_MODE` when ``None``.

    Raises:
        config.InvalidSettingError: If an environment setting is malformed.
    """
    mode = redactor_mode if redactor_mode is not None else config.get_redactor_mode()
    return AppContainer(
        engine=build_engine(config.get_digit_bonus()),
        redactor=Redactor(mode),
    )
