"""Global pytest fixtures for LEXISCORE."""

import pytest

from lexiscore import config


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove every LEXISCORE_* setting so tests start from the defaults."""
    for name in (
        config.REDACTOR_MODE_ENV,
        config.DIGIT_BONUS_ENV,
        config.LOGGER_LEVELS_ENV,
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
