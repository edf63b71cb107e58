"""Fixtures for end-to-end CLI tests."""

import logging

import pytest
from click.testing import CliRunner

# pylint: disable=redefined-outer-name,unused-argument


@pytest.fixture
def runner(clean_env):
    """Return a Click CliRunner with LEXISCORE_* settings cleared.

    The CLI sets logger levels globally (``-L``); they are reset afterwards so
    one test's overrides do not leak into the next.
    """
    yield CliRunner()
    for name in ("lexiscore", "click_extra"):
        logging.getLogger(name).setLevel(logging.NOTSET)
