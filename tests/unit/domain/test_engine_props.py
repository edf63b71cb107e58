"""Hypothesis property tests for the default scoring engine.

These properties exercise the invariants of the score:

- **Non-negative and total**: every string scores a non-negative integer and
  never raises.
- **Pure lowercase**: a lowercase ASCII string scores exactly its length.
- **Monotonic length**: prefixes of a single-class string never outscore it.
- **Presence, not count**: an appended uppercase letter adds exactly one
  bonus point on top of length, and only when no uppercase letter was present;
  a second special character adds length only.
- **Breakdown coherence**: `breakdown(s).total == score(s)`.
"""

import string

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from lexiscore import ScoringEngine, score

pytestmark = [pytest.mark.property]

# pylint: disable=magic-value-comparison

_PROPSET = settings(max_examples=200, deadline=None)

lowercase = st.text(alphabet=string.ascii_lowercase, max_size=64)
uppercase_letter = st.sampled_from(string.ascii_uppercase)
alphanumeric = st.text(alphabet=string.ascii_letters + string.digits, max_size=64)
special_character = st.characters().filter(
    lambda c: c not in string.ascii_letters + string.digits
)


@_PROPSET
@given(text=st.text())
def test_score_is_non_negative_int(text: str):
    """Any string scores a non-negative int."""
    result = score(text)
    assert isinstance(result, int)
    assert result >= 0


@_PROPSET
@given(text=st.text())
def test_score_is_deterministic(text: str):
    """Scoring twice, or with a fresh engine, gives the same result."""
    assert score(text) == score(text) == ScoringEngine().score(text)


@_PROPSET
@given(text=lowercase)
def test_lowercase_scores_its_length(text: str):
    """Lowercase ASCII strings earn no bonus."""
    assert score(text) == len(text)


@_PROPSET
@given(text=lowercase, cut=st.integers(min_value=0, max_value=64))
def test_prefix_never_outscores_string(text: str, cut: int):
    """Within one character class the score is non-decreasing in length."""
    assert score(text[:cut]) <= score(text)


@_PROPSET
@given(text=lowercase, letter=uppercase_letter)
def test_first_uppercase_adds_length_and_bonus(text: str, letter: str):
    """Appending the first uppercase letter adds exactly two points."""
    assert score(text + letter) == score(text) + 2


@_PROPSET
@given(text=alphanumeric, letter=uppercase_letter)
def test_further_uppercase_adds_length_only(text: str, letter: str):
    """Once an uppercase letter is present, another adds only its length."""
    seeded = "A" + text
    assert score(seeded + letter) == score(seeded) + 1


@_PROPSET
@given(text=alphanumeric, first=special_character, second=special_character)
def test_second_special_adds_length_only(text: str, first: str, second: str):
    """The special-character bonus does not re-trigger."""
    once = text + first
    assert score(once + second) == score(once) + 1
    assert score(once) == score(text) + 4


@_PROPSET
@given(text=st.text())
def test_breakdown_total_matches_score(text: str):
    """The diagnostic breakdown sums to the public score."""
    engine = ScoringEngine()
    result = engine.breakdown(text)
    assert result.total == engine.score(text)
    assert sum(c.points for c in result.contributions) == result.total
