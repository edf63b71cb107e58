"""LEXISCORE

A composable lexical scoring engine. It assigns a deterministic integer
complexity score to an arbitrary string (typically a candidate password)
by summing the contributions of an ordered, immutable set of weighted rules.
"""

from lexiscore.domain.engine import ScoringEngine, score

__all__ = ["__version__", "ScoringEngine", "score"]
__version__ = "0.1.0"
