"""Bootstrap (composition root) for LEXISCORE.

Assembles the application at runtime: reads configuration, builds the scoring
engine with its rule set and wires the redactor used for display.

Import rules:
- Entry points import *this* package (not adapters/interfaces/domain wiring).
- This package may import: `lexiscore.adapters`, `lexiscore.interfaces`,
  `lexiscore.domain`, and `lexiscore.config`.
- Inner layers must not import `lexiscore.bootstrap`.
"""

from .bootstrap import AppContainer, bootstrap

__all__ = ["AppContainer", "bootstrap"]
