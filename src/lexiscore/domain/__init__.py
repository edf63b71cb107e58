"""Domain layer for LEXISCORE.

Contains the scoring rules: character classes, rule types, the scoring engine
and the value objects it produces. This package is deliberately free of I/O.

Dependency rule: do not import from `lexiscore.adapters` or `lexiscore.entrypoints`.
"""
