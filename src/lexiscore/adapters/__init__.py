"""Adapters (infrastructure) for LEXISCORE.

Provide concrete implementations of the contracts in `lexiscore.interfaces`.

Dependency rule: may import `lexiscore.interfaces` and `lexiscore.domain`; the
domain must not import this package.
"""
