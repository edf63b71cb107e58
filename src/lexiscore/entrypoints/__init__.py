"""Entrypoints (inbound adapters) for LEXISCORE.

Expose the application to the outside world: currently the command line.
Parse and validate inputs, call into the bootstrapped application, and present
results.

Dependency rule: may import `lexiscore.bootstrap`; avoid importing
`lexiscore.adapters` directly.
"""
