"""Interfaces (application boundary) for LEXISCORE.

Defines framework-free contracts shared by the bootstrap, adapters and
entrypoints. Business rules stay out of this package.

Dependency rule: this package is independent; do not import from any
`lexiscore.*` modules.
"""
