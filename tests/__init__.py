"""LEXISCORE test suite.

Folder taxonomy
- unit/ : Isolated, fast checks of a single module/class/function.
- e2e/  : The `lexiscore` command driven end-to-end through click's CliRunner.

General guidance
- Keep unit tests fast and deterministic (no real I/O).
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
- Markers: unit, e2e, property
"""
