"""STRINGEXT test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- e2e/          : The installed ``stringext`` command driven through Click's CliRunner.

General guidance
- Keep unit fast and deterministic; no real I/O.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
- Markers: unit, property, e2e
"""
