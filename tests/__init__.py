"""BASHFUL test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- functional/   : User-visible flows through the ``bashful`` CLI.
- e2e/          : Whole-CLI behavior that spans commands (logging options).

General guidance
- Keep unit tests fast and deterministic; file I/O only through ``tmp_path``.
- Functional tests assert what a user sees on stdout/stderr and exit codes.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
"""
