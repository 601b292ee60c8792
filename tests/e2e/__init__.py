"""End-to-end tests of the ``stringext`` command."""
