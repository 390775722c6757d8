"""
Aegis test suite.

Tests are organized by layer:
    tests/unit/         Unit tests (no I/O, fast)
    tests/policy/       Policy resolution and dispatch behaviour
    tests/integration/  CLI tests (click CliRunner)
    tests/safety/       Guards on the naming convention and error semantics

Run all tests:
    pytest

Run with coverage:
    pytest --cov=aegis
"""
