"""
Test Suite for querykit.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: Cross-component workflows
    - performance/: Linear-scan timing checks
    - fixtures/: Shared test fixtures and sample data

Running Tests:
    pytest tests/                           # All tests
    pytest tests/unit/                      # Unit tests only
    pytest tests/integration/               # Integration tests only
    pytest --cov=src/querykit               # With coverage
"""
