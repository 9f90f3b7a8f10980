"""
Test Fixtures - Shared Test Data and Configurations.

This package contains reusable test fixtures:
    - sample_config.yaml: Sample configuration for testing
    - app_config.yaml: Settings nested under a querykit section
    - profiles/strict.yaml: Profile overlay for loader tests

Usage:
    Import fixtures in test files via pytest fixtures or direct import.
"""
