"""
Pytest configuration and shared fixtures.

This file provides common fixtures and configuration for all tests.

Decision: No custom event_loop fixture, pytest-asyncio handles it with
asyncio_mode = "auto" configured in pyproject.toml.
"""

import os

# Set test environment variables before config.settings is imported
# Use .setdefault() to respect values already set by the caller
os.environ.setdefault("LOG_LEVEL", "ERROR")

# Minimum bcrypt cost keeps password hashing fast in tests
os.environ.setdefault("BCRYPT_ROUNDS", "4")
