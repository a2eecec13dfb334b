"""
Unit tests package.

Services run against mocks or the in-memory fake repository; repository
and CLI tests use the shared in-memory SQLite engine.
"""
