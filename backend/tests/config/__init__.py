"""Pytest markers and collection hooks shared by the test suite."""
