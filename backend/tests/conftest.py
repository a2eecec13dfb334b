"""
Central pytest configuration for the beer stock tests.

Environment variables are set before any application import so the lazily
built engine points at an in-memory SQLite database.
"""

import os

os.environ["DATABASE_URL"] = "sqlite:///:memory:"  # In-memory SQLite for fast tests
os.environ["TESTING"] = "true"
os.environ["RATE_LIMIT_ENABLED"] = "0"  # Disable rate limiting in tests
os.environ["LOG_TO_FILE"] = "0"

from tests.config.markers import *  # noqa: E402,F401,F403
from tests.fixtures.database_fixtures import *  # noqa: E402,F401,F403
from tests.fixtures.domain_fixtures import *  # noqa: E402,F401,F403
