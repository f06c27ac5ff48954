"""Test configuration and fixtures."""

import os
from pathlib import Path

import logfire

# Settings are read from the environment; these keep the suite self-contained.
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("MYSQL_DSN", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("MONGO_URI", "mongodb://localhost:27017")
os.environ.setdefault("MONGO_DB_NAME", "redditclone_test")
os.environ.setdefault("STATIC_DIR", str(Path(__file__).parent.parent / "static"))

logfire.configure(send_to_logfire=False, console=False)
