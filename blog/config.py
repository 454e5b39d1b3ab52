"""Application configuration and constants."""
import os
from pathlib import Path

# Directory paths
BASE_DIR = Path(__file__).resolve().parent.parent

# Database configuration
# Service database; the test suite must never point here
DATABASE_URL = os.environ.get("DATABASE_URL", f"sqlite:///{BASE_DIR / 'blog.db'}")
# Isolated database the integration suite seeds and drops
TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL", f"sqlite:///{BASE_DIR / 'blog-test.db'}")

# Server configuration
HOST = os.environ.get("HOST", "127.0.0.1")
PORT = int(os.environ.get("PORT", "8080"))

# Logging configuration
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
