"""
Configuration
-------------
Settings are read from environment variables once, at import time.
"""
import os

DATABASE_URL = os.getenv("DB_URL", "sqlite:///./campgrounds.db")

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
