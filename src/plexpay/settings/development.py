import os

from . import build_database_uri

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

SQLALCHEMY_DATABASE_URI = build_database_uri()
SQLALCHEMY_TRACK_MODIFICATIONS = False

# 'sql' persists through SQLAlchemy, 'memory' keeps everything in process
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "sql")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Create tables on startup (idempotent)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo data on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "1")))
