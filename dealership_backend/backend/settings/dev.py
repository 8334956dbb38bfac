# backend/settings/dev.py
"""
PATH: backend/settings/dev.py

LOCAL DEVELOPMENT SETTINGS

- SQLite at dealership_backend/db.sqlite3 unless DATABASE_URL is set
  (IMMEDIATE transactions, see base.sqlite_write_options)
- CORS open to the marketplace frontend dev servers (Vite on 5173, Next on 3000)
- Marketplace loggers at DEBUG unless LOG_LEVEL says otherwise
"""

from __future__ import annotations

from .base import *  # noqa: F403
from .base import LOGGING, env

DEBUG = True

ALLOWED_HOSTS = env.list("ALLOWED_HOSTS", default=["localhost", "127.0.0.1"])

FRONTEND_DEV_ORIGINS = ["http://localhost:5173", "http://localhost:3000"]

CORS_ALLOWED_ORIGINS = env.list("CORS_ALLOWED_ORIGINS", default=FRONTEND_DEV_ORIGINS)
CSRF_TRUSTED_ORIGINS = env.list("CSRF_TRUSTED_ORIGINS", default=FRONTEND_DEV_ORIGINS)

CORS_ALLOW_CREDENTIALS = True

LOGGING["loggers"]["marketplace"]["level"] = env("LOG_LEVEL", default="DEBUG").upper()
